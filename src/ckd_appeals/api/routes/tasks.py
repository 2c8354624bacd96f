"""Tasks CRUD endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from ckd_appeals.tasks import Task, TaskCreate, TaskUpdate

router = APIRouter(prefix="/tasks", tags=["tasks"])


class TaskListResponse(BaseModel):
    tasks: list[Task]
    count: int


class TaskResponse(BaseModel):
    message: str
    task: Task


@router.get("", response_model=TaskListResponse)
async def list_tasks(req: Request) -> TaskListResponse:
    tasks = req.app.state.task_store.list()
    return TaskListResponse(tasks=tasks, count=len(tasks))


@router.get("/{task_id}", response_model=Task)
async def get_task(task_id: int, req: Request) -> Task:
    return req.app.state.task_store.get(task_id)


@router.post("", response_model=TaskResponse, status_code=201)
async def create_task(payload: TaskCreate, req: Request) -> TaskResponse:
    task = req.app.state.task_store.create(payload)
    return TaskResponse(message="Task created successfully", task=task)


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(task_id: int, payload: TaskUpdate, req: Request) -> TaskResponse:
    task = req.app.state.task_store.update(task_id, payload)
    return TaskResponse(message="Task updated successfully", task=task)


@router.delete("/{task_id}", status_code=204)
async def delete_task(task_id: int, req: Request) -> Response:
    req.app.state.task_store.delete(task_id)
    return Response(status_code=204)
