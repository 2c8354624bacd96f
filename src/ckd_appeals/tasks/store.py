"""Task store: CRUD over a pluggable persistence backend."""

from __future__ import annotations

import logging

from ckd_appeals.exceptions import TaskValidationError
from ckd_appeals.persistence.protocols import IPersistenceBackend
from ckd_appeals.tasks.models import Task, TaskCreate, TaskUpdate, _utcnow

log = logging.getLogger(__name__)

_PREFIX = "tasks/"


class TaskStore:
    """Persists tasks as JSON documents under ``tasks/{id}`` keys.

    Ids auto-increment from the highest stored id.
    """

    def __init__(self, backend: IPersistenceBackend) -> None:
        self._backend = backend

    @staticmethod
    def _key(task_id: int) -> str:
        return f"{_PREFIX}{task_id}"

    def _ids(self) -> list[int]:
        ids = []
        for key in self._backend.list_keys(_PREFIX):
            suffix = key[len(_PREFIX):]
            if suffix.isdigit():
                ids.append(int(suffix))
        return ids

    def _save(self, task: Task) -> Task:
        self._backend.save(self._key(task.id), task.model_dump_json())
        return task

    def create(self, payload: TaskCreate) -> Task:
        title = (payload.title or "").strip()
        if not title:
            raise TaskValidationError("Title is required and cannot be empty")

        description = payload.description.strip() if payload.description else None
        task = Task(id=max(self._ids(), default=0) + 1, title=title, description=description or None)
        log.info("Created task %d", task.id)
        return self._save(task)

    def get(self, task_id: int) -> Task:
        """Load one task. Raises KeyError if it does not exist."""
        try:
            raw = self._backend.load(self._key(task_id))
        except KeyError:
            raise KeyError(f"Task not found: {task_id}") from None
        return Task.model_validate_json(raw)

    def list(self) -> list[Task]:
        """All tasks, newest first."""
        tasks = [self.get(task_id) for task_id in self._ids()]
        return sorted(tasks, key=lambda t: (t.created_at, t.id), reverse=True)

    def update(self, task_id: int, payload: TaskUpdate) -> Task:
        task = self.get(task_id)
        provided = payload.model_fields_set
        changes: dict[str, object] = {}

        if "title" in provided:
            title = (payload.title or "").strip()
            if not title:
                raise TaskValidationError("Title cannot be empty if provided")
            changes["title"] = title

        if "description" in provided:
            changes["description"] = payload.description.strip() if payload.description else None

        if "completed" in provided:
            if payload.completed is None:
                raise TaskValidationError("Completed must be a boolean value")
            changes["completed"] = payload.completed

        updated = task.model_copy(update={**changes, "updated_at": _utcnow()})
        return self._save(updated)

    def delete(self, task_id: int) -> None:
        """Delete one task. Raises KeyError if it does not exist."""
        key = self._key(task_id)
        if not self._backend.exists(key):
            raise KeyError(f"Task not found: {task_id}")
        self._backend.delete(key)
        log.info("Deleted task %d", task_id)
