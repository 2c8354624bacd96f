"""Tasks resource."""

from __future__ import annotations

from ckd_appeals.tasks.models import Task, TaskCreate, TaskUpdate
from ckd_appeals.tasks.store import TaskStore

__all__ = ["Task", "TaskCreate", "TaskStore", "TaskUpdate"]
