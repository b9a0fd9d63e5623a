"""Asynchronous operation (task) payloads.

Create, delete and action requests answer with the ids of the tasks they
started. Once a task completes, its ``created_resources`` field lists the
ids of what it created, keyed by resource family::

    {"id": "...", "state": "FINISHED", "created_resources": {"loadbalancers": ["<id>"]}}
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from gcorecloud.errors import TaskResultError


class TaskResults(BaseModel):
    """Ids of the tasks started by a request."""

    tasks: list[str] = Field(default_factory=list)


class Task(BaseModel):
    """A long-running operation as reported by the task service."""

    id: str
    state: str | None = None
    task_type: str | None = None
    created_resources: dict[str, Any] | None = None
    error: str | None = None


def extract_created_resource_id(task: Task | Mapping[str, Any], key: str, resource_name: str | None = None) -> str:
    """Return the first id the task created under ``key``.

    Args:
        task: Completed task, or its ``created_resources`` mapping.
        key: Resource family key, e.g. ``"loadbalancers"``.
        resource_name: Name used in error messages; defaults to ``key``.

    Raises:
        TaskResultError: If the key is missing or its id list is empty or malformed.
    """
    name = resource_name or key
    created = task.created_resources if isinstance(task, Task) else task
    prefix = f"cannot decode {name} information in task structure"

    if not created or key not in created:
        raise TaskResultError(f"{prefix}: missing '{key}'", key=key)

    ids = created[key]
    if not isinstance(ids, list) or not all(isinstance(i, str) for i in ids):
        raise TaskResultError(f"{prefix}: '{key}' must be a list of ids, got {ids!r}", key=key)
    if not ids:
        raise TaskResultError(f"{prefix}: empty list", key=key)
    return ids[0]
