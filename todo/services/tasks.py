"""
Task queries and commands.

Every public method returns frozen `todo.domain.Task` values. Writes run in
one transaction on the service's database alias, including the re-read that
builds the returned value.
"""

import logging
from datetime import datetime
from typing import List, Optional

from django.db import DEFAULT_DB_ALIAS, transaction

from ..domain import Task
from ..exceptions import NotFoundError, TodoError, check_argument
from ..models import TaskRecord

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    def _tasks(self):
        return TaskRecord.objects.using(self.using)

    # ---- queries -------------------------------------------------------------

    def find_all_tasks(self) -> List[Task]:
        return [t.to_domain() for t in self._tasks().all()]

    def filter_tasks(self, closed: bool) -> List[Task]:
        return [t.to_domain() for t in self._tasks().filter(closed=closed)]

    def find_all_open_tasks(self) -> List[Task]:
        return self.filter_tasks(False)

    def find_all_closed_tasks(self) -> List[Task]:
        return self.filter_tasks(True)

    def find_task(self, task_id: int) -> Optional[Task]:
        record = self._tasks().filter(pk=task_id).first()
        return record.to_domain() if record else None

    def find_tasks_having_target_end_after(self, end: datetime) -> List[Task]:
        # NULL target_end never compares true, so tasks without one drop out
        return [t.to_domain() for t in self._tasks().filter(target_end__gt=end)]

    def find_tasks_having_target_end_before(self, end: datetime) -> List[Task]:
        return [t.to_domain() for t in self._tasks().filter(target_end__lt=end)]

    # ---- commands ------------------------------------------------------------

    def add_task(self, task: Task) -> Task:
        """Insert a new task and return it with its generated id."""
        check_argument(task.id is None, "A new task must not have an id")

        with transaction.atomic(using=self.using):
            record = TaskRecord.from_domain(task)
            record.save(using=self.using, force_insert=True)
            result = record.to_domain()
            if result.id is None:
                raise TodoError("Inserted task did not get an id")

        logger.info("Added task %s (%r)", result.id, result.name)
        return result

    def update_task(self, task: Task) -> Task:
        """
        Overwrite description, target end, extra information and closed flag
        of a stored task. The name identifies the task together with the id
        and must be unchanged.
        """
        check_argument(task.id is not None, "Only a stored task (with id) can be updated")

        with transaction.atomic(using=self.using):
            try:
                record = self._tasks().select_for_update().get(pk=task.id)
            except TaskRecord.DoesNotExist:
                raise NotFoundError(f"No task with id {task.id}") from None

            check_argument(
                record.name == task.name,
                f"Task {task.id} is named {record.name!r}, not {task.name!r}",
            )
            record.apply_update(task)
            record.save(
                using=self.using,
                update_fields=["description", "target_end", "extra_information", "closed"],
            )
            result = record.to_domain()

        logger.info("Updated task %s (closed=%s)", result.id, result.closed)
        return result

    def delete_task(self, task_id: int) -> None:
        """Delete one task; deleting an unknown id is a no-op."""
        with transaction.atomic(using=self.using):
            deleted, _ = self._tasks().filter(pk=task_id).delete()
        logger.info("Deleted task %s (%d row(s))", task_id, deleted)

    def delete_all_tasks(self) -> None:
        with transaction.atomic(using=self.using):
            deleted, _ = self._tasks().all().delete()
        logger.info("Deleted all tasks (%d row(s))", deleted)
