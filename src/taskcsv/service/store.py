# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

from taskcsv import time
from taskcsv.model.task import Task
from taskcsv.repository.task_file import TaskFileRepository
from taskcsv.template.task import get_task_template

logger = logging.getLogger(__name__)


class TaskStore:
    """
    The ordered in-memory task list plus its id counter.

    Every mutating operation rewrites the whole task file through the
    repository, including operations that end up changing nothing.
    """

    def __init__(
        self,
        repository: TaskFileRepository,
        tasks: Optional[list[Task]] = None,
        current_id: int = 0,
    ) -> None:
        self.repository = repository
        self._tasks: list[Task] = tasks if tasks is not None else []
        self.current_id = current_id

    @classmethod
    def load(cls, repository: TaskFileRepository) -> "TaskStore":
        tasks, current_id = repository.load()
        return cls(repository, tasks, current_id)

    def __next_id(self) -> int:
        self.current_id += 1
        return self.current_id

    def __flush(self) -> None:
        self.repository.save(self._tasks)

    def create_task(self, title: str, description: str, due_date: str) -> Task:
        # Parse before touching state so a bad date persists nothing
        parsed_due_date = time.due_date_from_str(due_date)

        task = get_task_template()
        task["title"] = title
        task["description"] = description
        task["due_date"] = parsed_due_date
        task["id"] = self.__next_id()
        self._tasks.append(task)
        logger.debug("created task %d", task["id"])

        self.__flush()
        return deepcopy(task)

    def update_task(
        self,
        id: int,
        title: str,
        description: str,
        due_date: str,
        completed: Optional[str],
    ) -> None:
        parsed_due_date = time.due_date_from_str(due_date)
        is_completed = time.completed_from_str(completed)

        for task in self._tasks:
            if task["id"] == id:
                task["title"] = title
                task["description"] = description
                task["due_date"] = parsed_due_date
                task["completed"] = is_completed
                logger.debug("updated task %d", id)

        self.__flush()

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self._tasks)

    def delete_task(self, id: Optional[int]) -> None:
        if id is not None:
            before = len(self._tasks)
            self._tasks = [task for task in self._tasks if task["id"] != id]
            logger.debug("deleted %d task(s) with id %d", before - len(self._tasks), id)

        self.__flush()
