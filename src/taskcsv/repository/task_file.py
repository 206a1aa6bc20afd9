# SPDX-License-Identifier: MIT

import csv
import logging
from pathlib import Path
from typing import Iterator, TextIO

from taskcsv import time
from taskcsv.errors import TaskFileError, TaskFormatError
from taskcsv.model.task import Task

logger = logging.getLogger(__name__)

SPLIT_CHARACTER = ","
FIELD_COUNT = 5


class TaskFileRepository:
    """
    Reads and rewrites the flat task file, one task per line:

        id,title,description,YYYY-MM-DD HH:mm,true|false

    In plain mode fields are joined and split on a bare comma with no
    escaping, so a comma inside free text breaks the next load. Quoted mode
    reads and writes the same layout through the csv module instead.
    """

    def __init__(self, path: Path, quoted: bool = False) -> None:
        self.path = path
        self.quoted = quoted

    def load(self) -> tuple[list[Task], int]:
        """
        Return the stored tasks in file order and the id counter.

        The counter is the id on the last line read, not the highest id.
        """
        tasks: list[Task] = []
        current_id = 0

        if not self.path.exists():
            try:
                self.path.touch()
                logger.debug("created empty task file %s", self.path)
            except OSError as e:
                logger.error("File could not be created. %s", e)
            return tasks, current_id

        try:
            with self.path.open(newline="", encoding="utf-8") as file:
                rows = self.__read_rows(file)
                for line_number, values in enumerate(rows, start=1):
                    task = self.__convert_task_for_deserialization(
                        values, line_number
                    )
                    tasks.append(task)
                    current_id = task["id"] or 0
        except OSError as e:
            logger.error("An error occurred while getting the file: %s", e)
        except UnicodeDecodeError as e:
            raise TaskFileError(
                str(self.path), len(tasks) + 1, f"not valid UTF-8 ({e.reason})"
            )

        logger.debug("loaded %d tasks from %s", len(tasks), self.path)
        return tasks, current_id

    def save(self, tasks: list[Task]) -> None:
        """Truncate the task file and write every task in collection order."""
        try:
            with self.path.open("w", newline="", encoding="utf-8") as file:
                if self.quoted:
                    writer = csv.writer(file, lineterminator="\n")
                    for task in tasks:
                        writer.writerow(self.__convert_task_for_serialization(task))
                else:
                    for task in tasks:
                        file.write(
                            SPLIT_CHARACTER.join(
                                self.__convert_task_for_serialization(task)
                            )
                        )
                        file.write("\n")
        except OSError as e:
            logger.error("An error occurred while updating the file: %s", e)
            return

        logger.debug("saved %d tasks to %s", len(tasks), self.path)

    def __read_rows(self, file: TextIO) -> Iterator[list[str]]:
        if self.quoted:
            yield from csv.reader(file)
        else:
            for line in file:
                yield line.rstrip("\r\n").split(SPLIT_CHARACTER)

    def __convert_task_for_serialization(self, task: Task) -> list[str]:
        return [
            str(task["id"]),
            task["title"],
            task["description"],
            time.due_date_to_str(task["due_date"]),
            time.completed_to_str(task["completed"]),
        ]

    def __convert_task_for_deserialization(
        self, values: list[str], line_number: int
    ) -> Task:
        if len(values) != FIELD_COUNT:
            raise TaskFileError(
                str(self.path),
                line_number,
                f"expected {FIELD_COUNT} fields, got {len(values)}",
            )

        try:
            id = int(values[0])
        except ValueError:
            raise TaskFileError(
                str(self.path), line_number, f"invalid id '{values[0]}'"
            )

        try:
            due_date = time.due_date_from_str(values[3])
        except TaskFormatError as e:
            raise TaskFileError(str(self.path), line_number, str(e))

        return {
            "id": id,
            "title": values[1],
            "description": values[2],
            "due_date": due_date,
            "completed": time.completed_from_str(values[4]),
        }
