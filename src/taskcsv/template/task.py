# SPDX-License-Identifier: MIT

from taskcsv.model.task import Task
from taskcsv.time import now_utc


def get_task_template() -> Task:
    return {
        "id": None,
        "title": "",
        "description": "",
        "due_date": now_utc().start_of("minute"),
        "completed": False,
    }
