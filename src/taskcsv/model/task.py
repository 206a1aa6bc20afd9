# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class Task(TypedDict):
    id: Optional[int]
    title: str
    description: str
    due_date: pendulum.DateTime
    completed: bool
