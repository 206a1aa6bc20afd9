# SPDX-License-Identifier: MIT

from typing import TypedDict

import platformdirs

APP_NAME = "taskcsv"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

DEFAULT_TASKS_PATH = "tasks.csv"


class Configuration(TypedDict):
    tasks_path: str
    quoted_fields: bool
    show_table: bool
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "tasks_path": DEFAULT_TASKS_PATH,
        "quoted_fields": False,
        "show_table": False,
        "log_level": "WARNING",
    }
