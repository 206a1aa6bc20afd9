# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from taskcsv import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        defaults = configuration.get_default_configuration()
        if not configuration.APP_CONFIG_PATH.is_file():
            self._config = defaults
            return

        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        # An empty file loads as None
        if self._config is None:
            self._config = defaults
            return

        # Fill in keys added after the file was written
        for key, value in defaults.items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)
