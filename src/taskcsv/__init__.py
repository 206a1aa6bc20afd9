# SPDX-License-Identifier: MIT

from taskcsv.initialize import initialize
from taskcsv.terminal.app import run


def main() -> None:
    initialize()
    run()


if __name__ == "__main__":
    main()
