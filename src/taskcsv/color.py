# SPDX-License-Identifier: MIT

# Color constant for completed tasks
COMPLETED_TASK_COLOR = "bright_black"

# Color constants for the table view
HEADER_COLOR = "dark_orange"
DUE_DATE_COLOR = "sandy_brown"
