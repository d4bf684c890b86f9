"""Constants shared across cleanpath."""

PROG_NAME = "cleanpath"

# Value of -x that selects every environment variable
ALL_ENV_MARKER = "-"

# Value of -p that lifts the parent traversal limit
UNLIMITED_PARENT_MARKER = "-"

# Width of the step column in verbose trace lines
STEP_WIDTH = 10

LOG_LEVEL_ENV = "CLEANPATH_LOG_LEVEL"
LOG_FILE_ENV = "CLEANPATH_LOG_FILE"
