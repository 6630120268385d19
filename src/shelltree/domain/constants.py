from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed parameters of the space queries and the literal
tokens of the shell transcript grammar.
"""

# -----------------------------------------------------------------------------
# QUERY PARAMETERS
# -----------------------------------------------------------------------------

DEFAULT_SIZE_THRESHOLD = 100_000
DEFAULT_DEVICE_CAPACITY = 70_000_000
DEFAULT_REQUIRED_FREE_SPACE = 30_000_000

# -----------------------------------------------------------------------------
# TRANSCRIPT GRAMMAR
# -----------------------------------------------------------------------------

ROOT_NAME = "/"
COMMAND_MARKER = "$"
DIR_MARKER = "dir"

CMD_CD = "cd"
CMD_LS = "ls"

CD_PARENT = ".."
CD_ROOT = "/"

DEFAULT_TRANSCRIPT_PATH = "data/data.txt"
