"""ANSI escape sequences used for the simulated terminal."""

RESET = "\033[0m"
GREEN = "\033[38;5;82m"
BLUE = "\033[38;5;32m"
HIGHLIGHT = "\033[38;5;229m"
