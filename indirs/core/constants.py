"""Module holding constants used across indirs."""

VERSION = "1.0.0"
PROG_NAME = "in"
SEPARATOR = "--"
LIST_DELIMITER = ","
GLOB_CHARS = ("*", "?", "[")
ENV_PREFIX = "IN_"
NOT_FOUND_EXIT = 127
