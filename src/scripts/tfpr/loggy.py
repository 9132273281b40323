#!/usr/bin/env python3
"""
loggy

Common code to force logging to the console, with colored level names.

Example Usage:
    from tfpr import loggy
"""
import logging
import sys

import click

LEVEL_COLORS = {
    "DEBUG": "blue",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red",
}


class ColorFormatter(logging.Formatter):
    """Colors the level name, only when the stream is a terminal."""

    def __init__(self, fmt=None, stream=None):
        super().__init__(fmt)
        self.stream = stream

    def format(self, record):
        color = LEVEL_COLORS.get(record.levelname)
        line = super().format(record)
        if color and self.stream is not None and self.stream.isatty():
            line = line.replace(record.levelname, click.style(record.levelname, fg=color, bold=True), 1)
        return line


_handler = logging.StreamHandler(sys.stdout)
_handler.setFormatter(ColorFormatter("%(levelname)s %(asctime)s - %(message)s", stream=sys.stdout))

logging.basicConfig(
    handlers=[_handler],
    level=logging.INFO
)
loggy = logging.getLogger()


def set_verbose(verbose: bool = True):
    """
    set_verbose()

    Switch between DEBUG and INFO output
    """
    loggy.setLevel(logging.DEBUG if verbose else logging.INFO)


def debug(msg):
    """
    debug()

    Log a DEBUG message to stdout
    """
    loggy.debug(msg)


def info(msg):
    """
    info()

    Log an INFO message to stdout
    """
    loggy.info(msg)


def warning(msg):
    """
    warning()

    Log a WARNING message to stdout
    """
    loggy.warning(msg)


def error(msg):
    """
    error()

    Log an ERROR message to stdout
    """
    loggy.error(msg)
