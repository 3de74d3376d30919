"""Logging configuration for the command line entry point.

Library modules only create module loggers; handlers are attached here.
"""
import logging
import sys

import config


class _PlainFormatter(logging.Formatter):
    def format(self, record):
        parts = [
            self.formatTime(record, datefmt="%H:%M:%S"),
            record.levelname[0],
            record.name + ":",
            record.getMessage(),
        ]
        return " ".join(parts)


def configure_logging(level=None):
    if getattr(configure_logging, "_configured", False):  # idempotent
        return
    root = logging.getLogger()
    root.setLevel((level or config.LOG_LEVEL).upper())
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_PlainFormatter())
    root.addHandler(handler)
    configure_logging._configured = True
