"""RinexData library module for logging

Description:
------------

This module provides simple logging inside RinexData. To write a log message, simply call one of the
rinexdata.log-functions corresponding to the log levels defined in rinexdata.lib.enums.


Example:
--------

    >>> from rinexdata.lib import log
    >>> log.init("info", prefix="rinex")
    >>> log.warn(f"Observable type 'C5X' cannot be translated to RINEX 2.10")
    WARN  [rinex] Observable type 'C5X' cannot be translated to RINEX 2.10

"""

# Standard library imports
import functools

# Midgard imports
from midgard.dev import log as mg_log

# RinexData imports
from rinexdata.lib import enums  # Log levels and colors for RinexData

# Make functions from Midgard available
from midgard.dev.log import log, blank, init, file_init, print_file  # noqa


# Make each log level available as a function, done here to include extra RinexData log levels
for level in enums.get_enum("log_level"):
    globals()[level.name] = functools.partial(mg_log.log, level=level.name)


class SilentLog:
    """Log sink dropping every message

    Used by containers created without a logger, so that diagnostics are discarded instead of being fatal.
    """

    def __getattr__(self, level):
        return self._drop

    @staticmethod
    def _drop(log_text, *args, **kwargs):
        pass
