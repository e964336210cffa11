"""Package for handling of RINEX data

The :class:`RinexData` container is the entry point for reading, writing and converting RINEX observation and
navigation files.

"""

# Import relevant classes from rinex_data.py
from rinexdata.data.rinex_data import RinexData  # noqa

# Do not support *-imports
__all__ = []
