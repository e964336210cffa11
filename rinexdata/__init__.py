"""RinexData, reading and writing of RINEX GNSS observation and navigation files

This package provides an in-memory model of RINEX 2.10 and 3.04 files together with the codecs reading and writing
them. The entry point is the :class:`~rinexdata.data.RinexData` container.

"""

# Version of RinexData, set by bumpversion
__version__ = "1.0.0"

__author__ = "RinexData developers"
__contact__ = "rinexdata@example.org"
__copyright__ = "2019 RinexData developers"
