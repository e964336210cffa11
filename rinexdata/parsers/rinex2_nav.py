"""A parser for reading records of RINEX 2.10 navigation files

Description:
------------

Reads one navigation record of a RINEX 2.10 navigation file: the PRN / EPOCH / SV CLK line followed by the BROADCAST
ORBIT lines. The system of the record is given by the file type (N: GPS, G: GLONASS, H: SBAS), which also decides
the number of orbit lines.

Numbers may be written with D as exponent character. Blank orbit fields are returned as NaN.

"""

# External library imports
import numpy as np

# Midgard imports
from midgard.dev import plugins

# RinexData imports
from rinexdata.lib import exceptions
from rinexdata.lib import gnss
from rinexdata.parsers.parser import NavRecord, _float, _int, _nan_float, epoch_date
from rinexdata.parsers.parser import read_record_line, read_record_start, split_fields

# ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
#  5 16  3  1  0  0  0.0-0.167079083622D-04-0.113686837722D-11 0.000000000000D+00
EPOCH_FIELDS = {
    "prn": (0, 2),
    "year": (2, 5),
    "month": (5, 8),
    "day": (8, 11),
    "hour": (11, 14),
    "minute": (14, 17),
    "second": (17, 22),
    "sv_clock_bias": (22, 41),
    "sv_clock_drift": (41, 60),
    "sv_clock_drift_rate": (60, 79),
}

# ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
#     0.910000000000D+02 0.348125000000D+02 0.456912746012D-08 0.215736681163D+01
ORBIT_FIELDS = {"field_0": (3, 22), "field_1": (22, 41), "field_2": (41, 60), "field_3": (60, 79)}


def is_record_start(line):
    """Whether a line is a PRN / EPOCH / SV CLK line"""
    return line[:2].strip().isdigit() and line[20] == "."


@plugins.register_named("read_epoch")
def read_epoch(reader, sat_sys, **_):
    """Read one navigation record

    Args:
        reader:         Lines of a file, positioned at a PRN / EPOCH / SV CLK line.
        sat_sys (str):  System of the records of the file.

    Returns:
        NavRecord: The record read, None at the end of the file.
    """
    line = read_record_start(reader, is_record_start)
    if line is None:
        return None

    num_lines = gnss.system(sat_sys).nav_lines
    fields = split_fields(line, EPOCH_FIELDS)
    date = epoch_date(fields)
    if date is None:
        raise exceptions.GrammarError(f"Missing epoch in navigation record {line.rstrip()!r}")
    orbit = np.full((8, 4), np.nan)
    orbit[0] = [
        gnss.datetime_to_gps(date)[1],
        _float(fields["sv_clock_bias"]),
        _float(fields["sv_clock_drift"]),
        _float(fields["sv_clock_drift_rate"]),
    ]
    for row in range(1, num_lines):
        orbit_fields = split_fields(read_record_line(reader, is_record_start), ORBIT_FIELDS)
        orbit[row] = [_nan_float(orbit_fields[f"field_{idx}"]) for idx in range(4)]
    return NavRecord(sat_sys, _int(fields["prn"]), date, orbit)
