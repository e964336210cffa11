"""A parser for reading records of RINEX 3.04 navigation files

Description:
------------

Reads one navigation record of a RINEX 3.04 navigation file. The first line starts with the satellite identifier,
which gives the system of the record and thereby the number of BROADCAST ORBIT lines:

=============================  ======
 System                         Lines
=============================  ======
 GPS, Galileo, BeiDou, IRNSS    8
 GLONASS, QZSS, SBAS            4
=============================  ======

Blank orbit fields are returned as NaN.

"""

# External library imports
import numpy as np

# Midgard imports
from midgard.dev import plugins

# RinexData imports
from rinexdata.lib import exceptions
from rinexdata.lib import gnss
from rinexdata.parsers.parser import NavRecord, _float, _nan_float, epoch_date
from rinexdata.parsers.parser import read_record_line, read_record_start, split_fields
from rinexdata import systems

# ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
# G05 2016 03 01 00 00 00-1.670792698860E-05-1.136868377216E-12 0.000000000000E+00
EPOCH_FIELDS = {
    "sat": (0, 3),
    "year": (4, 8),
    "month": (9, 11),
    "day": (12, 14),
    "hour": (15, 17),
    "minute": (18, 20),
    "second": (21, 23),
    "sv_clock_bias": (23, 42),
    "sv_clock_drift": (42, 61),
    "sv_clock_drift_rate": (61, 80),
}

# ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
#      9.100000000000E+01 3.481250000000E+01 4.569127460120E-09 2.157366811630E+00
ORBIT_FIELDS = {"field_0": (4, 23), "field_1": (23, 42), "field_2": (42, 61), "field_3": (61, 80)}


def is_record_start(line):
    """Whether a line is a SV / EPOCH / SV CLK line"""
    return gnss.is_system(line[0]) and line[1:3].strip().isdigit()


@plugins.register_named("read_epoch")
def read_epoch(reader, **_):
    """Read one navigation record

    Args:
        reader:  Lines of a file, positioned at a SV / EPOCH / SV CLK line.

    Returns:
        NavRecord: The record read, None at the end of the file.
    """
    line = read_record_start(reader, is_record_start)
    if line is None:
        return None

    fields = split_fields(line, EPOCH_FIELDS)
    letter, prn = systems.parse_satellite(line[:3])
    num_lines = gnss.system(letter).nav_lines
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
    return NavRecord(letter, prn, date, orbit)
