"""A parser for reading epochs of RINEX 2.10 observation files

Description:
------------

Reads one epoch of a RINEX 2.10 observation file: the epoch line with its satellite list, and the observation lines
of each satellite, or the special records following an event flag. The observation types are those of the
`# / TYPES OF OBSERV` header record, given in the order of the file.

An epoch line is recognized by its layout: blanks separating the date fields, the decimal point of the seconds and a
digit as epoch flag. Lines not belonging to an epoch are skipped until the next epoch line.

"""

# Standard library imports
import math

# Midgard imports
from midgard.dev import plugins

# RinexData imports
from rinexdata.lib import exceptions
from rinexdata.parsers.parser import ObsEpoch, ObsSample, _indicator, _int, _optional_float, epoch_date
from rinexdata.parsers.parser import read_record_line, read_record_start, split_columns, split_fields
from rinexdata import systems

# ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
#  16  3  1  0  0  0.0000000  0 12G05G07G08G09G13G15G20G21G23G27G28G30  0.000123456
EPOCH_FIELDS = {
    "year": (1, 3),
    "month": (4, 6),
    "day": (7, 9),
    "hour": (10, 12),
    "minute": (13, 15),
    "second": (15, 26),
    "epoch_flag": (28, 29),
    "num_sat": (29, 32),
    "sat_list": (32, 68),
    "rcv_clk_offset": (68, 80),
}
OBS_PER_LINE = 5
FIELD_WIDTH = 16


def is_epoch_line(line):
    """Whether a line has the layout of an epoch line"""
    if not line[28].isdigit() or any(line[idx] != " " for idx in (0, 3, 6, 9, 12)):
        return False
    return line[18] == "." or not line[1:26].strip()


@plugins.register_named("read_epoch")
def read_epoch(reader, obs_types, **_):
    """Read one epoch

    Args:
        reader:            Lines of a file, positioned at an epoch line.
        obs_types (list):  RINEX 2 observation types of the file, in file order.

    Returns:
        ObsEpoch: The epoch read, None at the end of the file.
    """
    line = read_record_start(reader, is_epoch_line)
    if line is None:
        return None

    fields = split_fields(line, EPOCH_FIELDS)
    flag = _int(fields["epoch_flag"])
    num_records = _int(fields["num_sat"], default=0)
    date = epoch_date(fields)
    bias = _optional_float(fields["rcv_clk_offset"]) or 0.0
    if flag in (3, 4) and not num_records:
        raise exceptions.GrammarError(f"Event flag {flag} without following header records")

    if 2 <= flag <= 5:
        header_lines = [read_record_line(reader, is_epoch_line) for _ in range(num_records)]
        return ObsEpoch(date, flag, bias, num_records, [], header_lines, [])

    sats = [s for s in split_columns(fields["sat_list"], 3) if s]
    while len(sats) < num_records:
        # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
        #                                 G05G07G08
        sats.extend(s for s in split_columns(read_record_line(reader, is_epoch_line)[32:68], 3) if s)

    num_lines = max(math.ceil(len(obs_types) / OBS_PER_LINE), 1)
    samples, errors = list(), list()
    for sat in sats[:num_records]:
        lines = [read_record_line(reader, is_epoch_line) for _ in range(num_lines)]
        try:
            samples.extend(_parse_satellite(sat, lines, obs_types))
        except exceptions.RinexException as err:
            errors.append(f"Satellite {sat!r}: {err}")
    return ObsEpoch(date, flag, bias, num_records, samples, [], errors)


def _parse_satellite(sat, lines, obs_types):
    """Observations of one satellite

    Args:
        sat (str):         Satellite identifier, like 'G05' or '5'.
        lines (list):      Observation lines of the satellite.
        obs_types (list):  RINEX 2 observation types of the file.

    Returns:
        List of ObsSample, one for each non-blank observation.
    """
    letter, prn = systems.parse_satellite(sat.rjust(3))
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    #   22492348.344 7  22492351.375 7 118199520.05107  92102284.62445  22492347.953 7
    line_width = OBS_PER_LINE * FIELD_WIDTH
    fields = [line[idx : idx + FIELD_WIDTH] for line in lines for idx in range(0, line_width, FIELD_WIDTH)]
    samples = list()
    for code, field in zip(obs_types, fields):
        value = _optional_float(field[:14])
        if value is None:
            continue
        samples.append(ObsSample(letter, prn, code, value, _indicator(field[14]), _indicator(field[15])))
    return samples
