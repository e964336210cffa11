"""A parser for reading epochs of RINEX 3.04 observation files

Description:
------------

Reads one epoch of a RINEX 3.04 observation file. Epoch lines start with the record identifier `>`. Each satellite
has one line, starting with the satellite identifier, followed by the observations in the order of the
`SYS / # / OBS TYPES` record of its system.

Lines not belonging to an epoch are skipped until the next line starting with `>`.

"""

# Midgard imports
from midgard.dev import plugins

# RinexData imports
from rinexdata.lib import exceptions
from rinexdata.parsers.parser import ObsEpoch, ObsSample, _indicator, _int, _optional_float, epoch_date
from rinexdata.parsers.parser import read_record_line, read_record_start, split_fields
from rinexdata import systems

# ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
# > 2016 03 01 00 00 00.0000000  0 22       0.000123456789
EPOCH_FIELDS = {
    "year": (2, 6),
    "month": (7, 9),
    "day": (10, 12),
    "hour": (13, 15),
    "minute": (16, 18),
    "second": (18, 29),
    "epoch_flag": (31, 32),
    "num_sat": (32, 35),
    "rcv_clk_offset": (41, 56),
}
FIELD_WIDTH = 16


def is_epoch_line(line):
    return line.startswith(">")


@plugins.register_named("read_epoch")
def read_epoch(reader, obs_types, **_):
    """Read one epoch

    Args:
        reader:            Lines of a file, positioned at an epoch line.
        obs_types (dict):  RINEX 3 observation types of the file for each system letter.

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

    lines = [read_record_line(reader, is_epoch_line) for _ in range(num_records)]
    if 2 <= flag <= 5:
        return ObsEpoch(date, flag, bias, num_records, [], lines, [])

    samples, errors = list(), list()
    for sat_line in lines:
        try:
            samples.extend(_parse_satellite(sat_line, obs_types))
        except exceptions.RinexException as err:
            errors.append(f"Satellite {sat_line[:3]!r}: {err}")
    return ObsEpoch(date, flag, bias, num_records, samples, [], errors)


def _parse_satellite(line, obs_types):
    """Observations of one satellite line

    Lines are not limited to 80 characters, as the number of observation types of a system may be large.
    """
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    # G05  22492348.344 7  22492351.375 7 118199520.05107  92102284.62445
    letter, prn = systems.parse_satellite(line[:3])
    if letter not in obs_types:
        raise exceptions.GrammarError(f"No observation types defined for system {letter!r}")
    samples = list()
    for idx, code in enumerate(obs_types[letter]):
        field = line[3 + idx * FIELD_WIDTH : 3 + (idx + 1) * FIELD_WIDTH].ljust(FIELD_WIDTH)
        value = _optional_float(field[:14])
        if value is None:
            continue
        samples.append(ObsSample(letter, prn, code, value, _indicator(field[14]), _indicator(field[15])))
    return samples
