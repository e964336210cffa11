"""Write epochs of RINEX 3.04 observation files

Description:
------------

An epoch is written as the epoch line starting with `>`, followed by one line per satellite with the observations in
the order of the `SYS / # / OBS TYPES` record of its system, or by header records for special event epochs.

"""

# Midgard imports
from midgard.dev import plugins

# RinexData imports
from rinexdata.lib import gnss
from rinexdata.writers._rinex import obs_field


@plugins.register_named("write_epoch")
def write_epoch(fid, date, flag, bias, satellites=(), header_lines=()):
    """Write one epoch

    Args:
        fid:                  File object opened for writing.
        date (datetime):      Epoch, None for special events without a date.
        flag (int):           Epoch flag.
        bias (float):         Receiver clock offset, not written if 0.
        satellites (list):    Satellite identifier and observation fields of each satellite, None for blank fields.
        header_lines (list):  Header records following a special event epoch.
    """
    num_records = len(header_lines) if header_lines else len(satellites)

    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    # > 2016 03 01 00 00 00.0000000  0 22       0.000123456789
    if date is None:
        epoch = ">" + " " * 28
    else:
        epoch = "> {:4d} {:02d} {:02d} {:02d} {:02d}{:11.7f}".format(
            date.year, date.month, date.day, date.hour, date.minute, gnss.split_seconds(date)
        )
    clock = "{:6s}{:15.12f}".format("", bias) if bias else ""
    fid.write("{}  {:1d}{:3d}{}\n".format(epoch, flag, num_records, clock))

    for line in header_lines:
        fid.write(line.rstrip() + "\n")

    for sat, fields in satellites:
        # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
        # G05  22492348.344 7  22492351.375 7 118199520.05107  92102284.62445
        fid.write("{:3s}{}".format(sat, "".join(obs_field(field) for field in fields)).rstrip() + "\n")
