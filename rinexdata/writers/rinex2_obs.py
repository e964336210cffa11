"""Write epochs of RINEX 2.10 observation files

Description:
------------

An epoch is written as the epoch line with up to 12 satellites, continuation lines for further satellites, and then
for each satellite its observations, 5 per line, in the order of the `# / TYPES OF OBSERV` record. Special event
epochs are followed by header records instead of observations.

"""

# Midgard imports
from midgard.dev import plugins

# RinexData imports
from rinexdata.lib import gnss
from rinexdata.writers._rinex import chunks, obs_field

SATS_PER_LINE = 12
OBS_PER_LINE = 5


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
    sat_ids = [sat for sat, _ in satellites]

    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    #  16  3  1  0  0  0.0000000  0 12G05G07G08G09G13G15G20G21G23G27G28G30  0.000123456
    if date is None:
        epoch = " " * 26
    else:
        epoch = " {:02d} {:2d} {:2d} {:2d} {:2d}{:11.7f}".format(
            date.year % 100, date.month, date.day, date.hour, date.minute, gnss.split_seconds(date)
        )
    sat_lines = chunks(sat_ids, SATS_PER_LINE)
    clock = "{:12.9f}".format(bias) if bias else ""
    fid.write("{}  {:1d}{:3d}{:36s}{}".format(epoch, flag, num_records, "".join(sat_lines[0]), clock).rstrip() + "\n")
    for sats in sat_lines[1:]:
        # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
        #                                 G05G07G08
        fid.write("{:32s}{}\n".format("", "".join(sats)))

    for line in header_lines:
        fid.write(line.rstrip() + "\n")

    for _, fields in satellites:
        for obs_line in chunks(fields, OBS_PER_LINE):
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            #   22492348.344 7  22492351.375 7 118199520.05107  92102284.62445  22492347.953 7
            fid.write("".join(obs_field(field) for field in obs_line).rstrip() + "\n")
