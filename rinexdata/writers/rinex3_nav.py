"""Write records of RINEX 3.04 navigation files

Description:
------------

Each navigation record is written as the SV / EPOCH / SV CLK line followed by the BROADCAST ORBIT lines, with
numbers in E19.12 format. Spare fields without value are written as blanks.

"""

# Midgard imports
from midgard.dev import plugins

# RinexData imports
from rinexdata.lib import gnss
from rinexdata.writers._rinex import format_orbit
from rinexdata import systems


@plugins.register_named("write_epoch")
def write_epoch(fid, system, prn, date, orbit):
    """Write one navigation record

    Args:
        fid:                  File object opened for writing.
        system (str):         System identifier of the satellite.
        prn (int):            Satellite number.
        date (datetime):      Epoch of the record, in the time scale of the system.
        orbit (numpy array):  Broadcast orbit, 8 lines of 4 values. The first value is not written.
    """
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    # G05 2016 03 01 00 00 00-1.670792698860E-05-1.136868377216E-12 0.000000000000E+00
    fid.write(
        "{:3s} {:4d} {:02d} {:02d} {:02d} {:02d} {:02d}{}\n".format(
            systems.satellite_id(system, prn),
            date.year,
            date.month,
            date.day,
            date.hour,
            date.minute,
            int(round(gnss.split_seconds(date))),
            "".join(format_orbit(value, v2_format=False) for value in orbit[0][1:]),
        )
    )
    for row in orbit[1 : gnss.system(system).nav_lines]:
        # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
        #      9.100000000000E+01 3.481250000000E+01 4.569127460120E-09 2.157366811630E+00
        fid.write(("    " + "".join(format_orbit(value, v2_format=False) for value in row)).rstrip() + "\n")
