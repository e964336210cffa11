"""Write records of RINEX 2.10 navigation files

Description:
------------

Each navigation record is written as the PRN / EPOCH / SV CLK line followed by the BROADCAST ORBIT lines, with
numbers in D19.12 format. GPS records have 7 orbit lines, GLONASS and SBAS records 3.

"""

# Midgard imports
from midgard.dev import plugins

# RinexData imports
from rinexdata.lib import gnss
from rinexdata.writers._rinex import format_orbit


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
    #  5 16  3  1  0  0  0.0-0.167079083622D-04-0.113686837722D-11 0.000000000000D+00
    fid.write(
        "{:2d} {:02d}{:3d}{:3d}{:3d}{:3d}{:5.1f}{}\n".format(
            prn,
            date.year % 100,
            date.month,
            date.day,
            date.hour,
            date.minute,
            gnss.split_seconds(date),
            "".join(format_orbit(value, v2_format=True) for value in orbit[0][1:]),
        )
    )
    for row in orbit[1 : gnss.system(system).nav_lines]:
        # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
        #     0.910000000000D+02 0.348125000000D+02 0.456912746012D-08 0.215736681163D+01
        fid.write(("   " + "".join(format_orbit(value, v2_format=True) for value in row)).rstrip() + "\n")
