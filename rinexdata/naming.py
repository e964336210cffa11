"""Names of RINEX files

Description:
------------

RINEX 2 files use short names, `ssssdddf.yyt`, with

=======  ==================================================================
 Field    Description
=======  ==================================================================
 ssss     4 character site designator
 ddd      day of year of the first record
 f        file sequence number: hourly session a-x, 0 for daily files
 yy       two digit year
 t        file type: o (observation), n (GPS), g (GLONASS), h (SBAS) nav
=======  ==================================================================

RINEX 3 files use long names, `SSSSMRCCC_S_YYYYDDDHHMM_PPU_FFU_TT.rnx` for observation files and
`SSSSMRCCC_S_YYYYDDDHHMM_PPU_TT.rnx` for navigation files, where MR are the monument and receiver numbers, CCC the
country code, S the data source, PPU the file period, FFU the data frequency and TT the data type (system letter or M
followed by O or N).

"""

# RinexData imports
from rinexdata.lib import exceptions


def short_name(site, date, file_type, daily=False):
    """RINEX 2 file name

    Args:
        site (str):       Site designator, only the first 4 characters are used.
        date (datetime):  Time of the first record.
        file_type (str):  One of o, n, g or h.
        daily (bool):     Use session 0 instead of the hourly session letter.

    Returns:
        String with the file name.
    """
    if not site.strip():
        raise exceptions.ShapeError("Site designator of the file name is empty")
    session = "0" if daily else chr(ord("a") + date.hour)
    return f"{site[:4].lower():_<4s}{date:%j}{session}.{date:%y}{file_type.lower()}"


def long_name(site, date, data_type, country="---", source="R", period=None, interval=None):
    """RINEX 3 file name

    Args:
        site (str):         Site designator, 4 characters, or 9 characters including monument, receiver and country.
        date (datetime):    Time of the first record.
        data_type (str):    System letter (M for mixed) followed by O (observation) or N (navigation).
        country (str):      ISO country code, used when the site designator has 4 characters.
        source (str):       Data source, R (receiver), S (stream) or U (unknown).
        period (float):     Time span of the file in seconds, None if not known.
        interval (float):   Data interval in seconds for observation files, None for navigation files.

    Returns:
        String with the file name.
    """
    if not site.strip():
        raise exceptions.ShapeError("Site designator of the file name is empty")
    station = site.upper() if len(site) >= 9 else f"{site[:4].upper():_<4s}00{country[:3].upper():-<3s}"
    parts = [station[:9], source[:1].upper(), f"{date:%Y%j%H%M}", _period(period)]
    if data_type.upper().endswith("O"):
        parts.append(_frequency(interval))
    parts.append(data_type.upper())
    return "_".join(parts) + ".rnx"


def _period(seconds):
    """File period, like 01D, 01H or 15M, 01D if not known"""
    if seconds is None or seconds <= 0:
        return "01D"
    for unit, size in (("Y", 365 * 86400), ("D", 86400), ("H", 3600), ("M", 60)):
        if seconds >= size:
            return f"{min(int(round(seconds / size)), 99):02d}{unit}"
    return "00U"


def _frequency(interval):
    """Data frequency, like 30S, 01S or 10Z (10 Hz), 00U if not known"""
    if interval is None or interval <= 0:
        return "00U"
    if interval < 1:
        return f"{min(int(round(1 / interval)), 99):02d}Z"
    for unit, size in (("D", 86400), ("H", 3600), ("M", 60), ("S", 1)):
        if interval >= size and interval / size < 100:
            return f"{int(round(interval / size)):02d}{unit}"
    return "00U"
