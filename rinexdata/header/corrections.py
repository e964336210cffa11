"""Ionospheric and time system corrections of navigation headers

Description:
------------

A correction is identified by a correction type label (GPSA, GPUT, ...) and holds 6 numeric slots:

================  ==========================  ==========================
 Slot              Ionospheric correction      Time system correction
================  ==========================  ==========================
 0-3               parameters                  a0, a1, reference time, reference week
 4                 time mark (hour 0-23)       UTC identifier
 5                 source satellite            source identifier
================  ==========================  ==========================

RINEX 2 records (ION ALPHA, ION BETA, DELTA-UTC: A0,A1,T,W, CORR TO SYSTEM TIME and D-UTC A0,A1,T,W,S,U) are stored as
the corresponding RINEX 3 correction, so that a header read in one version can be written in the other.

Source identifiers of time system corrections are numbers: satellite numbers below 100, SBAS satellites 100 + PRN and
the SBAS providers from 1000 and up.
"""

# RinexData imports
from rinexdata.header.labels import Label, V2_CORRECTIONS, IONO_CORRECTIONS
from rinexdata.lib import exceptions
from rinexdata.lib import gnss

SBAS_PROVIDERS = ("WAAS", "EGNOS", "MSAS", "GAGAN", "SDCM", "BDSBAS", "KASS")

# System of the satellite broadcasting a time system correction
_SOURCE_SYSTEMS = dict(GP="G", GL="R", GA="E", BD="C", QZ="J", IR="I", SB="S")


class Correction:
    def __init__(self, corr_type, values):
        self.type = corr_type
        self.values = [float(v) for v in values]

    @property
    def is_iono(self):
        return self.type in IONO_CORRECTIONS

    def __repr__(self):
        return f"{type(self).__name__}({self.type.name}, {self.values})"


def source_id(text, corr_type):
    """Numeric identifier of the source field of a time system correction"""
    text = text.strip().upper()
    if not text:
        return 0
    if text in SBAS_PROVIDERS:
        return 1000 + SBAS_PROVIDERS.index(text)
    try:
        number = int(text[1:])
    except ValueError:
        raise exceptions.RangeError(f"Unknown source {text!r} of time system correction") from None
    return 100 + number if text[0] == "S" else number


def source_text(number, corr_type):
    """Text of the source field of a time system correction, inverse of source_id"""
    number = int(number)
    if number <= 0:
        return ""
    if number >= 1000:
        return SBAS_PROVIDERS[number - 1000] if number - 1000 < len(SBAS_PROVIDERS) else ""
    if number >= 100:
        return f"S{number - 100:02d}"
    letter = _SOURCE_SYSTEMS.get(corr_type.name[-4:-2], "G")
    return f"{letter}{number:02d}"


def from_v3(corr_type, params, mark, source):
    """Correction from the payload of IONOSPHERIC CORR and TIME SYSTEM CORR records"""
    return Correction(corr_type, list(params) + [mark, source])


def to_v3(correction):
    values = correction.values
    return correction.type, values[:4], int(values[4]), int(values[5])


def from_v2(label, payload):
    """Correction from the payload of a RINEX 2 correction record"""
    corr_type = V2_CORRECTIONS[label]
    if label in (Label.IONA, Label.IONB):
        return Correction(corr_type, list(payload[0]) + [-1, 0])
    if label == Label.DUTC:
        a0, a1, ref_time, ref_week = payload
        return Correction(corr_type, [a0, a1, ref_time, ref_week, 0, 0])
    if label == Label.CORRT:
        year, month, day, tau_c = payload
        try:
            week, tow = gnss.datetime_to_gps(gnss.make_datetime(year, month, day, 0, 0, 0))
        except ValueError:
            raise exceptions.RangeError(f"Invalid reference date {year}-{month}-{day}") from None
        return Correction(corr_type, [tau_c, 0, tow, week, 0, 0])
    # Label.GEOT
    a0, a1, ref_time, ref_week, source, utc_id = payload
    return Correction(corr_type, [a0, a1, ref_time, ref_week, utc_id, source_id(source, corr_type)])


def to_v2(label, correction):
    """Payload of a RINEX 2 correction record, inverse of from_v2"""
    values = correction.values
    if label in (Label.IONA, Label.IONB):
        return (values[:4],)
    if label == Label.DUTC:
        return values[0], values[1], int(values[2]), int(values[3])
    if label == Label.CORRT:
        date = gnss.gps_to_datetime(int(values[3]), values[2])
        return date.year, date.month, date.day, values[0]
    return values[0], values[1], int(values[2]), int(values[3]), source_text(values[5], correction.type), int(values[4])
