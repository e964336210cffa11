"""Catalog of RINEX header record labels

Description:
------------

Every header record known by RinexData is described by a :class:`LabelDef` in the immutable `CATALOG`, keyed by the
closed :class:`Label` enumeration. The order of the enumeration is the order in which records are written to a file.

For each label the catalog gives:

===========  ========================================================================
 Field        Description
===========  ========================================================================
 token        Label text in columns 61-80 of the record
 version      RINEX version where the label is defined (`all` for both)
 obs          Obligation of the record in observation files
 nav          Obligation of the record in navigation files
 shape        Name of the payload shape, see :mod:`rinexdata.header.payloads`
===========  ========================================================================

Besides the header records, the enumeration contains the correction types used in IONOSPHERIC CORR and TIME SYSTEM
CORR records, and some pseudo labels used as results of lookups and reads.

"""

# Standard library imports
from collections import namedtuple
import enum

# RinexData imports
from rinexdata.lib.enums import FileType, Obligation, RinexVersion


class Label(enum.IntEnum):
    """Identifiers of header records, correction types and pseudo labels"""

    NOLABEL = 0
    # Header records, in print order
    VERSION = enum.auto()
    RUNBY = enum.auto()
    COMM = enum.auto()
    MRKNAME = enum.auto()
    MRKNUMBER = enum.auto()
    MRKTYPE = enum.auto()
    AGENCY = enum.auto()
    RECEIVER = enum.auto()
    ANTTYPE = enum.auto()
    APPXYZ = enum.auto()
    ANTHEN = enum.auto()
    ANTXYZ = enum.auto()
    ANTPHC = enum.auto()
    ANTBS = enum.auto()
    ANTZDAZI = enum.auto()
    ANTZDXYZ = enum.auto()
    COFM = enum.auto()
    WVLEN = enum.auto()
    TOBS = enum.auto()
    SYS = enum.auto()
    SIGU = enum.auto()
    INT = enum.auto()
    TOFO = enum.auto()
    TOLO = enum.auto()
    CLKOFFS = enum.auto()
    DCBS = enum.auto()
    PCVS = enum.auto()
    SCALE = enum.auto()
    PHSH = enum.auto()
    GLSLT = enum.auto()
    GLPHS = enum.auto()
    LEAP = enum.auto()
    SATS = enum.auto()
    PRNOBS = enum.auto()
    IONA = enum.auto()
    IONB = enum.auto()
    IONC = enum.auto()
    DUTC = enum.auto()
    CORRT = enum.auto()
    GEOT = enum.auto()
    TIMC = enum.auto()
    EOH = enum.auto()
    # Ionospheric correction types
    IONC_GAL = enum.auto()
    IONC_GPSA = enum.auto()
    IONC_GPSB = enum.auto()
    IONC_QZSA = enum.auto()
    IONC_QZSB = enum.auto()
    IONC_BDSA = enum.auto()
    IONC_BDSB = enum.auto()
    IONC_IRNA = enum.auto()
    IONC_IRNB = enum.auto()
    # Time system correction types
    TIMC_GPUT = enum.auto()
    TIMC_GLUT = enum.auto()
    TIMC_GAUT = enum.auto()
    TIMC_BDUT = enum.auto()
    TIMC_QZUT = enum.auto()
    TIMC_IRUT = enum.auto()
    TIMC_SBUT = enum.auto()
    TIMC_GLGP = enum.auto()
    TIMC_GAGP = enum.auto()
    TIMC_BDGP = enum.auto()
    TIMC_QZGP = enum.auto()
    TIMC_IRGP = enum.auto()
    # Pseudo labels
    INFILEVER = enum.auto()
    DONTMATCH = enum.auto()
    LASTONE = enum.auto()


LabelDef = namedtuple("LabelDef", ["label", "token", "version", "obs", "nav", "shape"])

V210, V304, ALL = RinexVersion.v210, RinexVersion.v304, RinexVersion.all
NAP, OBL, OPT = Obligation.not_applicable, Obligation.obligatory, Obligation.optional

CATALOG = {
    d.label: d
    for d in (
        LabelDef(Label.NOLABEL, "NO LABEL", ALL, NAP, NAP, None),
        LabelDef(Label.VERSION, "RINEX VERSION / TYPE", ALL, OBL, OBL, "version"),
        LabelDef(Label.RUNBY, "PGM / RUN BY / DATE", ALL, OBL, OBL, "text_triple"),
        LabelDef(Label.COMM, "COMMENT", ALL, OPT, OPT, "text"),
        LabelDef(Label.MRKNAME, "MARKER NAME", ALL, OBL, NAP, "text"),
        LabelDef(Label.MRKNUMBER, "MARKER NUMBER", ALL, OPT, NAP, "text"),
        LabelDef(Label.MRKTYPE, "MARKER TYPE", V304, OPT, NAP, "text"),
        LabelDef(Label.AGENCY, "OBSERVER / AGENCY", ALL, OBL, NAP, "text_pair"),
        LabelDef(Label.RECEIVER, "REC # / TYPE / VERS", ALL, OBL, NAP, "text_triple"),
        LabelDef(Label.ANTTYPE, "ANT # / TYPE", ALL, OBL, NAP, "text_pair"),
        LabelDef(Label.APPXYZ, "APPROX POSITION XYZ", ALL, OBL, NAP, "xyz"),
        LabelDef(Label.ANTHEN, "ANTENNA: DELTA H/E/N", ALL, OBL, NAP, "xyz"),
        LabelDef(Label.ANTXYZ, "ANTENNA: DELTA X/Y/Z", V304, OPT, NAP, "xyz"),
        LabelDef(Label.ANTPHC, "ANTENNA: PHASECENTER", V304, OPT, NAP, "phase_center"),
        LabelDef(Label.ANTBS, "ANTENNA: B.SIGHT XYZ", V304, OPT, NAP, "xyz"),
        LabelDef(Label.ANTZDAZI, "ANTENNA: ZERODIR AZI", V304, OPT, NAP, "number"),
        LabelDef(Label.ANTZDXYZ, "ANTENNA: ZERODIR XYZ", V304, OPT, NAP, "xyz"),
        LabelDef(Label.COFM, "CENTER OF MASS: XYZ", V304, OPT, NAP, "xyz"),
        LabelDef(Label.WVLEN, "WAVELENGTH FACT L1/2", V210, OPT, NAP, "wavelength"),
        LabelDef(Label.TOBS, "# / TYPES OF OBSERV", V210, OBL, NAP, "obs_codes"),
        LabelDef(Label.SYS, "SYS / # / OBS TYPES", V304, OBL, NAP, "obs_codes"),
        LabelDef(Label.SIGU, "SIGNAL STRENGTH UNIT", V304, OPT, NAP, "text"),
        LabelDef(Label.INT, "INTERVAL", ALL, OPT, NAP, "number"),
        LabelDef(Label.TOFO, "TIME OF FIRST OBS", ALL, OBL, NAP, "epoch"),
        LabelDef(Label.TOLO, "TIME OF LAST OBS", ALL, OPT, NAP, "epoch"),
        LabelDef(Label.CLKOFFS, "RCV CLOCK OFFS APPL", ALL, OPT, NAP, "integer"),
        LabelDef(Label.DCBS, "SYS / DCBS APPLIED", V304, OPT, NAP, "sys_applied"),
        LabelDef(Label.PCVS, "SYS / PCVS APPLIED", V304, OPT, NAP, "sys_applied"),
        LabelDef(Label.SCALE, "SYS / SCALE FACTOR", V304, OPT, NAP, "scale_factor"),
        LabelDef(Label.PHSH, "SYS / PHASE SHIFT", V304, OPT, NAP, "phase_shift"),
        LabelDef(Label.GLSLT, "GLONASS SLOT / FRQ #", V304, OPT, NAP, "slot_frequency"),
        LabelDef(Label.GLPHS, "GLONASS COD/PHS/BIS", V304, OPT, NAP, "code_bias"),
        LabelDef(Label.LEAP, "LEAP SECONDS", ALL, OPT, OPT, "leap_seconds"),
        LabelDef(Label.SATS, "# OF SATELLITES", ALL, OPT, NAP, "integer"),
        LabelDef(Label.PRNOBS, "PRN / # OF OBS", ALL, OPT, NAP, "prn_obs"),
        LabelDef(Label.IONA, "ION ALPHA", V210, NAP, OPT, "iono_params"),
        LabelDef(Label.IONB, "ION BETA", V210, NAP, OPT, "iono_params"),
        LabelDef(Label.IONC, "IONOSPHERIC CORR", V304, NAP, OPT, "correction"),
        LabelDef(Label.DUTC, "DELTA-UTC: A0,A1,T,W", V210, NAP, OPT, "delta_utc"),
        LabelDef(Label.CORRT, "CORR TO SYSTEM TIME", V210, NAP, OPT, "glonass_corr"),
        LabelDef(Label.GEOT, "D-UTC A0,A1,T,W,S,U", V210, NAP, OPT, "geo_utc"),
        LabelDef(Label.TIMC, "TIME SYSTEM CORR", V304, NAP, OPT, "correction"),
        LabelDef(Label.EOH, "END OF HEADER", ALL, OBL, OBL, None),
        LabelDef(Label.IONC_GAL, "GAL", V304, NAP, NAP, None),
        LabelDef(Label.IONC_GPSA, "GPSA", V304, NAP, NAP, None),
        LabelDef(Label.IONC_GPSB, "GPSB", V304, NAP, NAP, None),
        LabelDef(Label.IONC_QZSA, "QZSA", V304, NAP, NAP, None),
        LabelDef(Label.IONC_QZSB, "QZSB", V304, NAP, NAP, None),
        LabelDef(Label.IONC_BDSA, "BDSA", V304, NAP, NAP, None),
        LabelDef(Label.IONC_BDSB, "BDSB", V304, NAP, NAP, None),
        LabelDef(Label.IONC_IRNA, "IRNA", V304, NAP, NAP, None),
        LabelDef(Label.IONC_IRNB, "IRNB", V304, NAP, NAP, None),
        LabelDef(Label.TIMC_GPUT, "GPUT", V304, NAP, NAP, None),
        LabelDef(Label.TIMC_GLUT, "GLUT", V304, NAP, NAP, None),
        LabelDef(Label.TIMC_GAUT, "GAUT", V304, NAP, NAP, None),
        LabelDef(Label.TIMC_BDUT, "BDUT", V304, NAP, NAP, None),
        LabelDef(Label.TIMC_QZUT, "QZUT", V304, NAP, NAP, None),
        LabelDef(Label.TIMC_IRUT, "IRUT", V304, NAP, NAP, None),
        LabelDef(Label.TIMC_SBUT, "SBUT", V304, NAP, NAP, None),
        LabelDef(Label.TIMC_GLGP, "GLGP", V304, NAP, NAP, None),
        LabelDef(Label.TIMC_GAGP, "GAGP", V304, NAP, NAP, None),
        LabelDef(Label.TIMC_BDGP, "BDGP", V304, NAP, NAP, None),
        LabelDef(Label.TIMC_QZGP, "QZGP", V304, NAP, NAP, None),
        LabelDef(Label.TIMC_IRGP, "IRGP", V304, NAP, NAP, None),
        LabelDef(Label.INFILEVER, "INPUT FILE VERSION", ALL, NAP, NAP, "version"),
        LabelDef(Label.DONTMATCH, "LABEL DOES NOT MATCH", ALL, NAP, NAP, None),
        LabelDef(Label.LASTONE, "LAST LABEL", ALL, NAP, NAP, None),
    )
}

HEADER_LABELS = tuple(lbl for lbl in Label if Label.VERSION <= lbl <= Label.EOH)
IONO_CORRECTIONS = tuple(lbl for lbl in Label if Label.IONC_GAL <= lbl <= Label.IONC_IRNB)
TIME_CORRECTIONS = tuple(lbl for lbl in Label if Label.TIMC_GPUT <= lbl <= Label.TIMC_IRGP)

# Legacy RINEX 2 correction records and the correction type holding their data
V2_CORRECTIONS = {
    Label.IONA: Label.IONC_GPSA,
    Label.IONB: Label.IONC_GPSB,
    Label.DUTC: Label.TIMC_GPUT,
    Label.CORRT: Label.TIMC_GLUT,
    Label.GEOT: Label.TIMC_SBUT,
}

_TOKENS = {" ".join(d.token.split()).upper(): d.label for d in CATALOG.values()}


def label_to_id(text):
    """Identifier of a label text

    The lookup ignores case and leading, trailing and repeated blanks, so that `" marker   name"` is `MRKNAME`.

    Args:
        text (str):  Label text, for instance from columns 61-80 of a header record.

    Returns:
        Label: Identifier of the label, `NOLABEL` if the text is not known.
    """
    return _TOKENS.get(" ".join(text.split()).upper(), Label.NOLABEL)


def id_to_label(label):
    """Label text of an identifier"""
    return CATALOG[Label(label)].token


def definition(label):
    return CATALOG[Label(label)]


def is_applicable(label, version):
    """Whether a label is defined in a given RINEX version"""
    return CATALOG[label].version in (RinexVersion.all, version)


def obligation(label, file_type):
    """Obligation of a header record in observation or navigation files"""
    label_def = CATALOG[label]
    return label_def.obs if file_type == FileType.observation else label_def.nav


def print_order(version, file_type=None):
    """Header records defined for a version, in the order they are printed

    Args:
        version (RinexVersion):  Version of the file.
        file_type (FileType):    Only records applicable to this file type, all records if None.

    Returns:
        Tuple of labels.
    """
    return tuple(
        lbl
        for lbl in HEADER_LABELS
        if is_applicable(lbl, version) and (file_type is None or obligation(lbl, file_type) != NAP)
    )


def obligatory(version, file_type):
    """Header records that must hold data before a header of the given version and file type is printed"""
    return tuple(lbl for lbl in print_order(version, file_type) if obligation(lbl, file_type) == OBL)


def is_correction_type(label):
    return label in IONO_CORRECTIONS or label in TIME_CORRECTIONS
