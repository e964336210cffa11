"""Definition of RinexData-specific enumerations

Description:
------------

Custom enumerations used by RinexData for structured names. The enumerations are registered with Midgard, so that
they can be looked up by name, for instance::

    >>> from rinexdata.lib import enums
    >>> enums.get_value("rinex_version", "v304")
    <RinexVersion.v304: 1>

"""

# Standard library imports
import colorama
import enum

# Make Midgard-enums functions available
from midgard.collections.enums import get_enum, get_value, register_enum  # noqa


#
# ENUMS
#
@register_enum("log_level")
class LogLevel(int, enum.Enum):
    """Levels used when deciding how much log output to show"""

    all = enum.auto()
    debug = enum.auto()
    time = enum.auto()
    dev = enum.auto()
    info = enum.auto()
    out = enum.auto()
    warn = enum.auto()
    check = enum.auto()
    error = enum.auto()
    fatal = enum.auto()
    none = enum.auto()


@register_enum("log_color")
class LogColor(str, enum.Enum):
    """Colors used when logging"""

    dev = (colorama.Fore.BLUE,)
    time = (colorama.Fore.WHITE,)
    out = (colorama.Style.BRIGHT,)
    check = (colorama.Style.BRIGHT + colorama.Fore.YELLOW,)
    warn = colorama.Fore.YELLOW
    error = colorama.Fore.RED
    fatal = colorama.Style.BRIGHT + colorama.Fore.RED


@register_enum("rinex_version")
class RinexVersion(enum.IntEnum):
    """RINEX versions handled by the codecs

    The members `all` and `tbd` are only used in the label catalog, for labels valid in every version and for
    input files of a version that cannot be handled.
    """

    v210 = 0
    v304 = 1
    all = 2
    tbd = 3

    @property
    def number(self):
        """Version number as written in the RINEX VERSION / TYPE record"""
        return {RinexVersion.v210: 2.10, RinexVersion.v304: 3.04}.get(self, 0.0)

    @property
    def major(self):
        return int(self.number)

    @classmethod
    def from_number(cls, number):
        """Version handling a given version number, `tbd` for unknown major versions"""
        return {2: cls.v210, 3: cls.v304}.get(int(number), cls.tbd)


@register_enum("obligation")
class Obligation(enum.IntEnum):
    """Obligation of a header record for a given file type"""

    not_applicable = 0
    obligatory = 1
    optional = 2


@register_enum("file_type")
class FileType(str, enum.Enum):
    """Type of RINEX file, as used for the obligation of header records"""

    observation = "O"
    navigation = "N"


@register_enum("read_status")
class ReadStatus(enum.IntEnum):
    """Result of reading one epoch from a RINEX file"""

    end_of_file = 0
    epoch_read = 1
    epoch_error = 2


@register_enum("epoch_flag")
class EpochFlag(enum.IntEnum):
    """Epoch flags of observation records"""

    ok = 0
    power_failure = 1
    moving_antenna = 2
    new_site = 3
    header_info = 4
    external_event = 5
    cycle_slip = 6

    @property
    def has_header_records(self):
        """Whether the special records following the epoch line are header records"""
        return EpochFlag.moving_antenna <= self <= EpochFlag.external_event
