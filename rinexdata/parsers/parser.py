"""Basic functionality for parsing RINEX lines, used by the individual parsers

Description:
------------

A RINEX record is parsed by cutting a line into fields. How to cut a line is given by a parser definition, created
with :func:`define_parser`, where `parser_def` maps a label to the `parser` function and the `fields` of the line::

    parser = define_parser(
        label=lambda line, cache: line[60:].strip(),
        parser_def={
            "MARKER NAME": {"parser": parse_marker_name, "fields": {"marker_name": (0, 60)}},
        },
    )

Each field is a slice (start, end) of the line, the values are stripped of whitespace and given to the parser
function together with a cache shared by all lines of a group.

Lines are read one by one from already opened files by a :class:`LineReader`. The next line can be peeked, so that a
parser meeting the first line of the next record leaves it for the next read.
"""

# Standard library imports
from collections import namedtuple
import math

# RinexData imports
from rinexdata.lib import exceptions
from rinexdata.lib import gnss

LINE_LENGTH = 80

# Results of the epoch and record readers
ObsEpoch = namedtuple("ObsEpoch", ["date", "flag", "bias", "num_records", "samples", "header_lines", "errors"])
ObsEpoch.__doc__ = """One epoch read from an observation file

    Args:
        date (datetime):      Epoch, None for special events without a date.
        flag (int):           Epoch flag.
        bias (float):         Receiver clock offset, 0 if not given.
        num_records (int):    Number of satellites or special records given in the epoch line.
        samples (list):       ObsSample for each non-blank observation.
        header_lines (list):  Lines of header records following special event epochs.
        errors (list):        Descriptions of satellite lines that could not be decoded.
    """

ObsSample = namedtuple("ObsSample", ["system", "prn", "code", "value", "lol", "strength"])
NavRecord = namedtuple("NavRecord", ["system", "prn", "date", "orbit"])


def define_parser(label, parser_def, end_marker=None):
    """A convenience method for defining the necessary fields of a parser

    The label and end_marker parameters should be functions with the following signatures:

        label      = func(line, cache)
        end_marker = func(line, cache)

    Args:
        label:        A function returning a label used in the parser_def.
        parser_def:   A dict with 'parser' and 'fields' defining the parser.
        end_marker:   A function returning True for the last line in a group.

    Returns:
        A dict containing the definition of the parser.
    """
    parser = dict(label=label, parser_def=parser_def)
    if end_marker is not None:
        parser["end_marker"] = end_marker

    return parser


def parse_line(line, cache, parser):
    """Parse line

    Args:
        line (str):     Line to be parsed, padded to 80 characters.
        cache (dict):   Store temporary data.
        parser (dict):  Dictionary with defined parsers with the keys 'parser_def' and 'label'.

    Returns:
        The return value of the parser function of the label.
    """
    label = parser["label"](line, cache)
    if label not in parser["parser_def"]:
        raise exceptions.GrammarError(f"Unknown record {label!r} in line {line.rstrip()!r}")

    values = split_fields(line, parser["parser_def"][label]["fields"])
    return parser["parser_def"][label]["parser"](values, cache)


def split_fields(line, fields):
    """Cut a line into stripped fields, given as a dict of slices"""
    return {field: line[slice(*idx)].strip() for field, idx in fields.items()}


def split_columns(text, width):
    """Cut text into columns of the same width, stripped of whitespace"""
    return [text[idx : idx + width].strip() for idx in range(0, len(text), width)]


def read_line(fid):
    """Read the next line of a file, padded to 80 characters. Returns None at the end of the file"""
    line = fid.readline()
    if not line:
        return None
    return line.rstrip("\r\n").ljust(LINE_LENGTH)


class LineReader:
    """Lines of an opened file, with a lookahead of one line

    The file is only read forward, so that also streams that cannot seek, like pipes, can be read.

    Args:
        fid:  File object opened for reading.
    """

    def __init__(self, fid):
        self.fid = fid
        self._next_line = None

    def read_line(self):
        """Read the next line, padded to 80 characters. Returns None at the end of the file"""
        if self._next_line is not None:
            line, self._next_line = self._next_line, None
            return line
        return read_line(self.fid)

    def peek_line(self):
        """Read the next line without consuming it"""
        if self._next_line is None:
            self._next_line = read_line(self.fid)
        return self._next_line


def _float(value):
    """Convert string to float value

    Convert a string to a floating point number (including, e.g. -0.5960D-01).

    Args:
        value (str):   string value

    Returns:
        float: float value
    """
    try:
        return float(value.replace("D", "E").replace("d", "e"))
    except ValueError:
        raise exceptions.GrammarError(f"Invalid number {value!r}") from None


def _optional_float(value):
    """Convert string to float value, whitespace or empty value is absent and returns None"""
    if not value or value.isspace():
        return None
    return _float(value)


def _nan_float(value):
    """Convert string to float value, whitespace or empty value is NaN"""
    if not value or value.isspace():
        return math.nan
    return _float(value)


def _int(value, default=None):
    """Convert string to int value

    Whitespace or empty value is set to the default, which is an error if no default is given.

    Args:
        value (str):    string value
        default (int):  value of empty fields

    Returns:
        int: integer value
    """
    if not value or value.isspace():
        if default is None:
            raise exceptions.GrammarError("Missing integer value")
        return default
    try:
        return int(value)
    except ValueError:
        raise exceptions.GrammarError(f"Invalid integer {value!r}") from None


def _indicator(char):
    """Loss of lock or signal strength indicator, blank meaning 0"""
    if char == " ":
        return 0
    if not char.isdigit():
        raise exceptions.GrammarError(f"Invalid indicator {char!r}")
    return int(char)


def epoch_date(fields):
    """Date of the fields year, month, day, hour, minute and second. None if the date is blank

    Args:
        fields (dict):  Stripped fields of an epoch line.

    Returns:
        Datetime: The date, with a two digit year expanded to four digits.
    """
    if not fields["year"] and not fields["second"]:
        return None
    try:
        return gnss.make_datetime(
            _int(fields["year"]),
            _int(fields["month"]),
            _int(fields["day"]),
            _int(fields["hour"]),
            _int(fields["minute"]),
            _float(fields["second"]),
        )
    except ValueError:
        raise exceptions.GrammarError(f"Invalid date in {fields}") from None


def read_record_line(reader, is_record_start):
    """Read a line belonging to the current record

    Args:
        reader (LineReader):         Lines of a file positioned inside a record.
        is_record_start (function):  Function telling whether a line starts a new record.

    Raises:
        GrammarError:  At the end of the file, or if the next line starts a new record. That line is left unread.
    """
    line = reader.peek_line()
    if line is None:
        raise exceptions.GrammarError("Unexpected end of file inside a record")
    if is_record_start(line):
        raise exceptions.GrammarError("Record ends before all its lines are read")
    return reader.read_line()


def read_record_start(reader, is_record_start):
    """Read the first line of the next record, skipping blank lines

    Lines not starting a record are skipped up to the start of the next record, and reported as an error.

    Returns:
        String with the line, None at the end of the file.
    """
    line = reader.read_line()
    while line is not None and not line.strip():
        line = reader.read_line()
    if line is None or is_record_start(line):
        return line

    num_skipped = 1
    while True:
        line = reader.peek_line()
        if line is None or is_record_start(line):
            raise exceptions.GrammarError(f"{num_skipped} lines skipped while looking for the start of a record")
        reader.read_line()
        num_skipped += 1
