"""Definition of RinexData-specific exceptions

Description:
------------

Custom exceptions used by RinexData for more specific error messages and handling. The exceptions are raised by the
internal components (label catalog, header store, registry, buffers and codecs) and caught by the
:class:`~rinexdata.data.RinexData` container, which reports them through the log and returns an explicit result.

"""


class RinexException(Exception):
    pass


class InitializationError(RinexException):
    pass


class SchemaError(RinexException):
    """Label not applicable to the version or file type, or obligatory record missing"""

    pass


class ShapeError(RinexException):
    """Payload does not match the shape declared for a label"""

    pass


class GrammarError(RinexException):
    """Malformed line, wrong continuation line or unexpected end of file"""

    pass


class RangeError(RinexException):
    """System, satellite, observable or value out of bounds"""

    pass


class DuplicateError(RinexException):
    """Data for an existing key is ingested again"""

    pass
