"""Framework for reading RINEX records

Description:
------------

Each combination of RINEX major version and file type is read by a separate .py-file, named `rinex<major>_<type>`, for
instance `rinex3_obs`. The function reading one record needs to be decorated with the
:func:`~midgard.dev.plugins.register_named` decorator as follows::

    from midgard.dev import plugins

    @plugins.register_named("read_epoch")
    def read_epoch(reader, ...):
        ...

To read one record, use :func:`read_epoch` with the version and the file type of the file. Header records are read
with :class:`~rinexdata.parsers.rinex_header.HeaderParser`, which handles both versions.

"""

# Midgard imports
from midgard.dev import plugins

# RinexData imports
from rinexdata.lib.enums import FileType


def plugin_name(version, file_type):
    """Name of the module reading files of the given version and file type"""
    suffix = "obs" if FileType(file_type) == FileType.observation else "nav"
    return f"rinex{version.major}_{suffix}"


def read_epoch(version, file_type, reader, **kwargs):
    """Read one epoch or record from a RINEX file

    Args:
        version (RinexVersion):  Version of the file.
        file_type (FileType):    Observation or navigation file.
        reader (LineReader):     Lines of a file, positioned at the start of the record.
        kwargs:                  Input arguments to the reader.

    Returns:
        Record as returned by the reader, None at the end of the file.
    """
    return plugins.call(
        package_name=__name__,
        plugin_name=plugin_name(version, file_type),
        part="read_epoch",
        reader=reader,
        **kwargs,
    )
