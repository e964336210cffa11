"""Framework for writing RINEX records

Description:
------------

Each combination of RINEX major version and file type is written by a separate .py-file, named
`rinex<major>_<type>`, for instance `rinex2_nav`. The function writing one epoch or record needs to be decorated with
the :func:`~midgard.dev.plugins.register_named` decorator as follows::

    from midgard.dev import plugins

    @plugins.register_named("write_epoch")
    def write_epoch(fid, ...):
        ...

The function is called with an opened file and the data of the epoch or record, already selected and ordered for
output. Header records are written by :mod:`rinexdata.writers.rinex_header`, which handles both versions.

"""

# Midgard imports
from midgard.dev import plugins

# RinexData imports
from rinexdata.lib.enums import FileType


def plugin_name(version, file_type):
    """Name of the module writing files of the given version and file type"""
    suffix = "obs" if FileType(file_type) == FileType.observation else "nav"
    return f"rinex{version.major}_{suffix}"


def write_epoch(version, file_type, fid, **kwargs):
    """Write one epoch or record to a RINEX file

    Args:
        version (RinexVersion):  Version of the file.
        file_type (FileType):    Observation or navigation file.
        fid:                     File object opened for writing.
        kwargs:                  Data of the epoch or record.
    """
    plugins.call(
        package_name=__name__,
        plugin_name=plugin_name(version, file_type),
        part="write_epoch",
        fid=fid,
        **kwargs,
    )
