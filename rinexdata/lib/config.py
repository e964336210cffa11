"""RinexData library module for handling of configuration settings

Example:
--------

    >>> from rinexdata.lib import config
    >>> config.rinexdata.get("country", section="general").str
    '---'

Description:
------------

This module is used to read RinexData configuration settings. We first try to read configuration settings from the
current working directory, then from the user's `~/.rinexdata` directory and finally from the config directory of
the package (see `_CONFIG_DIRECTORIES`). The main configuration file is called rinexdata.conf. Personal changes to the
config can be done in a file called rinexdata_local.conf (see `_CONFIG_FILENAMES`).

The settings are used as defaults when creating :class:`~rinexdata.data.RinexData` containers and file names. Each
configuration entry is converted to the required data type using one of the properties `str`, `int`, `float`, `bool`
or `list`.

"""

# Standard library imports
import pathlib

# Midgard imports
from midgard.config.config import Configuration

# RinexData imports
from rinexdata.lib import enums  # noqa  # Register RinexData enums


# Base directory of the RinexData installation
RINEXDATA_DIR = pathlib.Path(__file__).resolve().parent.parent

# Prioritized list of possible names of RinexData config files
_CONFIG_FILENAMES = dict(rinexdata=("rinexdata_local.conf", "rinexdata.conf"))

# Prioritized list of possible locations for all RinexData config files
_CONFIG_DIRECTORIES = (pathlib.Path.cwd(), pathlib.Path.home() / ".rinexdata", RINEXDATA_DIR / "config")

# Datetime format of the PGM / RUN BY / DATE record, defined here for consistency
FMT_run_date = {enums.RinexVersion.v210: "%d-%b-%y %H:%M", enums.RinexVersion.v304: "%Y%m%d %H%M%S UTC"}


def config_paths(cfg_name):
    """Yield all files that contain the given configuration, lowest priority first"""
    for file_name in _CONFIG_FILENAMES.get(cfg_name, (f"{cfg_name}.conf",))[::-1]:
        for file_dir in _CONFIG_DIRECTORIES:
            file_path = file_dir / file_name
            if file_path.exists():
                yield file_path
                break


def read_rinexdata_config():
    """Read RinexData-configuration"""
    rinexdata.clear()
    for file_path in config_paths("rinexdata"):
        rinexdata.update_from_file(file_path, interpolate=True)
    rinexdata.master_section = "general"


def setting(key, default=""):
    """Value of a key in the general section, as a string

    Args:
        key (str):      Name of the configuration key.
        default (str):  Value used when the key is not configured.

    Returns:
        String with the configured value.
    """
    return rinexdata.get(key, section="general", default=default).str


# Add configuration as module variable
rinexdata = Configuration("rinexdata")
read_rinexdata_config()
