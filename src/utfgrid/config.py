"""Configuration management for utfgrid.

Settings are loaded using Dynaconf from multiple locations in order of
increasing priority:

1. Global settings (/etc/utfgrid/)
2. User settings (~/.config/utfgrid/)
3. Current directory settings (./)
4. Environment variable specified file (UTFGRID_SETTINGS_FILE_FOR_DYNACONF)

Environment variables prefixed with ``UTFGRID_`` override all files.

Attributes
----------
USER_DIR : pathlib.Path
    Path to user configuration directory.
GLOB_DIR : pathlib.Path
    Path to global configuration directory.
CURR_DIR : pathlib.Path
    Path to current working directory.
DEFAULTS : dict
    Fallback values for keys that no settings file defines.
settings : Dynaconf
    The Dynaconf settings object with loaded configuration.
"""
import os
import pathlib

from dynaconf import Dynaconf

USER_DIR = pathlib.Path("~/.config/utfgrid").expanduser()
GLOB_DIR = pathlib.Path("/etc/utfgrid/")
CURR_DIR = pathlib.Path("./").absolute()
settings_files = [
    GLOB_DIR / "settings.toml",
    GLOB_DIR / ".secrets.toml",
    USER_DIR / "settings.toml",
    USER_DIR / ".secrets.toml",
    CURR_DIR / "settings.toml",
    CURR_DIR / ".secrets.toml"
    ]
extra_file = os.getenv("UTFGRID_SETTINGS_FILE_FOR_DYNACONF")
if extra_file:
    settings_files.append(pathlib.Path(extra_file).absolute())

DEFAULTS = {
    "width": 256,
    "height": 256,
    "resolution": 4,
}

settings = Dynaconf(
    merge_enabled=True,
    envvar_prefix="UTFGRID",
    settings_files=settings_files,
    environments=True,
    load_dotenv=True,
)


def get(key, default=None):
    """Look up a setting, falling back to the package defaults.

    Parameters
    ----------
    key : str
        Setting name (case-insensitive, as with Dynaconf).
    default : object, optional
        Returned when neither the settings nor ``DEFAULTS`` define the key.
    """
    return settings.get(key, DEFAULTS.get(key.lower(), default))


def change_env(new_env):
    """Change the active Dynaconf environment.

    Parameters
    ----------
    new_env : str
        The environment name to switch to (e.g., 'development', 'production').
    """
    settings.setenv(new_env)
    settings.reload()
