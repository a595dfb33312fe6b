"""
Copyright (c) 2020, the Decred developers
See LICENSE for details

Configuration settings for weiermont. The configuration file is JSON
formatted and lives in an OS-appropriate data directory.
"""

import json
import os

from appdirs import AppDirs

from weiermont import WeierMontError
from weiermont.curve.weierstrass import DEFAULT_SCAN_LIMIT
from weiermont.util import helpers


# Set the data directory in a OS-appropriate location.
_ad = AppDirs("weiermont", False)
DATA_DIR = _ad.user_data_dir

# The master configuration file name.
CONFIG_NAME = "weiermont.conf"
CONFIG_PATH = os.path.join(DATA_DIR, CONFIG_NAME)

DEFAULTS = {
    "scanLimit": DEFAULT_SCAN_LIMIT,
    "logLevel": "info",
    "logFile": None,
}

log = helpers.getLogger("CONFIG")


class Config:
    """
    Config is the configuration settings, backed by a JSON file.
    """

    def __init__(self, path=None):
        if path is None:
            helpers.mkdir(DATA_DIR)
            path = CONFIG_PATH
        self.path = path
        try:
            self.file = helpers.fetchSettingsFile(path)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise WeierMontError(f"cannot read configuration file {path}: {e}")
        if not isinstance(self.file, dict):
            raise WeierMontError(f"configuration file {path} is not a JSON object")
        self.normalize()

    def set(self, k, v):
        """
        Set the configuration option. The configuration is not saved, so `save`
        should be called separately.

        Args:
            k (str): The setting key.
            v (JSON-encodable): The value.

        Raises:
            WeierMontError if k is not a known setting.
        """
        if k not in DEFAULTS:
            raise WeierMontError(f"unknown setting {k!r}")
        self.file[k] = v

    def get(self, *keys):
        """
        Retrieve the setting at the provided key path. Multiple keys can be
        provided, with each successive key being retrieved from the previous
        key's value.

        Args:
            *keys (str): Recursive key list.

        Returns:
            mixed: The configuration value.
        """
        d = self.file
        rVal = None
        for k in keys:
            if not isinstance(d, dict) or k not in d:
                return None
            rVal = d[k]
            d = rVal
        return rVal

    def normalize(self):
        """
        Fill in missing settings and check the types of the present ones.

        Raises:
            WeierMontError if a setting has an unusable value.
        """
        file = self.file
        for k, v in DEFAULTS.items():
            file.setdefault(k, v)
        unknown = set(file) - set(DEFAULTS)
        if unknown:
            log.warning(f"ignoring unknown settings {sorted(unknown)} in {self.path}")
        scanLimit = file["scanLimit"]
        if isinstance(scanLimit, bool) or not isinstance(scanLimit, int):
            raise WeierMontError(f"scanLimit must be an integer, got {scanLimit!r}")
        if scanLimit < 0:
            raise WeierMontError(f"scanLimit must not be negative, got {scanLimit}")
        # Raises for unknown level names.
        helpers.getLogLevel(file["logLevel"])
        logFile = file["logFile"]
        if logFile is not None and not isinstance(logFile, str):
            raise WeierMontError(f"logFile must be a path string, got {logFile!r}")

    def save(self):
        """
        Save the file.
        """
        helpers.saveJSON(self.path, self.file, indent=4, sort_keys=True)


cfg = None


def load(path=None):
    """
    Load and return the current configuration.

    The configuration is loaded once per path. Successive calls to the modular
    `load` function return the same instance, unless a different path is
    given, in which case that file is loaded and replaces it.

    Args:
        path (str): Optional configuration file path. Defaults to the file
            in the user data directory on first load, and to the loaded
            file afterwards.

    Returns:
        Config: The current configuration.
    """
    global cfg
    if not cfg or (path is not None and str(path) != str(cfg.path)):
        cfg = Config(path)
    return cfg
