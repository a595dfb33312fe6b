"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

import json
import logging
from logging import Logger
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
import shutil
import sys
from tempfile import TemporaryDirectory
import traceback
from typing import Any, Callable, Dict, Optional, Union

from weiermont import WeierMontError


def formatTraceback(err: Exception) -> str:
    """
    Format a traceback for an error so that it can go into logs.

    Args:
        err: The error the traceback is extracted from.

    Returns:
        The __str__() of the error, followed by the standard formatting
            of the traceback on the following lines.
    """
    return "".join(traceback.format_exception(None, err, err.__traceback__))


def mkdir(path: Union[Path, str]) -> bool:
    """
    Create the directory if it doesn't exist. Uses os.path .

    Args:
        path: the directory path.
    """
    if os.path.isdir(path):
        return True
    if os.path.isfile(path):
        return False
    os.makedirs(path)
    return True


class LogSettings:
    """
    Tracks the module log levels and the handlers installed on the root
    logger. Handlers are keyed by destination, "stderr" or the resolved log
    file path, so that repeated prepareLogging calls do not duplicate output.
    """

    root = logging.getLogger("")
    defaultLevel = logging.INFO
    moduleLevels: Dict[str, int] = {}
    loggers: Dict[str, Logger] = {}
    handlers: Dict[str, logging.Handler] = {}
    formatter = logging.Formatter(
        "%(asctime)s %(module)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s"
    )


LogSettings.root.setLevel(logging.NOTSET)


class _StderrHandler(logging.StreamHandler):
    """
    A StreamHandler writing to whatever sys.stderr is when a record arrives,
    so one shared handler survives sys.stderr being swapped out.
    """

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, _):
        pass


def _installHandler(key: str, makeHandler: Callable[[], logging.Handler]) -> None:
    if key in LogSettings.handlers:
        return
    handler = makeHandler()
    handler.setFormatter(LogSettings.formatter)
    LogSettings.root.addHandler(handler)
    LogSettings.handlers[key] = handler


def prepareLogging(
    filepath: Union[Path, str, None] = None,
    logLvl: int = logging.INFO,
    lvlMap: Optional[Dict[str, int]] = None,
) -> None:
    """
    Set the log levels of all weiermont loggers, current and future, and make
    sure output goes to stderr. With a filepath, output also goes to a
    rotating log file there. Calling this again only changes levels and adds
    destinations not yet seen.

    Args:
        filepath: The base name for the rotating log file.
        logLvl: The level for loggers without an entry in lvlMap.
        lvlMap: Per-logger levels, merged into the stored map.

    Raises:
        OSError if the log file cannot be opened.
    """
    LogSettings.defaultLevel = logLvl
    LogSettings.moduleLevels.update(lvlMap if lvlMap else {})
    for name, logger in LogSettings.loggers.items():
        logger.setLevel(LogSettings.moduleLevels.get(name, logLvl))

    if filepath:
        _installHandler(
            str(Path(filepath).resolve()),
            lambda: RotatingFileHandler(
                filepath, mode="a", maxBytes=5 * 1024 * 1024, backupCount=2
            ),
        )
    # pythonw on Windows has no console streams.
    if not sys.executable.endswith("pythonw.exe"):
        _installHandler("stderr", _StderrHandler)


def getLogger(name: str) -> Logger:
    """
    A child of the root logger at the level registered for name, or the
    default level.
    """
    l = LogSettings.root.getChild(name)
    l.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))
    LogSettings.loggers[name] = l
    return l


LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def getLogLevel(logLvl: Union[int, str]) -> int:
    """
    Resolve a log level given as an int, a numeric string, or a level name
    such as "debug". Names are case-insensitive.

    Args:
        logLvl: The level to resolve.

    Returns:
        The logging module level.

    Raises:
        WeierMontError if logLvl is not a known level name or not a level at
            all.
    """
    if isinstance(logLvl, bool) or not isinstance(logLvl, (int, str)):
        raise WeierMontError(f"log level must be a name or an integer, got {logLvl!r}")
    if isinstance(logLvl, int):
        return logLvl
    try:
        return int(logLvl)
    except ValueError:
        pass
    name = logLvl.upper()
    if name not in LOG_LEVELS:
        raise WeierMontError(f"unknown log level {logLvl!r}")
    return LOG_LEVELS[name]


def fetchSettingsFile(filepath: Union[Path, str]) -> Dict[str, Any]:
    """
    Fetches the JSON settings file, creating an empty json object if necessary.

    Args:
        filepath: The settings file path.

    Returns:
        The decoded settings.
    """
    if not os.path.isfile(filepath):
        with open(filepath, "w+", encoding="utf-8") as f:
            f.write("{}")
    with open(filepath, "r", encoding="utf-8") as f:
        return json.load(f)


def saveJSON(filepath: Union[Path, str], thing: Any, **kwargs: Any) -> None:
    """
    Atomic JSON save. The object is written to a temporary file that is then
    moved into place.

    Args:
        filepath: The destination path.
        thing: A JSON-encodable object.
        **kwargs: Passed on to json.dumps.
    """
    with TemporaryDirectory() as tempDir:
        tmpPath = os.path.join(tempDir, "tmp.tmp")
        with open(tmpPath, "w", encoding="utf-8") as f:
            f.write(json.dumps(thing, **kwargs))
            f.flush()
            os.fsync(f.fileno())
        shutil.move(tmpPath, filepath)
