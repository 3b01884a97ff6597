"""
Logging utilities for Skycast.

Logging is configured from the ``[logging]`` table of the configuration:

    [logging]
    level = "INFO"
    console = true
    file = "logs/skycast.log"
    rotate = true

    [logging.logger."weatherlib.open_meteo"]
    level = "DEBUG"
"""

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# Chatty third-party loggers, raised to WARNING unless we are already there
NOISY_LOGGERS = ("httpx", "httpcore")


def getLogLevelByStr(levelStr: str, default: Optional[int] = None) -> Optional[int]:
    """Get log level by string."""
    level = getattr(logging, str(levelStr).upper(), None)
    if not isinstance(level, int):
        logger.error(f"Invalid log level '{levelStr}'")
        return default
    return level


def _makeFileHandler(logFile: str, rotate: bool) -> logging.Handler:
    logPath = Path(logFile)
    logPath.parent.mkdir(parents=True, exist_ok=True)
    if rotate:
        return TimedRotatingFileHandler(
            filename=logFile,
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
    return logging.FileHandler(logFile, encoding="utf-8")


def configureLogger(localLogger: logging.Logger, config: Dict[str, Any]) -> None:
    """Configure individual logger from config file settings."""

    if "propagate" in config:
        localLogger.propagate = bool(config["propagate"])

    if "level" in config:
        logLevel = getLogLevelByStr(config["level"])
        if logLevel is not None:
            localLogger.setLevel(logLevel)

    logLevel = localLogger.getEffectiveLevel()
    formatter = logging.Formatter(config.get("format", DEFAULT_FORMAT))

    # Drop existing handlers to avoid duplicated records on reconfiguration
    for handler in localLogger.handlers[:]:
        localLogger.removeHandler(handler)

    if config.get("console", False):
        consoleLevel = getLogLevelByStr(config.get("console-level", ""), logLevel) if "console-level" in config else logLevel
        consoleHandler = logging.StreamHandler()
        consoleHandler.setLevel(consoleLevel or logLevel)
        consoleHandler.setFormatter(formatter)
        localLogger.addHandler(consoleHandler)
        logger.info(f"Logging {localLogger.name} to console, logLevel: {consoleHandler.level}")

    if "file" in config:
        logFile = config["file"]
        try:
            fileHandler = _makeFileHandler(logFile, bool(config.get("rotate", False)))
        except OSError as e:
            logger.error(f"Failed to setup file logging for {localLogger.name}: {e}")
            return

        fileLevel = getLogLevelByStr(config.get("file-level", ""), logLevel) if "file-level" in config else logLevel
        fileHandler.setLevel(fileLevel or logLevel)
        fileHandler.setFormatter(formatter)
        localLogger.addHandler(fileHandler)
        logger.info(f"Logging {localLogger.name} to file: {logFile}, logLevel: {fileHandler.level}")


def initLogging(config: Dict[str, Any]) -> None:
    """Configure logging from config file settings."""
    rootLogger = logging.getLogger()
    rootLogger.setLevel(logging.INFO)

    configureLogger(rootLogger, config)
    logLevel = rootLogger.getEffectiveLevel()

    if logLevel < logging.WARNING:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    for loggerName, loggerConfig in config.get("logger", {}).items():
        logger.debug(f"Configuring logger '{loggerName}' with config {loggerConfig}")
        configureLogger(logging.getLogger(loggerName), loggerConfig)

    logger.info(f"Logging configured: root level={logging.getLevelName(logLevel)}")
