"""
Tests for weatherlib.logging_utils
"""

import logging
from logging.handlers import TimedRotatingFileHandler

import pytest

from .logging_utils import configureLogger, getLogLevelByStr, initLogging


@pytest.fixture
def scratchLogger():
    localLogger = logging.getLogger("weatherlib.tests.scratch")
    yield localLogger
    for handler in localLogger.handlers[:]:
        localLogger.removeHandler(handler)
        handler.close()
    localLogger.setLevel(logging.NOTSET)
    localLogger.propagate = True


def testGetLogLevelByStr():
    assert getLogLevelByStr("debug") == logging.DEBUG
    assert getLogLevelByStr("WARNING") == logging.WARNING
    assert getLogLevelByStr("nonsense") is None
    assert getLogLevelByStr("nonsense", logging.INFO) == logging.INFO


def testConfigureConsole(scratchLogger):
    configureLogger(scratchLogger, {"level": "DEBUG", "console": True, "console-level": "ERROR"})

    assert scratchLogger.level == logging.DEBUG
    assert len(scratchLogger.handlers) == 1
    assert scratchLogger.handlers[0].level == logging.ERROR


def testReconfigureReplacesHandlers(scratchLogger):
    configureLogger(scratchLogger, {"console": True})
    configureLogger(scratchLogger, {"console": True})

    assert len(scratchLogger.handlers) == 1


def testConfigureFile(scratchLogger, tmp_path):
    logFile = tmp_path / "logs" / "app.log"
    configureLogger(scratchLogger, {"level": "INFO", "file": str(logFile), "propagate": False})

    scratchLogger.info("hello file")
    for handler in scratchLogger.handlers:
        handler.flush()

    assert scratchLogger.propagate is False
    assert "hello file" in logFile.read_text(encoding="utf-8")


def testConfigureRotatingFile(scratchLogger, tmp_path):
    configureLogger(scratchLogger, {"file": str(tmp_path / "app.log"), "rotate": True})

    assert isinstance(scratchLogger.handlers[0], TimedRotatingFileHandler)


def testInitLoggingPerLoggerSection(scratchLogger):
    rootLogger = logging.getLogger()
    savedLevel = rootLogger.level
    savedHandlers = rootLogger.handlers[:]
    try:
        initLogging({"level": "DEBUG", "logger": {scratchLogger.name: {"level": "ERROR"}}})

        assert rootLogger.level == logging.DEBUG
        assert scratchLogger.level == logging.ERROR
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        rootLogger.setLevel(savedLevel)
        for handler in savedHandlers:
            if handler not in rootLogger.handlers:
                rootLogger.addHandler(handler)
