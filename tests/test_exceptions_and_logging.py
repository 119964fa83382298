"""Tests for the exception hierarchy and structured logging."""

from __future__ import annotations

import logging

import pytest

from sass_import_resolver import (
    ConfigurationError,
    Importer,
    ImportResolutionError,
    ImportResolverError,
    LogContext,
    PackageNotFoundError,
    configure_logging,
    log_debug,
    log_error,
    log_info,
    log_trace,
    log_warn,
)
from sass_import_resolver.logging import LOGGER_NAME, TRACE, get_logger


class TestExceptions:
    @pytest.mark.parametrize(
        "error",
        [
            ImportResolutionError("a", "/b.scss"),
            ConfigurationError("bad"),
            PackageNotFoundError("pkg", "/proj"),
        ],
    )
    def test_hierarchy(self, error):
        assert isinstance(error, ImportResolverError)

    def test_resolution_error_message(self):
        error = ImportResolutionError("theme", "/proj/index.scss")

        assert str(error) == "Could not find file: theme from parent /proj/index.scss"
        assert error.specifier == "theme"
        assert error.referrer == "/proj/index.scss"

    def test_package_not_found_message(self):
        error = PackageNotFoundError("bootstrap", "/proj")

        assert str(error) == "Cannot find module 'bootstrap' from '/proj'"
        assert error.base_directory == "/proj"


class TestLogging:
    @pytest.fixture(autouse=True)
    def restore_logger(self):
        logger = get_logger()
        handlers = list(logger.handlers)
        level = logger.level
        yield
        logger.handlers = handlers
        logger.setLevel(level)

    def test_log_functions_are_callable(self):
        log_error("error")
        log_warn("warn")
        log_info("info")
        log_debug("debug")
        log_trace("trace")

    def test_fields_are_attached_and_rendered(self, caplog):
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)

        log_debug("Lookup", {"strategy": "local", "attempt": 2})

        record = caplog.records[-1]
        assert record.name == LOGGER_NAME
        assert record.fields == {"strategy": "local", "attempt": "2"}
        assert record.getMessage() == "Lookup [strategy=local attempt=2]"

    def test_log_context_skips_unset_fields(self, caplog):
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        log_info("Resolved", LogContext(specifier="second", path="/proj/second.scss"))

        assert caplog.records[-1].fields == {"specifier": "second", "path": "/proj/second.scss"}

    def test_message_without_fields(self, caplog):
        caplog.set_level(logging.WARNING, logger=LOGGER_NAME)

        log_warn("plain")

        assert caplog.records[-1].getMessage() == "plain"
        assert caplog.records[-1].fields == {}

    def test_trace_is_below_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)

        log_trace("hidden")

        assert all(r.getMessage() != "hidden" for r in caplog.records)

    def test_configure_logging_adds_one_handler(self):
        logger = get_logger()
        before = len(logger.handlers)

        configure_logging("debug")
        configure_logging("trace")

        assert len(logger.handlers) == before + 1
        assert logger.level == TRACE

    def test_configure_logging_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SASS_IMPORT_LOG", "warn")

        assert configure_logging().level == logging.WARNING

    def test_failed_resolution_is_logged(self, project, caplog):
        caplog.set_level(logging.ERROR, logger=LOGGER_NAME)

        class DeniedProbe:
            def exists(self, path):
                raise PermissionError(13, "Permission denied", path)

        importer = Importer(resolvers=["local"], file_probe=DeniedProbe())
        with pytest.raises(ImportResolutionError):
            importer.resolve("second", str(project / "index.scss"))

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.fields["error_type"] == "PermissionError"
