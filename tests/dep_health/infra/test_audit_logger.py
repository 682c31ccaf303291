"""Tests for the structured logging stack."""
import json
import logging

from dependency_injector import providers

from dep_health.infra.logging import (
    AUDIT_LOG_FILENAME,
    AuditLogger,
    HumanReadableFormatter,
    JSONFormatter,
    audit_handlers,
    json_lines_handler,
)


def _record(message="package_scored", **extra):
    record = logging.LogRecord("dep_health", logging.INFO, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestFormatters:
    def test_json_formatter_lifts_extra_fields(self):
        line = JSONFormatter().format(_record(package="express", health_score=10.0))
        data = json.loads(line)

        assert data["message"] == "package_scored"
        assert data["level"] == "INFO"
        assert data["logger"] == "dep_health"
        assert data["package"] == "express"
        assert data["health_score"] == 10.0
        assert "timestamp" in data

    def test_human_formatter_appends_key_values(self):
        line = HumanReadableFormatter().format(_record("package_degraded", package="ghost", reason="Package not found: ghost"))

        assert " - INFO - package_degraded" in line
        assert line.endswith("package=ghost reason=Package not found: ghost")

    def test_human_formatter_without_extras(self):
        line = HumanReadableFormatter().format(_record("batch_started"))
        assert line.endswith(" - INFO - batch_started")

    def test_json_file_handler_appends(self, tmp_path):
        path = tmp_path / "nested" / "audit.jsonl"
        handler = json_lines_handler(path)
        try:
            handler.emit(_record("first"))
            handler.emit(_record("second"))
        finally:
            handler.close()

        lines = path.read_text(encoding="utf-8").splitlines()
        assert [json.loads(l)["message"] for l in lines] == ["first", "second"]

    def test_audit_handlers_follow_config(self, tmp_path):
        assert audit_handlers(logs_dir=tmp_path, json_file=False, console_output=False, level=logging.INFO) == []

        handlers = audit_handlers(logs_dir=None, json_file=True, console_output=True, level=logging.DEBUG)
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, HumanReadableFormatter)

        handlers = audit_handlers(logs_dir=tmp_path, json_file=True, console_output=False, level=logging.INFO)
        try:
            assert isinstance(handlers[0].formatter, JSONFormatter)
            assert handlers[0].baseFilename == str(tmp_path / AUDIT_LOG_FILENAME)
        finally:
            handlers[0].close()


class TestAuditLogger:
    def test_writes_json_lines(self, tmp_path):
        resource = AuditLogger()
        logger = resource.init(logs_dir=tmp_path, logger_name="dep_health.test.json", json_file=True)
        try:
            logger.info("audit_stored", audit_id="abc", total_dependencies=3)
            logger.debug("hidden_at_info")
        finally:
            resource.shutdown(logger)

        lines = (tmp_path / AUDIT_LOG_FILENAME).read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        data = json.loads(lines[0])
        assert data["message"] == "audit_stored"
        assert data["audit_id"] == "abc"
        assert data["total_dependencies"] == 3

    def test_console_output(self, tmp_path, capsys):
        resource = AuditLogger()
        logger = resource.init(logger_name="dep_health.test.console", console_output=True, level="DEBUG")
        try:
            logger.debug("package_scored", package="lodash")
        finally:
            resource.shutdown(logger)

        assert "package_scored package=lodash" in capsys.readouterr().err

    def test_no_file_without_json_output(self, tmp_path):
        resource = AuditLogger()
        logger = resource.init(logs_dir=tmp_path, logger_name="dep_health.test.quiet")
        logger.warning("package_degraded", package="ghost")
        resource.shutdown(logger)

        assert not (tmp_path / AUDIT_LOG_FILENAME).exists()

    def test_shutdown_releases_handlers(self, tmp_path):
        resource = AuditLogger()
        logger = resource.init(logs_dir=tmp_path, logger_name="dep_health.test.shutdown", json_file=True, console_output=True)

        assert len(logging.getLogger("dep_health.test.shutdown").handlers) == 2
        resource.shutdown(logger)
        assert logging.getLogger("dep_health.test.shutdown").handlers == []

    def test_exception_records_traceback(self, tmp_path):
        resource = AuditLogger()
        logger = resource.init(logs_dir=tmp_path, logger_name="dep_health.test.exc", json_file=True)
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            logger.exception("package_analysis_failed", package="boom")
        finally:
            resource.shutdown(logger)

        data = json.loads((tmp_path / AUDIT_LOG_FILENAME).read_text(encoding="utf-8").splitlines()[0])
        assert data["level"] == "ERROR"
        assert data["package"] == "boom"
        assert "RuntimeError: boom" in data["exc_info"]

    def test_as_container_resource(self, tmp_path):
        provider = providers.Resource(
            AuditLogger,
            logs_dir=tmp_path,
            logger_name="dep_health.test.provider",
            json_file=True,
        )

        logger = provider()
        logger.info("batch_started", count=1)
        provider.shutdown()

        assert (tmp_path / AUDIT_LOG_FILENAME).exists()
