import logging

import pytest

from certifier.logging.logger import ContextFormatter, Log


def _record(**fields: object) -> logging.LogRecord:
    record = logging.makeLogRecord({"msg": "Workflow idle -> uploading", "levelname": "INFO"})
    for key, value in fields.items():
        setattr(record, key, value)
    return record


class TestContextFormatter:
    def test_appends_fields_sorted_by_name(self) -> None:
        formatter = ContextFormatter("[%(levelname)s] %(message)s")

        line = formatter.format(_record(state="uploading", previous="idle"))

        assert line == "[INFO] Workflow idle -> uploading previous=idle state=uploading"

    def test_plain_record_is_unchanged(self) -> None:
        formatter = ContextFormatter("[%(levelname)s] %(message)s")

        assert formatter.format(_record()) == "[INFO] Workflow idle -> uploading"


class TestLog:
    def test_fields_are_attached_to_record(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="certifier")

        Log.warning("Rejected: Please select a file first", kind="Validation")

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "Rejected: Please select a file first"
        assert record.__dict__["kind"] == "Validation"

    def test_configure_attaches_single_handler(self) -> None:
        Log.configure("debug")
        Log.configure("info")

        logger = logging.getLogger("certifier")
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, ContextFormatter)
