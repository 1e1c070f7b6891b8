import logging

import pytest

from docreview.logging.logging_setup import ColorLogger, ColoredFormatter, CustomFormatter, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def _record(level: int, msg: str, *args) -> logging.LogRecord:
    return logging.LogRecord("docreview", level, __file__, 1, msg, args, None)


def test_setup_logging_console_only(monkeypatch):
    monkeypatch.delenv("LOG_DIR", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "debug")

    logger = setup_logging()

    assert isinstance(logger, ColorLogger)
    assert logger.name == "docreview"
    assert logging.getLogger().level == logging.DEBUG
    assert all(not isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)


def test_setup_logging_writes_file(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("LOG_LEVEL", "info")

    logger = setup_logging()
    logger.info("comment %s stored", "c-1", color="green")
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = (tmp_path / "logs" / "docreview.log").read_text(encoding="utf-8")
    assert "comment c-1 stored" in content
    assert "\033[" not in content


def test_formatter_prefixes_warnings_without_touching_record():
    formatter = CustomFormatter("UTC", fmt="%(message)s")
    record = _record(logging.WARNING, "low rank %d", 3)

    assert formatter.format(record) == "⚠️ low rank 3"
    assert record.msg == "low rank %d"
    assert record.args == (3,)


def test_colored_formatter():
    formatter = ColoredFormatter("UTC", fmt="%(message)s")
    record = _record(logging.INFO, "plain")
    colored = _record(logging.INFO, "cyan text")
    colored.color = "cyan"

    assert formatter.format(record) == "plain"
    assert formatter.format(colored) == "\033[36mcyan text\033[0m"


def test_color_logger_critical_and_log_accept_color():
    records = []

    class _Collect(logging.Handler):
        def emit(self, record):
            records.append(record)

    inner = logging.getLogger("docreview.test.color")
    inner.propagate = False
    inner.setLevel(logging.DEBUG)
    handler = _Collect()
    inner.addHandler(handler)
    try:
        logger = ColorLogger(inner)
        logger.critical("store unreachable", color="red")
        logger.log(logging.INFO, "fetched %d comments", 3, color="green")
    finally:
        inner.removeHandler(handler)

    assert [(r.levelno, r.getMessage(), r.color) for r in records] == [
        (logging.CRITICAL, "store unreachable", "red"),
        (logging.INFO, "fetched 3 comments", "green"),
    ]
