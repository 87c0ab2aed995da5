"""Unit tests for logging_utils.py"""

import logging

import pytest

from mdxview.logging_utils import configure_logging


@pytest.mark.parametrize("level,expected", [
    ("debug", logging.DEBUG),
    ("INFO", logging.INFO),
    (logging.ERROR, logging.ERROR),
    ("nonsense", logging.WARNING),
])
def test_configure_logging_level(level, expected):
    root = configure_logging(level)
    assert root is logging.getLogger()
    assert root.level == expected
    (handler,) = root.handlers
    assert handler.level == expected


def test_configure_logging_plain_format(capsys):
    configure_logging("INFO")
    logging.getLogger("mdxview.sample").info("rendered %d files", 3)
    assert capsys.readouterr().err == "INFO: rendered 3 files\n"


def test_configure_logging_trace_format(capsys):
    configure_logging("DEBUG", trace_mode=True)
    logging.getLogger("mdxview.sample").debug("traced")
    err = capsys.readouterr().err
    assert "[DEBUG] [mdxview.sample] traced" in err
    assert err.startswith("[20")


def test_configure_logging_filters_below_level(capsys):
    configure_logging("WARNING")
    logging.getLogger("mdxview.sample").info("quiet")
    logging.getLogger("mdxview.sample").warning("loud")
    assert capsys.readouterr().err == "WARNING: loud\n"


def test_configure_logging_log_file(tmp_path):
    log_file = tmp_path / "run.log"
    root = configure_logging("INFO", log_file=str(log_file))
    logging.getLogger("mdxview.sample").warning("to file")
    for handler in root.handlers:
        handler.flush()
    assert len(root.handlers) == 2
    assert "WARNING: to file" in log_file.read_text(encoding="utf-8")
