"""Unit tests for the logging helpers."""

import logging

from bloglist.logging import (
    ThirdPartyPrefixFilter,
    config_console_handler,
    config_flight_recorder,
    log_startup,
)


def _record(name: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


def test_prefix_filter_marks_third_party_records():
    """Third-party records get a bracketed library prefix; ours get none."""
    prefix_filter = ThirdPartyPrefixFilter()
    ours, theirs = _record("bloglist.service_layer"), _record("sqlalchemy.engine.Engine")
    assert prefix_filter.filter(ours) and ours.prefix == ""
    assert prefix_filter.filter(theirs) and theirs.prefix == "[sqlalchemy]"


def test_console_handler_debug_mode_forces_debug():
    """Debug mode lowers the console level to DEBUG."""
    assert config_console_handler(logging.WARNING, debug_mode=True).level == logging.DEBUG
    assert config_console_handler(logging.WARNING).level == logging.WARNING


def test_flight_recorder_flushes_on_warning(tmp_path):
    """Buffered records reach the file once a WARNING arrives."""
    path = tmp_path / "latest.log"
    handler = config_flight_recorder(path, capacity=10)
    logger = logging.getLogger("bloglist.test.flight")
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        logger.debug("early detail")
        assert path.read_text(encoding="utf-8") == ""
        logger.warning("trouble")
        text = path.read_text(encoding="utf-8")
        assert "early detail" in text
        assert "trouble" in text
    finally:
        logger.removeHandler(handler)
        handler.close()


def test_log_startup_summary(caplog):
    """The startup line names the version and console level."""
    logger = logging.getLogger("bloglist.test.startup")
    with caplog.at_level(logging.DEBUG, logger="bloglist.test.startup"):
        log_startup(
            logger,
            app_version="9.9.9",
            level=logging.INFO,
            handlers=[],
            log_path=None,
            flight_recorder=False,
            flight_capacity=None,
            logger_levels={"sqlalchemy": logging.WARNING},
        )
    assert "BLOGLIST 9.9.9: console=INFO, flight-recorder=OFF" in caplog.messages
