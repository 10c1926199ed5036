import logging

from prometheus_client import REGISTRY

from textstats.utils import logging_config
from textstats.utils.observability import create_counter, create_histogram, get_logger


def test_structured_logger_renders_context(caplog):
    caplog.set_level(logging.INFO, logger="textstats.test")
    logger = get_logger("textstats.test").bind(component="tests")

    logger.info("Loaded", context={"words": 3})

    assert caplog.messages == ['Loaded | {"component": "tests", "words": 3}']


def test_bind_does_not_mutate_parent(caplog):
    caplog.set_level(logging.INFO, logger="textstats.test")
    parent = get_logger("textstats.test")
    parent.bind(component="child")

    parent.info("plain")

    assert caplog.messages == ["plain"]


def test_configure_logging_respects_environment(monkeypatch):
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)
    monkeypatch.setenv(logging_config.LOG_LEVEL_ENV, "debug")

    logging_config.configure_logging(force=True)

    assert logging.getLogger("textstats").level == logging.DEBUG
    logging_config.configure_logging("WARNING", force=True)
    assert logging.getLogger("textstats").level == logging.WARNING


def test_configure_logging_runs_once(monkeypatch):
    monkeypatch.setattr(logging_config, "_CONFIGURED", True)
    logging.getLogger("textstats").setLevel(logging.ERROR)

    logging_config.configure_logging("DEBUG")

    assert logging.getLogger("textstats").level == logging.ERROR
    logging.getLogger("textstats").setLevel(logging.NOTSET)


def test_counters_are_reused_across_registrations():
    first = create_counter("textstats_test_events_total", "Test events.")
    second = create_counter("textstats_test_events_total", "Test events.")

    assert first._impl is second._impl


def test_unknown_level_name_falls_back_to_warning(monkeypatch):
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)

    logging_config.configure_logging("chatty", force=True)

    assert logging.getLogger("textstats").level == logging.WARNING


def test_histogram_timer_records_an_observation():
    histogram = create_histogram("textstats_test_block_seconds", "Test block duration.")
    before = REGISTRY.get_sample_value("textstats_test_block_seconds_count") or 0.0

    with histogram.time():
        pass

    assert REGISTRY.get_sample_value("textstats_test_block_seconds_count") == before + 1
