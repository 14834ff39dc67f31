"""Tests for logging, seeding and timing utilities."""

import logging
import random

import numpy as np
import pytest

from chainhash import Timer, get_logger, seed_everything
from chainhash.utils.timing import timer
from chainhash.experiments.common import make_rng, random_words


def test_get_logger_namespaced_and_idempotent():
    logger = get_logger("utils_test")
    again = get_logger("utils_test")
    assert logger is again
    assert logger.name == "chainhash.utils_test"
    stream_handlers = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    assert len(stream_handlers) <= 1
    assert logger.propagate


def test_get_logger_records_reach_root_handlers(caplog):
    logger = get_logger("utils_propagation_test")
    with caplog.at_level(logging.INFO):
        logger.info("visible to the application")
    assert "visible to the application" in caplog.text


def test_get_logger_skips_console_handler_when_root_configured():
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        logger = get_logger("utils_root_configured_test")
    finally:
        root.removeHandler(handler)
    assert not [h for h in logger.handlers if type(h) is logging.StreamHandler]


def test_get_logger_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    logger = get_logger("utils_file_test", log_file=log_file)
    get_logger("utils_file_test", log_file=log_file)
    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1

    logger.info("hello from test")
    for handler in file_handlers:
        handler.flush()
    assert "hello from test" in log_file.read_text()


def test_seed_everything_is_reproducible():
    seed_everything(123)
    first = (random.random(), np.random.rand())
    seed_everything(123)
    second = (random.random(), np.random.rand())
    assert first == second


def test_random_words_deterministic_and_valid():
    a = random_words(make_rng(5), 50, min_len=2, max_len=6)
    b = random_words(make_rng(5), 50, min_len=2, max_len=6)
    assert a == b
    for word in a:
        assert 2 <= len(word) <= 6
        assert word[0].isupper() and word.isalpha() and word.isascii()


def test_random_words_rejects_bad_range():
    with pytest.raises(ValueError):
        random_words(make_rng(0), 5, min_len=0)
    with pytest.raises(ValueError):
        random_words(make_rng(0), 5, min_len=5, max_len=3)


def test_timer_records_elapsed():
    with Timer("noop", verbose=False) as t:
        sum(range(100))
    assert t.elapsed >= 0.0


def test_timer_context_function_yields_timer(capsys):
    with timer("loop") as t:
        sum(range(100))
    assert isinstance(t, Timer)
    assert t.elapsed >= 0.0
    assert "loop took" in capsys.readouterr().out

    with timer("quiet", verbose=False):
        pass
    assert capsys.readouterr().out == ""


def test_timer_elapsed_before_use():
    with pytest.raises(ValueError):
        Timer("unused").elapsed
