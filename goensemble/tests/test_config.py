# -*- coding: utf-8 -*-
"""
test_config.py

Tests for the package configuration and the logging helpers.
"""
import logging
import os

import pytest
import numpy as np

from goensemble import config as config_module
from goensemble._goenslog import goenslog
from goensemble._util import initialize_logging, get_logger
from goensemble.config import Configure, get_config, set_config


@pytest.fixture(autouse=True)
def restore_config():
    saved = get_config()
    logger = logging.getLogger("goensemble")
    level = logger.level
    yield
    saved.pop("random_seed")
    set_config(**saved)
    logger.setLevel(level)

def test_get_config_returns_a_copy():
    options = get_config()
    options["n_jobs"] = 123
    assert get_config()["n_jobs"] != 123

def test_set_config_updates_options():
    applied = set_config(n_jobs=2)
    assert isinstance(applied, Configure)
    assert get_config()["n_jobs"] == 2
    assert applied.n_jobs == 2

def test_set_config_rejects_unknown_options():
    with pytest.raises(TypeError):
        set_config(threads=4)

@pytest.mark.parametrize("params", [
    {"verbosity": 5},
    {"verbosity": "debug"},
    {"random_seed": -1},
    {"n_jobs": 1.5},
    {"warnings_enabled": "yes"},
])
def test_configure_rejects_invalid_values(params):
    with pytest.raises(ValueError):
        Configure(**params)

@pytest.mark.parametrize("verbosity, level", [
    (1, logging.ERROR),
    (2, logging.WARNING),
    (3, logging.INFO),
    (4, logging.DEBUG),
])
def test_verbosity_sets_package_log_level(verbosity, level):
    Configure(verbosity=verbosity)
    assert logging.getLogger("goensemble").level == level
    assert get_config()["verbosity"] == verbosity

def test_verbosity_zero_silences_package():
    config = Configure(verbosity=3)
    config.set_verbosity(0)
    assert logging.getLogger("goensemble").level > logging.CRITICAL

def test_random_seed_seeds_numpy():
    Configure(random_seed=7)
    first = np.random.rand(3)
    np.random.seed(7)
    np.testing.assert_array_equal(first, np.random.rand(3))
    assert get_config()["random_seed"] == 7

def test_set_n_jobs():
    config = Configure()
    config.set_n_jobs(-1)
    assert get_config()["n_jobs"] == -1

def test_set_warnings_enabled():
    config = Configure()
    config.set_warnings_enabled(False)
    assert get_config()["warnings_enabled"] is False
    config.set_warnings_enabled(True)
    assert get_config()["warnings_enabled"] is True

def test_repr():
    config = Configure(verbosity=2, n_jobs=3)
    assert repr(config) == ("Configure(verbosity=2, random_seed=None, "
                            "n_jobs=3, warnings_enabled=True)")

def test_forest_falls_back_to_configured_n_jobs():
    from goensemble.datasets import Labeled
    from goensemble.estimators import RandomForestClassifier

    set_config(n_jobs=1)
    rng = np.random.RandomState(0)
    X = rng.normal(size=(30, 2))
    forest = RandomForestClassifier(n_estimators=3, subsample=0.5,
                                    random_state=0)
    forest.train(Labeled(X, X[:, 0] > 0))
    assert len(forest.estimators_) == 3
    assert config_module.get_config()["n_jobs"] == 1

def test_set_logger_output(tmp_path):
    log_file = str(tmp_path / "training.log")
    logger = logging.getLogger("goensemble")
    handler = goenslog.set_logger_output(log_file, file_mode="a")
    try:
        assert goenslog.set_logger_output(log_file, file_mode="a") is handler
        assert logger.handlers.count(handler) == 1
        get_logger("goensemble.tests").info("round trip message")
        handler.flush()
        with open(log_file, encoding="utf8") as f:
            assert "round trip message" in f.read()
    finally:
        logger.removeHandler(handler)
        handler.close()

def test_initialize_logging_falls_back_to_default(tmp_path):
    missing = os.path.join(str(tmp_path), "missing.yml")
    initialize_logging(config_file=missing)

def test_initialize_logging_strict_missing_file(tmp_path):
    missing = os.path.join(str(tmp_path), "missing.yml")
    with pytest.raises(FileNotFoundError):
        initialize_logging(config_file=missing, use_default_logger=False)

def test_initialize_logging_reloads_package_config():
    initialize_logging()
    logger = logging.getLogger("goensemble")
    assert logger.propagate is False
    assert logger.handlers

def test_default_verbosity_matches_package_logger():
    initialize_logging()
    logger = logging.getLogger("goensemble")
    assert logger.level == logging.WARNING
    config = Configure()
    assert config.verbosity == 2
    assert get_config()["verbosity"] == 2
    assert logger.level == logging.WARNING

def test_ini_logging_configuration_is_unsupported(tmp_path, caplog):
    ini_file = tmp_path / "logging.ini"
    ini_file.write_text("[loggers]\nkeys=root\n", encoding="utf8")
    with caplog.at_level(logging.WARNING):
        goenslog.load_configuration(str(ini_file))
    assert "Unsupported logging configuration format" in caplog.text
