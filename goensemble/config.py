# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>

"""
Provides the configuration settings for the `goensemble` package,
allowing users to customize logging verbosity, global random seeding,
warnings and the default number of parallel workers used by the bagging
ensembles.

How to Use
----------
Creating a :class:`Configure` applies its options and makes them the
active package configuration:

>>> from goensemble.config import Configure, get_config
>>> config = Configure(verbosity=4, random_seed=42, n_jobs=2)
>>> get_config()['n_jobs']
2
>>> config.set_verbosity(2)

The module helpers :func:`get_config` and :func:`set_config` read and
update the active options without keeping a reference around.
"""
import logging
import random
import warnings
from numbers import Integral
from typing import Optional, Union

import numpy as np

from .compat.sklearn import validate_params, Interval
from ._goenslog import goenslog

logger = goenslog.get_goensemble_logger(__name__)

__all__ = ["Configure", "get_config", "set_config"]

_LOG_LEVELS = {
    0: logging.CRITICAL + 10,
    1: logging.ERROR,
    2: logging.WARNING,
    3: logging.INFO,
    4: logging.DEBUG,
}

_active_config = {
    "verbosity": 2,
    "random_seed": None,
    "n_jobs": None,
    "warnings_enabled": True,
}


class Configure:
    """
    A class for managing and customizing the behavior of the `goensemble`
    package.

    Parameters
    ----------
    verbosity : int, optional
        Controls the level of logging detail of the package logger.
        0 = No logging,
        1 = Errors only,
        2 = Warnings,
        3 = Info (training rounds are reported),
        4 = Debug.
        Default is 2 (Warnings), the level the package logger starts at.
    random_seed : int or None, optional
        Sets a global random seed (``numpy`` and ``random``) for
        reproducibility. Default is None.
    n_jobs : int or None, optional
        Default number of parallel workers for estimators whose own
        ``n_jobs`` is None. Default is None (sequential).
    warnings_enabled : bool, optional
        If True, warnings will be displayed. Default is True.

    Examples
    --------
    >>> from goensemble.config import Configure
    >>> config = Configure(verbosity=3, random_seed=0)
    >>> config.set_n_jobs(-1)
    """

    @validate_params(
        {
            'verbosity': [Interval(Integral, 0, 4, closed="both"), bool],
            'random_seed': [Interval(Integral, 0, None, closed="left"), None],
            'n_jobs': [Integral, None],
            'warnings_enabled': [bool],
        }
    )
    def __init__(
        self,
        verbosity: Union[int, bool] = 2,
        random_seed: Optional[int] = None,
        n_jobs: Optional[int] = None,
        warnings_enabled: bool = True,
    ):
        self.verbosity = int(verbosity)
        self.random_seed = random_seed
        self.n_jobs = n_jobs
        self.warnings_enabled = warnings_enabled

        self._setup_logging()

        if self.random_seed is not None:
            self._set_random_seed(self.random_seed)

        self._configure_warnings()
        _active_config["n_jobs"] = self.n_jobs

    def set_verbosity(self, level: int):
        """
        Set the verbosity level for logging.

        Parameters
        ----------
        level : int
            Verbosity level from 0 (silent) to 4 (debug).
        """
        self.verbosity = int(level)
        self._setup_logging()
        logger.info("Verbosity level set to %d", self.verbosity)

    def set_random_seed(self, seed: int):
        """
        Set the global random seed for reproducibility.

        Parameters
        ----------
        seed : int
            The seed value to use for random number generation.
        """
        self.random_seed = seed
        self._set_random_seed(seed)

    def set_n_jobs(self, n_jobs: Optional[int]):
        """
        Set the default number of parallel workers.

        Parameters
        ----------
        n_jobs : int or None
            Number of workers, ``-1`` for all cores, None for sequential.
        """
        self.n_jobs = n_jobs
        _active_config["n_jobs"] = n_jobs
        logger.info("Default n_jobs set to %s", n_jobs)

    def set_warnings_enabled(self, enable: bool):
        """
        Enable or disable warnings.

        Parameters
        ----------
        enable : bool
            If True, warnings are enabled. If False, they are suppressed.
        """
        self.warnings_enabled = enable
        self._configure_warnings()

    def _setup_logging(self):
        """Configure the package logger level based on verbosity."""
        level = _LOG_LEVELS.get(self.verbosity, logging.INFO)
        goenslog.get_goensemble_logger("goensemble").setLevel(level)
        _active_config["verbosity"] = self.verbosity
        logger.info("Logging initialized. Current verbosity level: %d",
                    self.verbosity)

    def _set_random_seed(self, seed: int):
        """Set the global random seed for reproducibility."""
        random.seed(seed)
        np.random.seed(seed)
        _active_config["random_seed"] = seed
        logger.info("Random seed set to %d", seed)

    def _configure_warnings(self):
        """Enable or disable warnings based on user configuration."""
        if not self.warnings_enabled:
            warnings.filterwarnings('ignore')
            logger.info("Warnings are disabled.")
        else:
            warnings.resetwarnings()
            logger.info("Warnings are enabled.")
        _active_config["warnings_enabled"] = self.warnings_enabled

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(verbosity={self.verbosity}, "
            f"random_seed={self.random_seed}, n_jobs={self.n_jobs}, "
            f"warnings_enabled={self.warnings_enabled})"
        )


def get_config() -> dict:
    """Return a copy of the active package options."""
    return dict(_active_config)


def set_config(**options) -> Configure:
    """
    Update the active package options.

    Options not given keep their current value. Unknown option names raise
    ``TypeError`` and invalid values are rejected by :class:`Configure`.

    Returns
    -------
    Configure
        The configuration object that was applied.

    Examples
    --------
    >>> from goensemble.config import set_config
    >>> set_config(n_jobs=4)
    Configure(verbosity=2, random_seed=None, n_jobs=4, warnings_enabled=True)
    """
    unknown = set(options) - set(_active_config)
    if unknown:
        raise TypeError(
            f"Unknown configuration option(s): {sorted(unknown)}. "
            f"Valid options are {sorted(_active_config)}."
        )
    current = get_config()
    # Seeding is a one-shot action; do not replay a previous seed.
    current["random_seed"] = None
    current.update(options)
    return Configure(**current)
