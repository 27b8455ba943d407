# -*- coding: utf-8 -*-
# License: BSD-3-Clause
# Author: LKouadio <etanoyau@gmail.com>

"""Provides the logging setup of the `goensemble` package.

The module initializes the logging configuration to ensure consistent
logging across all modules within the package.
"""

import os
import logging
from ._goenslog import goenslog


__all__ = ['initialize_logging', 'get_logger']


PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

DEFAULT_LOG_CONFIG = os.path.join(PACKAGE_DIR, '_goenslog.yml')

def initialize_logging(
    config_file: str = DEFAULT_LOG_CONFIG,
    use_default_logger: bool = True,
    verbose: bool = False
) -> None:
    """
    Initializes the logging configuration for the `goensemble` package.

    This function configures logging based on a YAML configuration file
    located within the package directory. If the configuration file is not
    found or fails to load, it falls back to a default logger setup.

    Parameters
    ----------
    config_file : str, optional
        Path to the logging configuration YAML file. Defaults to
        `_goenslog.yml` located in the package directory.

    use_default_logger : bool, optional
        Whether to use the default logger configuration if the specified
        `config_file` is not found or fails to load. Defaults to `True`.

    verbose : bool, optional
        If `True`, prints additional information during the logging setup.

    Raises
    ------
    FileNotFoundError
        If the specified `config_file` does not exist and `use_default_logger`
        is set to `False`.
    """
    try:
        goenslog.load_configuration(
            config_path=config_file,
            use_default_logger=use_default_logger,
            verbose=verbose
        )
    except FileNotFoundError:
        if not use_default_logger:
            raise
        logging.warning(
            f"Logging configuration file not found: {config_file}. "
            "Falling back to default logger."
        )
        goenslog.set_default_logger()
    except Exception as e:
        if not use_default_logger:
            raise
        logging.error(
            f"Failed to load logging configuration from {config_file}: {e}. "
            "Falling back to default logger."
        )
        goenslog.set_default_logger()

def get_logger(logger_name: str = '') -> logging.Logger:
    """
    Retrieves a logger with the specified name.

    Parameters
    ----------
    logger_name : str, optional
        The name of the logger. If empty, returns the root logger.

    Returns
    -------
    logging.Logger
        The logger instance with the specified name.
    """
    return goenslog.get_goensemble_logger(logger_name)
