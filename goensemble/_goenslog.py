# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>

"""
Track training progress and issues across the `goensemble` package.

This module provides the logging utility class `goenslog` used to configure
and retrieve loggers. It supports YAML configuration files and
offers helpers to set up a default logger, retrieve named loggers and add
a log file output.
"""

import os
import yaml
import logging
import logging.config
from typing import Optional

__all__ = ["goenslog"]


class goenslog:
    """
    A class to configure logging for the `goensemble` package, facilitating
    the tracking of training rounds and exceptions.
    """

    @staticmethod
    def load_configuration(
        config_path: Optional[str] = None,
        use_default_logger: bool = True,
        verbose: bool = False
    ) -> None:
        """
        Configures logging based on a specified configuration file.

        Parameters
        ----------
        config_path : str, optional
            Path to the configuration file. Supports the `.yaml` and
            `.yml` formats. If `None`, uses a basic logging configuration or
            the default logger setup, depending on `use_default_logger`.

        use_default_logger : bool, optional
            Whether to use the default logger configuration if no
            `config_path` is provided. Defaults to `True`.

        verbose : bool, optional
            If `True`, prints additional information during configuration.
            Defaults to `False`.

        Raises
        ------
        FileNotFoundError
            If the specified configuration file does not exist.
        """
        if not config_path:
            if use_default_logger:
                goenslog.set_default_logger()
            else:
                logging.basicConfig()
            return

        if verbose:
            print(f"Configuring logging with: {config_path}")

        if config_path.endswith((".yaml", ".yml")):
            goenslog._configure_from_yaml(config_path, verbose)
        else:
            logging.warning(
                f"Unsupported logging configuration format: {config_path}"
            )

    @staticmethod
    def _configure_from_yaml(yaml_path: str, verbose: bool = False) -> None:
        """
        Configures logging from a YAML file.

        Raises
        ------
        FileNotFoundError
            If the YAML configuration file does not exist.

        yaml.YAMLError
            If there is an error parsing the YAML file.
        """
        full_path = os.path.abspath(yaml_path)
        if not os.path.exists(full_path):
            raise FileNotFoundError(
                f"The YAML config file {full_path} does not exist.")

        if verbose:
            print(f"Loading YAML config from {full_path}")

        try:
            with open(full_path, "rt") as f:
                config = yaml.safe_load(f.read())
            logging.config.dictConfig(config)
        except yaml.YAMLError as e:
            logging.error(f"Error parsing YAML config file: {e}")
            raise

    @staticmethod
    def set_default_logger() -> None:
        """
        Sets up a default logger configuration for basic logging needs.

        Messages with level WARNING and above go to the console with a
        simple format.
        """
        logging.basicConfig(
            level=logging.WARNING,
            format='%(asctime)s - %(levelname)s - %(message)s'
        )

    @staticmethod
    def get_goensemble_logger(logger_name: str = '') -> logging.Logger:
        """
        Retrieves a logger with a specified name.

        Parameters
        ----------
        logger_name : str, optional
            The name of the logger. If empty, returns the root logger.

        Returns
        -------
        logging.Logger
            The logger instance with the specified name.
        """
        return logging.getLogger(logger_name)

    @staticmethod
    def set_logger_output(
        log_filename: str = "goensemble.log",
        date_format: str = '%Y-%m-%d %H:%M:%S',
        file_mode: str = "w",
        format_: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level: int = logging.DEBUG,
        logger_name: str = "goensemble",
    ) -> logging.Handler:
        """
        Adds a file output to the package logger.

        Parameters
        ----------
        log_filename : str, optional
            The name of the log file. Defaults to `"goensemble.log"`.

        date_format : str, optional
            The date format used in log messages.

        file_mode : str, optional
            The mode for opening the log file (`'a'` for append, `'w'` for
            overwrite). Defaults to `'w'`.

        format_ : str, optional
            The format of the log messages.

        level : int, optional
            The logging level. Defaults to `logging.DEBUG`.

        logger_name : str, optional
            The logger receiving the handler. Defaults to the package logger.

        Returns
        -------
        logging.Handler
            The file handler that was attached.
        """
        handler = logging.FileHandler(log_filename, mode=file_mode)
        handler.setLevel(level)
        formatter = logging.Formatter(format_, datefmt=date_format)
        handler.setFormatter(formatter)

        logger = goenslog.get_goensemble_logger(logger_name)
        logger.setLevel(level)
        # Skip handlers already writing to the same file.
        target = os.path.abspath(log_filename)
        for existing in logger.handlers:
            if getattr(existing, "baseFilename", None) == target:
                handler.close()
                return existing
        logger.addHandler(handler)
        return handler
