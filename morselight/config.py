#!/usr/bin/env python3

"""
Configuration loading and logging set-up for applications embedding
morselight.
"""

# © Stuart Longland VK4MSL
# SPDX-License-Identifier: GPL-2.0-or-later

import copy
import logging
import logging.config
import os.path

import yaml

from .path import get_config_dir

CONFIG_FILE = "morselight.yaml"

LOG_FORMAT = (
    "%(asctime)s %(name)s[%(filename)s:%(lineno)4d] %(levelname)s %(message)s"
)
LOG_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {"detail": {"format": LOG_FORMAT}},
    "handlers": {
        "console": {
            "formatter": "detail",
            "class": "logging.StreamHandler",
            "level": "INFO",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {"level": "INFO", "handlers": ["console"]},
    "loggers": {
        "morselight.scheduler": {"level": "INFO"},
    },
}


def get_config_path():
    return os.path.join(get_config_dir(), CONFIG_FILE)


def load_config(path=None):
    """
    Load the YAML configuration file.  If no path is given, the default
    location is tried, and a missing file there gives an empty
    configuration.
    """
    if path is None:
        path = get_config_path()
        if not os.path.exists(path):
            return {}

    with open(path, "r") as f:
        config = yaml.safe_load(f.read())

    if config is None:
        # Empty file
        return {}

    if not isinstance(config, dict):
        raise ValueError(
            "%r: expected a mapping at the top level, got %s"
            % (path, type(config).__name__)
        )

    return config


def init_logging(logconfig=None):
    """
    Initialise logging.  ``logconfig`` is either a full ``dictConfig``
    tree, or a simplified one with just ``level`` and ``format`` keys.
    Returns the package logger.
    """
    if logconfig is None:
        logconfig = LOG_CONFIG

    logconfig = copy.deepcopy(logconfig)

    if "version" not in logconfig:
        # Assume simplified config
        level = logconfig.pop("level", "INFO")
        logfmt = logconfig.pop("format", LOG_FORMAT)

        logconfig = copy.deepcopy(LOG_CONFIG)
        logconfig["formatters"]["detail"]["format"] = logfmt
        logconfig["handlers"]["console"]["level"] = level
        logconfig["root"]["level"] = level
        for logger in logconfig["loggers"].values():
            logger["level"] = level

    logging.config.dictConfig(logconfig)
    log = logging.getLogger("morselight")
    log.debug("Initialised logging")
    return log
