#!/usr/bin/env python3

"""
Path handler: determines the default location of the configuration file.
"""

# © Stuart Longland VK4MSL
# SPDX-License-Identifier: GPL-2.0-or-later

import os
import os.path


def get_home():
    """
    Determine the path for the user's home directory.
    """
    return os.path.expanduser("~")


def get_config_dir():
    """
    Determine the path for config files.  If the user does not set one with
    ``MORSELIGHT_CONFIG_DIR``, derive one from ``HOME``.
    """
    try:
        return os.path.expanduser(os.environ["MORSELIGHT_CONFIG_DIR"])
    except KeyError:
        pass

    return os.path.join(get_home(), ".config", "morselight")
