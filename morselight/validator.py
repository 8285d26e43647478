#!/usr/bin/env python3

"""
Input validation: decide whether some text can be sent as Morse.
"""

# © Stuart Longland VK4MSL
# SPDX-License-Identifier: GPL-2.0-or-later

from collections import namedtuple

from . import codebook

# Longest message we will accept, in characters.
INPUT_LIMIT = 120

# Drawn straight from the codebook so the two can never disagree.
VALID_CHARACTERS = codebook.characters()


Validation = namedtuple("Validation", ["is_valid", "accepted"])


def validate(text, limit=INPUT_LIMIT):
    """
    Check the text against the codebook and length limit.  Returns a
    ``Validation`` tuple: ``accepted`` is the text with unsupported
    characters removed and truncated to ``limit`` characters, ``is_valid``
    is true only if that is the same as what was given.
    """
    accepted = "".join(c for c in text if c in VALID_CHARACTERS)[:limit]
    return Validation(accepted == text, accepted)
