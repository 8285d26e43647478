#!/usr/bin/env python3

"""
Morse codebook: the fixed mapping of supported characters to the symbols
that make up their Morse representation.
"""

# © Stuart Longland VK4MSL
# SPDX-License-Identifier: GPL-2.0-or-later

import enum


class Symbol(enum.Enum):
    """
    A single timed element of Morse code.  The value is the glyph used when
    rendering a message as a Morse string.
    """

    DOT = "•"
    DASH = "-"
    WORD_GAP = " "

    @property
    def duration(self):
        """
        Duration of this symbol in pulse ticks.
        """
        return _DURATIONS[self]

    @property
    def keyed(self):
        """
        True if this symbol is transmitted with the signal on.
        """
        return self is not Symbol.WORD_GAP


_DURATIONS = {
    Symbol.DOT: 1,
    Symbol.DASH: 2,
    Symbol.WORD_GAP: 3,
}


def _parse(code):
    """
    Turn a ``.``/``-``/`` `` string into a tuple of symbols.
    """
    return tuple(
        {".": Symbol.DOT, "-": Symbol.DASH, " ": Symbol.WORD_GAP}[c]
        for c in code
    )


# Keys are lower-case; see lookup() for the case folding.
CODEBOOK = dict(
    (char, _parse(code))
    for (char, code) in {
        # Digits
        "0": "-----",
        "1": ".----",
        "2": "..---",
        "3": "...--",
        "4": "....-",
        "5": ".....",
        "6": "-....",
        "7": "--...",
        "8": "---..",
        "9": "----.",
        # Letters
        "a": ".-",
        "b": "-...",
        "c": "-.-.",
        "d": "-..",
        "e": ".",
        "f": "..-.",
        "g": "--.",
        "h": "....",
        "i": "..",
        "j": ".---",
        "k": "-.-",
        "l": ".-..",
        "m": "--",
        "n": "-.",
        "o": "---",
        "p": ".--.",
        "q": "--.-",
        "r": ".-.",
        "s": "...",
        "t": "-",
        "u": "..-",
        "v": "...-",
        "w": ".--",
        "x": "-..-",
        "y": "-.--",
        "z": "--..",
        # Symbols
        ".": ".-.-.-",
        ",": "--..--",
        "?": "..--..",
        "'": ".----.",
        "!": "-.-.--",
        "/": "-..-.",
        # Yes, both brackets are sent the same way here.
        "(": "-.--.-",
        ")": "-.--.-",
        "&": ".-...",
        ":": "---...",
        ";": "-.-.-.",
        "=": "-...-",
        "+": ".-.-.",
        "-": "-....-",
        "_": "..--.-",
        '"': ".-..-.",
        "$": "...-..-",
        "@": ".--.-.",
        # Word space
        " ": " ",
    }.items()
)


# Both cases of every key, so that oddities such as the Kelvin sign (which
# lower-cases to "k") are not accepted.
_LOOKUP = dict(
    list(CODEBOOK.items())
    + [(char.upper(), symbols) for (char, symbols) in CODEBOOK.items()]
)


def lookup(char):
    """
    Return the symbols for the given character, or ``None`` if the
    character is not in the codebook.  Upper and lower case letters give
    the same result.
    """
    return _LOOKUP.get(char)


def characters():
    """
    Return every character ``lookup`` will accept.
    """
    return frozenset(_LOOKUP)
