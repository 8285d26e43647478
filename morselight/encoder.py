#!/usr/bin/env python3

"""
Text to Morse encoder.  Produces an ``EncodedMessage``, the symbol-level
representation of some text that the pulse compiler turns into a timed
on/off sequence.
"""

# © Stuart Longland VK4MSL
# SPDX-License-Identifier: GPL-2.0-or-later

from . import codebook
from .codebook import Symbol
from .validator import INPUT_LIMIT, validate


class EncodedMessage(object):
    """
    Symbols for a message, grouped two ways:

    - ``letters``: one tuple of symbols per input character, used to render
      the message as a Morse string.
    - ``words``: the symbols split into words.  A word-gap symbol (from a
      space) is the last symbol of the word it follows; the next keyed
      symbol starts a new word.
    """

    def __init__(self, letters):
        self._letters = tuple(tuple(letter) for letter in letters)

        words = []
        word = []
        for symbol in self.symbols:
            if word and (word[-1] is Symbol.WORD_GAP) and symbol.keyed:
                words.append(tuple(word))
                word = []
            word.append(symbol)

        if word:
            words.append(tuple(word))

        self._words = tuple(words)

    @property
    def letters(self):
        return self._letters

    @property
    def words(self):
        return self._words

    @property
    def symbols(self):
        """
        All symbols of the message as one flat tuple.
        """
        return tuple(symbol for letter in self._letters for symbol in letter)

    def __len__(self):
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def __eq__(self, other):
        if not isinstance(other, EncodedMessage):
            return NotImplemented
        return self._letters == other._letters

    def __hash__(self):
        return hash(self._letters)

    def __str__(self):
        return " ".join(
            "".join(symbol.value for symbol in letter)
            for letter in self._letters
        )

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, str(self))


def encode(text, limit=INPUT_LIMIT):
    """
    Encode the text as Morse.  Returns ``None`` if the text contains
    characters outside the codebook or is longer than ``limit``.
    """
    (is_valid, accepted) = validate(text, limit)
    if not is_valid:
        return None

    letters = []
    for char in accepted.lower():
        symbols = codebook.lookup(char)
        assert symbols is not None, "%r passed validation" % char
        letters.append(symbols)

    return EncodedMessage(letters)


def morse_string(text, limit=INPUT_LIMIT):
    """
    Render the text as a Morse string (e.g. ``"••• --- •••"``), or return
    ``None`` if it cannot be encoded.
    """
    message = encode(text, limit)
    if message is None:
        return None
    return str(message)
