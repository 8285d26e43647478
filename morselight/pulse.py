#!/usr/bin/env python3

"""
Pulse compiler.  Turns an encoded message into a flat train of on/off
pulses, each lasting one tick of the transmission scheduler.
"""

# © Stuart Longland VK4MSL
# SPDX-License-Identifier: GPL-2.0-or-later

# Length of one pulse in seconds.
TICK_INTERVAL = 0.25

# Extra silence between words, in ticks, on top of the gap after each symbol.
WORD_SPACE = 2


class PulseTrain(object):
    """
    An immutable sequence of pulses, ``True`` meaning the signal is on.
    """

    def __init__(self, pulses=()):
        self._pulses = tuple(bool(p) for p in pulses)

    def duration(self, tick_interval=TICK_INTERVAL):
        """
        Return the playback time of this train in seconds.
        """
        return len(self._pulses) * tick_interval

    def __len__(self):
        return len(self._pulses)

    def __iter__(self):
        return iter(self._pulses)

    def __getitem__(self, index):
        return self._pulses[index]

    def __eq__(self, other):
        if isinstance(other, PulseTrain):
            return self._pulses == other._pulses
        elif isinstance(other, (tuple, list)):
            return self._pulses == tuple(other)
        return NotImplemented

    def __hash__(self):
        return hash(self._pulses)

    def __str__(self):
        return "".join("#" if p else "_" for p in self._pulses)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, str(self))


def compile_pulses(message):
    """
    Compile the message into a ``PulseTrain``.  Every symbol is followed by
    one tick of silence, each word after the first is preceded by a further
    ``WORD_SPACE`` ticks, and the very last tick of silence is dropped as
    nothing follows it.
    """
    pulses = []
    words = list(message)
    for idx, word in enumerate(words):
        for symbol in word:
            pulses.extend([symbol.keyed] * symbol.duration)
            pulses.append(False)

        if idx < len(words) - 1:
            pulses.extend([False] * WORD_SPACE)

    return PulseTrain(pulses[:-1])


def transmit_duration(message, tick_interval=TICK_INTERVAL):
    """
    Return how long the message takes to send, in seconds.
    """
    return compile_pulses(message).duration(tick_interval)
