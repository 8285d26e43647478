#!/usr/bin/env python3

"""
Morse transmitter.  Ties the encoder, pulse compiler and scheduler
together: give it some text and a signal sink, and it will key the sink in
Morse.
"""

# © Stuart Longland VK4MSL
# SPDX-License-Identifier: GPL-2.0-or-later

from . import defaults
from .encoder import encode
from .observer import Signal
from .pulse import TICK_INTERVAL, compile_pulses
from .scheduler import TransmissionScheduler
from .validator import INPUT_LIMIT, validate


class Transmitter(object):
    @classmethod
    def from_cfg(cls, loop=None, log=None, **config):
        """
        Instantiate a transmitter from the ``transmitter`` section of the
        configuration file.
        """
        return cls(loop=loop, log=log, **config)

    def __init__(
        self,
        tick_interval=TICK_INTERVAL,
        input_limit=INPUT_LIMIT,
        loop=None,
        log=None,
    ):
        self._log = defaults.get_logger(log, self.__class__.__module__)

        input_limit = int(input_limit)
        if input_limit < 0:
            raise ValueError(
                "Input limit must not be negative, got %r" % input_limit
            )

        self._input_limit = input_limit
        self._scheduler = TransmissionScheduler(
            tick_interval=tick_interval,
            loop=loop,
            log=self._log.getChild("scheduler"),
        )

        # Emitted with the text of each transmission as it begins.
        self.started = Signal(log=self._log)

    @property
    def tick_interval(self):
        return self._scheduler.tick_interval

    @property
    def input_limit(self):
        return self._input_limit

    @property
    def transmission(self):
        """
        The most recently started transmission, if any.
        """
        return self._scheduler.current

    @property
    def transmitting(self):
        transmission = self.transmission
        return (transmission is not None) and transmission.is_active()

    def validate(self, text):
        """
        Check the text can be sent.  Returns a ``Validation`` tuple.
        """
        return validate(text, self._input_limit)

    def encode(self, text):
        """
        Encode the text, returning ``None`` if it cannot be sent.
        """
        return encode(text, self._input_limit)

    def transmit_duration(self, text):
        """
        Return the time in seconds needed to send the text, or ``None`` if it
        cannot be sent.
        """
        message = self.encode(text)
        if message is None:
            return None
        return compile_pulses(message).duration(self.tick_interval)

    def transmit(self, text, on_tick=None, on_complete=None):
        """
        Send the text.  ``on_tick(is_on, remaining)`` is called for every
        pulse and ``on_complete()`` when the message is finished or
        cancelled.  Returns the ``Transmission`` handle, or ``None`` if the
        text cannot be sent.
        """
        message = self.encode(text)
        if message is None:
            self._log.info("Refusing to transmit invalid input %r", text)
            return None

        pulses = compile_pulses(message)
        self._log.debug("Encoded %r as %r", text, pulses)
        transmission = self._scheduler.start(
            pulses, on_tick=on_tick, on_complete=on_complete
        )
        self.started.emit(text)
        return transmission

    def cancel(self):
        """
        Cancel the message being sent, if any.
        """
        self._scheduler.cancel()
