#!/usr/bin/env python3

"""
Transmission scheduler.  Plays a pulse train back in real time on the
asyncio event loop, one pulse per tick, notifying listeners of each pulse
and of the end of the transmission.

Ticks fall on a fixed grid measured from the start of the transmission, so
slow listeners do not make the cadence drift.  If the loop stalls past a
tick, the grid restarts from the late tick instead of sending the missed
pulses in a burst.  The first tick happens one interval after
``start()``.  The tick after the last pulse has been sent ends the
transmission.

Only one transmission may be in progress per scheduler.  Callers are
expected to wait for (or cancel) the current one before starting another.
"""

# © Stuart Longland VK4MSL
# SPDX-License-Identifier: GPL-2.0-or-later

import asyncio
import enum

from . import defaults
from .observer import Signal
from .pulse import PulseTrain, TICK_INTERVAL


class TransmissionState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Transmission(object):
    """
    Handle on a single playback of a pulse train.

    ``tick`` is emitted with ``(is_on, remaining)`` for every pulse, where
    ``remaining`` is the time in seconds left including the pulse being
    reported.  ``completed`` is emitted exactly once, with no arguments,
    whether the transmission ran to the end or was cancelled.
    """

    def __init__(self, pulses, tick_interval, loop, log):
        if not isinstance(pulses, PulseTrain):
            pulses = PulseTrain(pulses)

        self._pulses = pulses
        self._tick_interval = tick_interval
        self._loop = loop
        self._log = log
        self._state = TransmissionState.IDLE
        self._position = 0
        self._ticks = 0
        self._start_time = None
        self._timer = None
        self._future = loop.create_future()

        self.tick = Signal(log=log)
        self.completed = Signal(log=log)

    @property
    def pulses(self):
        return self._pulses

    @property
    def state(self):
        return self._state

    @property
    def position(self):
        """
        Number of pulses sent so far.
        """
        return self._position

    @property
    def remaining(self):
        """
        Time in seconds needed to send the pulses not yet sent.
        """
        return (len(self._pulses) - self._position) * self._tick_interval

    def is_active(self):
        return self._state is TransmissionState.RUNNING

    def cancel(self):
        """
        Stop the transmission.  Does nothing if it has already finished.
        """
        if not self.is_active():
            return

        self._log.info(
            "Transmission cancelled after %d of %d pulses",
            self._position,
            len(self._pulses),
        )
        self._finish(TransmissionState.CANCELLED)

    async def wait(self):
        """
        Wait for the transmission to finish or be cancelled.
        """
        await asyncio.shield(self._future)

    def _start(self):
        self._log.info(
            "Transmitting %d pulses (%.2f seconds)",
            len(self._pulses),
            self.remaining,
        )
        self._state = TransmissionState.RUNNING
        self._start_time = self._loop.time()
        self._schedule()

    def _schedule(self):
        self._ticks += 1
        deadline = self._start_time + (self._ticks * self._tick_interval)
        now = self._loop.time()
        if deadline < now:
            # The loop stalled past this tick; restart the grid from now
            # rather than sending the missed pulses back to back.
            self._log.warning(
                "Tick %d is %.3fs late, resynchronising",
                self._ticks,
                now - deadline,
            )
            deadline = now + self._tick_interval
            self._start_time = deadline - (self._ticks * self._tick_interval)

        self._timer = self._loop.call_at(deadline, self._on_tick)

    def _on_tick(self):
        self._timer = None
        if not self.is_active():
            return

        if self._position >= len(self._pulses):
            self._log.info("Transmission complete")
            self._finish(TransmissionState.COMPLETED)
            return

        pulse = self._pulses[self._position]
        remaining = self.remaining
        self._position += 1

        # Queue the next tick first, so a listener may cancel us.
        self._schedule()

        self._log.debug(
            "Pulse %d: %s (%.2fs remain)",
            self._position,
            "on" if pulse else "off",
            remaining,
        )
        self.tick.emit(pulse, remaining)

    def _finish(self, state):
        self._state = state
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

        # Nothing more to tell tick listeners, even mid-emit.
        self.tick.disconnect_all()
        self.completed.emit()
        self.completed.disconnect_all()

        if not self._future.done():
            self._future.set_result(None)


class TransmissionScheduler(object):
    def __init__(self, tick_interval=TICK_INTERVAL, loop=None, log=None):
        tick_interval = float(tick_interval)
        if tick_interval <= 0:
            raise ValueError(
                "Tick interval must be positive, got %r" % tick_interval
            )

        self._log = defaults.get_logger(log, self.__class__.__module__)
        self._loop = loop
        self._tick_interval = tick_interval
        self._current = None

    @property
    def tick_interval(self):
        return self._tick_interval

    @property
    def current(self):
        """
        The most recently started transmission, if any.
        """
        return self._current

    def start(self, pulses, on_tick=None, on_complete=None):
        """
        Begin playing back the pulse train.  ``on_tick(is_on, remaining)`` is
        called for each pulse, ``on_complete()`` once at the end or on
        cancellation.  Returns the ``Transmission`` handle.
        """
        if (self._current is not None) and self._current.is_active():
            raise RuntimeError("A transmission is already in progress")

        transmission = Transmission(
            pulses,
            tick_interval=self._tick_interval,
            loop=defaults.get_loop(self._loop),
            log=self._log,
        )

        if on_tick is not None:
            transmission.tick.connect(on_tick)

        if on_complete is not None:
            transmission.completed.connect(on_complete)

        self._current = transmission
        transmission._start()
        return transmission

    def cancel(self):
        """
        Cancel the current transmission, if there is one.
        """
        if self._current is not None:
            self._current.cancel()
