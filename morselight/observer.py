#!/usr/bin/env python3

"""
A very simple signalslot work-alike, used to notify listeners of
transmission ticks and completion.
"""

# © Stuart Longland VK4MSL
# SPDX-License-Identifier: GPL-2.0-or-later

from . import defaults


class Slot(object):
    def __init__(self, callback):
        self._callback = callback

    @property
    def callback(self):
        return self._callback

    def __call__(self, *args, **kwargs):
        self._callback(*args, **kwargs)

    def __eq__(self, other):
        if other is self:
            return True

        if isinstance(other, Slot):
            return self.callback == other.callback
        else:
            return self.callback == other


class Signal(object):
    """
    A list of slots to call when the signal is emitted.  A slot that raises
    is logged and skipped; the remaining slots still get called and the
    emitter carries on.  Slots disconnected while the signal is being
    emitted are not called.
    """

    def __init__(self, log=None):
        self._log = defaults.get_logger(log, self.__class__.__module__)
        self._slots = []

    def __len__(self):
        return len(self._slots)

    def connect(self, slot):
        if not isinstance(slot, Slot):
            slot = Slot(slot)

        self._slots.append(slot)
        return slot

    def disconnect(self, slot):
        self._slots = [s for s in self._slots if s != slot]

    def disconnect_all(self):
        self._slots = []

    def emit(self, *args, **kwargs):
        for slot in list(self._slots):
            if not any(s is slot for s in self._slots):
                # Disconnected by an earlier slot
                continue

            self._emit(slot, args, kwargs)

    def _emit(self, slot, args, kwargs):
        try:
            slot(*args, **kwargs)
        except Exception:
            self._log.exception("Slot %r failed", slot.callback)
