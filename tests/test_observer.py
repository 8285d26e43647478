# © Stuart Longland VK4MSL
# SPDX-License-Identifier: GPL-2.0-or-later

import logging

from morselight.observer import Signal


def test_emit_calls_every_slot():
    calls = []
    signal = Signal()
    signal.connect(lambda *a: calls.append(("first", a)))
    signal.connect(lambda *a: calls.append(("second", a)))

    signal.emit(True, 1.5)
    assert calls == [("first", (True, 1.5)), ("second", (True, 1.5))]


def test_disconnect_bound_method():
    calls = []
    signal = Signal()
    signal.connect(calls.append)
    assert len(signal) == 1

    # A fresh bound method object each time; must still match.
    signal.disconnect(calls.append)
    assert len(signal) == 0
    signal.emit(1)
    assert calls == []


def test_disconnect_by_slot():
    calls = []
    signal = Signal()
    slot = signal.connect(calls.append)
    signal.connect(lambda v: calls.append(-v))
    signal.disconnect(slot)
    signal.emit(1)
    assert calls == [-1]


def test_disconnect_all():
    calls = []
    signal = Signal()
    signal.connect(calls.append)
    signal.connect(calls.append)
    signal.disconnect_all()
    assert len(signal) == 0
    signal.emit(1)
    assert calls == []


def test_slots_disconnected_during_emit_are_skipped():
    calls = []
    signal = Signal()

    def _first(value):
        calls.append(("first", value))
        signal.disconnect_all()

    signal.connect(_first)
    signal.connect(lambda value: calls.append(("second", value)))

    signal.emit(1)
    signal.emit(2)
    assert calls == [("first", 1)]


def test_failing_slot_is_logged(caplog):
    calls = []

    def _broken():
        raise ValueError("broken slot")

    signal = Signal(log=logging.getLogger("test.observer"))
    signal.connect(_broken)
    signal.connect(lambda: calls.append(True))

    with caplog.at_level(logging.ERROR):
        signal.emit()

    assert calls == [True]
    assert "broken slot" in caplog.text
