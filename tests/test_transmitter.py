# © Stuart Longland VK4MSL
# SPDX-License-Identifier: GPL-2.0-or-later

import asyncio

import pytest

from morselight.transmitter import Transmitter

TICK = 0.01


def test_defaults():
    transmitter = Transmitter()
    assert transmitter.tick_interval == 0.25
    assert transmitter.input_limit == 120
    assert transmitter.transmission is None
    assert not transmitter.transmitting


def test_from_cfg():
    transmitter = Transmitter.from_cfg(tick_interval="0.5", input_limit=10)
    assert transmitter.tick_interval == 0.5
    assert transmitter.input_limit == 10


def test_from_cfg_rejects_unknown_settings():
    with pytest.raises(TypeError):
        Transmitter.from_cfg(dit_period=0.1)


def test_rejects_bad_settings():
    with pytest.raises(ValueError):
        Transmitter(tick_interval=0)

    with pytest.raises(ValueError):
        Transmitter(input_limit=-1)


def test_transmit_duration():
    transmitter = Transmitter()
    assert transmitter.transmit_duration("sos") == pytest.approx(5.0)
    assert transmitter.transmit_duration("") == 0
    assert transmitter.transmit_duration("#") is None


def test_input_limit_applies():
    transmitter = Transmitter(input_limit=3)
    assert transmitter.validate("sos").is_valid
    assert transmitter.encode("soss") is None
    assert transmitter.transmit_duration("soss") is None


def test_transmit():
    ticks = []
    completions = []
    started = []

    async def _run():
        transmitter = Transmitter(tick_interval=TICK)
        transmitter.started.connect(started.append)
        transmission = transmitter.transmit(
            "e e",
            on_tick=lambda is_on, remaining: ticks.append(is_on),
            on_complete=lambda: completions.append(None),
        )
        assert transmitter.transmitting
        assert transmitter.transmission is transmission
        await transmission.wait()
        assert not transmitter.transmitting

    asyncio.run(_run())
    assert ticks == [True] + [False] * 7 + [True]
    assert len(completions) == 1
    assert started == ["e e"]


def test_transmit_invalid_input():
    completions = []

    async def _run():
        transmitter = Transmitter(tick_interval=TICK)
        result = transmitter.transmit(
            "sos#", on_complete=lambda: completions.append(None)
        )
        await asyncio.sleep(TICK * 3)
        return (transmitter, result)

    (transmitter, result) = asyncio.run(_run())
    assert result is None
    assert completions == []
    assert transmitter.transmission is None


def test_cancel():
    completions = []

    async def _run():
        transmitter = Transmitter(tick_interval=TICK)
        transmission = transmitter.transmit(
            "paris paris", on_complete=lambda: completions.append(None)
        )
        await asyncio.sleep(TICK * 2.5)
        transmitter.cancel()
        transmitter.cancel()
        await transmission.wait()

    asyncio.run(_run())
    assert len(completions) == 1
