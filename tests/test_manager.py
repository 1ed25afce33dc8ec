from collections import deque

import pytest

from canframe.manager import BitRate, CanManager
from canframe.message import CanFormat, CanMessage, CanType


class LoopbackManager(CanManager):
    def __init__(self, *args):
        super().__init__(*args)
        self.queue = deque()
        self.refreshed = []

    def _bit_rate_refresh(self):
        self.refreshed.append(self.bit_rate)

    def emit(self, msg):
        self.queue.append(msg)

    def receive(self):
        return self.queue.popleft() if self.queue else None


class SilentManager(CanManager):
    def emit(self, msg):
        pass

    def receive(self):
        return None


def _get_rate(manager):
    return CanManager.bit_rate.fget(manager)


def _set_rate(manager, rate):
    CanManager.bit_rate.fset(manager, rate)


def test_default_bit_rate():
    manager = LoopbackManager()
    assert _get_rate(manager) is BitRate.KBPS20


def test_constructor_bit_rate():
    manager = LoopbackManager(BitRate(BitRate.KBPS500.value))
    assert _get_rate(manager) is BitRate.KBPS500


def test_constructor_does_not_refresh():
    manager = LoopbackManager(BitRate(BitRate.KBPS125.value))
    assert _get_rate(manager) is BitRate.KBPS125
    assert manager.refreshed == []


def test_setting_bit_rate_triggers_refresh():
    manager = LoopbackManager()
    _set_rate(manager, BitRate.KBPS1000)
    _set_rate(manager, BitRate.KBPS62_5)
    assert _get_rate(manager) is BitRate.KBPS62_5
    assert manager.refreshed == [BitRate.KBPS1000, BitRate.KBPS62_5]


def test_default_refresh_hook_is_harmless():
    manager = SilentManager()
    _set_rate(manager, BitRate.KBPS800)
    assert _get_rate(manager) is BitRate.KBPS800


def test_abstract_manager_cannot_be_instantiated():
    with pytest.raises(TypeError):
        CanManager()


def test_emit_then_receive_round_trip():
    manager = LoopbackManager()
    first = CanMessage(2048, CanType.DATA, CanFormat.STANDARD, 2)
    second = CanMessage(9, CanType.REMOTE, CanFormat.STANDARD, 0)
    manager.emit(first)
    manager.emit(second)
    assert manager.receive() is first
    assert manager.receive() is second
    assert manager.receive() is None


def test_bit_rates_are_distinct_and_ordered():
    values = [rate.value for rate in BitRate]
    assert values == sorted(values)
    assert len(set(values)) == len(values)
    assert [BitRate(value) for value in values] == list(BitRate)