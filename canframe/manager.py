"""Abstract CAN bus manager with a configurable bit rate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from .message import CanMessage


class BitRate(Enum):
    """Supported CAN bus bit rates, valued in bits per second."""

    KBPS10 = 10_000
    KBPS20 = 20_000
    KBPS62_5 = 62_500
    KBPS125 = 125_000
    KBPS250 = 250_000
    KBPS500 = 500_000
    KBPS800 = 800_000
    KBPS1000 = 1_000_000


class CanManager(ABC):
    """Base class for CAN interfaces that send and receive frames."""

    def __init__(self, bit_rate: BitRate = BitRate.KBPS20) -> None:
        self._bit_rate = bit_rate

    @property
    def bit_rate(self) -> BitRate:
        """Current bus bit rate; assigning it triggers a refresh."""
        return self._bit_rate

    @bit_rate.setter
    def bit_rate(self, value: BitRate) -> None:
        self._bit_rate = value
        self._bit_rate_refresh()

    def _bit_rate_refresh(self) -> None:
        """Hook run after each bit rate change; does nothing by default."""

    @abstractmethod
    def emit(self, msg: CanMessage) -> None:
        """Transmit a frame."""

    @abstractmethod
    def receive(self) -> CanMessage | None:
        """Return the next received frame, or None if none is available."""