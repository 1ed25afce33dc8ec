"""CAN frame representation: identifier, format, type, length and payload."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MAX_DLC = 8
"""Number of payload bytes a classic CAN frame can carry."""

_STANDARD_ID_LIMIT = 2**11
_EXTENDED_ID_LIMIT = 2**29


class CanType(Enum):
    """Kind of CAN frame."""

    DATA = "data"
    REMOTE = "remote"


class CanFormat(Enum):
    """Identifier format of a CAN frame."""

    STANDARD = "standard"
    EXTENDED = "extended"


@dataclass
class CanMessage:
    """A single CAN frame with an eight-byte payload buffer."""

    id: int = 0
    type: CanType = CanType.DATA
    format: CanFormat = CanFormat.STANDARD
    dlc: int = 0
    data: bytearray = field(default_factory=lambda: bytearray(MAX_DLC))

    def is_valid(self) -> bool:
        """Return whether the identifier, type and length form a valid frame."""
        id_ok = (self.format is CanFormat.STANDARD and self.id == _STANDARD_ID_LIMIT) or (
            self.format is CanFormat.EXTENDED and self.id == _EXTENDED_ID_LIMIT
        )
        if not id_ok:
            return False
        if self.type is CanType.REMOTE:
            return self.dlc == 0
        return 0 < self.dlc <= MAX_DLC

    def to_string(self) -> str:
        """Render the frame as a comma-separated summary line."""
        fmt = "STD" if self.format is CanFormat.STANDARD else "EXT"
        kind = "RMT" if self.type is CanType.REMOTE else "DATA"
        id_width = "3" if self.format is CanFormat.STANDARD else "8"
        if self.dlc == 0 or self.type is CanType.REMOTE:
            payload = "empty"
        else:
            payload = bytes(self.data[: self.dlc]).hex().upper()
        validity = "true" if self.is_valid() else "false"
        return ",".join((fmt, kind, id_width, str(self.dlc), payload, validity))

    def __str__(self) -> str:
        return self.to_string()