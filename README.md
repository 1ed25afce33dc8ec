# canframe

A small model of CAN bus frames and an abstract base for bus managers.

## Installation

```
pip install canframe
```

## Messages

`canframe.message` provides the `CanMessage` dataclass. It also provides two
enumerations. `CanType` is either `DATA` or `REMOTE`. `CanFormat` is either
`STANDARD` (11-bit identifier) or `EXTENDED` (29-bit identifier).

```python
from canframe.message import CanMessage, CanType, CanFormat

msg = CanMessage(id=2048, type=CanType.DATA, format=CanFormat.STANDARD, dlc=2)
msg.data[0] = 0x12
msg.data[1] = 0xAB
print(msg.is_valid())   # True
print(msg.to_string())  # STD,DATA,3,2,12AB,true
print(str(msg))         # same as to_string()
```

A new message has these defaults:

- `id` is 0.
- `type` is `CanType.DATA`.
- `format` is `CanFormat.STANDARD`.
- `dlc` is 0.
- `data` is a zero-filled `bytearray` of `MAX_DLC` (8) bytes.

`is_valid()` returns true only when both of these conditions hold:

- The identifier is exactly 2**11 with the standard format, or exactly 2**29
  with the extended format.
- The frame is a remote frame with a DLC of 0, or a data frame with a DLC
  from 1 to 8.

`to_string()` returns six comma-separated fields:

1. The format: `STD` or `EXT`.
2. The type: `DATA` or `RMT`.
3. The identifier width in hex digits: `3` for standard, `8` for extended.
4. The DLC.
5. The payload. For a remote frame or a DLC of 0 this is `empty`. Otherwise it
   is the first `dlc` bytes of `data` in upper-case hex.
6. The validity: `true` or `false`.

## Managers

`canframe.manager` provides two names:

- `BitRate` lists the supported bus bit rates, from `KBPS10` to `KBPS1000`.
  Each member's value is in bits per second.
- `CanManager` is an abstract base class for bus back ends. Its default bit
  rate is `BitRate.KBPS20`.

A subclass of `CanManager` must implement two methods:

- `emit(msg)` sends a frame.
- `receive()` returns the next frame, or `None` when there is none.

You can assign a new value to the `bit_rate` property. Each assignment calls
`_bit_rate_refresh()`, which does nothing by default. A subclass can override
it to react to the change.

```python
from canframe.manager import CanManager, BitRate

class LoopbackManager(CanManager):
    def __init__(self, bit_rate=BitRate.KBPS20):
        self._queue = []
        super().__init__(bit_rate)

    def emit(self, msg):
        self._queue.append(msg)

    def receive(self):
        return self._queue.pop(0) if self._queue else None

bus = LoopbackManager()
bus.bit_rate = BitRate.KBPS500
```

## What this package does not do

The package does not include any concrete `CanManager`. It does not talk to
CAN hardware, sockets or drivers. To send or receive frames on a real bus,
write a subclass that does this.

## Running the tests

```
pip install canframe[test]
pytest
```