"""The bit-per-signal wire protocol.

Each byte travels as eight signals, least significant bit first: SIGUSR1
carries a 0 bit and SIGUSR2 a 1 bit. A message ends with a NUL byte.
"""

from __future__ import annotations

import signal
from typing import Iterator, Optional, Tuple, Union

BITS_PER_BYTE = 8


def _check_bit(bit: int) -> int:
    if bit not in (0, 1):
        raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
    return int(bit)


def byte_to_bits(byte: int) -> Tuple[int, ...]:
    """The eight bits of ``byte``, least significant first."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")
    return tuple((byte >> i) & 1 for i in range(BITS_PER_BYTE))


def message_bits(message: Union[str, bytes]) -> Iterator[int]:
    """Yield the bits of ``message`` followed by those of its NUL terminator.

    Text is sent as UTF-8. The message itself may not contain a NUL byte.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if b"\0" in data:
        raise ValueError("a message cannot contain a NUL byte")
    for byte in data + b"\0":
        yield from byte_to_bits(byte)


def signal_for_bit(bit: int) -> signal.Signals:
    """The signal that carries ``bit``."""
    return signal.SIGUSR2 if _check_bit(bit) else signal.SIGUSR1


def bit_for_signal(signum: int) -> int:
    """The bit carried by ``signum``."""
    if signum == signal.SIGUSR2:
        return 1
    if signum == signal.SIGUSR1:
        return 0
    raise ValueError(f"signal {signum} does not carry a bit")


class BitDecoder:
    """Reassembles bytes from bits received least significant first."""

    def __init__(self) -> None:
        self._count = 0
        self._value = 0

    def feed(self, bit: int) -> Optional[int]:
        """Add one bit; return the byte once eight bits have arrived."""
        if _check_bit(bit):
            self._value |= 1 << self._count
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._count = 0
        self._value = 0
        return byte