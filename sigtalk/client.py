"""The sending end: transmits a message to a server one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional, Union

from sigtalk.numconv import atoi
from sigtalk.printf import printf
from sigtalk.protocol import byte_to_bits, message_bits, signal_for_bit

DEFAULT_DELAY = 350e-6


def _check_pid(pid: int) -> None:
    if pid <= 0:
        raise ValueError(f"not a valid process id: {pid}")


@contextmanager
def _ack_blocked(acknowledge: bool) -> Iterator[None]:
    if not acknowledge:
        yield
        return
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, {signal.SIGUSR1})
    try:
        yield
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def _send_bits(pid: int, bits: Iterable[int], acknowledge: bool, delay: float) -> None:
    with _ack_blocked(acknowledge):
        for bit in bits:
            os.kill(pid, signal_for_bit(bit))
            if acknowledge:
                signal.sigwait({signal.SIGUSR1})
            else:
                time.sleep(delay)


def send_byte(
    pid: int, byte: int, acknowledge: bool = False, delay: float = DEFAULT_DELAY
) -> None:
    """Send the eight bits of ``byte`` to ``pid``, least significant first.

    With ``acknowledge`` each bit waits for SIGUSR1 from the receiver;
    otherwise the sender pauses ``delay`` seconds between bits.
    """
    _check_pid(pid)
    _send_bits(pid, byte_to_bits(byte), acknowledge, delay)


def send_message(
    pid: int,
    message: Union[str, bytes],
    acknowledge: bool = False,
    delay: float = DEFAULT_DELAY,
) -> int:
    """Send ``message`` and its NUL terminator; return the bytes sent."""
    _check_pid(pid)
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if b"\x00" in data:
        raise ValueError("message must not contain a NUL byte")
    _send_bits(pid, message_bits(data), acknowledge, delay)
    return len(data) + 1


def main(argv: Optional[list] = None) -> int:
    """Send the message given on the command line to the server's pid."""
    args = list(sys.argv[1:] if argv is None else argv)
    acknowledge = bool(args) and args[0] == "--ack"
    if acknowledge:
        args = args[1:]
    if len(args) != 2:
        program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "client"
        printf("Use: %s <PID> <mensagem>\n", program)
        return 1
    try:
        send_message(atoi(args[0]), os.fsencode(args[1]), acknowledge)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0