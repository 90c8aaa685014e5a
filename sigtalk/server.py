"""The receiving end: turns incoming signals back into bytes on a stream."""

from __future__ import annotations

import argparse
import os
import signal
import sys
from typing import BinaryIO, Optional

from sigtalk.printf import printf
from sigtalk.protocol import BitDecoder, bit_for_signal

_SIGNALS = frozenset({signal.SIGUSR1, signal.SIGUSR2})


class Server:
    """Decodes bits carried by SIGUSR1/SIGUSR2 and writes each byte received.

    With ``acknowledge`` set, every signal is answered with SIGUSR1 to its
    sender and a received NUL byte is written as a newline. Without it, the
    bytes are written exactly as they arrive.
    """

    def __init__(
        self, stream: Optional[BinaryIO] = None, acknowledge: bool = False
    ) -> None:
        self._stream = sys.stdout.buffer if stream is None else stream
        self.acknowledge = acknowledge
        self._decoder = BitDecoder()

    def handle(self, signum: int, sender_pid: Optional[int] = None) -> Optional[int]:
        """Process one signal; return the byte completed by it, if any."""
        byte = self._decoder.feed(bit_for_signal(signum))
        if byte is not None:
            if self.acknowledge and byte == 0:
                self._write(b"\n")
            else:
                self._write(bytes([byte]))
        if self.acknowledge and sender_pid:
            os.kill(sender_pid, signal.SIGUSR1)
        return byte

    def _write(self, data: bytes) -> None:
        self._stream.write(data)
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()

    def serve_forever(self) -> None:
        """Receive signals until interrupted."""
        wait = getattr(signal, "sigwaitinfo", None)
        if wait is None:
            self._serve_with_handlers()
            return
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
        try:
            while True:
                info = wait(_SIGNALS)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)

    def _serve_with_handlers(self) -> None:
        if self.acknowledge:
            raise RuntimeError(
                "acknowledging senders needs signal.sigwaitinfo, "
                "which this platform lacks"
            )
        previous = {signum: signal.getsignal(signum) for signum in _SIGNALS}
        for signum in _SIGNALS:
            signal.signal(signum, lambda received, _frame: self.handle(received))
        try:
            while True:
                signal.pause()
        finally:
            for signum, handler in previous.items():
                signal.signal(signum, handler)


def main(argv: Optional[list] = None) -> int:
    """Print the process id and receive messages until interrupted."""
    parser = argparse.ArgumentParser(description="Receive messages sent as signals.")
    parser.add_argument(
        "--ack",
        action="store_true",
        help="acknowledge every signal and end each message with a newline",
    )
    args = parser.parse_args(argv)
    printf("Server PID: %d\n", os.getpid())
    sys.stdout.flush()
    server = Server(acknowledge=args.ack)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0