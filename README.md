# sigtalk

A tiny messaging pair for POSIX systems: a server prints its process id and
waits, and a client sends it a message one bit at a time using only the
signals `SIGUSR1` (a 0 bit) and `SIGUSR2` (a 1 bit). Bits travel least
significant first, eight per byte, and every message ends with a zero byte.
Text given on the command line is sent as its raw bytes.

## Installing

```
pip install .
```

## Running

Start the server in one terminal:

```
sigtalk-server
```

It prints a line such as `Server PID: 12345` and then writes every byte it
receives to standard output, until it is interrupted (Ctrl-C). Send it a
message from another terminal:

```
sigtalk-client 12345 "hello there"
```

The client takes exactly two arguments, the server's process id and the
message; otherwise it prints `Use: <program> <PID> <mensagem>` and exits with
status 1. The process id is read like C `atoi`: leading digits only, so text
without digits gives 0, which is rejected. If sending fails (for example, no
such process), the client prints `error: ...` to standard error and exits
with status 1.

### Acknowledged mode

Without acknowledgements the client pauses 350 microseconds between bits and
the server writes bytes exactly as they arrive, including the terminating
zero byte. Both commands also have an acknowledged mode:

```
sigtalk-server --ack
sigtalk-client --ack 12345 "hello there"
```

In this mode the server answers every signal with `SIGUSR1` to its sender, and
writes a newline in place of the zero byte that ends each message; the client
waits for each answer before sending the next bit. For the client, `--ack`
must come before the process id. The server needs `signal.sigwaitinfo` for
this mode; on platforms without it, `--ack` makes it fail with `RuntimeError`.

## Using it as a library

The bit protocol (`sigtalk.protocol`) works without any signals involved:

```python
from sigtalk.protocol import BitDecoder, message_bits

decoder = BitDecoder()
received = bytes(
    byte for bit in message_bits(b"hi")
    if (byte := decoder.feed(bit)) is not None
)
assert received == b"hi\x00"
```

It also offers `byte_to_bits(byte)`, `signal_for_bit(bit)` and
`bit_for_signal(signum)`. Messages may not contain a zero byte.

`sigtalk.server.Server(stream, acknowledge)` writes to a binary stream
(standard output by default); `Server.handle(signum, sender_pid)` processes
one signal and returns the byte it completed, if any, and
`Server.serve_forever()` receives signals until interrupted.

`sigtalk.client.send_byte(pid, byte, acknowledge, delay)` sends one byte and
`sigtalk.client.send_message(pid, message, acknowledge, delay)` sends a whole
message with its terminator, returning the number of bytes sent.

The package also carries the small helpers these programs are built on:

- `sigtalk.chars`: ASCII classes and case mapping (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`).
- `sigtalk.numconv`: `atoi`, `itoa` and `put_nbr` for signed 32-bit integers.
- `sigtalk.bytesops`: `memchr` and `memcmp`.
- `sigtalk.textops`: `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`,
  `strlcat`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`,
  returning indices (or `None`) instead of pointers.
- `sigtalk.linkedlist`: `LinkedList` of `Node`s with `push_front`,
  `push_back`, `last`, `iterate`, `map` and `clear`.
- `sigtalk.printf`: `sprintf` and `printf` supporting
  `%c %s %d %i %u %x %X %p %%`, plus `format_hex` and `format_pointer`.

## Tests

```
pip install ".[test]"
pytest
```