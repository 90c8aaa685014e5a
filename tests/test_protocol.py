import signal

import pytest

from sigtalk.protocol import (
    BitDecoder,
    bit_for_signal,
    byte_to_bits,
    message_bits,
    signal_for_bit,
)


def _decode(bits):
    decoder = BitDecoder()
    out = bytearray()
    for bit in bits:
        byte = decoder.feed(bit)
        if byte is not None:
            out.append(byte)
    return bytes(out)


def test_least_significant_bit_first():
    assert byte_to_bits(1) == (1, 0, 0, 0, 0, 0, 0, 0)


def test_extreme_bytes():
    assert byte_to_bits(0) == (0,) * 8
    assert byte_to_bits(255) == (1,) * 8


@pytest.mark.parametrize("byte", [-1, 256])
def test_byte_out_of_range(byte):
    with pytest.raises(ValueError):
        byte_to_bits(byte)


def test_every_byte_round_trips():
    for byte in range(256):
        decoder = BitDecoder()
        results = [decoder.feed(bit) for bit in byte_to_bits(byte)]
        assert results[:-1] == [None] * 7
        assert results[-1] == byte


def test_decoder_resets_between_bytes():
    assert _decode(byte_to_bits(200) + byte_to_bits(7)) == bytes([200, 7])


def test_decoder_rejects_bad_bit():
    with pytest.raises(ValueError):
        BitDecoder().feed(2)


def test_message_ends_with_nul():
    bits = list(message_bits("hi"))
    assert len(bits) == 8 * 3
    assert bits[-8:] == [0] * 8


def test_message_round_trip():
    assert _decode(message_bits("hello")) == b"hello\0"


def test_bytes_message_round_trip():
    assert _decode(message_bits(b"\x01\xff")) == b"\x01\xff\0"


def test_utf8_message():
    assert _decode(message_bits("é")) == "é".encode("utf-8") + b"\0"


def test_empty_message_is_just_terminator():
    assert list(message_bits("")) == [0] * 8


def test_embedded_nul_rejected():
    with pytest.raises(ValueError):
        list(message_bits("a\0b"))


def test_signal_mapping():
    assert signal_for_bit(0) == signal.SIGUSR1
    assert signal_for_bit(1) == signal.SIGUSR2


@pytest.mark.parametrize("bit", [0, 1])
def test_signal_bit_round_trip(bit):
    assert bit_for_signal(signal_for_bit(bit)) == bit


def test_unknown_signal_rejected():
    with pytest.raises(ValueError):
        bit_for_signal(signal.SIGINT)


def test_invalid_bit_rejected():
    with pytest.raises(ValueError):
        signal_for_bit(2)