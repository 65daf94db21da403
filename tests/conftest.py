# -*- coding: utf-8 -*-
import pytest


def encode_block(nibbles, filter=0, range=0, end=False, loop=False):
    """Pack 16 nibbles (-8..7) and header fields into nine BRR bytes."""
    if isinstance(nibbles, int):
        nibbles = [nibbles] * 16
    assert len(nibbles) == 16
    header = (range << 4) | (filter << 2) | (int(loop) << 1) | int(end)
    data = bytearray([header])
    for hi, lo in zip(nibbles[::2], nibbles[1::2]):
        data.append(((hi & 0xF) << 4) | (lo & 0xF))
    return bytes(data)


@pytest.fixture
def block_bytes():
    return encode_block
