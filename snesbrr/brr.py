# -*- coding: utf-8 -*-
"""BRR block decoding.

A BRR block is nine bytes: one header byte followed by eight data bytes,
each holding two 4-bit samples (high nibble first).

Header layout::

    RRRRFFLE

    R: Range (left-shift applied to each nibble)
    F: Filter
    L: Loop flag
    E: End flag

Attributes
----------
LOGGER : logging.Logger
    Module-level logger.

"""
import io
from logging import WARNING, getLogger
from typing import BinaryIO, List, NamedTuple, Optional, Tuple, Union

from .config import BLOCK_SIZE, NIBBLES_PER_BLOCK, SHOW_DECODER_EXECUTION
from .exceptions import TruncatedSample

LOGGER = getLogger(__name__)
if not SHOW_DECODER_EXECUTION:
    LOGGER.setLevel(WARNING)

Source = Union[bytes, bytearray, memoryview, BinaryIO]


def sign_extend(nibble: int) -> int:
    """Extend the sign bit of a 4-bit value (0x8-0xF become -8 to -1)."""
    nibble &= 0xF
    if nibble > 7:
        return nibble - 16
    return nibble


class BRRHeader(NamedTuple):
    """Decoded BRR header byte."""

    end: bool
    loop: bool
    filter: int
    range: int

    @classmethod
    def from_byte(cls, header: int) -> 'BRRHeader':
        """Split a header byte into its fields."""
        return cls(end=header & 1 == 1,
                   loop=header & 2 == 2,
                   filter=header >> 2 & 3,
                   range=header >> 4 & 0xF)


class BRRBlock(NamedTuple):
    """One nine-byte block of BRR compressed data.

    Attributes
    ----------
    end : bool
        Last block of the sample.
    loop : bool
        Block marked as a loop target. Informational only.
    filter : int
        Prediction filter (0-3).
    range : int
        Left-shift amount applied to each nibble (0-15).
    nibbles : tuple of int
        16 sign-extended nibbles, in playback order.

    """

    end: bool
    loop: bool
    filter: int
    range: int
    nibbles: Tuple[int, ...]

    def __str__(self):
        flags = ''.join((' END' if self.end else '', ' LOOP' if self.loop else ''))
        return f'BRRBlock({flags.strip() or "-"}, range={self.range}, ' \
               f'filter={self.filter}, nibbles={list(self.nibbles)})'


def decode_block(data: bytes) -> BRRBlock:
    """Decode a single nine-byte block.

    Parameters
    ----------
    data : bytes
        Exactly `BLOCK_SIZE` bytes.

    Returns
    -------
    BRRBlock

    Raises
    ------
    ValueError
        `data` is not `BLOCK_SIZE` bytes long.

    """
    if len(data) != BLOCK_SIZE:
        raise ValueError(f'BRR block must be {BLOCK_SIZE} bytes, got {len(data)}')
    header = BRRHeader.from_byte(data[0])
    nibbles = []
    for byte in data[1:]:
        nibbles.append(sign_extend(byte >> 4))
        nibbles.append(sign_extend(byte & 0xF))
    return BRRBlock(header.end, header.loop, header.filter, header.range,
                    tuple(nibbles))


def read_blocks(source: Source, offset: int = 0,
                max_blocks: Optional[int] = None) -> List[BRRBlock]:
    """Read blocks until an END block or `max_blocks` blocks.

    Parameters
    ----------
    source : bytes-like or binary file
        Compressed data. Streams are seeked to `offset`.
    offset : int
        Byte offset of the first block.
    max_blocks : int, optional
        Stop after this many blocks. When given, a source that runs out
        early is accepted and only the complete blocks are returned.

    Returns
    -------
    list of BRRBlock

    Raises
    ------
    TruncatedSample
        The source ran out before an END block and `max_blocks` is None.

    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        source = io.BytesIO(bytes(source))
    source.seek(offset)

    blocks = []
    while max_blocks is None or len(blocks) < max_blocks:
        data = source.read(BLOCK_SIZE)
        if len(data) < BLOCK_SIZE:
            if max_blocks is None:
                raise TruncatedSample(offset, len(blocks))
            LOGGER.debug(f'Source ended after {len(blocks)} block(s) '
                         f'@0x{offset:X}')
            break
        block = decode_block(data)
        blocks.append(block)
        if block.end:
            break

    LOGGER.debug(f'Loaded {len(blocks)} block(s) @0x{offset:X}')
    return blocks


def nibble_count(blocks: List[BRRBlock]) -> int:
    """Total number of samples stored in `blocks`."""
    return len(blocks) * NIBBLES_PER_BLOCK
