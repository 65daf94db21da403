# -*- coding: utf-8 -*-
"""Predictive decoding of BRR blocks into PCM samples."""
from typing import Iterator, Sequence

from .brr import BRRBlock
from .exceptions import InvalidFilter, StreamExhausted

# Filter coefficients for (old, older); the S-DSP uses fixed-point
# approximations of these ratios.
FILTERS = {
    0: (0.0, 0.0),
    1: (0.9375, 0.0),
    2: (1.90625, -0.9375),
    3: (1.796875, -0.8125),
}


def apply_filter(filter_id: int, raw: int, old: int, older: int) -> int:
    """Combine a shifted nibble with the previous two output samples.

    The result is truncated toward zero and is not clamped to 16 bits.

    Raises
    ------
    InvalidFilter
        `filter_id` is not 0-3.

    """
    if filter_id == 0:
        return raw
    try:
        old_coef, older_coef = FILTERS[filter_id]
    except KeyError:
        raise InvalidFilter(filter_id) from None
    return int(raw + old * old_coef + older * older_coef)


class SampleStream(object):
    """Stream of decompressed samples which can loop indefinitely.

    Parameters
    ----------
    blocks : sequence of BRRBlock
        Decoded blocks of one sample.

    Attributes
    ----------
    block_index : int
        Block holding the next nibble.
    nibble_index : int
        Position of the next nibble inside its block.
    old : int
        Last decoded sample.
    older : int
        Sample decoded before `old`.

    """

    def __init__(self, blocks: Sequence[BRRBlock]):
        self.blocks = blocks
        self.block_index = 0
        self.nibble_index = 0
        self.old = 0
        self.older = 0

    def __repr__(self):
        return f'SampleStream(block={self.block_index}, ' \
               f'nibble={self.nibble_index}, old={self.old}, ' \
               f'older={self.older})'

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if not self.has_next():
            raise StopIteration
        return self.next_sample()

    def has_next(self) -> bool:
        """Check if the cursor is still inside the retained blocks."""
        return self.block_index < len(self.blocks)

    def next_sample(self) -> int:
        """Decode the nibble under the cursor and advance.

        Raises
        ------
        StreamExhausted
            Called after the last nibble of the last block.

        """
        if not self.has_next():
            raise StreamExhausted()
        block = self.blocks[self.block_index]
        nibble = block.nibbles[self.nibble_index]

        self.nibble_index += 1
        if self.nibble_index == len(block.nibbles):
            self.block_index += 1
            self.nibble_index = 0

        raw = (nibble << block.range) >> 1
        new = apply_filter(block.filter, raw, self.old, self.older)

        self.older = self.old
        self.old = new
        return new

    def loop(self, block_index: int) -> None:
        """Move the cursor to the first nibble of `block_index`.

        Filter history is kept so the loop seam decodes exactly as the
        hardware does.
        """
        self.block_index = block_index
        self.nibble_index = 0
