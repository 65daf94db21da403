# -*- coding: utf-8 -*-
"""CLI display of compressed blocks and decoded samples."""
import sys
from typing import Sequence, TextIO

from .brr import BRRBlock
from .config import NIBBLES_PER_BLOCK


def format_block(index: int, block: BRRBlock, samples: Sequence[int]) -> str:
    """Two-line dump of a block and the samples it decodes to.

    Parameters
    ----------
    index : int
        Block index within the sample.
    block : BRRBlock
    samples : sequence of int
        Decoded samples of the whole sample; the block's 16 are shown.

    """
    flags = (' END' if block.end else '') + (' LOOP' if block.loop else '')
    nibbles = ', '.join(str(n) for n in block.nibbles)
    start = index * NIBBLES_PER_BLOCK
    decoded = ''.join(f' {s}' for s in samples[start:start + NIBBLES_PER_BLOCK])
    return f'{index}:{flags} range {block.range}, filter {block.filter} ' \
           f'[{nibbles}]\n    {decoded}'


def print_blocks(blocks: Sequence[BRRBlock], samples: Sequence[int],
                 file: TextIO = None) -> None:
    """Print every block with its decoded samples."""
    if file is None:
        file = sys.stdout
    for index, block in enumerate(blocks):
        print(format_block(index, block, samples), file=file)
