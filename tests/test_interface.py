# -*- coding: utf-8 -*-
import io

from snesbrr.brr import BRRBlock
from snesbrr.interface import format_block, print_blocks


def test_format_block_flags():
    block = BRRBlock(True, True, 2, 11, tuple(range(-8, 8)))
    samples = [0] * 16 + list(range(16))
    text = format_block(1, block, samples)
    first, second = text.split('\n')
    assert first == '1: END LOOP range 11, filter 2 ' \
                    '[-8, -7, -6, -5, -4, -3, -2, -1, 0, 1, 2, 3, 4, 5, 6, 7]'
    assert second == '    ' + ''.join(f' {i}' for i in range(16))


def test_format_block_no_flags():
    block = BRRBlock(False, False, 0, 0, (0,) * 16)
    assert format_block(0, block, [0] * 16).startswith('0: range 0, filter 0 [')


def test_print_blocks():
    blocks = [BRRBlock(False, False, 0, 0, (1,) * 16),
              BRRBlock(True, False, 0, 0, (1,) * 16)]
    out = io.StringIO()
    print_blocks(blocks, [0] * 32, file=out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 4
    assert lines[2].startswith('1: END ')
