# -*- coding: utf-8 -*-
"""Provides File IO for BRR samples stored in ROM images or raw dumps.

Attributes
----------
LOGGER : logging.Logger
    Module-level logger.

"""
import os
from logging import WARNING, getLogger
from typing import List, Optional

from .brr import BRRBlock, read_blocks
from .config import SHOW_DECODER_EXECUTION

LOGGER = getLogger(__name__)
if not SHOW_DECODER_EXECUTION:
    LOGGER.setLevel(WARNING)


class SampleRom(object):
    """ROM I/O helper.

    Parameters
    ----------
    path : str
        File path to a ROM image or BRR dump.

    Attributes
    ----------
    _file : io.BufferedReader
        Base file object used for read operations.
    _path : str
        File path to ROM.

    """

    def __init__(self, path: str):
        self._path = path
        self._file = open(self.path, 'rb', 8192)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @property
    def path(self) -> str:
        """ROM file path."""
        return self._path

    def close(self) -> None:
        """Close the ROM."""
        self._file.close()

    def load_blocks(self, offset: int,
                    max_blocks: Optional[int] = None) -> List[BRRBlock]:
        """Decode the BRR sample starting at `offset`.

        See Also
        --------
        brr.read_blocks

        """
        LOGGER.debug(f'Reading {os.path.basename(self.path)}@0x{offset:X}')
        return read_blocks(self._file, offset, max_blocks)
