# -*- coding: utf-8 -*-
"""Configuration file for the decoder and player.

Attributes
----------
BLOCK_SIZE : int
    Size in bytes of one BRR block (1 header byte + 8 data bytes).
NIBBLES_PER_BLOCK : int
    Number of 4-bit samples stored in one BRR block.
MIN_LEVEL : int
    Lowest envelope level.
MAX_LEVEL : int
    Highest envelope level reachable by a timed envelope.
UNATTENUATED_LEVEL : int
    Envelope level used when no envelope is configured (sample passes
    through at full volume).
LEVEL_SCALE : int
    Divisor applied to `sample * level` when scaling output samples.
SAMPLES_PER_TICK : tuple of int
    S-DSP rate table; samples between envelope ticks for each 5-bit rate.
    Rate 0 never ticks.
DEFAULT_SAMPLE_RATE : int
    S-DSP output sample-rate in Hz.
BITS_PER_SAMPLE : int
    PCM output sample width.
CHANNELS : int
    PCM output channel count.
SHOW_ENVELOPE_EXECUTION : bool
    Emit envelope state on the `ENVELOPE` logger at every loop reset.
SHOW_DECODER_EXECUTION : bool
    Emit block loading records on the decoder loggers.

"""
import sys
from typing import NamedTuple, Optional

from .exceptions import InvalidArgument

BLOCK_SIZE = 9
NIBBLES_PER_BLOCK = 16

MIN_LEVEL = 0
MAX_LEVEL = 0x7FF
UNATTENUATED_LEVEL = 0x800
LEVEL_SCALE = 0x800

SAMPLES_PER_TICK = (
    sys.maxsize, 2048, 1536, 1280, 1024, 768, 640, 512,
    384, 320, 256, 192, 160, 128, 96, 80,
    64, 48, 40, 32, 24, 20, 16, 12,
    10, 8, 6, 5, 4, 3, 2, 1
)

DEFAULT_SAMPLE_RATE = 32000
BITS_PER_SAMPLE = 16
CHANNELS = 1

SHOW_ENVELOPE_EXECUTION = True
SHOW_DECODER_EXECUTION = True


class PlaybackConfig(NamedTuple):
    """Playback settings for one sample.

    Attributes
    ----------
    offset : int
        Byte offset of the first BRR block in the source.
    adsr : int, optional
        Both ADSR register bytes as one 16-bit value (first byte high).
    gain : int, optional
        GAIN register byte; ignored when `adsr` is set.
    end_block : int, optional
        Maximum number of blocks to keep; allows truncated sources.
    loop_block : int, optional
        Block index to restart from when the sample ends.
    sample_rate : int
        Output frames per second.

    """

    offset: int = 0
    adsr: Optional[int] = None
    gain: Optional[int] = None
    end_block: Optional[int] = None
    loop_block: Optional[int] = None
    sample_rate: int = DEFAULT_SAMPLE_RATE

    def validate(self) -> 'PlaybackConfig':
        """Check every field against its register/hardware range."""
        if self.offset < 0:
            raise InvalidArgument(self.offset, 'OFFSET')
        if self.adsr is not None and not 0 <= self.adsr <= 0xFFFF:
            raise InvalidArgument(self.adsr, 'ADSR')
        if self.gain is not None and not 0 <= self.gain <= 0xFF:
            raise InvalidArgument(self.gain, 'GAIN')
        if self.end_block is not None and self.end_block < 0:
            raise InvalidArgument(self.end_block, 'END BLOCK')
        if self.loop_block is not None and self.loop_block < 0:
            raise InvalidArgument(self.loop_block, 'LOOP BLOCK')
        if self.sample_rate <= 0:
            raise InvalidArgument(self.sample_rate, 'SAMPLE RATE')
        return self


def parse_number(text: str, name: str) -> int:
    """Parse a decimal or `0x`-prefixed hexadecimal option value.

    Parameters
    ----------
    text : str
        Raw option text.
    name : str
        Option name used in the error message.

    Returns
    -------
    int

    Raises
    ------
    InvalidArgument
        The text is not a number.

    """
    value = text.strip()
    try:
        if value.lower().startswith('0x'):
            return int(value[2:], 16)
        return int(value, 10)
    except ValueError:
        raise InvalidArgument(text, name) from None
