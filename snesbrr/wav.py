# -*- coding: utf-8 -*-
"""WAV output for decoded samples."""
import sys
import wave
from array import array
from logging import getLogger
from typing import Iterable

from .config import BITS_PER_SAMPLE, CHANNELS, DEFAULT_SAMPLE_RATE

LOGGER = getLogger(__name__)


def to_pcm16(sample: int) -> int:
    """Keep the low 16 bits of `sample` as a signed value."""
    return ((sample + 0x8000) & 0xFFFF) - 0x8000


def pcm16_bytes(samples: Iterable[int]) -> bytes:
    """Pack samples as signed 16-bit little-endian PCM."""
    data = array('h', (to_pcm16(s) for s in samples))
    if sys.byteorder == 'big':
        data.byteswap()
    return data.tobytes()


def write_wav(path: str, samples: Iterable[int],
              sample_rate: int = DEFAULT_SAMPLE_RATE) -> int:
    """Write mono 16-bit PCM samples to a WAV file.

    Parameters
    ----------
    path : str
        Output file path.
    samples : iterable of int
        Samples; values outside 16 bits keep their low 16 bits.
    sample_rate : int
        Frames per second written to the `fmt ` chunk.

    Returns
    -------
    int
        Number of frames written.

    """
    data = pcm16_bytes(samples)
    with wave.open(path, 'wb') as wav_file:
        wav_file.setnchannels(CHANNELS)
        wav_file.setsampwidth(BITS_PER_SAMPLE // 8)
        wav_file.setframerate(sample_rate)
        wav_file.writeframes(data)
    frames = len(data) // (BITS_PER_SAMPLE // 8)
    LOGGER.debug(f'Wrote {frames} frames@{sample_rate} Hz to {path}')
    return frames
