# -*- coding: utf-8 -*-
"""S-DSP single-voice playback emulation.

Attributes
----------
LOGGER : logging.Logger
    Module-level logger

"""
from array import array
from itertools import islice
from logging import WARNING, getLogger
from typing import Iterator, List, Optional, Sequence

from .brr import BRRBlock, nibble_count
from .config import (BITS_PER_SAMPLE, CHANNELS, LEVEL_SCALE, MIN_LEVEL,
                     SHOW_ENVELOPE_EXECUTION, PlaybackConfig)
from .envelope import Envelope, advance, create_envelope, describe
from .exceptions import InvalidArgument
from .rom import SampleRom
from .stream import SampleStream
from .wav import to_pcm16

LOGGER = getLogger(__name__)


def scale(sample: int, level: int) -> int:
    """Apply an envelope level to a sample, truncating toward zero."""
    product = sample * level
    if product < 0:
        return -(-product // LEVEL_SCALE)
    return product // LEVEL_SCALE


class Player(object):
    """Drives one BRR sample through an envelope.

    Parameters
    ----------
    blocks : sequence of BRRBlock
        Decoded blocks of the sample.
    config : PlaybackConfig
        Envelope registers, loop point and output rate.

    Attributes
    ----------
    Player.ENVELOPE_LOGGER : Logger
        Class-level logger exclusively for envelope state.
    envelope : Envelope
        Envelope of the sample currently (or last) produced by `samples`.
    loops : int
        Number of loop resets performed by the last `samples` run.

    """

    ENVELOPE_LOGGER = getLogger('ENVELOPE')
    if not SHOW_ENVELOPE_EXECUTION:
        ENVELOPE_LOGGER.setLevel(WARNING)

    def __init__(self, blocks: Sequence[BRRBlock],
                 config: PlaybackConfig = PlaybackConfig()):
        self.config = config.validate()
        self.blocks = blocks
        if config.loop_block is not None and config.loop_block >= len(blocks):
            raise InvalidArgument(config.loop_block, 'LOOP BLOCK')
        self.envelope: Envelope = create_envelope(config.adsr, config.gain)
        self.loops = 0

    @classmethod
    def from_file(cls, path: str,
                  config: PlaybackConfig = PlaybackConfig()) -> 'Player':
        """Load the sample at `config.offset` in the file at `path`."""
        config.validate()
        with SampleRom(path) as rom:
            blocks = rom.load_blocks(config.offset, config.end_block)
        return cls(blocks, config)

    @property
    def sample_rate(self) -> int:
        return self.config.sample_rate

    def decoded_samples(self) -> List[int]:
        """Decode every block once, without envelope or looping."""
        return list(SampleStream(self.blocks))

    def samples(self) -> Iterator[int]:
        """Generate output samples.

        Each decoded sample is scaled by the envelope level before the
        envelope advances. At the end of the sample, playback restarts from
        the loop block while the envelope is audible; without a loop block
        it stops after `nibble_count(blocks)` samples.

        Yields
        ------
        int
            Enveloped sample.

        """
        loop_block = self.config.loop_block
        stream = SampleStream(self.blocks)
        envelope = create_envelope(self.config.adsr, self.config.gain)
        self.envelope = envelope
        self.loops = 0
        LOGGER.debug(f'Start: {nibble_count(self.blocks)} samples, '
                     f'{describe(envelope)}, loop={loop_block}')

        while stream.has_next():
            sample = scale(stream.next_sample(), envelope.level)
            yield sample

            envelope = advance(envelope)
            self.envelope = envelope

            if not stream.has_next() and loop_block is not None \
                    and envelope.level != MIN_LEVEL:
                stream.loop(loop_block)
                self.loops += 1
                self.ENVELOPE_LOGGER.debug(
                    f' Loop {self.loops:4} | {describe(envelope)}')

        LOGGER.debug(f'End: {self.loops} loop(s), {describe(envelope)}')

    def render(self, max_samples: Optional[int] = None) -> List[int]:
        """Collect `samples` into a list, stopping after `max_samples`."""
        return list(islice(self.samples(), max_samples))

    def play(self, device=None, block_frames: int = 1024) -> None:
        """Stream `samples` to an audio device until playback ends.

        Parameters
        ----------
        device : int or str, optional
            sounddevice output device (default device when None).
        block_frames : int
            Frames written per device call.

        """
        import sounddevice as sd

        samples = self.samples()
        with sd.RawOutputStream(samplerate=self.sample_rate,
                                channels=CHANNELS,
                                dtype=f'int{BITS_PER_SAMPLE}',
                                device=device) as stream:
            LOGGER.debug(f'Output@{self.sample_rate} Hz, device={device}')
            while True:
                chunk = array('h', (to_pcm16(s) for s in
                                    islice(samples, block_frames)))
                if not chunk:
                    break
                stream.write(chunk.tobytes())
