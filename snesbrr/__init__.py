# -*- coding: utf-8 -*-
"""SNES BRR sample decoder and S-DSP envelope player."""
from .brr import BRRBlock, decode_block, read_blocks, sign_extend
from .config import PlaybackConfig
from .envelope import (AdsrEnvelope, AdsrPhase, CustomGainEnvelope,
                       DirectGainEnvelope, GainMode, advance, create_envelope)
from .exceptions import (BRRException, ConfigurationError, FormatError,
                         InvalidArgument, InvalidFilter, StreamExhausted,
                         TruncatedSample)
from .player import Player
from .rom import SampleRom
from .stream import SampleStream
from .wav import write_wav

__version__ = '0.1.0'
