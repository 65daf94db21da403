# -*- coding: utf-8 -*-
"""S-DSP volume envelopes.

An envelope is one of three immutable values:

- `AdsrEnvelope`: Attack/Decay/Sustain/Release, driven by the ADSR registers.
- `DirectGainEnvelope`: a constant level.
- `CustomGainEnvelope`: a one-way linear/exponential/bent volume slide.

`advance` produces the envelope for the next output sample.
"""
from enum import IntEnum
from typing import NamedTuple, Optional, Union

from .config import MAX_LEVEL, MIN_LEVEL, SAMPLES_PER_TICK, UNATTENUATED_LEVEL
from .exceptions import InvalidArgument

FAST_ATTACK_RATE = 0x1F
ATTACK_STEP = 0x20
FAST_ATTACK_STEP = 0x400
ATTACK_END = 0x7E0
RELEASE_STEP = 8
LINEAR_STEP = 32
BENT_STEP = 8
BENT_KNEE = 0x600


class AdsrPhase(IntEnum):
    """ADSR envelope phases."""

    ATTACK = 0
    DECAY = 1
    SUSTAIN = 2
    RELEASE = 3


class GainMode(IntEnum):
    """Custom gain slide modes, as stored in GAIN bits 5-6."""

    LINEAR_DECREASE = 0
    EXPONENTIAL_DECREASE = 1
    LINEAR_INCREASE = 2
    BENT_INCREASE = 3

    @property
    def initial_level(self) -> int:
        """Starting level of a slide in this mode."""
        if self in (GainMode.LINEAR_DECREASE, GainMode.EXPONENTIAL_DECREASE):
            return MAX_LEVEL
        return MIN_LEVEL


def clamp(level: int) -> int:
    """Clamp `level` between `MIN_LEVEL` and `MAX_LEVEL`."""
    return max(MIN_LEVEL, min(MAX_LEVEL, level))


def samples_per_tick(rate: int) -> int:
    """Samples between ticks for a 5-bit rate (0 never ticks)."""
    return SAMPLES_PER_TICK[min(rate, len(SAMPLES_PER_TICK) - 1)]


def exponential_decay(level: int) -> int:
    """Decrease `level` by 1/256th of itself, plus one."""
    level -= 1
    return clamp(level - (level >> 8))


class AdsrEnvelope(NamedTuple):
    """Attack/Decay/Sustain/Release envelope.

    The level rises to full volume at `attack_rate`, decays at `decay_rate`
    until it crosses the `sustain_level` boundary, then decays at
    `sustain_rate` until silent, where it stays in RELEASE.

    Attributes
    ----------
    attack_rate : int
        4-bit attack rate.
    decay_rate : int
        3-bit decay rate.
    sustain_level : int
        3-bit sustain boundary; decay ends at `(sustain_level + 1) * 0x100`.
    sustain_rate : int
        5-bit sustain rate.
    level : int
        Current level.
    phase : AdsrPhase
        Current phase.
    counter : int
        Samples elapsed since the last tick.

    """

    attack_rate: int
    decay_rate: int
    sustain_level: int
    sustain_rate: int
    level: int = MIN_LEVEL
    phase: AdsrPhase = AdsrPhase.ATTACK
    counter: int = 0

    @classmethod
    def from_registers(cls, adsr: int) -> 'AdsrEnvelope':
        """Build an envelope from both ADSR bytes (EDDDAAAA LLLRRRRR)."""
        return cls(attack_rate=adsr >> 8 & 0xF,
                   decay_rate=adsr >> 12 & 0x7,
                   sustain_level=adsr >> 5 & 0x7,
                   sustain_rate=adsr & 0x1F)

    @property
    def attack_samples(self) -> int:
        return samples_per_tick(self.attack_rate * 2 + 1)

    @property
    def decay_samples(self) -> int:
        return samples_per_tick(self.decay_rate * 2 + 16)

    @property
    def sustain_samples(self) -> int:
        return samples_per_tick(self.sustain_rate)

    @property
    def sustain_boundary(self) -> int:
        return (self.sustain_level + 1) * 0x100


class DirectGainEnvelope(NamedTuple):
    """Constant level set directly by the GAIN register."""

    level: int

    @classmethod
    def from_register(cls, gain: int) -> 'DirectGainEnvelope':
        """Build an envelope from a GAIN byte with bit 7 clear (0DDDDDDD)."""
        return cls(level=(gain & 0x7F) << 4)


class CustomGainEnvelope(NamedTuple):
    """One-way volume slide set by the GAIN register.

    Attributes
    ----------
    mode : GainMode
        Slide direction and curve.
    rate : int
        5-bit slide rate.
    level : int
        Current level.
    counter : int
        Samples elapsed since the last tick.

    """

    mode: GainMode
    rate: int
    level: int
    counter: int = 0

    @classmethod
    def create(cls, mode: int, rate: int) -> 'CustomGainEnvelope':
        """Start a slide at the initial level of `mode`."""
        mode = GainMode(mode)
        return cls(mode=mode, rate=rate, level=mode.initial_level)

    @classmethod
    def from_register(cls, gain: int) -> 'CustomGainEnvelope':
        """Build an envelope from a GAIN byte with bit 7 set (1MMRRRRR)."""
        return cls.create(gain >> 5 & 3, gain & 0x1F)

    @property
    def samples(self) -> int:
        return samples_per_tick(self.rate)


Envelope = Union[AdsrEnvelope, DirectGainEnvelope, CustomGainEnvelope]


def _advance_adsr(env: AdsrEnvelope) -> AdsrEnvelope:
    if env.phase == AdsrPhase.RELEASE:
        return env._replace(level=clamp(env.level - RELEASE_STEP))

    if env.phase == AdsrPhase.ATTACK:
        interval = env.attack_samples
    elif env.phase == AdsrPhase.DECAY:
        interval = env.decay_samples
    else:
        interval = env.sustain_samples

    counter = env.counter + 1
    if counter != interval:
        return env._replace(counter=counter)

    phase = env.phase
    if phase == AdsrPhase.ATTACK:
        step = FAST_ATTACK_STEP if env.attack_rate == FAST_ATTACK_RATE else ATTACK_STEP
        level = clamp(env.level + step)
        if level >= ATTACK_END:
            phase = AdsrPhase.DECAY
    elif phase == AdsrPhase.DECAY:
        level = exponential_decay(env.level)
        if level <= env.sustain_boundary:
            phase = AdsrPhase.SUSTAIN
    else:
        level = exponential_decay(env.level)
        if level == MIN_LEVEL:
            phase = AdsrPhase.RELEASE
    return env._replace(level=level, phase=phase, counter=0)


def _advance_direct(env: DirectGainEnvelope) -> DirectGainEnvelope:
    return env


def _advance_custom(env: CustomGainEnvelope) -> CustomGainEnvelope:
    counter = env.counter + 1
    if counter != env.samples:
        return env._replace(counter=counter)

    level = env.level
    if env.mode == GainMode.LINEAR_DECREASE:
        level -= LINEAR_STEP
    elif env.mode == GainMode.EXPONENTIAL_DECREASE:
        level -= ((level - 1) >> 8) + 1
    elif env.mode == GainMode.LINEAR_INCREASE:
        level += LINEAR_STEP
    elif level < BENT_KNEE:
        level += LINEAR_STEP
    else:
        level += BENT_STEP
    return env._replace(level=clamp(level), counter=0)


_ADVANCE = {
    AdsrEnvelope: _advance_adsr,
    DirectGainEnvelope: _advance_direct,
    CustomGainEnvelope: _advance_custom,
}


def advance(envelope: Envelope) -> Envelope:
    """Return the envelope for the next output sample.

    Parameters
    ----------
    envelope : Envelope
        Current envelope; left unchanged.

    Returns
    -------
    Envelope
        Envelope of the same kind after one sample.

    """
    try:
        step = _ADVANCE[type(envelope)]
    except KeyError:
        raise TypeError(f'Not an envelope: {envelope!r}') from None
    return step(envelope)


def create_envelope(adsr: Optional[int] = None,
                    gain: Optional[int] = None) -> Envelope:
    """Select the envelope for the configured registers.

    ADSR takes precedence over GAIN. Without either, the sample plays at
    full volume.

    Raises
    ------
    InvalidArgument
        A register value does not fit its width.

    """
    if adsr is not None:
        if not 0 <= adsr <= 0xFFFF:
            raise InvalidArgument(adsr, 'ADSR')
        return AdsrEnvelope.from_registers(adsr)
    if gain is not None:
        if not 0 <= gain <= 0xFF:
            raise InvalidArgument(gain, 'GAIN')
        if gain & 0x80 == 0:
            return DirectGainEnvelope.from_register(gain)
        return CustomGainEnvelope.from_register(gain)
    return DirectGainEnvelope(UNATTENUATED_LEVEL)


def describe(envelope: Envelope) -> str:
    """Short human-readable envelope state for logging."""
    if isinstance(envelope, AdsrEnvelope):
        return f'ADSR {envelope.phase.name} level=0x{envelope.level:03X}'
    if isinstance(envelope, CustomGainEnvelope):
        return f'GAIN {envelope.mode.name} rate={envelope.rate} ' \
               f'level=0x{envelope.level:03X}'
    return f'GAIN DIRECT level=0x{envelope.level:03X}'
