# -*- coding: utf-8 -*-
import pytest

from snesbrr.config import (SAMPLES_PER_TICK, PlaybackConfig, parse_number)
from snesbrr.exceptions import ConfigurationError, InvalidArgument


@pytest.mark.parametrize('text, value', [
    ('42', 42), ('0x2E2F84', 0x2E2F84), ('0X1f', 31), (' 7 ', 7),
])
def test_parse_number(text, value):
    assert parse_number(text, 'OFFSET') == value


@pytest.mark.parametrize('text', ['', 'abc', '0x', '1.5', '0xZZ'])
def test_parse_number_invalid(text):
    with pytest.raises(InvalidArgument) as info:
        parse_number(text, 'OFFSET')
    assert 'OFFSET' in str(info.value)
    assert isinstance(info.value, ConfigurationError)


def test_defaults():
    config = PlaybackConfig()
    assert config.sample_rate == 32000
    assert config.adsr is None and config.gain is None
    assert config.validate() is config


@pytest.mark.parametrize('kwargs', [
    {'offset': -1}, {'adsr': 0x10000}, {'gain': 0x100}, {'end_block': -1},
    {'loop_block': -2}, {'sample_rate': 0},
])
def test_validate_rejects(kwargs):
    with pytest.raises(InvalidArgument):
        PlaybackConfig(**kwargs).validate()


def test_rate_table_shape():
    assert len(SAMPLES_PER_TICK) == 32
    assert SAMPLES_PER_TICK[-1] == 1
    assert list(SAMPLES_PER_TICK[1:]) == sorted(SAMPLES_PER_TICK[1:], reverse=True)
