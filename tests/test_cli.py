# -*- coding: utf-8 -*-
import logging
import wave

import pytest

import sbrr


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def write_rom(tmp_path, data):
    path = tmp_path / 'rom.sfc'
    path.write_bytes(bytes(0x10) + data)
    return str(path)


def test_out_writes_wav(tmp_path, block_bytes):
    path = write_rom(tmp_path, block_bytes(2) + block_bytes(2, end=True))
    out = str(tmp_path / 'out.wav')
    assert sbrr.main([path, '0x10', '-o', out, '-r', '22050']) == 0
    with wave.open(out, 'rb') as wav_file:
        assert wav_file.getnframes() == 32
        assert wav_file.getframerate() == 22050


def test_print(tmp_path, block_bytes, capsys):
    path = write_rom(tmp_path, block_bytes(2, end=True))
    assert sbrr.main([path, '16', '--print']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith('0: END range 0, filter 0')
    assert lines[1] == '    ' + ' 1' * 16


def test_no_action_prints_usage(tmp_path, block_bytes, capsys):
    path = write_rom(tmp_path, block_bytes(2, end=True))
    assert sbrr.main([path, '0x10']) == 0
    assert 'usage' in capsys.readouterr().out


def test_bad_offset(tmp_path, block_bytes):
    path = write_rom(tmp_path, block_bytes(2, end=True))
    assert sbrr.main([path, 'nope', '--print']) == 1


def test_truncated_sample(tmp_path, block_bytes):
    path = write_rom(tmp_path, block_bytes(2))
    assert sbrr.main([path, '0x10', '--print']) == 1
    assert sbrr.main([path, '0x10', '--print', '-e', '1']) == 0


def test_missing_file(tmp_path):
    assert sbrr.main([str(tmp_path / 'missing.sfc'), '0x10', '--print']) == 1


def test_resolve_config():
    args = sbrr.build_parser().parse_args(
        ['rom.sfc', '0x29B166', '-a', '0x8FD0', '-l', '177', '-g', '0x7F'])
    config = sbrr.resolve_config(args)
    assert config.offset == 0x29B166
    assert config.adsr == 0x8FD0
    assert config.gain == 0x7F
    assert config.loop_block == 177
    assert config.end_block is None
    assert config.sample_rate == 32000


def test_quiet_without_verbose(tmp_path, block_bytes, caplog):
    path = write_rom(tmp_path, block_bytes(2) + block_bytes(2, end=True))
    assert sbrr.main([path, '0x10', '--print']) == 0
    assert not [r for r in caplog.records if r.levelno == logging.DEBUG]


def test_verbose_shows_decoder_records(tmp_path, block_bytes, caplog):
    path = write_rom(tmp_path, block_bytes(2) + block_bytes(2, end=True))
    assert sbrr.main([path, '0x10', '--print', '-v']) == 0
    debug = [r for r in caplog.records if r.levelno == logging.DEBUG]
    assert {'snesbrr.brr', 'snesbrr.rom'} <= {r.name for r in debug}
