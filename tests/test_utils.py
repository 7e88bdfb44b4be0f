"""Tests for configuration, timing and memory helpers."""

import logging

import numpy as np
import pytest

from segsieve import nth_prime
from segsieve.errors import InvalidArgumentError
from segsieve.utils import (
    DEFAULT_SEGMENT_SIZE,
    TimingCollector,
    get_config,
    get_config_file,
    get_segment_size,
    validate_segment_size,
    memory_usage_mb,
)


def test_missing_config_gives_defaults():
    assert get_config() == {}
    assert get_segment_size() == DEFAULT_SEGMENT_SIZE


def test_config_file_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv('SEGSIEVE_CONFIG', str(tmp_path / 'other.toml'))
    assert get_config_file() == tmp_path / 'other.toml'
    monkeypatch.delenv('SEGSIEVE_CONFIG')
    assert str(get_config_file()) == 'pixi.toml'


def test_reads_tool_table(tmp_path, monkeypatch):
    config_file = tmp_path / 'pixi.toml'
    config_file.write_text('[workspace]\nname = "x"\n\n[tool.segsieve]\nsegment_size = 500\nshow_progress = true\n')
    monkeypatch.setenv('SEGSIEVE_CONFIG', str(config_file))
    assert get_config() == {'segment_size': 500, 'show_progress': True}
    assert get_segment_size() == 500


def test_malformed_config_warns(tmp_path, monkeypatch, caplog):
    config_file = tmp_path / 'pixi.toml'
    config_file.write_text("[tool.segsieve\nsegment_size = ")
    monkeypatch.setenv('SEGSIEVE_CONFIG', str(config_file))
    with caplog.at_level(logging.WARNING):
        assert get_config() == {}
    assert any('Could not parse' in r.getMessage() for r in caplog.records)


def test_segment_size_env_override(monkeypatch):
    monkeypatch.setenv('SEGSIEVE_SEGMENT_SIZE', '4096')
    assert get_segment_size({'segment_size': 10}) == 4096


@pytest.mark.parametrize("value", ['abc', '0', '-1'])
def test_bad_segment_size_env(monkeypatch, value):
    monkeypatch.setenv('SEGSIEVE_SEGMENT_SIZE', value)
    with pytest.raises(InvalidArgumentError):
        get_segment_size()


def test_bad_segment_size_config():
    with pytest.raises(InvalidArgumentError):
        get_segment_size({'segment_size': 'large'})


def test_timing_collector_stats():
    timer = TimingCollector()
    for _ in range(3):
        with timer.time_operation('segment'):
            pass
    with timer.time_operation('base_primes'):
        pass

    stats = timer.get_stats()
    assert list(stats) == ['segment', 'base_primes']
    assert stats['segment']['count'] == 3
    assert stats['segment']['min_ms'] >= 0


def test_empty_timing_summary(capsys):
    timer = TimingCollector()
    assert timer.get_stats() == {}
    timer.print_summary()
    assert 'No timing data collected' in capsys.readouterr().out


def test_memory_usage():
    assert memory_usage_mb() > 0


def test_missing_config_is_quiet(caplog):
    """Library calls without a config file log nothing at WARNING."""
    with caplog.at_level(logging.WARNING):
        for k in range(3):
            nth_prime(k)
    assert not caplog.records


def test_numpy_segment_size():
    size = validate_segment_size(np.int64(100))
    assert size == 100
    assert type(size) is int
    with pytest.raises(InvalidArgumentError):
        validate_segment_size(np.int64(0))


def test_timing_record():
    timer = TimingCollector()
    timer.record('segment', 0.5)
    assert timer.timings == [{'operation': 'segment', 'duration_ms': 500.0}]
