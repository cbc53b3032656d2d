"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from territory.config import BatchConfig, SimulationConfig


def test_defaults():
    config = SimulationConfig()
    assert config.level == 1
    assert (config.cols, config.rows) == (10, 8)
    assert config.seed is None
    assert config.jitter is True
    assert config.idle_wander is False


@pytest.mark.parametrize(
    "level,expected", [(0, 1), (-50, 1), (1, 1), (57, 57), (100, 100), (101, 100)]
)
def test_level_clamped(level, expected):
    assert SimulationConfig(level=level).level == expected


@pytest.mark.parametrize("cols,rows", [(0, 1), (1, 0), (-1, -1)])
def test_dimensions_must_be_positive(cols, rows):
    with pytest.raises(ValidationError):
        SimulationConfig(cols=cols, rows=rows)


def test_batch_defaults():
    config = BatchConfig(level=200)
    assert config.level == 100
    assert config.runs == 10
    assert config.workers == 1


def test_batch_limits():
    with pytest.raises(ValidationError):
        BatchConfig(runs=10_001)
    with pytest.raises(ValidationError):
        BatchConfig(workers=65)
