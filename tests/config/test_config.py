"""Tests for package settings."""

import pytest

from transitloom import config
from transitloom.config import SamplingSettings, ephemeris_path


def test_sampling_defaults():
    settings = SamplingSettings()
    assert settings.count == 200
    assert settings.safety_factor == 1.4
    assert settings.clamped() == settings


def test_sampling_minimums():
    settings = SamplingSettings(count=5, safety_factor=0.5).clamped()
    assert settings.count == 100
    assert settings.safety_factor == 1.1


def test_sampling_settings_are_frozen():
    with pytest.raises(AttributeError):
        SamplingSettings().count = 5


def test_sampling_from_environment(monkeypatch):
    monkeypatch.setenv("TRANSITLOOM_PRECALC_COUNT", "1000")
    monkeypatch.setenv("TRANSITLOOM_PRECALC_SAFETY_FACTOR", "1.05")
    assert config._sampling_from_env() == SamplingSettings(count=1000, safety_factor=1.1)


def test_sampling_without_environment(monkeypatch):
    monkeypatch.delenv("TRANSITLOOM_PRECALC_COUNT", raising=False)
    monkeypatch.delenv("TRANSITLOOM_PRECALC_SAFETY_FACTOR", raising=False)
    assert config._sampling_from_env() == SamplingSettings()


def test_ephemeris_path(monkeypatch):
    monkeypatch.delenv("SE_EPHE_PATH", raising=False)
    monkeypatch.delenv("SWE_EPH_PATH", raising=False)
    assert ephemeris_path() is None

    monkeypatch.setenv("SWE_EPH_PATH", "/data/ephe2")
    assert ephemeris_path() == "/data/ephe2"

    monkeypatch.setenv("SE_EPHE_PATH", "/data/ephe")
    assert ephemeris_path() == "/data/ephe"
