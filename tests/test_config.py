"""Tests for environment-driven configuration."""

import logging

import config
from game.bootstrap import build_suspect_index


def test_bucket_count_default(monkeypatch):
    monkeypatch.delenv("DQ_BUCKET_COUNT", raising=False)
    assert config.get_bucket_count() == 101


def test_bucket_count_override(monkeypatch):
    monkeypatch.setenv("DQ_BUCKET_COUNT", "53")
    assert config.get_bucket_count() == 53
    idx = build_suspect_index()
    assert idx.bucket_count == 53
    assert idx.lookup("Faca molhada na pia.") == "Cozinheiro"


def test_bucket_count_invalid_falls_back(monkeypatch):
    monkeypatch.setenv("DQ_BUCKET_COUNT", "zero")
    assert config.get_bucket_count() == 101
    monkeypatch.setenv("DQ_BUCKET_COUNT", "0")
    assert config.get_bucket_count() == 101


def test_log_level(monkeypatch):
    monkeypatch.setenv("DQ_LOG_LEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG
    monkeypatch.setenv("DQ_LOG_LEVEL", "chatty")
    assert config.get_log_level() == logging.WARNING
    monkeypatch.delenv("DQ_LOG_LEVEL")
    assert config.get_log_level() == logging.WARNING


def test_text_width(monkeypatch):
    monkeypatch.setenv("DQ_TEXT_WIDTH", "5")
    assert config.get_text_width() == 78
    monkeypatch.setenv("DQ_TEXT_WIDTH", "40")
    assert config.get_text_width() == 40
