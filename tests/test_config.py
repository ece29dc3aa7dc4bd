"""Tests for settings and identifier generation."""

import logging
import uuid

import pytest

from uikit_blocks import BlockBuilder, InvalidSettingsError, make_id_generator, setup_logging
from uikit_blocks.config import get_settings
from uikit_blocks.ids import uuid1_generator, uuid4_generator


def test_default_settings(monkeypatch):
    monkeypatch.delenv("UIKIT_ID_VERSION", raising=False)
    settings = get_settings()
    assert settings.id_version == 1
    assert settings.log_level == "INFO"


def test_id_version_from_environment(monkeypatch):
    monkeypatch.setenv("UIKIT_ID_VERSION", "4")
    assert make_id_generator() is uuid4_generator


def test_builder_uses_configured_generator(monkeypatch):
    monkeypatch.setenv("UIKIT_ID_VERSION", "4")
    builder = BlockBuilder("app-1").add_divider_block()
    assert uuid.UUID(builder.get_blocks()[0].block_id).version == 4


def test_uuid1_generator():
    assert uuid.UUID(uuid1_generator()).version == 1


def test_unsupported_version():
    with pytest.raises(InvalidSettingsError):
        make_id_generator(3)


def test_injected_generator_wins(monkeypatch):
    monkeypatch.setenv("UIKIT_ID_VERSION", "4")
    builder = BlockBuilder("app-1", id_generator=lambda: "fixed").add_divider_block()
    assert builder.get_blocks()[0].block_id == "fixed"


def test_builder_logs_appends(builder, caplog):
    with caplog.at_level(logging.DEBUG, logger="uikit_blocks.builder"):
        builder.add_divider_block()
    assert "Added divider block id-1 for app app-1" in caplog.text


def test_setup_logging_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    setup_logging("warning")
    assert calls[0]["level"] == logging.WARNING
    assert len(calls[0]["handlers"]) == 1
