"""Tests for the startup asset check."""
import logging

from listcarousel import config


def test_missing_images_dir_warns(tmp_path, monkeypatch, caplog):
    missing = tmp_path / "images"
    monkeypatch.setattr(config, "IMAGES_PATH", str(missing))

    with caplog.at_level(logging.WARNING, logger="listcarousel.config"):
        assert config.check_assets() is False

    assert str(missing) in caplog.text


def test_present_images_dir_is_silent(tmp_path, monkeypatch, caplog):
    monkeypatch.setattr(config, "IMAGES_PATH", str(tmp_path))

    with caplog.at_level(logging.WARNING, logger="listcarousel.config"):
        assert config.check_assets() is True

    assert caplog.records == []
