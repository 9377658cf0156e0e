import pytest

from percy_playwright.utils.config import DEFAULT_SERVER_ADDRESS, PercyConfig


def test_defaults_from_empty_environment():
    config = PercyConfig.from_env({})
    assert config.server_address == DEFAULT_SERVER_ADDRESS
    assert config.log_level == "info"
    assert not config.debug
    assert config.request_timeout == 30.0


def test_environment_overrides():
    config = PercyConfig.from_env({
        "PERCY_SERVER_ADDRESS": "http://percy.local:9999",
        "PERCY_LOGLEVEL": "debug",
        "PERCY_REQUEST_TIMEOUT": "2.5",
    })
    assert config.server_address == "http://percy.local:9999"
    assert config.debug
    assert config.request_timeout == 2.5


def test_load_overlays_yaml(tmp_path, monkeypatch):
    monkeypatch.setenv("PERCY_SERVER_ADDRESS", "http://from-env:5338")
    monkeypatch.delenv("PERCY_LOGLEVEL", raising=False)
    path = tmp_path / "percy.yml"
    path.write_text("log_level: debug\nrequest_timeout: 10\n")

    config = PercyConfig.load(str(path))

    assert config.server_address == "http://from-env:5338"
    assert config.debug
    assert config.request_timeout == 10


def test_load_without_path_uses_environment(monkeypatch):
    monkeypatch.setenv("PERCY_LOGLEVEL", "debug")
    assert PercyConfig.load().debug


def test_load_rejects_unknown_keys(tmp_path):
    path = tmp_path / "percy.yml"
    path.write_text("server: http://localhost:5338\n")
    with pytest.raises(TypeError):
        PercyConfig.load(str(path))


def test_load_rejects_non_mapping(tmp_path):
    path = tmp_path / "percy.yml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        PercyConfig.load(str(path))
