"""Tests for `demo_common.settings`."""

import pytest
from pydantic import ValidationError

from demo_common.settings import ConfigError, ServerSettings, load_config_section


class ExampleSettings(ServerSettings):
    message: str = ""
    service_url: str = "http://localhost:8080"


def test_defaults() -> None:
    settings = ExampleSettings()
    assert settings.host == "0.0.0.0"
    assert settings.port == 8080
    assert settings.log_format == "text"
    assert settings.message == ""


def test_env_prefix(monkeypatch) -> None:
    monkeypatch.setenv("DEMO_MESSAGE", "from env")
    monkeypatch.setenv("DEMO_PORT", "9000")
    settings = ExampleSettings()
    assert settings.message == "from env"
    assert settings.port == 9000


def test_yaml_section_is_read(config_dir) -> None:
    (config_dir / "application.yml").write_text(
        "demo:\n  message: from yaml\n  service-url: http://demo-service\n"
    )
    settings = ExampleSettings()
    assert settings.message == "from yaml"
    assert settings.service_url == "http://demo-service"


def test_yaml_extension_variant(config_dir) -> None:
    (config_dir / "application.yaml").write_text("demo:\n  message: yaml ext\n")
    assert ExampleSettings().message == "yaml ext"


def test_env_beats_yaml(monkeypatch, config_dir) -> None:
    (config_dir / "application.yml").write_text("demo:\n  message: from yaml\n")
    monkeypatch.setenv("DEMO_MESSAGE", "from env")
    assert ExampleSettings().message == "from env"


def test_init_beats_env(monkeypatch) -> None:
    monkeypatch.setenv("DEMO_MESSAGE", "from env")
    assert ExampleSettings(message="explicit").message == "explicit"


def test_unknown_yaml_keys_are_ignored(config_dir) -> None:
    (config_dir / "application.yml").write_text(
        "demo:\n  message: hi\n  colour: blue\nother:\n  message: nope\n"
    )
    assert ExampleSettings().message == "hi"


def test_missing_file_gives_empty_section(config_dir) -> None:
    assert load_config_section() == {}


def test_empty_file_gives_empty_section(config_dir) -> None:
    (config_dir / "application.yml").write_text("")
    assert load_config_section() == {}


def test_non_mapping_file_raises(config_dir) -> None:
    (config_dir / "application.yml").write_text("- just\n- a list\n")
    with pytest.raises(ConfigError):
        load_config_section()


def test_non_mapping_section_raises(config_dir) -> None:
    (config_dir / "application.yml").write_text("demo: hello\n")
    with pytest.raises(ConfigError):
        load_config_section()


def test_invalid_yaml_raises(config_dir) -> None:
    (config_dir / "application.yml").write_text("demo: [unclosed\n")
    with pytest.raises(ConfigError):
        load_config_section()


def test_settings_are_frozen() -> None:
    settings = ExampleSettings(message="fixed")
    with pytest.raises(ValidationError):
        settings.message = "changed"


def test_invalid_log_format_rejected() -> None:
    with pytest.raises(ValidationError):
        ExampleSettings(log_format="xml")
