"""Settings shared by both services.

Configuration is defined with `pydantic-settings` so values are parsed and
validated once, at startup, and then held for the lifetime of the process.

Sources, highest priority first:
1. keyword arguments passed to the settings class (app factories, tests)
2. environment variables prefixed with `DEMO_` (e.g. `DEMO_MESSAGE`)
3. the `demo:` section of a mounted `application.yml` (a ConfigMap in Kubernetes)
4. field defaults

The YAML file is looked up in `DEMO_CONFIG_DIR` when set, otherwise in
`/workspace/config` (the container mount path) and then `./config`.
Reloading is not supported: restart the process to pick up new values.
"""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

CONFIG_DIR_ENV = "DEMO_CONFIG_DIR"
DEFAULT_CONFIG_DIRS = ("/workspace/config", "config")
CONFIG_FILE_NAMES = ("application.yml", "application.yaml")
CONFIG_SECTION = "demo"


class ConfigError(RuntimeError):
    """Raised when a mounted configuration file cannot be used."""


def config_dirs() -> list[Path]:
    """Return the directories searched for `application.yml`, in order."""
    override = os.getenv(CONFIG_DIR_ENV)
    if override:
        return [Path(override)]
    return [Path(d) for d in DEFAULT_CONFIG_DIRS]


def find_config_file(dirs=None) -> Path | None:
    """Return the first existing config file, or None if there is none."""
    for directory in dirs if dirs is not None else config_dirs():
        for name in CONFIG_FILE_NAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None


def load_config_section(section: str = CONFIG_SECTION, dirs=None) -> dict[str, Any]:
    """Read one top-level section of the mounted YAML config.

    Keys are normalized to snake_case so that Spring-style kebab-case keys
    (`service-url`) map onto settings fields (`service_url`).

    Args:
        section: Top-level key to read.
        dirs: Directories to search; defaults to `config_dirs()`.

    Returns:
        dict: Normalized key/value pairs. Empty if no file or no section exists.

    Raises:
        ConfigError: If the file is not valid YAML or the section is not a mapping.
    """
    path = find_config_file(dirs)
    if path is None:
        return {}

    try:
        document = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level")

    values = document.get(section) or {}
    if not isinstance(values, dict):
        raise ConfigError(f"Section '{section}' in {path} must be a mapping")

    return {str(key).replace("-", "_").lower(): value for key, value in values.items()}


class YamlSectionSource(PydanticBaseSettingsSource):
    """Settings source backed by the `demo:` section of `application.yml`."""

    def __init__(self, settings_cls: type[BaseSettings]):
        super().__init__(settings_cls)
        self._values = load_config_section()

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        return self._values.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return {
            name: value
            for name, value in self._values.items()
            if name in self.settings_cls.model_fields
        }


class ServerSettings(BaseSettings):
    """Process-level settings common to both services."""

    model_config = SettingsConfigDict(
        env_prefix="DEMO_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"
    # Seconds uvicorn waits for in-flight requests after SIGTERM.
    shutdown_grace_period: int = 30

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings, YamlSectionSource(settings_cls))
