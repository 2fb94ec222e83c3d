"""Configuration loading with pydantic-settings.

Sources, highest precedence first:
1. Direct kwargs (CLI flags)
2. Environment variables (ROUTECOV__SECTION__KEY)
3. Project config (<basedir>/routecov.yaml)
4. Global config (~/.config/routecov/config.yaml)
5. Built-in defaults
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from routecov.config.models import RouteCovConfig
from routecov.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/routecov/config.yaml").expanduser()
PROJECT_CONFIG_NAME = "routecov.yaml"


def config_files(basedir: Path) -> list[Path]:
    """Config file locations, lowest precedence first."""
    return [GLOBAL_CONFIG_PATH, basedir / PROJECT_CONFIG_NAME]


def read_config_file(path: Path) -> dict[str, Any]:
    """Read one YAML config file; a missing file is an empty config."""
    if not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top level must be a mapping of sections")
    return data


def merge_sections(lower: dict[str, Any], higher: dict[str, Any]) -> dict[str, Any]:
    """Recursively overlay ``higher`` on ``lower`` without mutating either."""
    merged = dict(lower)
    for key, value in higher.items():
        below = merged.get(key)
        if isinstance(below, dict) and isinstance(value, dict):
            merged[key] = merge_sections(below, value)
        else:
            merged[key] = value
    return merged


def _settings_class(file_values: dict[str, Any]) -> type[BaseSettings]:
    class RouteCovSettings(BaseSettings, RouteCovConfig):
        model_config = SettingsConfigDict(
            env_prefix="ROUTECOV__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            files = InitSettingsSource(settings_cls, init_kwargs=file_values)
            return (init_settings, env_settings, files)

    return RouteCovSettings


def _invalid_value(error: ValidationError) -> ConfigError:
    first = error.errors()[0]
    field = ".".join(str(loc) for loc in first["loc"])
    return ConfigError.invalid_value(field, first.get("input"), first["msg"])


def load_config(basedir: Path | None = None, **kwargs: Any) -> RouteCovConfig:
    """Resolve the configuration of one project.

    Args:
        basedir: Project base directory holding routecov.yaml (default: cwd).
        **kwargs: Per-section overrides, e.g. ``coverage={"fail_on_error": True}``.

    Raises:
        ConfigError: On invalid YAML syntax or validation errors.
    """
    basedir = basedir or Path.cwd()
    file_values: dict[str, Any] = {}
    for path in config_files(basedir):
        file_values = merge_sections(file_values, read_config_file(path))

    try:
        settings = _settings_class(file_values)(**kwargs)
        return RouteCovConfig.model_validate(settings.model_dump())
    except ValidationError as e:
        raise _invalid_value(e) from e
