"""Configuration management for autotyper."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import Field, ValidationError
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .errors import ConfigurationError

CONFIG_FILE_NAME = ".autotyper.yaml"
CONFIG_ENV_VAR = "AUTOTYPER_CONFIG"

# Short keys accepted in the config file for the prompt fields.
_KEY_ALIASES = {
    "username": "prompt_username",
    "hostname": "prompt_hostname",
    "path": "prompt_path",
}


def resolve_config_path(config_file: Optional[Path] = None) -> tuple[Path, bool]:
    """Return the config file to read and whether it was asked for explicitly."""
    if config_file is not None:
        return config_file.expanduser(), True
    from_env = os.getenv(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser(), True
    return Path.home() / CONFIG_FILE_NAME, False


def _normalize_key(key: str) -> str:
    normalized = str(key).strip().lower().replace("-", "_")
    return _KEY_ALIASES.get(normalized, normalized)


def read_config_file(path: Path, *, required: bool = False) -> dict[str, Any]:
    """Read a YAML config file into a dict keyed by settings field names."""
    if not path.is_file():
        if required:
            raise ConfigurationError(f"config file not found: {path}")
        return {}
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"cannot read config file {path}: {exc!s}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigurationError(f"config file {path} must contain a mapping")
    return {_normalize_key(key): value for key, value in payload.items()}


class YamlConfigFileSource(PydanticBaseSettingsSource):
    """Settings source backed by the YAML config file."""

    def __init__(self, settings_cls: type[BaseSettings], config_file: Optional[Path]) -> None:
        super().__init__(settings_cls)
        self.path, self.required = resolve_config_path(config_file)
        self._values: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._values is None:
            self._values = read_config_file(self.path, required=self.required)
        return self._values

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        return self._load().get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        fields = self.settings_cls.model_fields
        return {key: value for key, value in self._load().items() if key in fields and key != "config_file"}


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_prefix="AUTOTYPER_", case_sensitive=False, extra="ignore")

    config_file: Optional[Path] = Field(default=None, description="Config file, default ~/.autotyper.yaml")
    input_file: Optional[Path] = Field(default=None, description="File to read the commands from")

    # Timing, all in milliseconds
    char_delay: int = Field(default=75, ge=0, description="Delay between each character")
    pre_delay: int = Field(default=500, ge=0, description="Delay before typing each command")
    post_delay: int = Field(default=3500, ge=0, description="Delay after each command")

    # Prompt
    shell: str = Field(default="ps", description="Shell prompt to simulate: bash, cmd or ps")
    prompt_username: str = Field(default="bitcanon", description="Username printed in the bash prompt")
    prompt_hostname: str = Field(default="code", description="Hostname printed in the bash prompt")
    prompt_path: str = Field(default="", description="Path printed in the prompt, empty for the shell default")

    no_cls: bool = Field(default=False, description="Do not clear the screen between commands")

    log_level: str = Field(default="WARNING", description="Log level")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        init_kwargs = getattr(init_settings, "init_kwargs", {})
        return (init_settings, env_settings, YamlConfigFileSource(settings_cls, init_kwargs.get("config_file")))


def get_settings(config_file: Optional[Path] = None, **overrides: Any) -> Settings:
    """Get application settings.

    Args:
        config_file: Optional config file overriding ~/.autotyper.yaml
        overrides: Values given explicitly on the command line; None is ignored

    Returns:
        Settings instance
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return Settings(config_file=config_file, **values)
    except ValidationError as exc:
        errors = "; ".join(f"{'.'.join(map(str, error['loc']))}: {error['msg']}" for error in exc.errors())
        raise ConfigurationError(f"invalid settings: {errors}") from exc
