"""WireSettings — everything one wirectl invocation is configured by.

Layers, highest priority first:

1. CLI flags passed by the root group
2. ``WIRECTL_*`` environment variables (``__`` reaches into a section,
   e.g. ``WIRECTL_STORAGE__DATA_FILE``)
3. ``wirectl.toml``
4. defaults baked into :mod:`wirectl.config.models`

Layers merge per key, so a TOML file that sets ``[export] font`` and an
env var that sets ``export.rankdir`` both take effect.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import (
    BaseSettings,
    EnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from wirectl.config.discovery import ConfigError, locate_config, read_config
from wirectl.config.models import ExportConfig, RendererConfig, StorageConfig

# Derived by from_cli, never read from a config layer.
_RESOLVED_FIELDS = ("workspace_root", "config_path")


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class WireSettings(BaseSettings):
    """Settings for one wirectl invocation.

    Attributes:
        workspace_root: Directory relative file paths resolve against
            (parent of ``wirectl.toml``, or CWD if no config found).
        config_path: The TOML file in use, or None.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="WIRECTL_",
        env_nested_delimiter="__",
    )

    workspace_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    storage: StorageConfig = Field(default_factory=StorageConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    renderer: RendererConfig = Field(default_factory=RendererConfig)

    @model_validator(mode="after")
    def _exports_keep_off_data_file(self) -> WireSettings:
        data_file = Path(self.storage.data_file)
        for key, value in (
            ("export.dot_file", self.export.dot_file),
            ("export.image_file", self.export.image_file),
        ):
            if Path(value) == data_file:
                msg = f"{key} would overwrite storage.data_file ({value})"
                raise ValueError(msg)
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Flags and environment only; :meth:`from_cli` folds in the TOML layer."""
        return init_settings, env_settings

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        workspace_root: Path | None = None,
        **cli_flags: Any,
    ) -> WireSettings:
        """Build settings for a CLI invocation.

        The workspace root is *workspace_root* if given, else the directory
        of the config file in use, else the CWD.

        Raises:
            ConfigError: if the config file is missing, unreadable, or
                holds values that do not validate.
        """
        toml_path = locate_config(config_path, start=workspace_root)
        values = _merge(read_config(toml_path), EnvSettingsSource(cls)())
        values = _merge(values, cli_flags)
        for key in _RESOLVED_FIELDS:
            values.pop(key, None)

        if workspace_root is None:
            workspace_root = toml_path.parent if toml_path else Path.cwd()
        try:
            return cls(workspace_root=workspace_root, config_path=toml_path, **values)
        except ValidationError as exc:
            source = toml_path or "settings"
            msg = f"Invalid config {source}: {exc}"
            raise ConfigError(msg) from exc
