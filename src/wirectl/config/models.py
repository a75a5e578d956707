"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, wirectl.toml only contains
overrides. A workspace with no config file at all runs on these values.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, Field

ImageFormat = Literal["svg", "png", "pdf"]


def _file_path(value: str) -> str:
    value = value.strip()
    if not value or value.endswith(("/", "\\")):
        msg = f"expected a file path, got {value!r}"
        raise ValueError(msg)
    return value


# Relative paths resolve against the workspace root.
FilePath = Annotated[str, AfterValidator(_file_path)]


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True, "extra": "forbid"}

    data_file: FilePath = "links_data.xml"


class ExportConfig(BaseModel):
    """[export] section."""

    model_config = {"frozen": True, "extra": "forbid"}

    dot_file: FilePath = "graph.dot"
    image_file: FilePath = "graph.svg"
    image_format: ImageFormat = "svg"
    rankdir: Literal["LR", "RL", "TB", "BT"] = "LR"
    font: str = "Arial"


class RendererConfig(BaseModel):
    """[renderer] section."""

    model_config = {"frozen": True, "extra": "forbid"}

    enabled: bool = True
    command: str = "dot"
    timeout: float = Field(default=30, gt=0)
