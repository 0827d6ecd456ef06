"""Application configuration: section class options, settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError


CONFIG_FILE = "config.yaml"


class SectionConfig(BaseModel):
    """Immutable class-token options applied to every rendered <section>."""
    model_config = ConfigDict(frozen=True)

    section_class:       bool = Field(default=True,  description="Add section-h{level}")
    heading_class:       bool = Field(default=False, description="Add h{level}")
    custom_class_prefix: str  = Field(default="",    description="Add {prefix}h{level} when non-empty")
    custom_class:        str  = Field(default="",    description="Add this literal class when non-empty")


class Settings(BaseModel):
    section_class:       bool = Field(default=True,  description="Add section-h{level} to sections")
    heading_class:       bool = Field(default=False, description="Add h{level} to sections")
    custom_class_prefix: str  = Field(default="",    description="Prefix for an extra {prefix}h{level} class")
    custom_class:        str  = Field(default="",    description="Literal class added to every section")
    parser_config:       str  = Field(default="gfm-like", description="MarkdownIt parser preset name")
    output_dir:          str  = Field(default="dist",     description="Directory for rendered HTML files")
    log_level:           str  = Field(default="WARNING",
                                      pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
                                      description="Logging level name")

    def section_config(self) -> SectionConfig:
        """Build the immutable class options used by the grouper and renderer."""
        return SectionConfig(
            section_class=self.section_class,
            heading_class=self.heading_class,
            custom_class_prefix=self.custom_class_prefix,
            custom_class=self.custom_class,
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDSECTION_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDSECTION_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e
