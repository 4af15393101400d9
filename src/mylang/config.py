# Copyright 2026 MyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the ``.mylang.yaml`` configuration file."""

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mylang.report.composer import ALL_SECTIONS, ReportSection
from mylang.scanner.lexer import ScanLimits

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".mylang.yaml"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read, written, or is invalid."""


class ReportFormat(Enum):
    """Output formats of the scan report."""

    TEXT = "text"
    JSON = "json"


class ScannerSettings(BaseModel):
    """Limits applied by the scanner."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    max_identifier_length: int = Field(alias="max-identifier-length", default=31, ge=1)
    max_decimal_digits: int = Field(alias="max-decimal-digits", default=6, ge=1)

    def to_limits(self) -> ScanLimits:
        return ScanLimits(
            max_identifier_length=self.max_identifier_length,
            max_decimal_digits=self.max_decimal_digits,
        )


class ReportSettings(BaseModel):
    """What the report contains and how it is rendered."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    format: ReportFormat = ReportFormat.TEXT
    sections: list[ReportSection] = Field(default_factory=lambda: list(ALL_SECTIONS))


class MyLangConfig(BaseModel):
    """Top-level configuration model."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    scanner: ScannerSettings = Field(default_factory=ScannerSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)


def default_config() -> MyLangConfig:
    return MyLangConfig()


def load_config(path: Path) -> MyLangConfig:
    """Load and validate a configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the ``.mylang.yaml`` file.

    Returns:
        A validated MyLangConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: configuration must be a YAML mapping")

    try:
        return MyLangConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def save_config(config: MyLangConfig, path: Path) -> None:
    """Write *config* to *path* as YAML.

    Raises:
        ConfigError: If the file cannot be written.
    """
    data = config.model_dump(by_alias=True, mode="json")
    try:
        path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False), encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot write config file '{path}': {exc}") from exc
