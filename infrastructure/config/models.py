"""Configuration models (Pydantic classes)."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from domain.catalog import AdapterSettings
from infrastructure.constants import DATA_DIR, DATA_FILE, OUTPUT_DIR

_LEVEL_NAMES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Console/file log levels and optional log file."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path | None = None

    @field_validator("console_level", "file_level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        v = str(value).strip().upper()
        if v not in _LEVEL_NAMES:
            raise ValueError(f"Log level must be one of {_LEVEL_NAMES}, got {value!r}")
        return v

    @property
    def console_level_no(self) -> int:
        return getattr(logging, self.console_level)

    @property
    def file_level_no(self) -> int:
        return getattr(logging, self.file_level)


class ExplorerConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from explorer.yaml
    - Data file may be overridden from the environment by the loader
    - Consumed by the CLI and CatalogSession
    """

    data_dir: Path = Field(default_factory=lambda: DATA_DIR, description="Directory holding the verbs document.")
    data_file: Path = Field(
        default_factory=lambda: DATA_FILE,
        description="Verbs document (.json/.yaml), relative to data_dir unless absolute.",
    )
    output_dir: Path = Field(default_factory=lambda: OUTPUT_DIR, description="Where reports are written.")

    catalog: AdapterSettings = Field(default_factory=AdapterSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def data_path(self) -> Path:
        return self.data_dir / self.data_file

    @model_validator(mode="after")
    def _validate(self) -> "ExplorerConfig":
        if not str(self.data_file).strip() or str(self.data_file) == ".":
            raise ValueError("data_file is required in explorer.yaml")
        return self
