from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures.


class StorageConfig(BaseModel):
    # Storage backend selection; file storage keeps the counter between runs.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["memory", "file"] = "memory"
    path: str | None = None
    key: str = Field(default="number", min_length=1)

    @model_validator(mode="after")
    def _require_path(self) -> StorageConfig:
        # For file kind, a path is required to avoid silent defaults.
        if self.kind == "file" and not self.path:
            raise ValueError("storage.path is required when kind is 'file'")
        return self


class LoggingConfig(BaseModel):
    # Structured log sink selector: only one sink is active at a time.
    model_config = ConfigDict(extra="forbid")
    sink: Literal["none", "stdout", "jsonl"] = "none"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: int
    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def default(cls) -> AppConfig:
        return cls(version=1)
