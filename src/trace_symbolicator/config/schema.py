"""Pydantic models for configuration schema."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.entry_module import DEFAULT_IGNORED_MODULES
from ..core.method_resolver import DEFAULT_TYPE_CACHE_SIZE
from ..core.trace_assembler import DEFAULT_SKIP_FRAMES, SELF_FRAME_COUNT


class CaptureConfig(BaseModel):
    """Trace capture configuration."""

    self_frame_count: int = Field(
        SELF_FRAME_COUNT,
        ge=0,
        description="Leading frames produced by the host capture primitive itself",
    )
    skip_frames: int = Field(DEFAULT_SKIP_FRAMES, ge=0)


class ResolverConfig(BaseModel):
    """Method resolver configuration."""

    type_cache_size: int = Field(DEFAULT_TYPE_CACHE_SIZE, ge=1)


class EntryModuleConfig(BaseModel):
    """Entry module identification configuration."""

    module: str | None = Field(None, description="Entry module reported by the host")
    ignored_modules: list[str] = list(DEFAULT_IGNORED_MODULES)

    @field_validator("ignored_modules")
    @classmethod
    def validate_ignored_modules(cls, v: list[str]) -> list[str]:
        """Reject blank module names."""
        for name in v:
            if not name.strip():
                raise ValueError("Ignored module names must not be blank")
        return v


class FileLoggingConfig(BaseModel):
    """File logging configuration."""

    enabled: bool = False
    path: Path = Path("trace-symbolicator.log")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "console"
    file: FileLoggingConfig = FileLoggingConfig()


class SymbolicatorConfig(BaseSettings):
    """Root configuration for the trace symbolicator."""

    capture: CaptureConfig = CaptureConfig()
    resolver: ResolverConfig = ResolverConfig()
    entry_module: EntryModuleConfig = EntryModuleConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        env_prefix="TRACE_SYMBOLICATOR_",
    )
