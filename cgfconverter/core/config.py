"""Configuration models for cgfconverter using Pydantic."""

from enum import Enum, IntEnum
from pathlib import Path
from typing import Literal, Optional

import tomli
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cgfconverter.core.exceptions import ConfigurationError


class ExitCode(IntEnum):
    """Process exit codes returned by argument parsing."""

    SUCCESS = 0
    FAILURE = 1


class OutputFormat(str, Enum):
    """Output formats the export pipeline can produce."""

    CRYTEK = "crytek"
    WAVEFRONT = "wavefront"
    BLENDER = "blender"
    COLLADA = "collada"
    FBX = "fbx"

    @property
    def label(self) -> str:
        """Human readable format name."""
        return _FORMAT_LABELS[self][0]

    @property
    def extensions(self) -> str:
        """File extensions written for this format."""
        return _FORMAT_LABELS[self][1]

    @property
    def field_name(self) -> str:
        """Name of the matching toggle on Configuration."""
        return f"output_{self.value}"


_FORMAT_LABELS = {
    OutputFormat.CRYTEK: ("CryTek", ".cga/.cgf/.chr/.skin"),
    OutputFormat.WAVEFRONT: ("Wavefront", ".obj"),
    OutputFormat.BLENDER: ("Blender", ".blend"),
    OutputFormat.COLLADA: ("COLLADA", ".dae"),
    OutputFormat.FBX: ("FBX", ".fbx"),
}


class Configuration(BaseModel):
    """Resolved command-line configuration handed to the export pipeline."""

    model_config = ConfigDict(frozen=True)

    input_files: tuple[Path, ...] = Field(
        default=(), description="Absolute paths of the files to convert"
    )
    data_dir: Optional[Path] = Field(
        None, description="Directory used to locate companion material files"
    )
    output_dir: Optional[Path] = Field(
        None, description="Absolute directory for converted output"
    )

    allow_conflicts: bool = Field(False, description="Allow naming conflicts for mtl files")
    no_conflicts: bool = Field(False, description="Append _out to output names")
    group_meshes: bool = Field(False, description="Group all meshes into one model")
    smooth: bool = Field(False, description="Smooth faces")
    tiff_textures: bool = Field(False, description="Use TIFF texture paths instead of DDS")
    skip_shield_nodes: bool = Field(False, description="Skip nodes containing $shield")
    skip_proxy_nodes: bool = Field(False, description="Skip nodes containing $proxy")
    throw: bool = Field(False, description="Pass exceptions to an attached debugger")
    verbose: bool = Field(False, description="Verbose diagnostics")

    output_crytek: bool = Field(False, description="Render CryTek format files")
    output_wavefront: bool = Field(False, description="Render Wavefront format files")
    output_blender: bool = Field(False, description="Render Blender format files")
    output_collada: bool = Field(False, description="Render COLLADA format files")
    output_fbx: bool = Field(False, description="Render FBX format files")

    @property
    def output_formats(self) -> tuple[OutputFormat, ...]:
        """Enabled output formats, in declaration order."""
        return tuple(fmt for fmt in OutputFormat if getattr(self, fmt.field_name))


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    model_config = ConfigDict(frozen=True)

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "WARNING", description="Logging level"
    )
    format: Literal["json", "console", "plain"] = Field(
        "console", description="Log format"
    )
    colorize: bool = Field(True, description="Colorize console output when on a TTY")
    add_caller_info: bool = Field(False, description="Add file, line and function")
    timestamp_format: str = Field("iso", description="structlog TimeStamper format")
    log_file: Optional[Path] = Field(None, description="Optional JSON log file")


class Settings(BaseModel):
    """Application settings read from an optional TOML file."""

    model_config = ConfigDict(frozen=True)

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @classmethod
    def from_toml(cls, path: Path | str) -> "Settings":
        """Load settings from TOML file.

        Args:
            path: Path to TOML settings file

        Returns:
            Settings instance

        Raises:
            FileNotFoundError: If settings file doesn't exist
            ConfigurationError: If TOML or any value is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        with open(path, "rb") as f:
            try:
                data = tomli.load(f)
            except tomli.TOMLDecodeError as e:
                raise ConfigurationError(
                    f"Invalid TOML in '{path}': {e}", details={"path": str(path)}
                ) from e

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid settings in '{path}'",
                details={"path": str(path), "errors": e.errors()},
            ) from e

    def with_verbose(self) -> "Settings":
        """Return a copy with DEBUG logging enabled."""
        return self.model_copy(
            update={"logging": self.logging.model_copy(update={"level": "DEBUG"})}
        )


def get_default_settings() -> Settings:
    """Get default settings.

    Returns:
        Default Settings instance
    """
    return Settings()


def load_settings(path: Optional[Path | str] = None) -> Settings:
    """Load settings from file or return defaults.

    Args:
        path: Optional path to settings file

    Returns:
        Settings instance
    """
    if path:
        return Settings.from_toml(path)
    return get_default_settings()
