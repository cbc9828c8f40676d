"""Command-line token scanning for cgfconverter.

Tokens are read once, left to right. Flags are matched case-insensitively
against :data:`FLAGS`; anything else is an input file or file filter.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, NamedTuple, Optional, Sequence

from rich.console import Console

from cgfconverter.core.config import Configuration, ExitCode, OutputFormat
from cgfconverter.core.usage import print_usage
from cgfconverter.processing.file_filter import DirectoryListing, expand_filter
from cgfconverter.utils.logging import StructuredLogger, get_logger

logger = get_logger(__name__)


class FlagKind(Enum):
    """How a flag is handled by the scanner."""

    VALUE = "value"  # consumes the next token
    TOGGLE = "toggle"
    USAGE = "usage"  # prints usage and stops


@dataclass(frozen=True)
class FlagSpec:
    """Action bound to one or more flag names."""

    kind: FlagKind
    field: Optional[str] = None
    message: Optional[str] = None


def _format_message(fmt: OutputFormat) -> str:
    return f"Output format set to {fmt.label} ({fmt.extensions})"


_DATA_DIR = FlagSpec(FlagKind.VALUE, "data_dir", "Data directory set to {value}")
_OUTPUT_DIR = FlagSpec(FlagKind.VALUE, "output_dir", "Output directory set to {value}")
_INPUT_FILE = FlagSpec(FlagKind.VALUE, "input_files", "Input file set to {value}")
_BLENDER = FlagSpec(FlagKind.TOGGLE, "output_blender", _format_message(OutputFormat.BLENDER))
_WAVEFRONT = FlagSpec(FlagKind.TOGGLE, "output_wavefront", _format_message(OutputFormat.WAVEFRONT))
_COLLADA = FlagSpec(FlagKind.TOGGLE, "output_collada", _format_message(OutputFormat.COLLADA))
_CRYTEK = FlagSpec(FlagKind.TOGGLE, "output_crytek", _format_message(OutputFormat.CRYTEK))
_TIFF = FlagSpec(FlagKind.TOGGLE, "tiff_textures")
_SKIP_SHIELD = FlagSpec(FlagKind.TOGGLE, "skip_shield_nodes")
_ALLOW_CONFLICTS = FlagSpec(
    FlagKind.TOGGLE, "allow_conflicts", "Allow conflicts for mtl files enabled"
)
_NO_CONFLICTS = FlagSpec(
    FlagKind.TOGGLE, "no_conflicts", "Prevent conflicts for mtl files enabled"
)

FLAGS: dict[str, FlagSpec] = {
    "-usage": FlagSpec(FlagKind.USAGE),
    "-datadir": _DATA_DIR,
    "-objectdir": _DATA_DIR,
    "-out": _OUTPUT_DIR,
    "-outdir": _OUTPUT_DIR,
    "-outputdir": _OUTPUT_DIR,
    "-infile": _INPUT_FILE,
    "-inputfile": _INPUT_FILE,
    "-smooth": FlagSpec(FlagKind.TOGGLE, "smooth", "Smoothing Faces"),
    "-blend": _BLENDER,
    "-blender": _BLENDER,
    "-obj": _WAVEFRONT,
    "-object": _WAVEFRONT,
    "-wavefront": _WAVEFRONT,
    "-fbx": FlagSpec(FlagKind.TOGGLE, "output_fbx", _format_message(OutputFormat.FBX)),
    "-dae": _COLLADA,
    "-collada": _COLLADA,
    "-cry": _CRYTEK,
    "-crytek": _CRYTEK,
    "-tif": _TIFF,
    "-tiff": _TIFF,
    "-skipshield": _SKIP_SHIELD,
    "-skipshields": _SKIP_SHIELD,
    "-skipproxy": FlagSpec(FlagKind.TOGGLE, "skip_proxy_nodes"),
    "-group": FlagSpec(FlagKind.TOGGLE, "group_meshes", "Grouping set to True"),
    "-throw": FlagSpec(FlagKind.TOGGLE, "throw", "Exceptions thrown to debugger"),
    "-allowconflict": _ALLOW_CONFLICTS,
    "-allowconflicts": _ALLOW_CONFLICTS,
    "-noconflict": _NO_CONFLICTS,
    "-noconflicts": _NO_CONFLICTS,
}


class ParseResult(NamedTuple):
    """Outcome of :func:`parse_args`."""

    config: Configuration
    exit_code: ExitCode


class ConfigurationBuilder:
    """Accumulates parsed options until the final Configuration is built."""

    def __init__(self, verbose: bool = False):
        self.input_files: list[Path] = []
        self.options: dict[str, Any] = {"verbose": verbose}

    def set_flag(self, field: str) -> None:
        self.options[field] = True

    def set_data_dir(self, value: str) -> None:
        self.options["data_dir"] = Path(value.replace('"', ""))

    def set_output_dir(self, value: str) -> None:
        self.options["output_dir"] = Path(os.path.abspath(value))

    def add_input_files(self, paths: Iterable[Path]) -> None:
        self.input_files.extend(paths)

    @property
    def has_output_format(self) -> bool:
        return any(self.options.get(fmt.field_name, False) for fmt in OutputFormat)

    def apply_defaults(self) -> None:
        """Default to COLLADA when no output format was requested."""
        if not self.has_output_format:
            self.options[OutputFormat.COLLADA.field_name] = True

    def build(self) -> Configuration:
        return Configuration(input_files=tuple(self.input_files), **self.options)


def parse_args(
    tokens: Sequence[str],
    *,
    verbose: bool = False,
    listing: Optional[DirectoryListing] = None,
    console: Optional[Console] = None,
) -> ParseResult:
    """Parse command line tokens into a Configuration.

    Usage requests, a value flag without a value and an empty input set all
    print the usage text and return ``ExitCode.FAILURE`` together with
    whatever had been parsed up to that point.

    Args:
        tokens: Arguments without the program name
        verbose: Value of the verbose toggle
        listing: Directory listing used to expand file filters
        console: Console for progress and usage output

    Returns:
        ParseResult of the configuration and exit code

    Raises:
        FileFilterError: If a directory cannot be read while expanding a filter
    """
    console = console or Console(soft_wrap=True, emoji=False)
    builder = ConfigurationBuilder(verbose=verbose)

    def progress(message: str) -> None:
        console.print(message, markup=False, highlight=False, emoji=False)

    def fail(reason: str) -> ParseResult:
        logger.info("parse_failed", reason=reason)
        print_usage(console)
        return ParseResult(builder.build(), ExitCode.FAILURE)

    with StructuredLogger(logger, "parse_args", token_count=len(tokens)):
        index = 0
        while index < len(tokens):
            token = tokens[index]
            spec = FLAGS.get(token.lower())

            if spec is None:
                builder.add_input_files(expand_filter(token, listing))
                progress(f"Input file set to {token}")

            elif spec.kind is FlagKind.USAGE:
                return fail("usage requested")

            elif spec.kind is FlagKind.TOGGLE:
                builder.set_flag(spec.field)
                if spec.message:
                    progress(spec.message)

            else:
                if index + 1 >= len(tokens):
                    return fail(f"missing value for {token}")
                index += 1
                value = tokens[index]

                if spec.field == "data_dir":
                    builder.set_data_dir(value)
                elif spec.field == "output_dir":
                    builder.set_output_dir(value)
                else:
                    builder.add_input_files(expand_filter(value, listing))
                progress(spec.message.format(value=value))

            logger.debug("token_parsed", token=token, flag=spec is not None)
            index += 1

        if not builder.input_files:
            return fail("no input files")

        builder.apply_defaults()
        config = builder.build()

    logger.debug(
        "parse_completed",
        input_files=len(config.input_files),
        formats=[fmt.value for fmt in config.output_formats],
    )
    return ParseResult(config, ExitCode.SUCCESS)
