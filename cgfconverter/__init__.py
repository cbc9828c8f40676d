"""cgfconverter - command-line front end for the CryEngine model converter."""

from cgfconverter.core.args import ParseResult, parse_args
from cgfconverter.core.config import Configuration, ExitCode, OutputFormat

__version__ = "1.0.0"

__all__ = [
    "Configuration",
    "ExitCode",
    "OutputFormat",
    "ParseResult",
    "parse_args",
    "__version__",
]
