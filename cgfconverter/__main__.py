"""cgfconverter - command-line front end for the CryEngine model converter."""

import sys
from typing import Optional

import typer

from cgfconverter.cli.app import app


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the cgfconverter CLI."""
    try:
        exit_code = app(argv, prog_name="cgf-converter", standalone_mode=False)
    except (KeyboardInterrupt, typer.Abort):
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return exit_code or 0


if __name__ == "__main__":
    sys.exit(main())
