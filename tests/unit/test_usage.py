"""Unit tests for usage and summary rendering."""

from pathlib import Path

from cgfconverter.core.config import Configuration
from cgfconverter.core.usage import USAGE_HEADER, format_usage, print_summary, print_usage


class TestUsage:
    """Test the usage block."""

    def test_format_usage(self):
        lines = format_usage()

        assert lines[0] == ""
        assert lines[1] == USAGE_HEADER
        assert lines[-1] == ""

    def test_flag_column_alignment(self):
        lines = format_usage()

        assert "-usage:           Prints out the usage statement" in lines
        assert "-throw:           Throw Exceptions to installed debugger" in lines

    def test_documents_every_flag(self):
        text = "\n".join(format_usage())

        for flag in (
            "-usage", "-infile", "-outputdir", "-objectdir", "-noconflict",
            "-allowconflict", "-obj", "-blend", "-dae", "-fbx", "-crytek",
            "-smooth", "-group", "-tif", "-skipshield", "-skipproxy", "-throw",
        ):
            assert f"{flag}:" in text

    def test_print_usage_keeps_brackets(self, console):
        print_usage(console)

        text = console.file.getvalue()
        assert USAGE_HEADER in text
        assert "[-objectdir <ObjectDir>]" in text


class TestSummary:
    """Test the submitted args summary."""

    def test_summary_lists_configuration(self, console):
        config = Configuration(
            input_files=[Path("/data/Objects/ship.cgf")],
            data_dir=Path("/data"),
            output_dir=Path("/out"),
            output_wavefront=True,
            smooth=True,
        )

        print_summary(config, console)
        text = console.file.getvalue()

        assert "Submitted args" in text
        assert "/data/Objects/ship.cgf" in text
        assert "Object dir" in text
        assert "Output dir" in text
        assert "Output to .obj" in text

    def test_summary_omits_unset_directories(self, console):
        print_summary(Configuration(input_files=[Path("/a.cgf")]), console)
        text = console.file.getvalue()

        assert "Object dir" not in text
        assert "Output dir" not in text
