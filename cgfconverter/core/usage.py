"""Usage text and configuration summary rendering."""

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from cgfconverter.core.config import Configuration, OutputFormat

USAGE_HEADER = (
    "cgf-converter [-usage] | <.cgf file> [-outputdir <output dir>] "
    "[-objectdir <ObjectDir>] [-obj] [-blend] [-dae] [-smooth] [-throw]"
)

USAGE_LINES = [
    ("-usage:", "Prints out the usage statement"),
    None,
    ("<.cgf file>:", "Mandatory.  The name of the .cgf, .cga or .skin file to process"),
    ("", "Wildcards (? and *) in the file name search all subdirectories"),
    ("-infile:", "Same as <.cgf file>"),
    ("-outputdir:", "The directory to write the output files to"),
    ("-noconflict:", "Use non-conflicting naming scheme (<cgf File>_out.obj)"),
    ("-allowconflict:", "Allows conflicts in .mtl file name"),
    ("-objectdir:", "The name where the base Objects directory is located.  Used to read mtl file"),
    ("", "Defaults to current directory."),
    ("-obj:", "Export Wavefront format files"),
    ("-blend:", "Export Blender format files (Not Implemented)"),
    ("-dae:", "Export Collada format files (Default when no format is given)"),
    ("-fbx:", "Export FBX format files (Not Implemented)"),
    ("-crytek:", "Export CryTek format files"),
    ("-smooth:", "Smooth Faces"),
    ("-group:", "Group meshes into single model"),
    ("-tif:", "Change the materials to look for .tif files instead of .dds"),
    ("-skipshield:", "Skip nodes whose name contains $shield"),
    ("-skipproxy:", "Skip nodes whose name contains $proxy"),
    None,
    ("-throw:", "Throw Exceptions to installed debugger"),
]

FLAG_COLUMN_WIDTH = 18


def _default_console() -> Console:
    return Console(soft_wrap=True, emoji=False)


def format_usage() -> list[str]:
    """Build the usage block, one entry per output line."""
    lines = ["", USAGE_HEADER, ""]
    for entry in USAGE_LINES:
        if entry is None:
            lines.append("")
            continue
        flag, text = entry
        lines.append(f"{flag:<{FLAG_COLUMN_WIDTH}}{text}")
    lines.append("")
    return lines


def print_usage(console: Optional[Console] = None) -> None:
    """Print the usage syntax of the executable."""
    console = console or _default_console()
    for line in format_usage():
        console.print(line, markup=False, highlight=False, emoji=False)


def print_summary(config: Configuration, console: Optional[Console] = None) -> None:
    """Print the submitted arguments as a table."""
    console = console or _default_console()

    table = Table(title="Submitted args", show_header=False)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    for path in config.input_files:
        table.add_row("Input file", Text(str(path)))
    if config.data_dir is not None:
        table.add_row("Object dir", Text(str(config.data_dir)))
    if config.output_dir is not None:
        table.add_row("Output dir", Text(str(config.output_dir)))
    table.add_row("Smooth Faces", str(config.smooth))
    for fmt in OutputFormat:
        table.add_row(f"Output to {fmt.extensions}", str(getattr(config, fmt.field_name)))
    table.add_row("Group meshes", str(config.group_meshes))
    table.add_row("TIFF textures", str(config.tiff_textures))
    table.add_row("Skip shields", str(config.skip_shield_nodes))
    table.add_row("Skip proxies", str(config.skip_proxy_nodes))
    table.add_row("Allow conflicts", str(config.allow_conflicts))
    table.add_row("No conflicts", str(config.no_conflicts))

    console.print()
    console.print(table)
