"""
fluidcss Plugin Main Module.

This module serves as the main entry point for fluidcss, a ChRIS plugin that
rewrites `fluid(min, max, [minBP], [maxBP])` calls in stylesheets into
viewport-responsive `clamp()` expressions.

Features:
- Maps every stylesheet in the input directory to the output directory
- Resolves `--token` arguments against a design-token file
- Converts px arguments and tokens to rem
- Leaves unresolvable fluid() calls untouched and reports them

Examples:
    Transform all stylesheets with the default breakpoints:
        $ fluidcss incoming/ outgoing/

    Use a token file and custom breakpoints:
        $ fluidcss --tokensPath tokens.css --minBreakpoint 20 --maxBreakpoint 96 \\
            incoming/ outgoing/

Note:
    Setting precedence is: command line > config file > FLUID_* environment
    variables > defaults. Relative token paths are looked up in the input
    directory first, then in the working directory.
"""

from pathlib import Path
from argparse import Namespace, ArgumentParser, ArgumentDefaultsHelpFormatter
from chris_plugin import chris_plugin, PathMapper
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from fluidcss.config.settings import FluidSettings, settings_build
from fluidcss.lib.log import LOG
from fluidcss.lib.transform import FluidTransform
from fluidcss.models.dataModel import StylesheetResult
import sys
from typing import Final

__version__: Final[str] = "0.1.0"

console: Final[Console] = Console()

# Define the argument parser for the plugin
parser: Final[ArgumentParser] = ArgumentParser(
    description="Rewrite fluid() calls in stylesheets into clamp() expressions.",
    formatter_class=ArgumentDefaultsHelpFormatter,
)
parser.add_argument("--tokensPath", type=str, help="Design-token file to resolve --name arguments")
parser.add_argument("--minBreakpoint", type=float, help="Default start breakpoint in rem")
parser.add_argument("--maxBreakpoint", type=float, help="Default end breakpoint in rem")
parser.add_argument("--basePxSize", type=float, help="Pixels per rem for px conversion")
parser.add_argument("--precision", type=int, help="Decimal places in emitted clamp()")
parser.add_argument(
    "-p", "--pattern", type=str, default="**/*.css", help="Input file filter glob"
)
parser.add_argument(
    "-V", "--version", action="version", version=f"%(prog)s {__version__}"
)


def tokens_locate(tokens_path: str, inputdir: Path) -> Path:
    """Find the token file, preferring a path relative to the input directory.

    Args:
        tokens_path: Configured token file location
        inputdir: Plugin input directory

    Returns:
        Path: The first existing candidate, else the path as given
    """
    path: Path = Path(tokens_path).expanduser()
    if not path.is_absolute() and (inputdir / path).is_file():
        return inputdir / path
    return path


def stylesheets_process(
    settings: FluidSettings, inputdir: Path, outputdir: Path, pattern: str = "**/*.css"
) -> dict[Path, StylesheetResult]:
    """Transform every stylesheet matching pattern from inputdir to outputdir.

    The token file is read once for the whole run, before the first
    stylesheet.

    Args:
        settings: Settings for the pass
        inputdir: Directory containing input stylesheets
        outputdir: Directory for transformed stylesheets
        pattern: Glob selecting input files

    Returns:
        dict: Result per input file
    """
    fluid: FluidTransform = FluidTransform(settings)
    fluid.prepare(tokens_locate(settings.tokensPath, inputdir))

    results: dict[Path, StylesheetResult] = {}
    mapper: PathMapper = PathMapper.file_mapper(inputdir, outputdir, glob=pattern)
    for input_file, output_file in mapper:
        LOG(f"Processing {input_file}")
        result: StylesheetResult = fluid.stylesheet(input_file.read_text(encoding="utf-8"))
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(result.text, encoding="utf-8")
        results[input_file] = result
    return results


def summary_print(results: dict[Path, StylesheetResult], inputdir: Path) -> None:
    """Print a per-file summary table of the run."""
    table: Table = Table(title="fluid() rewrite summary")
    table.add_column("Stylesheet", style="cyan")
    table.add_column("Replaced", justify="right", style="green")
    table.add_column("Unchanged", justify="right", style="red")

    for path, result in results.items():
        table.add_row(
            str(path.relative_to(inputdir)), str(result.replaced), str(len(result.failures))
        )
    console.print(table)

    for path, result in results.items():
        for failure in result.failures:
            console.print(
                f"[bold red]{escape(path.name)}[/bold red]: {escape(failure.call)} "
                f"[yellow]({failure.kind.value})[/yellow] {escape(failure.reason)}"
            )


@chris_plugin(
    parser=parser,
    title="fluidcss",
    category="",
    min_memory_limit="100Mi",
    min_cpu_limit="1000m",
    min_gpu_limit=0,
)
def main(options: Namespace, inputdir: Path, outputdir: Path) -> None:
    """Main entry point for the ChRIS plugin.

    Args:
        options: Parsed command-line options
        inputdir: Directory containing input stylesheets
        outputdir: Directory for output stylesheets
    """
    try:
        settings: FluidSettings = settings_build(vars(options))
    except ValidationError as e:
        console.print(f"[bold red]Invalid configuration:[/bold red] {escape(str(e))}")
        sys.exit(1)

    results: dict[Path, StylesheetResult] = stylesheets_process(
        settings, inputdir, outputdir, options.pattern
    )
    summary_print(results, inputdir)
