"""CLI application entry point for svgtess.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from svgtess import __version__
from svgtess.cli.output import (
    SYM_OK,
    console,
    print_document_info,
    print_error,
    print_header,
    print_shape_table,
    print_step,
    print_success,
)
from svgtess.config import (
    FlatteningConfig,
    LoggingConfig,
    NormalizationConfig,
    SvgTessSettings,
    TessellationConfig,
    WindingRule,
)
from svgtess.core.processor import DocumentProcessor
from svgtess.exceptions import DocumentError, GeometrySaveError, SvgTessError
from svgtess.io import get_geometry_path
from svgtess.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="svgtess",
    help="Flatten and tessellate SVG shapes into batched triangle and line geometry.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]svgtess[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def tessellate(
    input_svg: Annotated[
        Path,
        typer.Argument(
            help="Path to input SVG file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-geometry.json; .npz writes a NumPy archive)",
        ),
    ] = None,
    curve_segments: Annotated[
        int,
        typer.Option(
            "--curve-segments",
            "-s",
            help="Parameter steps per curve or arc segment",
            min=1,
            max=1024,
        ),
    ] = 32,
    winding_rule: Annotated[
        WindingRule,
        typer.Option(
            "--winding-rule",
            "-w",
            help="Fill rule for filled paths",
            case_sensitive=False,
        ),
    ] = WindingRule.EVEN_ODD,
    no_normalize: Annotated[
        bool,
        typer.Option(
            "--no-normalize",
            help="Keep document coordinates instead of moving the scene to the origin",
        ),
    ] = False,
    info: Annotated[
        bool,
        typer.Option(
            "--info",
            help="Show document and shape information and exit",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Flatten and tessellate the shapes of an SVG document.

    Reads rect, circle, ellipse and path elements, flattens curves, triangulates
    fills and writes interleaved fill and stroke vertex buffers.

    Example:
        svgtess drawing.svg

    This will create drawing-geometry.json next to the input.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_svg.exists():
        print_error(
            f"Input file not found: {input_svg}",
            details=f"The file '{input_svg}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_svg.is_file():
        print_error(
            f"Input path is not a file: {input_svg}",
            details="Please provide a path to an SVG file.",
        )
        raise typer.Exit(code=1)

    settings = SvgTessSettings(
        flattening=FlatteningConfig(curve_segments=curve_segments),
        tessellation=TessellationConfig(winding_rule=winding_rule),
        normalization=NormalizationConfig(enabled=not no_normalize),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )

    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    processor = DocumentProcessor(settings)

    try:
        if info:
            _handle_info(processor, input_svg, verbose)
            raise typer.Exit(code=0)

        actual_output_path = output if output is not None else get_geometry_path(input_svg)

        if not quiet:
            print_step("Processing document")

        result = processor.process(input_svg, output_path=actual_output_path)

        if not quiet:
            if verbose:
                print_document_info(
                    svg_path=str(input_svg),
                    dimensions=result.dimensions,
                    view_box=result.view_box,
                    shape_count=len(result.shapes),
                )
            stats = result.stats
            print_success(
                output_path=str(actual_output_path),
                file_size=_format_file_size(actual_output_path),
                total_time_s=stats.duration_seconds,
                shapes=stats.shape_count,
                triangles=stats.triangle_count,
                segments=stats.segment_count,
                anomalies=stats.anomaly_count,
                errors=stats.error_count,
            )

    except (FileNotFoundError, DocumentError) as e:
        print_error(f"Could not load document: {e}")
        raise typer.Exit(code=1)
    except GeometrySaveError as e:
        print_error(f"Could not save geometry: {e.reason}")
        raise typer.Exit(code=1)
    except SvgTessError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _handle_info(processor: DocumentProcessor, svg_path: Path, verbose: bool) -> None:
    """Handle --info mode.

    Builds the shapes and their geometry without writing anything.

    Args:
        processor: Configured document processor
        svg_path: Path to SVG file
        verbose: List every shape
    """
    print_step("Loading document")

    shapes = processor.load_shapes(svg_path)
    result = processor.build(shapes)

    print_document_info(
        svg_path=str(svg_path),
        dimensions=result.dimensions,
        view_box=result.view_box,
        shape_count=len(shapes),
    )

    if shapes:
        print_shape_table(shapes, verbose)

    console.print(
        f"\n[bold green]{SYM_OK} Info complete[/bold green] "
        f"{result.geometry.triangle_count} triangles, "
        f"{result.geometry.segment_count} segments, no file written"
    )


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"

    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
