"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from svgtess.core.shapes import FilledPathShape, PathShape, Shape

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

MAX_LISTED_SHAPES = 20


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]svgtess[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_document_info(
    svg_path: str,
    dimensions: tuple[float, float] | None,
    view_box: tuple[float, float, float, float] | None,
    shape_count: int,
) -> None:
    """Print document information.

    Args:
        svg_path: Path to the SVG file
        dimensions: Width and height in pixels
        view_box: Document viewBox
        shape_count: Number of shapes built from the document
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(svg_path)
    console.print(line)

    if dimensions is not None:
        width, height = dimensions
        console.print(f"  {width:g} x {height:g} px {SYM_DOT} {shape_count} shapes")
    if view_box is not None:
        console.print("  viewBox " + " ".join(f"{value:g}" for value in view_box))


def _shape_kind(shape: Shape) -> str:
    if isinstance(shape, FilledPathShape):
        return "filled path"
    if isinstance(shape, PathShape):
        return "path"
    return "outline"


def print_shape_table(shapes: list[Shape], verbose: bool) -> None:
    """Print a per-shape summary table.

    Args:
        shapes: Shapes in document order
        verbose: Whether to list every shape instead of the first few
    """
    table = Table(show_edge=False, pad_edge=False, box=None)
    table.add_column("Shape", style="bold")
    table.add_column("Kind")
    table.add_column("Vertices", justify="right")
    table.add_column("Triangles", justify="right")
    table.add_column("Segments", justify="right")

    listed = shapes if verbose else shapes[:MAX_LISTED_SHAPES]
    for shape in listed:
        table.add_row(
            shape.label,
            _shape_kind(shape),
            str(shape.vertex_count),
            str(len(shape.fill_triangles())),
            str(len(shape.stroke_segments())),
        )

    console.print()
    console.print(table)
    if len(listed) < len(shapes):
        console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(shapes) - len(listed)} more)")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    shapes: int,
    triangles: int,
    segments: int,
    anomalies: int,
    errors: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total processing time in seconds
        shapes: Number of shapes built
        triangles: Number of fill triangles written
        segments: Number of stroke segments written
        anomalies: Number of recoverable anomalies reported
        errors: Number of elements that failed
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(
        f"  {shapes} shapes {SYM_DOT} {triangles} triangles {SYM_DOT} {segments} segments"
    )

    warn_style = "yellow" if anomalies > 0 else "green"
    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  [{warn_style}]{anomalies} warnings[/{warn_style}] {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
