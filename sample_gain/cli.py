"""Command-line interface for sample-gain."""

import json
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from sample_gain.config import DEFAULT_SOURCE_TYPE, DISPLAY_PRECISION
from sample_gain.core.lossy import SourceType, get_source_type
from sample_gain.utils.conversion import (
    db_to_ratio,
    db_to_ratio_exact,
    ratio_to_db,
    ratio_to_db_exact,
)

app = typer.Typer(
    name="sample-gain",
    help="Inspect float32 sample conversion and dB/ratio gain math",
    no_args_is_help=True,
)
console = Console()


def relative_error(approx: float, exact: float) -> float:
    """Relative error of an approximation, in percent.

    Args:
        approx: Approximated value
        exact: Reference value

    Returns:
        Error in percent (absolute error when the reference is 0)
    """
    if approx == exact:
        return 0.0
    if exact == 0:
        return abs(approx) * 100
    return abs(approx - exact) / abs(exact) * 100


def parse_source_value(text: str, source: SourceType):
    """Parse a command-line value for the given source type.

    Args:
        text: Value as typed by the user (e.g. "1e308", "4294967295")
        source: Source type the value belongs to

    Returns:
        float for float sources, int for integer sources

    Raises:
        ValueError: If the text is not a valid number for the type
    """
    if source.is_float:
        return float(text)
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return int(text, 0)  # 0x, 0o, 0b prefixes
    except ValueError:
        raise ValueError(f"Invalid {source.name} value: {text}")


def display_gain_table(
    rows: list[tuple[float, float, float]],
    input_label: str,
    output_label: str,
    title: str,
) -> None:
    """Display conversions next to their exact reference values.

    Args:
        rows: List of (input, approximate, exact) tuples
        input_label: Column header for the input
        output_label: Column header for the output
        title: Table title
    """
    table = Table(title=title)
    table.add_column(input_label, style="cyan", justify="right")
    table.add_column(output_label, justify="right")
    table.add_column("Exact", justify="right")
    table.add_column("Error", justify="right")

    for value, approx, exact in rows:
        table.add_row(
            f"{value:g}",
            f"{approx:.{DISPLAY_PRECISION}g}",
            f"{exact:.{DISPLAY_PRECISION}g}",
            f"{relative_error(approx, exact):.5f}%",
        )

    console.print(table)


@app.command("db-to-ratio")
def db_to_ratio_command(
    values: Annotated[
        list[float],
        typer.Argument(help="Gain values in dB (use -- before negative values)"),
    ],
    output_json: Annotated[
        bool,
        typer.Option("--json", help="Output results as JSON"),
    ] = False,
) -> None:
    """Convert decibel values to linear amplitude ratios."""
    rows = [
        (db, float(db_to_ratio(db)), db_to_ratio_exact(db))
        for db in values
    ]

    if output_json:
        json_results = [
            {"db": db, "ratio": approx, "exact": exact}
            for db, approx, exact in rows
        ]
        console.print(json.dumps(json_results, indent=2))
    else:
        display_gain_table(rows, "dB", "Ratio", "dB -> Ratio")


@app.command("ratio-to-db")
def ratio_to_db_command(
    values: Annotated[
        list[float],
        typer.Argument(help="Linear amplitude ratios (must be > 0)"),
    ],
    output_json: Annotated[
        bool,
        typer.Option("--json", help="Output results as JSON"),
    ] = False,
) -> None:
    """Convert linear amplitude ratios to decibel values."""
    invalid = [ratio for ratio in values if ratio <= 0]
    if invalid:
        console.print(
            f"[red]Error: ratios must be greater than 0, got "
            f"{', '.join(f'{r:g}' for r in invalid)}[/red]"
        )
        raise typer.Exit(1)

    rows = [
        (ratio, float(ratio_to_db(ratio)), ratio_to_db_exact(ratio))
        for ratio in values
    ]

    if output_json:
        json_results = [
            {"ratio": ratio, "db": approx, "exact": exact}
            for ratio, approx, exact in rows
        ]
        console.print(json.dumps(json_results, indent=2))
    else:
        display_gain_table(rows, "Ratio", "dB", "Ratio -> dB")


@app.command("to-f32")
def to_f32_command(
    values: Annotated[
        list[str],
        typer.Argument(help="Values to convert (use -- before negative values)"),
    ],
    source_name: Annotated[
        str,
        typer.Option("-t", "--type", help="Source type: f64, u32, u64, i64, u128, usize"),
    ] = DEFAULT_SOURCE_TYPE,
) -> None:
    """Convert values to float32, clamping to the float32 range."""
    try:
        source = get_source_type(source_name)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"{source.name} -> f32")
    table.add_column("Input", style="cyan", no_wrap=True)
    table.add_column("f32", justify="right")
    table.add_column("Clamped", justify="center")

    failed = False
    for text in values:
        try:
            value = parse_source_value(text, source)
            result = source.to_f32_lossy(value)
        except (ValueError, TypeError, OverflowError) as e:
            console.print(f"[red]Error converting {text}: {e}[/red]")
            failed = True
            continue

        clamped = (
            value != value  # NaN
            or value > source.upper_threshold
            or (source.signed and value < source.lower_threshold)
        )
        table.add_row(
            text,
            f"{float(result):.{DISPLAY_PRECISION}g}",
            "[yellow]yes[/yellow]" if clamped else "no",
        )

    console.print(table)

    if failed:
        raise typer.Exit(1)


@app.callback()
def main() -> None:
    """Inspect float32 sample conversion and dB/ratio gain math."""
    pass


if __name__ == "__main__":
    app()
