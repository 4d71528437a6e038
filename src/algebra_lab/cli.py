"""
Command-line interface for Algebra Lab.

Usage:
    algebra-lab info                     Show scalar kinds, methods and formats
    algebra-lab det "{{1,2},{3,4}}"      Determinant of a matrix
    algebra-lab reduce MATRIX            Row echelon form
    algebra-lab lu MATRIX [--pivot]      LU (or LUP) factorisation
    algebra-lab inverse MATRIX           Gauss-Jordan inverse
    algebra-lab minor MATRIX ROW COL     Minor and cofactor
    algebra-lab compare [MATRIX]         Time every determinant method
"""

import logging
from typing import Annotated, Any, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from algebra_lab import __version__
from algebra_lab.algorithms import (
    CONCRETE_METHODS,
    DeterminantMethod,
    compare_methods,
    select_method,
)
from algebra_lab.matrix import (
    DEFAULT_SEED,
    MatrixError,
    SquareMatrix,
    compute_fingerprint,
    create_banded_matrix,
    create_random_integer_matrix,
)
from algebra_lab.structures import (
    DEFAULT_TOLERANCE,
    SCALAR_KINDS,
    PrecisionFormat,
    Real,
    StructureError,
    get_spec,
    get_tolerance,
)

app = typer.Typer(
    name="algebra-lab",
    help="Exact and floating-point determinants over generic rings",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"algebra-lab version {__version__}")
        raise typer.Exit()


@app.callback()  # type: ignore[misc]
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log algorithm decisions (pivots, dispatch)."),
    ] = False,
) -> None:
    """Algebra Lab - determinants and elimination over generic rings."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(console=err_console, show_path=False)],
            force=True,
        )


# =============================================================================
# SHARED OPTIONS AND HELPERS
# =============================================================================

MatrixArg = Annotated[str, typer.Argument(help="Matrix in brace syntax, e.g. '{{1,2},{3,4}}'")]
KindOption = Annotated[
    str,
    typer.Option("--kind", "-k", help=f"Scalar structure: {', '.join(SCALAR_KINDS)}"),
]
ToleranceOption = Annotated[
    float | None,
    typer.Option("--tolerance", "-t", help="Zero threshold (default depends on --precision)."),
]
PrecisionOption = Annotated[
    PrecisionFormat,
    typer.Option(
        "--precision",
        "-p",
        help="Storage format for real entries; also sets the default real/complex tolerance.",
    ),
]


def _fail(exc: Exception) -> NoReturn:
    err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
    raise typer.Exit(code=1)


def _element_type(kind: str) -> type:
    try:
        return SCALAR_KINDS[kind.lower()]
    except KeyError:
        msg = f"Unknown kind '{kind}'. Valid: {list(SCALAR_KINDS)}"
        raise typer.BadParameter(msg) from None


def _resolve_tolerance(kind: str, tolerance: float | None, precision: PrecisionFormat) -> float:
    if tolerance is not None:
        return tolerance
    if kind.lower() in ("real", "complex"):
        return get_tolerance(precision)
    return DEFAULT_TOLERANCE


def _load(text: str, kind: str, precision: PrecisionFormat) -> SquareMatrix[Any]:
    element_type = _element_type(kind)
    options: dict[str, Any] = {}
    if element_type is Real:
        options["precision"] = precision
    return SquareMatrix.parse(text, element_type, **options)


def _matrix_table(matrix: SquareMatrix[Any], title: str) -> Table:
    table = Table(title=title, show_header=False, min_width=len(title) + 4)
    for _ in range(matrix.dimension):
        table.add_column(justify="right")
    for row in matrix.rows():
        table.add_row(*[str(x) for x in row])
    return table


# =============================================================================
# COMMANDS
# =============================================================================


@app.command()  # type: ignore[misc]
def info() -> None:
    """Display scalar structures, determinant methods and precision formats."""
    kinds = Table(title="Scalar Structures")
    kinds.add_column("Kind", style="cyan", no_wrap=True)
    kinds.add_column("Type")
    kinds.add_column("Exact", justify="center")
    for name, element_type in SCALAR_KINDS.items():
        exact = "✓" if name in ("integer", "rational") else "✗"
        kinds.add_row(name, element_type.__name__, exact)
    console.print(kinds)

    methods = Table(title="Determinant Methods")
    methods.add_column("Method", style="cyan", no_wrap=True)
    methods.add_column("Complexity", justify="right")
    methods.add_column("Dimensions", justify="right")
    complexity = {
        DeterminantMethod.TRIANGLE: ("O(1)", "1-3"),
        DeterminantMethod.BAREISS: ("O(n³)", "any"),
        DeterminantMethod.LAPLACE: ("O(n!)", "small"),
        DeterminantMethod.GAUSSIAN: ("O(n³)", "any"),
    }
    for method in CONCRETE_METHODS:
        methods.add_row(method.value, *complexity[method])
    methods.add_row(
        DeterminantMethod.OPTIMIZE.value,
        "-",
        f"{select_method(1).value} < 4 ≤ {select_method(4).value} < 10",
        style="dim",
    )
    console.print(methods)

    formats = Table(title="Real Precision Formats")
    formats.add_column("Format", style="cyan", no_wrap=True)
    formats.add_column("Bits", justify="right")
    formats.add_column("Mantissa", justify="right")
    formats.add_column("Machine ε", justify="right")
    formats.add_column("Zero tolerance", justify="right")
    for fmt in PrecisionFormat:
        spec = get_spec(fmt)
        formats.add_row(
            fmt.value.upper(),
            str(spec.bits),
            str(spec.mantissa_bits),
            f"{spec.machine_epsilon:.2e}",
            f"{get_tolerance(fmt):.0e}",
        )
    console.print(formats)


@app.command()  # type: ignore[misc]
def det(
    matrix: MatrixArg,
    kind: KindOption = "rational",
    method: Annotated[
        DeterminantMethod,
        typer.Option("--method", "-m", help="Determinant algorithm."),
    ] = DeterminantMethod.OPTIMIZE,
    tolerance: ToleranceOption = None,
    precision: PrecisionOption = PrecisionFormat.FP64,
) -> None:
    """Compute the determinant of MATRIX."""
    try:
        m = _load(matrix, kind, precision)
        value = m.determinant(method, _resolve_tolerance(kind, tolerance, precision))
    except (MatrixError, StructureError) as exc:
        _fail(exc)
    console.print(str(value))


@app.command()  # type: ignore[misc]
def reduce(
    matrix: MatrixArg,
    kind: KindOption = "rational",
    tolerance: ToleranceOption = None,
    precision: PrecisionOption = PrecisionFormat.FP64,
) -> None:
    """Reduce MATRIX to row echelon form (partial pivoting)."""
    try:
        m = _load(matrix, kind, precision)
        reduced = m.gaussian_elimination(_resolve_tolerance(kind, tolerance, precision))
    except (MatrixError, StructureError) as exc:
        _fail(exc)
    console.print(_matrix_table(reduced, "Row echelon form"))


@app.command()  # type: ignore[misc]
def lu(
    matrix: MatrixArg,
    kind: KindOption = "rational",
    pivot: Annotated[
        bool,
        typer.Option("--pivot", help="Use partial pivoting and print P as well."),
    ] = False,
    tolerance: ToleranceOption = None,
    precision: PrecisionOption = PrecisionFormat.FP64,
) -> None:
    """Factor MATRIX as L·U (or P·A = L·U with --pivot)."""
    try:
        m = _load(matrix, kind, precision)
        if pivot:
            p, lower, upper = m.lup(_resolve_tolerance(kind, tolerance, precision))
        else:
            lower, upper = m.lu(0.0 if tolerance is None else tolerance)
    except (MatrixError, StructureError) as exc:
        _fail(exc)
    if pivot:
        console.print(_matrix_table(p, "P"))
    console.print(_matrix_table(lower, "L"))
    console.print(_matrix_table(upper, "U"))


@app.command()  # type: ignore[misc]
def inverse(
    matrix: MatrixArg,
    kind: KindOption = "rational",
    tolerance: ToleranceOption = None,
    precision: PrecisionOption = PrecisionFormat.FP64,
) -> None:
    """Invert MATRIX by Gauss-Jordan elimination."""
    try:
        m = _load(matrix, kind, precision)
        result = m.inverse(_resolve_tolerance(kind, tolerance, precision))
    except (MatrixError, StructureError) as exc:
        _fail(exc)
    console.print(_matrix_table(result, "Inverse"))


@app.command()  # type: ignore[misc]
def minor(
    matrix: MatrixArg,
    row: Annotated[int, typer.Argument(help="Row to remove (0-based).")],
    col: Annotated[int, typer.Argument(help="Column to remove (0-based).")],
    kind: KindOption = "rational",
    precision: PrecisionOption = PrecisionFormat.FP64,
) -> None:
    """Print the minor of MATRIX without ROW and COL, and its cofactor."""
    try:
        m = _load(matrix, kind, precision)
        sub = m.minor(row, col)
        cofactor = m.cofactor(row, col)
    except (MatrixError, StructureError) as exc:
        _fail(exc)
    console.print(_matrix_table(sub, f"Minor ({row}, {col})"))
    console.print(f"Cofactor: {cofactor}")


@app.command()  # type: ignore[misc]
def compare(
    matrix: Annotated[
        str | None,
        typer.Argument(help="Matrix in brace syntax; generated when omitted."),
    ] = None,
    kind: KindOption = "rational",
    size: Annotated[
        int,
        typer.Option("--size", "-n", min=1, help="Dimension of the generated matrix."),
    ] = 6,
    seed: Annotated[int, typer.Option("--seed", "-s", help="Random seed.")] = DEFAULT_SEED,
    bandwidth: Annotated[
        int | None,
        typer.Option("--bandwidth", "-b", help="Generate a 0/1 band matrix instead of a random one."),
    ] = None,
    methods: Annotated[
        list[DeterminantMethod] | None,
        typer.Option("--method", "-m", help="Methods to run (repeatable)."),
    ] = None,
    tolerance: ToleranceOption = None,
    precision: PrecisionOption = PrecisionFormat.FP64,
) -> None:
    """Run every determinant method on one matrix and compare results and timings."""
    if kind.lower() == "complex":
        raise typer.BadParameter("compare needs a real-valued kind")
    element_type = _element_type(kind)
    options: dict[str, Any] = {"precision": precision} if element_type is Real else {}
    try:
        if matrix is not None:
            m = _load(matrix, kind, precision)
            source, used_seed = "given", None
        elif bandwidth is not None:
            m = create_banded_matrix(size, bandwidth=bandwidth, element_type=element_type, **options)
            source, used_seed = "banded", None
        else:
            m = create_random_integer_matrix(size, element_type=element_type, seed=seed, **options)
            source, used_seed = "random", seed
        results = compare_methods(m, methods, _resolve_tolerance(kind, tolerance, precision))
    except (MatrixError, StructureError) as exc:
        _fail(exc)

    fingerprint = compute_fingerprint(m, seed=used_seed, kind=source)
    console.print(
        f"[bold]{fingerprint.dimension}×{fingerprint.dimension} {source} matrix[/] "
        f"(‖A‖_F = {fingerprint.frobenius_norm:.4g}, numpy det ≈ {fingerprint.reference_determinant:.6g})"
    )

    table = Table(title="Determinant Methods")
    table.add_column("Method", style="cyan", no_wrap=True)
    table.add_column("Determinant", justify="right")
    table.add_column("Time (ms)", justify="right")
    for result in results:
        if result.ok:
            table.add_row(result.method.value, str(result.value), f"{result.elapsed * 1e3:.3f}")
        else:
            table.add_row(result.method.value, f"[red]{escape(result.error or '')}[/]", f"{result.elapsed * 1e3:.3f}", style="dim")
    console.print(table)


if __name__ == "__main__":
    app()
