import logging

import click
import numpy as np

from vecmathpy.factory import get_vector_math
from vecmathpy.log import vecmath_logger


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    vecmath_logger("vecmathpy", logging.DEBUG if verbose else logging.INFO)


@cli.command()
@click.option("--start", type=float, default=-20.0, show_default=True)
@click.option("--stop", type=float, default=20.0, show_default=True)
@click.option("--num", type=click.IntRange(min=1), default=10001, show_default=True)
@click.option(
    "--precision",
    type=click.Choice(["float64", "float32"]),
    default="float64",
    show_default=True,
)
@click.option(
    "--tolerance",
    type=float,
    default=1e-6,
    show_default=True,
    help="Maximum accepted relative error against numpy.exp.",
)
def accuracy(start: float, stop: float, num: int, precision: str, tolerance: float) -> None:
    """Compare the fast exponential with numpy.exp on an evenly spaced grid."""
    log = logging.getLogger("vecmathpy.cli")
    vm = get_vector_math(precision, checked=True)

    grid = np.linspace(start, stop, num, dtype=vm.dtype)
    approx = grid.copy()
    vm.exp(approx, num)

    inside = (grid >= vm.fmt.minlog) & (grid <= vm.fmt.maxlog)
    ref = np.exp(grid[inside].astype(np.float64))
    rel = np.abs(approx[inside].astype(np.float64) - ref) / ref
    if (~inside).any():
        log.info(f"{int((~inside).sum())} grid points lie outside the clamp bounds")

    if rel.size == 0:
        raise click.UsageError("No grid point lies inside the clamp bounds.")

    worst = float(rel.max())
    at = float(grid[inside][int(rel.argmax())])
    click.echo(f"max relative error {worst:.3e} at x = {at:.6g} ({precision})")
    if worst > tolerance:
        log.error(f"Relative error {worst:.3e} exceeds tolerance {tolerance:.1e}")
        raise click.exceptions.Exit(1)


@cli.command()
def check() -> None:
    """Run the x = [1, 2, 3] walkthrough and print every intermediate result."""
    vm = get_vector_math(np.float64, checked=True)
    x = np.array([1.0, 2.0, 3.0])

    click.echo(f"sum(x)    = {vm.sum(x, 3)}")
    click.echo(f"dot(x, x) = {vm.dot(x, x, 3)}")
    vm.scale(x, 2.0, 3)
    click.echo(f"scale(x, 2) -> {x.tolist()}")
    vm.inv(x, 3)
    click.echo(f"inv(x)      -> {x.tolist()}")

    z = np.zeros(3)
    vm.exp(z, 3)
    click.echo(f"exp(zeros)  -> {z.tolist()}")
