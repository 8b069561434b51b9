# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Command line interface for secret reconstruction."""

from __future__ import annotations

import logging
from dataclasses import replace
from fractions import Fraction
from typing import Any, BinaryIO, Mapping

import click

from . import __version__, policy
from .errors import DecodeError, ReconstructionError, SecretOverflow
from .fixtures import BUILTIN_SHARE_SETS
from .radix import MAX_RADIX, MIN_RADIX, PRECISIONS, decode
from .solver import Solution, read_share_text, solve, solve_text

EXIT_FAILURE = 1
EXIT_OVERFLOW = 3


def _format_number(value: object) -> str:
    if isinstance(value, Fraction) and value.denominator != 1:
        return f"{value.numerator}/{value.denominator}"
    if isinstance(value, float):
        return f"{value:.0f}"
    return str(value)


def _report(solution: Solution) -> None:
    threshold = solution.threshold
    click.echo(f"Input: n={threshold.n} roots, k={threshold.k} minimum required")
    for x, y in solution.points:
        click.echo(f"  Point {x}: {_format_number(y)}")
    for skipped in solution.skipped:
        click.echo(f"  Skipped share {skipped.key}: {skipped.reason}")
    click.echo(f"Secret (constant term): {_format_number(solution.value)}")
    click.echo(f"Final Answer: {solution.secret}")


def _run(ctx: click.Context, job, *args: Any) -> int:
    """Run ``job`` and translate failures into an exit status."""
    try:
        _report(job(*args, settings=ctx.obj))
    except SecretOverflow as exc:
        click.echo(f"Secret (constant term): {_format_number(exc.value)}")
        click.echo(f"Error: {exc}", err=True)
        return EXIT_OVERFLOW
    except ReconstructionError as exc:
        click.echo(f"Error: {exc.kind}: {exc}", err=True)
        return EXIT_FAILURE
    return 0


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="polysecret")
@click.option(
    "--precision",
    type=click.Choice(PRECISIONS),
    default=None,
    help="Arithmetic for decoding and interpolation (default: exact).",
)
@click.option(
    "--secret-bits",
    type=click.IntRange(min=0),
    default=None,
    help="Signed width the secret must fit; 0 disables the check.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log every decoding step.")
@click.pass_context
def cli(ctx: click.Context, precision: str | None, secret_bits: int | None, verbose: bool) -> None:
    """Recover a polynomial's constant term from mixed-base shares."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    overrides: dict[str, Any] = {}
    if precision is not None:
        overrides["precision"] = precision
    if secret_bits is not None:
        overrides["secret_bits"] = secret_bits or None
    ctx.obj = replace(policy.settings, **overrides)


@cli.command("solve")
@click.argument("source", type=click.File("rb"), default="-")
@click.pass_context
def solve_cmd(ctx: click.Context, source: BinaryIO) -> None:
    """Reconstruct the secret from a share-set JSON file (or stdin)."""
    ctx.exit(_run(ctx, _solve_source, source))


def _solve_source(source: BinaryIO, *, settings: policy.Settings) -> Solution:
    return solve_text(read_share_text(source.read()), settings=settings)


@cli.command("demo")
@click.pass_context
def demo_cmd(ctx: click.Context) -> None:
    """Run the built-in share sets."""
    status = 0
    for number, (name, document) in enumerate(BUILTIN_SHARE_SETS.items(), start=1):
        click.echo(f"--- Test Case {number} ({name}) ---")
        if _run(ctx, _solve_fixture, document):
            click.echo("Failed to solve this test case")
            status = EXIT_FAILURE
        click.echo()
    ctx.exit(status)


def _solve_fixture(document: Mapping[str, Any], *, settings: policy.Settings) -> Solution:
    return solve(document, settings=settings)


@cli.command("decode")
@click.argument("digits")
@click.option("-b", "--base", type=int, required=True, help=f"Radix, {MIN_RADIX}..{MAX_RADIX}.")
@click.pass_context
def decode_cmd(ctx: click.Context, digits: str, base: int) -> None:
    """Print DIGITS converted from BASE to decimal."""
    try:
        value = decode(digits, base, precision=ctx.obj.precision)
    except DecodeError as exc:
        click.echo(f"Error: {exc.kind}: {exc}", err=True)
        ctx.exit(EXIT_FAILURE)
    click.echo(_format_number(value))


def main() -> None:
    cli(prog_name="polysecret")


if __name__ == "__main__":
    main()
