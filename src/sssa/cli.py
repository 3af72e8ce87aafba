"""Command line interface for splitting and combining secrets."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

import click

from .combiner import combine_bytes
from .errors import SSSAError
from .policy import policy
from .splitter import create_bytes
from .text import decode_share, encode_share
from .validation import validate_share


def _read_shares(shares: Iterable[str]) -> List[str]:
    collected = [s for s in shares if s.strip()]
    if collected:
        return collected
    stdin = click.get_text_stream("stdin")
    return [line.strip() for line in stdin if line.strip()]


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Shamir's Secret Sharing over a 256-bit prime field."""
    level = logging.DEBUG if verbose else getattr(logging, policy.log_level)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@main.command()
@click.option("--minimum", "-m", type=int, required=True, help="Shares needed to recover.")
@click.option("--shares", "-n", type=int, required=True, help="Shares to generate.")
@click.option(
    "--secret-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the secret from this file instead of prompting.",
)
def split(minimum: int, shares: int, secret_file: Path | None) -> None:
    """Split a secret and print one share per line."""
    if secret_file is not None:
        secret = secret_file.read_bytes()
    else:
        secret = click.prompt("Secret", hide_input=True, err=True).encode("utf-8")
    try:
        buffers = create_bytes(minimum, shares, secret)
    except SSSAError as exc:
        raise click.ClickException(str(exc)) from exc
    for buffer in buffers:
        click.echo(encode_share(buffer))


@main.command()
@click.argument("shares", nargs=-1)
@click.option("--length", type=int, default=None, help="Original secret length in bytes.")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Write the secret to this file instead of stdout.",
)
def combine(shares: tuple[str, ...], length: int | None, output: Path | None) -> None:
    """Recover a secret from shares given as arguments or on stdin."""
    try:
        buffers = [decode_share(s) for s in _read_shares(shares)]
        secret = combine_bytes(buffers, length)
    except SSSAError as exc:
        raise click.ClickException(str(exc)) from exc
    if output is not None:
        output.write_bytes(secret)
        click.echo(f"Wrote {len(secret)} bytes to {output}", err=True)
    else:
        stdout = click.get_binary_stream("stdout")
        stdout.write(secret)
        stdout.flush()


@main.command()
@click.argument("shares", nargs=-1)
def check(shares: tuple[str, ...]) -> None:
    """Report whether each share is structurally valid."""
    collected = _read_shares(shares)
    if not collected:
        raise click.ClickException("no shares given")
    failed = False
    for index, text in enumerate(collected):
        try:
            validate_share(decode_share(text), index)
        except SSSAError as exc:
            failed = True
            click.echo(f"{index}: invalid ({exc})")
        else:
            click.echo(f"{index}: ok")
    if failed:
        click.get_current_context().exit(1)


if __name__ == "__main__":
    main()
