"""Documentation generator for Solidity projects.

Generates:
    docs/src/SUMMARY.md          - Nested outline of every document
    docs/src/{path}/{File}.md    - Contracts declared in src/{path}/{File}.sol
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from .config import load_config
from .errors import AbidocError
from .pipeline import run

log = logging.getLogger(__name__)


def _display(path: Path, root: Path) -> str:
    return str(path.relative_to(root)) if path.is_relative_to(root) else str(path)


@click.command(name="abidoc")
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Project root containing foundry.toml",
)
@click.option("--src", help="Source directory relative to the root (default: src)")
@click.option(
    "--out",
    type=click.Path(file_okay=False, resolve_path=True, path_type=Path),
    help="Output directory (default: docs/src)",
)
@click.option(
    "--artifact",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True, path_type=Path),
    help="Use a pre-built solc standard-JSON output instead of running solc",
)
@click.option("--solc", help="solc binary (default: solc)")
@click.option("--clean", is_flag=True, help="Remove the output directory first")
@click.option("--strict", is_flag=True, help="Fail on undocumented contracts and members")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(
    root: Path,
    src: str | None,
    out: Path | None,
    artifact: Path | None,
    solc: str | None,
    clean: bool,
    strict: bool,
    verbose: bool,
):
    """Generate Markdown documentation from contract ABI and NatSpec.

    \b
    Examples:
        abidoc
        abidoc --root ./my-project --clean
        abidoc --artifact build/output.json --src contracts
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(
            root.resolve(),
            src=src,
            out=out,
            artifact=artifact,
            solc=solc,
            clean=clean or None,
            strict=strict or None,
        )
        result = run(config)
    except AbidocError as e:
        log.debug("Run failed", exc_info=True)
        raise click.ClickException(str(e)) from e

    for warning in result.validation.warnings:
        click.echo(f"  ⚠ {warning}", err=True)

    if result.validation.errors:
        click.echo("\nValidation errors:", err=True)
        for err in result.validation.errors:
            click.echo(f"  ✗ {err}", err=True)
        sys.exit(1)

    coverage = result.coverage
    click.echo(
        f"Coverage: methods {coverage['methods']:.0%}, events {coverage['events']:.0%}"
    )

    click.echo("\nGenerated:")
    for path in result.written:
        click.echo(f"  {_display(path, config.root)}")

    click.echo("\nDone!")


if __name__ == "__main__":
    main()
