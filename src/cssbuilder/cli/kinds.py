"""CLI command: cssbuilder kinds -- list fragment kinds and combinators."""

from __future__ import annotations

import click

from cssbuilder.model import Combinator, FragmentKind


@click.command()
def kinds() -> None:
    """List fragment kinds in canonical order and the known combinators."""
    click.echo("Fragments:")
    for kind in FragmentKind:
        limit = "once" if kind.max_occurrences == 1 else "repeatable"
        click.echo(f"  {kind.value:<15} {kind.render('x'):<6} {limit}")
    click.echo()
    click.echo("Combinators:")
    for combinator in Combinator:
        name = combinator.name.lower().replace("_", "-")
        click.echo(f"  {name:<17} {combinator.value!r}")
