"""CLI command: cssbuilder build -- assemble a selector from tokens."""

from __future__ import annotations

import sys

import click

from cssbuilder.builder import SelectorBuilder
from cssbuilder.config import BuilderConfig
from cssbuilder.errors import SelectorError
from cssbuilder.facade import BuilderFacade
from cssbuilder.model import Combinator, FragmentKind


def _parse_fragment(token: str) -> tuple[FragmentKind, str] | None:
    """Split ``kind=value`` on the first ``=``; None if not a fragment token."""
    name, sep, value = token.partition("=")
    if not sep:
        return None
    try:
        return FragmentKind(name), value
    except ValueError:
        raise ValueError(f"Unknown fragment kind: {name!r}") from None


def build_selector(tokens: list[str], config: BuilderConfig) -> SelectorBuilder:
    """Fold fragment and combinator tokens into a single selector.

    Consecutive fragments form one compound selector; each combinator token
    joins the selector built so far with the next compound.
    """
    facade = BuilderFacade(config)
    result: SelectorBuilder | None = None
    compound: SelectorBuilder | None = None
    combinator: Combinator | None = None

    for token in tokens:
        fragment = _parse_fragment(token)
        if fragment is not None:
            if compound is None:
                compound = SelectorBuilder(config)
            compound.append(*fragment)
            continue

        next_combinator = Combinator.parse(token)
        if compound is None:
            raise ValueError(f"Combinator {token!r} must follow a selector")
        if result is None:
            result = compound
        else:
            result = facade.combine(result, combinator, compound)
        combinator = next_combinator
        compound = None

    if compound is None:
        raise ValueError("Expected a selector after the last combinator")
    if result is None:
        return compound
    return facade.combine(result, combinator, compound)


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.pass_obj
def build(config: BuilderConfig | None, tokens: tuple[str, ...]) -> None:
    """Build a selector from fragment and combinator TOKENS.

    Fragments are written KIND=VALUE (element, id, class, attr, pseudo-class,
    pseudo-element). Combinators are +, >, ~ or a name such as descendant.

    Example: cssbuilder build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    try:
        selector = build_selector(list(tokens), config or BuilderConfig())
    except (SelectorError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())
