"""CLI command: selectorkit selector -- build and print a CSS selector."""

from __future__ import annotations

import sys

import click

from selectorkit.selector import COMBINATORS, Selector, SelectorError, combine

# Fragment keywords accepted on the command line, mapped to append methods.
_APPENDERS = {
    "element": Selector.with_element,
    "id": Selector.with_id,
    "class": Selector.with_class,
    "attr": Selector.with_attribute,
    "pseudo-class": Selector.with_pseudo_class,
    "pseudo-element": Selector.with_pseudo_element,
}


def _build_compound(tokens: list[str]) -> Selector:
    """Apply KIND=VALUE tokens to an empty selector, in the given order."""
    result = Selector()
    for token in tokens:
        kind, sep, value = token.partition("=")
        if not sep or kind not in _APPENDERS:
            raise click.BadParameter(
                f"expected KIND=VALUE with KIND one of {', '.join(_APPENDERS)}, got {token!r}",
                param_hint="PARTS",
            )
        result = _APPENDERS[kind](result, value)
    return result


def build_from_parts(parts: tuple[str, ...]) -> Selector:
    """Build a selector from fragment tokens and combinator tokens.

    Combinator tokens split the parts into compound selectors, which are
    combined left to right.
    """
    groups: list[list[str]] = [[]]
    combinators: list[str] = []
    for part in parts:
        if part in COMBINATORS:
            combinators.append(part)
            groups.append([])
        else:
            groups[-1].append(part)

    if any(not group for group in groups):
        raise click.BadParameter(
            "every combinator needs a selector on both sides", param_hint="PARTS"
        )

    result = _build_compound(groups[0])
    for combinator, group in zip(combinators, groups[1:]):
        result = combine(result, combinator, _build_compound(group))
    return result


@click.command()
@click.argument("parts", nargs=-1, required=True)
def selector(parts: tuple[str, ...]) -> None:
    """Build a CSS selector from KIND=VALUE parts and print it.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    A part that is a combinator (' ', '+', '~', '>') joins the selectors
    on either side of it.

    Example: selectorkit selector element=a 'attr=href$=".png"' pseudo-class=focus
    """
    try:
        result = build_from_parts(parts)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(result.render())
