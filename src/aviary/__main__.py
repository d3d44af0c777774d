## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# aviary — Classical combinator birds, built from arity-checked function composition.
#

import sys
from dataclasses import dataclass

import click

from .errors import AviaryError, ArityError, CombinatorNameError, SignatureTypeError
from .combinators import Combinator
from .formatting import write_without_ansi, format_term, format_call, build_reading, interpretations

from . import api


@dataclass(frozen=True)
class CliConfig:
    plain: bool
    max_arity: int


def _fatal_error(message: str, detail: str, exc_type: str = None) -> None:
    header = detail if not exc_type else f"{detail} (Exception: \033[33m{exc_type}\033[0m)"
    print(f'\033[30;43m {message} \033[0m {header}', file=sys.stderr)
    sys.exit(1)

def _handle_exception(exc: AviaryError, symbol: str) -> None:
    if isinstance(exc, CombinatorNameError):
        detail = f"Combinator `\033[1;97m{exc.aviary_token}\033[0m` was not found in catalog!"
        _fatal_error("LOOKUP ERROR.", detail, type(exc).__name__)
    elif isinstance(exc, SignatureTypeError):
        _fatal_error("TYPE ERROR.", f"Building `\033[97m{symbol}\033[0m` failed: {exc}", type(exc).__name__)
    elif isinstance(exc, ArityError):
        _fatal_error("ARITY ERROR.", f"Building `\033[97m{symbol}\033[0m` failed: {exc}", type(exc).__name__)
    else:
        _fatal_error("ERROR.", f"Building `\033[97m{symbol}\033[0m` failed: {exc}", type(exc).__name__)


def _parse_shapes(assignments: tuple[str, ...]) -> dict:
    shapes = {}
    for item in assignments:
        name, sep, value = item.partition('=')
        if not sep or not name:
            raise click.BadParameter(f"Expected `name=arity`, got `{item}`.")
        try:
            arities = tuple(int(v) for v in value.split(','))
        except ValueError:
            raise click.BadParameter(f"Arity for `{name}` must be an integer or a comma-separated list, got `{value}`.") from None
        shapes[name] = arities[0] if len(arities) == 1 else arities
    return shapes


@click.group()
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.option('--max-arity', default=3, show_default=True, envvar='AVIARY_MAX_ARITY', type=click.IntRange(1, 6),
              help='Largest arity tried for each parameter when listing interpretations.')
@click.pass_context
def cli(ctx: click.Context, plain: bool, max_arity: int) -> None:
    ctx.ensure_object(dict)
    ctx.obj['config'] = CliConfig(plain=plain, max_arity=max_arity)

    if plain:
        writer = write_without_ansi(sys.stdout.write)
        sys.stdout.write, sys.stderr.write = writer, writer


@cli.command('list')
def list_catalog() -> None:
    """List every combinator in the catalog."""
    for entry in api.catalog:
        print(f"\033[1;97m{entry.symbol:<6}\033[0m {entry.ascii_name:<12} {entry.name:<28} \033[90m{entry.source}\033[0m")


@cli.command('show')
@click.argument('symbol')
@click.pass_context
def show(ctx: click.Context, symbol: str) -> None:
    """Show the definition and nested-call readings of one combinator."""
    config: CliConfig = ctx.obj['config']
    try:
        entry = api.lookup(symbol)
        print(f"\033[1;97m{entry.symbol}\033[0m = {entry.name}  \033[90m({entry.ascii_name})\033[0m")
        print(f"lambda\t{entry.source}")
        print(f"arity\t{entry.arity}")
        if not isinstance(entry, Combinator):
            print(f"returns\t{entry.returns}")
            return

        print(f"compose\t{format_term(entry.form)}")
        for shapes, text in interpretations(entry, max_arity=config.max_arity):
            arities = ' '.join(f"{k}={v}" for k, v in shapes.items())
            print(f"\t\033[97m{text}\033[0m  \033[90m[{arities}]\033[0m")
    except AviaryError as exc:
        _handle_exception(exc, symbol)


@cli.command('explain')
@click.argument('symbol')
@click.argument('assignments', nargs=-1)
def explain(symbol: str, assignments: tuple[str, ...]) -> None:
    """Build a combinator over placeholders with the given `name=arity` shapes and print the call."""
    shapes = _parse_shapes(assignments)
    try:
        entry = api.lookup(symbol)
        if not isinstance(entry, Combinator):
            raise click.UsageError(f"`{entry.symbol}` = {entry.name} has no finite reading; it returns {entry.returns}.")
        shapes = {p: shapes.get(p, 1) for p in entry.form.params} | shapes
        print(format_call(build_reading(entry, shapes)))
    except AviaryError as exc:
        _handle_exception(exc, symbol)


def main(argv: list[str] | None = None) -> None:
    cli.main(args=argv, prog_name='aviary')


if __name__ == "__main__":
    main()
