from typing import List, Optional

import click
import typer
from typer.core import TyperGroup

from cidrexpand.log import configure_logging
from cidrexpand.ranges.membership import check_all, split_check_tokens
from cidrexpand.ranges.output import (
    format_checks,
    format_checks_json,
    format_expansions,
    format_expansions_json,
)
from cidrexpand.ranges.targets import expand as expand_range

__version__ = "0.0.1"


class DefaultExpandGroup(TyperGroup):
    """Runs ``expand`` when the first argument is not a command name."""

    def resolve_command(self, ctx: click.Context, args: List[str]):
        if args and self.get_command(ctx, args[0]) is None:
            args = ["expand", *args]
        return super().resolve_command(ctx, args)


app = typer.Typer(
    name="cidr",
    cls=DefaultExpandGroup,
    no_args_is_help=True,
    help="Expand CIDR ranges to individual IP addresses.\n\n"
    "cidr expand 8.8.8.8/24 192.168.10.1/30, or simply cidr 8.8.8.8/24 192.168.10.1/30",
)


def _version(value: bool):
    if value:
        typer.echo(f"cidr version {__version__}")
        raise typer.Exit()


def _wants_json(ctx: typer.Context, json_output: bool) -> bool:
    return json_output or bool((ctx.obj or {}).get("json"))


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", "-j", help="generate JSON output"),
    log_level: str = typer.Option("WARNING", "--log-level", envvar="CIDR_LOG_LEVEL", help="Logging level"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version, is_eager=True, help="Show the version and exit"
    ),
):
    configure_logging(log_level)
    ctx.obj = {"json": json_output}
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("expand", help="Expand one or more space-separated CIDR ranges into IP addresses")
@app.command("e", hidden=True)
def expand(
    ctx: typer.Context,
    ranges: Optional[List[str]] = typer.Argument(None, help="CIDR ranges, hosts or host:ports"),
    json_output: bool = typer.Option(False, "--json", "-j", help="generate JSON output"),
):
    if not ranges:
        typer.echo(ctx.parent.get_help() if ctx.parent else ctx.get_help())
        raise typer.Exit()

    expansions = [(arg, expand_range(arg)) for arg in ranges]
    if _wants_json(ctx, json_output):
        typer.echo(format_expansions_json(expansions))
    else:
        typer.echo(format_expansions(expansions), nl=False)


@app.command(
    "check",
    help="Check whether CIDR ranges contain IP addresses: cidr check 192.168.10.1/30 contains 192.168.10.3",
)
@app.command("c", hidden=True)
def check(
    ctx: typer.Context,
    tokens: Optional[List[str]] = typer.Argument(None, help="RANGE... contains IP..."),
    json_output: bool = typer.Option(False, "--json", "-j", help="generate JSON output"),
):
    if not tokens or len(tokens) < 3:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    cidrs, ips = split_check_tokens(tokens)
    checks = check_all(cidrs, ips)
    if _wants_json(ctx, json_output):
        typer.echo(format_checks_json(checks))
    else:
        typer.echo(format_checks(checks))


if __name__ == "__main__":
    app()
