"""Command line interface for the request parser."""
from __future__ import annotations

import importlib.metadata
import json
import platform
import typing as t

import click

from httpline import __version__
from httpline.config import Config, default_config
from httpline.exceptions import MalformedRequestLine
from httpline.parser import HEADER_POLICIES, RequestParser


@click.group(
    name="httpline",
    help=(
        "Parse raw HTTP/1.x requests.\n\n"
        "Settings are read from HTTPLINE_* environment variables, for"
        " example HTTPLINE_HEADER_VALUE_POLICY=truncate. Command line options"
        " take precedence."
    ),
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    config = Config(default_config)
    config.from_prefixed_env()
    ctx.obj = config


@cli.command("parse", short_help="Parse a request and print it as JSON.")
@click.argument("file", type=click.File("rb"), default="-")
@click.option(
    "--header-policy",
    type=click.Choice(HEADER_POLICIES),
    default=None,
    help=(
        "How to treat header values containing ':'. 'rejoin' keeps the"
        " whole value, 'truncate' stops at the second ':'."
    ),
)
@click.option("--encoding", default=None, help="Encoding of the request bytes.")
@click.option(
    "--indent", type=int, default=2, show_default=True, help="JSON indentation."
)
@click.option("--debug", is_flag=True, help="Log parser decisions at DEBUG level.")
@click.pass_obj
def parse_command(
    config: Config,
    file: t.BinaryIO,
    header_policy: str | None,
    encoding: str | None,
    indent: int,
    debug: bool,
) -> None:
    """Parse the request in FILE, or stdin when FILE is omitted or '-'."""
    if header_policy is not None:
        config["HEADER_VALUE_POLICY"] = header_policy
    if encoding is not None:
        config["ENCODING"] = encoding
    if debug:
        config["DEBUG"] = True

    parser = RequestParser(config)
    try:
        request = parser.parse(file.read())
    except MalformedRequestLine as e:
        raise click.ClickException(e.description) from e
    except (ValueError, LookupError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(json.dumps(request.to_dict(), indent=indent, ensure_ascii=False))


@cli.command("version", short_help="Show version information.")
def version_command() -> None:
    click.echo(
        f"Python {platform.python_version()}\n"
        f"httpline {__version__}\n"
        f"Click {importlib.metadata.version('click')}\n"
        f"Werkzeug {importlib.metadata.version('werkzeug')}"
    )


def main() -> None:
    cli.main(prog_name="httpline")
