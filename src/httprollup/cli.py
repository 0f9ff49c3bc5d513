"""Command-line interface: roll up a query string and print it as JSON."""
from __future__ import annotations

import importlib.metadata
import json
import os
import platform
import typing as t

import click
import dotenv
from werkzeug.exceptions import RequestEntityTooLarge

from httprollup import __version__
from httprollup.config import Config
from httprollup.errors import RollupError
from httprollup.logging import create_logger
from httprollup.rollup import rollup_query_string
from httprollup.sources import read_query_string


def get_version(ctx: click.Context, param: click.Parameter, value: t.Any) -> None:
    if not value or ctx.resilient_parsing:
        return
    werkzeug_version = importlib.metadata.version("werkzeug")
    click.echo(
        f"Python {platform.python_version()}\n"
        f"httprollup {__version__}\n"
        f"Werkzeug {werkzeug_version}",
        color=ctx.color,
    )
    ctx.exit()


version_option = click.Option(
    ["--version"],
    help="Show the httprollup version.",
    expose_value=False,
    callback=get_version,
    is_flag=True,
    is_eager=True,
)


def get_load_dotenv(default: bool = True) -> bool:
    if not default:
        return False
    return not bool(os.environ.get("ROLLUP_SKIP_DOTENV"))


def load_dotenv(
    path: str | os.PathLike[str] | None = None, load_defaults: bool = True
) -> bool:
    """Load ``.rollupenv``, ``.env`` and *path* into ``os.environ``.

    Variables that are already set are never overwritten. Returns True if
    any file provided variables.
    """
    data: dict[str, str | None] = {}
    if load_defaults:
        for default_name in (".rollupenv", ".env"):
            default_path = dotenv.find_dotenv(default_name, usecwd=True)
            if not default_path:
                continue
            data |= dotenv.dotenv_values(default_path, encoding="utf-8")

    if path is not None and os.path.isfile(path):
        data |= dotenv.dotenv_values(path, encoding="utf-8")

    for key, value in data.items():
        if key in os.environ or value is None:
            continue
        os.environ[key] = value

    return bool(data)


def _env_file_callback(
    ctx: click.Context, param: click.Option, value: str | None
) -> str | None:
    load_defaults = get_load_dotenv()
    if value is not None or load_defaults:
        load_dotenv(value, load_defaults=load_defaults)
    return value


_env_file_option = click.Option(
    ["-e", "--env-file"],
    type=click.Path(exists=True, dir_okay=False),
    help=(
        "Load environment variables from this file, taking precedence over"
        " those set by '.env' and '.rollupenv'. Variables set directly in the"
        " environment take highest precedence."
    ),
    is_eager=True,
    expose_value=False,
    callback=_env_file_callback,
)


def _read_query(pairs: tuple[str, ...], cgi: bool, config: Config) -> str:
    if cgi:
        environ: dict[str, t.Any] = dict(os.environ)
        environ.setdefault("REQUEST_METHOD", "GET")
        environ["wsgi.input"] = click.get_binary_stream("stdin")
        return read_query_string(environ=environ, config=config)
    if pairs:
        return read_query_string(argv=pairs, config=config)

    stdin = click.get_text_stream("stdin")
    if stdin.isatty():
        click.echo("(offline mode: enter name=value pairs on standard input)", err=True)
    return read_query_string(stdin=stdin, config=config)


@click.command(
    "httprollup",
    params=[_env_file_option, version_option],
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("pairs", nargs=-1)
@click.option(
    "-d",
    "--delim",
    default=None,
    help="Token delimiter. Defaults to ';' or ROLLUP_DELIM.",
)
@click.option(
    "--force-list/--no-force-list",
    default=None,
    help="Keep names flat and store every value as a list.",
)
@click.option(
    "--cgi",
    is_flag=True,
    help="Read the request from the CGI environment (body on stdin).",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=2,
    show_default=True,
    help="JSON indentation; 0 prints compact output.",
)
@click.option("--debug/--no-debug", default=False, help="Log to stderr.")
def cli(
    pairs: tuple[str, ...],
    delim: str | None,
    force_list: bool | None,
    cgi: bool,
    indent: int,
    debug: bool,
) -> None:
    """Roll a query string up into nested JSON.

    PAIRS are name=value words such as 'employee.name.first=Jane'. Without
    PAIRS or --cgi, words are read from standard input.
    """
    logger = create_logger(debug)

    config = Config()
    config.from_prefixed_env("ROLLUP")
    if delim is not None:
        config["DELIM"] = delim
    if force_list is not None:
        config["FORCE_LIST"] = force_list
    logger.debug("Using %r", config)

    try:
        tree = rollup_query_string(_read_query(pairs, cgi, config), config)
    except RequestEntityTooLarge as e:
        raise click.ClickException(e.description) from e
    except (RollupError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(json.dumps(tree, indent=indent or None, ensure_ascii=False))
