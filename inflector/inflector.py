"""Command line interface for interpolating inflection patterns."""

import logging
import pathlib
import pprint

import click

from .api import Inflector
from .constants import TOKENS_PREFIX
from .errors import InflectionError
from .utils import (
    ensure_path_exists,
    load_config,
    load_inflections_file,
    make_list,
    parse_option_pairs,
    save_inflections,
    set_logging_config,
    tokens_to_df,
    write_table,
)

CFG = {
    'inflections_file': 'inflections.py',
    'locale': 'en',
    'output_dir': 'output',
}
CONFIG_FILE = load_config("./config.py")
CFG.update(CONFIG_FILE)
CONTEXT_SETTINGS = dict(
    default_map=CFG,
    help_option_names=['-h', '--help'],
)


def split_multiple_args(ctx, param, arg):
    """Create a list from an option parameter."""
    if arg is None:
        return
    if isinstance(arg, (list, tuple)):
        return [item for value in arg for item in make_list(value)]
    return make_list(arg)


def parse_kinds(ctx, param, pairs):
    try:
        return parse_option_pairs(pairs)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error


def configure_logging(ctx, param, verbose):
    """Configure logging level and destination based on user input."""
    output_dir = ensure_path_exists(CFG.get("output_dir"))
    return set_logging_config(verbose, logfile=(output_dir / "log.txt"))


def fail(error):
    """Report an inflection error and stop with a non-zero exit status."""
    logging.error(error)
    click.secho(f"{type(error).__name__}: {error}", fg="red", err=True)
    click.get_current_context().exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-i",
    "--inflections-file",
    type=click.Path(resolve_path=True, dir_okay=False, path_type=pathlib.Path),
    help="Python file with inflection data, one variable per locale.",
)
@click.option(
    "-l",
    "--locale",
    type=str,
    help="Locale to interpolate patterns or list kinds for.",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    callback=configure_logging,
    help="Print logging messages to the console in addition to the log file. "
         "-v is informative, -vv is detailed (for debugging)."
)
@click.pass_context
def main(ctx, inflections_file, locale, verbose):
    """Interpolate inflection patterns with the given inflection data.

    Default values for the inflection data file, the locale
    and the output directory are specified in the config.py file.

    If provided, CLI arguments override the default values from the config.
    """
    logging.info("START LOG")
    CFG.update(ctx.params)
    if verbose:
        click.secho("Configuration values:", fg="yellow")
        click.echo(pprint.pformat(CFG))
        click.echo(f"Invoked command: {ctx.invoked_subcommand}")
    inflector = Inflector()
    try:
        inflector.load_all(load_inflections_file(inflections_file))
    except (InflectionError, ValueError, FileNotFoundError) as error:
        fail(error)
    ctx.obj = inflector


@main.command("interpolate")
@click.argument("text")
@click.option(
    "-k",
    "--kind",
    "kinds",
    multiple=True,
    callback=parse_kinds,
    help="Inflection option given as kind=token. "
         "Prefix the kind with @ to target a strict kind only.",
)
@click.option("--raises/--no-raises", default=None,
              help="Raise errors for malformed patterns and options.")
@click.option("--aliased-patterns/--no-aliased-patterns", default=None,
              help="Allow aliases as tokens in patterns.")
@click.option("--unknown-defaults/--no-unknown-defaults", default=None,
              help="Use the default token for unknown options.")
@click.option("--excluded-defaults/--no-excluded-defaults", default=None,
              help="Use the default token's value for tokens "
                   "missing from a pattern.")
@click.pass_context
def interpolate_text(ctx, text, kinds, raises, aliased_patterns,
                     unknown_defaults, excluded_defaults):
    """Interpolate the inflection patterns in TEXT."""
    inflector = ctx.obj
    switches = {
        "raises": raises,
        "aliased_patterns": aliased_patterns,
        "unknown_defaults": unknown_defaults,
        "excluded_defaults": excluded_defaults,
    }
    options = dict(kinds)
    for key, name in inflector.options.known.items():
        options[key] = switches[name]
    try:
        result = inflector.interpolate(text, CFG.get("locale"), options)
    except InflectionError as error:
        fail(error)
    click.echo(result)


@main.command("kinds")
@click.pass_obj
def list_kinds(inflector):
    """List the inflection kinds of the locale, strict kinds prefixed by @."""
    locale = CFG.get("locale")
    try:
        kinds = inflector.kinds(locale)
        strict_kinds = inflector.strict_kinds(locale)
    except InflectionError as error:
        fail(error)
    for kind in kinds:
        default = inflector.default_token(kind, locale)
        click.echo(kind if default is None else f"{kind} (default: {default})")
    for kind in strict_kinds:
        click.secho(f"@{kind}", fg="cyan")


@main.command("tokens")
@click.option(
    "-o",
    "--outfile",
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
    help="File name where the token table will be saved. "
         "Defaults to a file in the output directory.",
)
@click.option(
    "-a",
    "--all-locales",
    is_flag=True,
    help="Include the tokens of every loaded locale.",
)
@click.pass_obj
def write_tokens(inflector, outfile, all_locales):
    """Write a table of the tokens and aliases to a csv file."""
    locales = None if all_locales else [CFG.get("locale")]
    if outfile is None:
        output_dir = ensure_path_exists(CFG.get("output_dir"))
        suffix = "all" if all_locales else CFG.get("locale")
        outfile = output_dir / f"{TOKENS_PREFIX}_{suffix}.csv"
    click.secho(f"Write inflection tokens to {outfile}", fg="cyan")
    try:
        data = tokens_to_df(inflector, locales)
    except InflectionError as error:
        fail(error)
    write_table(outfile, data)


@main.command("export")
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False, path_type=pathlib.Path),
    help="The directory path that the normalized data is written to.",
)
@click.option(
    "-L",
    "--locales",
    type=str,
    multiple=True,
    callback=split_multiple_args,
    help="Export one or more locales, separated by a simple comma (,). "
         "Defaults to all loaded locales.",
)
@click.pass_obj
def export_inflections(inflector, output_dir, locales):
    """Write normalized inflection data to a python file."""
    if output_dir is None:
        output_dir = CFG.get("output_dir")
    locales = locales or inflector.locales()
    try:
        trees = {locale: inflector.to_tree(locale) for locale in locales}
        out_file = save_inflections(trees, output_dir)
    except (InflectionError, ValueError) as error:
        fail(error)
    click.secho(f"Done processing. Output is in {out_file}", fg="cyan")
