"""Utility functions for inflector"""

import importlib
import importlib.util
import logging
import sys
from pathlib import Path
from typing import Dict, List, Union

import autopep8
import pandas as pd
from schema import SchemaError

from .constants import EXPORT_FILENAME, TOKEN_TABLE_COLUMNS, locales_schema
from .errors import InflectionConfigurationError


def ensure_path_exists(path):
    """Make sure a directory exists and is a Path object."""
    path_obj = Path(path)
    path_obj.mkdir(exist_ok=True, parents=True)
    return path_obj


def resolve_rel_path(file_rel_path: Union[str, Path]) -> Path:
    """Resolve the full path from a potential relative path to the local or parent directory."""

    full_path = Path(file_rel_path).resolve()
    if not full_path.exists():
        full_path = Path.cwd().parent / file_rel_path
    return full_path


def load_module_from_path(file_path):
    """Use importlib to load a module from a .py file path."""
    module_path = resolve_rel_path(file_path)
    if module_path.suffix != ".py":
        raise ValueError(
            f"Inappropriate file type: {module_path.suffix} ({file_path})")
    module_name = module_path.stem

    spec = importlib.util.spec_from_file_location(module_name, module_path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


def load_module_dict(module_path) -> Dict:
    """Load a dict of the public variables defined in a python module, ``{var_name:value}``."""
    module = load_module_from_path(module_path)
    module_dict = module.__dict__
    return {
        key: value for key, value in module_dict.items()
        if value is not None and not key.startswith("_")
        and not callable(value) and not isinstance(value, type(sys))
    }


def load_config(filename):
    """Load variable names (lower case) and their values as a dict from a .py file."""
    try:
        return {k.lower(): v for k, v in load_module_dict(filename).items()}
    except FileNotFoundError:
        return {}


def load_inflections_file(file_path: Union[str, Path]) -> Dict[str, dict]:
    """Load raw inflection data from a .py file.

    Each public variable of the module is a locale identifier,
    and its value is the raw inflection data for that locale.

    Raises
    ------
    InflectionConfigurationError
        If the module content is not shaped like inflection data
    """
    logging.info("Load inflection data from %s", file_path)
    locales = load_module_dict(file_path)
    try:
        return locales_schema.validate(locales)
    except SchemaError as error:
        logging.error("Couldn't validate inflection data in %s: %s",
                      file_path, error)
        raise InflectionConfigurationError(
            f"inflection data in {file_path} is malformed: {error}"
        ) from error


def make_list(value):
    """Turn a string of locales or kinds, or another collection, into a list.

    Strings are split on commas or newlines, and empty items are dropped.
    """
    if isinstance(value, list):
        return value
    if isinstance(value, str):
        separator = "," if "," in value else "\n"
        return [item.strip() for item in value.split(separator) if item.strip()]
    return list(value)


def parse_option_pairs(pairs) -> Dict[str, str]:
    """Turn ``kind=token`` strings into an inflection options dict."""
    options = {}
    for pair in pairs or []:
        kind, sep, token = pair.partition("=")
        if not sep or not kind.strip():
            raise ValueError(f"Expected an option like kind=token, got {pair!r}")
        options[kind.strip()] = token.strip()
    return options


def tokens_to_df(inflector, locales: List[str] = None) -> pd.DataFrame:
    """Create a table with all tokens of the given locales.

    Parameters
    ----------
    inflector: Inflector
    locales: list
        Locales to include, defaults to all inflected locales

    Returns
    -------
    pd.DataFrame
        One row per token or alias, with the columns TOKEN_TABLE_COLUMNS
    """
    if locales is None:
        locales = inflector.locales()
    rows = []
    for locale in locales:
        for store in (inflector.data(locale), inflector.strict_data(locale)):
            for kind in store.kinds():
                default = store.get_default(kind)
                for name, description in store.tokens(kind).items():
                    rows.append({
                        "locale": locale,
                        "kind": store.kind_name(kind),
                        "token": name,
                        "description": description,
                        "target": store.get_target_for_alias(name, kind),
                        "default": name == default,
                        "strict": store.strict,
                    })
    return pd.DataFrame(rows, columns=TOKEN_TABLE_COLUMNS)


def write_table(output_file: Union[str, Path], data: pd.DataFrame):
    """Write a table of inflection data to a csv file."""
    logging.info("Write inflection table to %s", output_file)
    data.to_csv(output_file, header=True, index=False)


def format_inflections(trees: Dict[str, dict]) -> str:
    """Format code strings that assign inflection data to locale variables."""
    code = '"""Normalized inflection data."""\n'
    for locale, tree in trees.items():
        if not locale.isidentifier():
            raise ValueError(
                f"Locale {locale!r} cannot be written as a python variable")
        code += (
            f"\n"
            f"{locale} = {tree!r}"
            f"\n")
    return autopep8.fix_code(code, options={'aggressive': 2})


def save_inflections(trees: Dict[str, dict], output_dir=".") -> Path:
    """Save normalized inflection data to a python file in output_dir."""
    output_dir = ensure_path_exists(output_dir)
    out_file = output_dir / EXPORT_FILENAME
    logging.info("Save inflection data for %s to %s", list(trees), out_file)
    out_file.write_text(format_inflections(trees), encoding="utf-8")
    return out_file


def log_level(verbosity: int):
    """Calculate the log level given by the number of -v flags.

    0 = logging.WARNING (30)
    1 = logging.INFO (20)
    2 = logging.DEBUG (10)
    """
    return (3 - verbosity) * 10 if verbosity in (0, 1, 2) else 10


def set_logging_config(verbose=False, logfile="log.txt"):
    """Configure logging level and destination based on user input."""
    logging.basicConfig(
        level=logging.DEBUG,
        format=(
            "%(asctime)s | %(levelname)s "
            "| %(module)s-%(funcName)s-%(lineno)04d | %(message)s"),
        datefmt='%Y-%m-%d %H:%M',
        filename=logfile,
        filemode='a')

    if verbose:
        # messages to stderr, in addition to the log file
        console = logging.StreamHandler()
        console.setLevel(log_level(verbose))
        formatter = logging.Formatter(
            '%(asctime)-10s | %(levelname)s | %(message)s')
        console.setFormatter(formatter)
        logging.getLogger('').addHandler(console)

    return verbose
