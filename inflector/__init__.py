"""Grammatical inflection patterns for translated strings."""

from .api import Inflector
from .errors import (
    BadInflectionAlias,
    BadInflectionKind,
    BadInflectionToken,
    ComplexPatternMalformed,
    DuplicatedInflectionToken,
    InflectionConfigurationError,
    InflectionError,
    InflectionOptionIncorrect,
    InflectionOptionNotFound,
    InflectionPatternError,
    InvalidInflectionKind,
    InvalidInflectionToken,
    InvalidLocale,
    InvalidOptionForKind,
    MisplacedInflectionToken,
)
from .inflection_data import InflectionData, StrictInflectionData, Token
from .loader import load_inflection_tokens
from .options import InflectionOptions
