"""Constant values used by inflector.

* Markers and operators of the inflection pattern syntax.
* Reserved names and option keys.
* Validation schemas for the raw inflection data.
"""

from schema import Schema, Optional, Or

# Pattern markers
PATTERN_MARKER = "@"
PATTERN_BEGIN = "{"
PATTERN_END = "}"
NAMED_MARKER = "@"
ALIAS_MARKER = "@"
LOUD_VALUE = "~"

# Escapes
ESCAPE = "\\"

# Operators between clauses and inside token sets
OPERATOR_OR = "|"
OPERATOR_AND = "+"
OPERATOR_ASSIGN = ":"
TOKEN_OR = ","
TOKEN_NOT = "!"

RESERVED_CHARS = frozenset("+|:!@{},")
"""Characters that cannot appear in token or kind names."""

DEFAULT_TOKEN = "default"
"""Name of the token that points to the default token of a kind."""

MAX_ALIAS_HOPS = 64

# Reserved keys of key_to_pattern() mappings
KEY_PREFIX = "@prefix"
KEY_SUFFIX = "@suffix"
KEY_KIND = "@kind"
KEY_FREE = "@free"

SWITCH_PREFIX = "inflector_"

RESERVED_OPTION_KEYS = (
    "inflector_raises",
    "inflector_aliased_patterns",
    "inflector_unknown_defaults",
    "inflector_excluded_defaults",
)
"""Option keys consumed by interpolate() before kinds are matched."""

# Define validation Schemas
token_tree_schema = Schema({Optional(str): object})

inflections_schema = Schema({
    Optional(str): Or(None, token_tree_schema.schema),
})
"""Raw inflection data of a locale: kind -> {token -> description}"""

locales_schema = Schema({
    Optional(str): inflections_schema.schema,
})

TOKEN_TABLE_COLUMNS = [
    "locale",
    "kind",
    "token",
    "description",
    "target",
    "default",
    "strict",
]

TOKENS_PREFIX = "inflection_tokens"
EXPORT_FILENAME = "inflections_normalized.py"
