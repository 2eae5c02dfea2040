"""Inflection data for the command line interface.

Each variable is a locale identifier mapped to its inflection kinds.
Tokens pointing to other tokens with ``@`` are aliases,
``default`` names the default token of a kind,
and kinds prefixed with ``@`` are used by named patterns,
e.g. ``@gender{m:he|f:she}``.
"""

en = {
    "gender": {
        "m": "male",
        "f": "female",
        "n": "neuter",
        "masculine": "@m",
        "feminine": "@f",
        "neuter": "@n",
        "neutral": "@neuter",
        "default": "neutral",
    },
    "person": {
        "i": "first",
        "you": "second",
        "he": "third",
    },
    "@gender": {
        "m": "male",
        "f": "female",
        "n": "neuter",
        "default": "n",
    },
    "@number": {
        "s": "singular",
        "p": "plural",
        "default": "s",
    },
}

pl = {
    "gender": {
        "m": "mężczyzna",
        "f": "kobieta",
        "n": "nijaki",
        "masculine": "@m",
        "feminine": "@f",
        "default": "n",
    },
    "@gender": {
        "m": "męski",
        "f": "żeński",
        "n": "nijaki",
        "default": "n",
    },
    "@tense": {
        "past": "przeszły",
        "present": "teraźniejszy",
        "default": "present",
    },
}
