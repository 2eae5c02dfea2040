"""Inflection data stores holding the tokens, aliases and defaults of a locale.

There are two kinds of stores:

* ``InflectionData`` for regular kinds, where token names are unique
  across all kinds of a locale.
* ``StrictInflectionData`` for strict kinds (used by named patterns),
  where token names only need to be unique within a kind.

Both are populated once by the loader and treated as read-only afterwards.
"""

import logging
from typing import Dict, Hashable, Iterator, List, Optional

from .constants import ALIAS_MARKER, DEFAULT_TOKEN, NAMED_MARKER


class Token:
    """A named value inside a kind: either a true token or an alias."""

    def __init__(
            self,
            name: str,
            kind: str,
            description: str,
            target: str = None
    ) -> None:
        self.name = name
        self.kind = kind
        self.description = description
        self.target = target

    def __repr__(self):
        return f"{self.__class__.__name__}({repr(self.to_dict())})"

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @property
    def is_alias(self) -> bool:
        return self.target is not None

    def to_dict(self):
        return {
            "name": self.name,
            "kind": self.kind,
            "description": self.description,
            "target": self.target,
        }


class InflectionData:
    """Tokens of regular kinds for a single locale.

    Token names are unique across all kinds,
    so the kind of a token can be deduced from its name alone.
    """

    strict = False

    def __init__(self, locale: str = None):
        self.locale = locale
        self._tokens: Dict[Hashable, Token] = {}
        self._kinds: Dict[str, None] = {}
        self._defaults: Dict[str, str] = {}

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(locale={self.locale!r}, "
            f"kinds={self.kinds()!r})"
        )

    def _key(self, token, kind=None) -> Hashable:
        return token

    def _label(self, token: Token, kind=None) -> Hashable:
        return token.name

    def _get(self, token, kind=None) -> Optional[Token]:
        try:
            return self._tokens.get(self._key(token, kind))
        except TypeError:
            return None

    def _entries(self, kind=None) -> Iterator[Token]:
        for token in self._tokens.values():
            if kind is None or token.kind == kind:
                yield token

    def add_token(self, token: str, kind: str, description: str) -> Token:
        """Register a true token of the given kind."""
        entry = Token(token, kind, str(description))
        self._tokens[self._key(token, kind)] = entry
        self._kinds[kind] = None
        logging.debug("Adding token %s of kind %s", token, kind)
        return entry

    def add_alias(self, name: str, target: str, kind: str = None) -> bool:
        """Register an alias pointing to an existing true token.

        The alias takes over the description of its target.

        Returns
        -------
        bool: False if the target is not a true token (of the given kind)
        """
        if not name or not target:
            return False
        true_token = self._get(target, kind)
        if true_token is None or true_token.is_alias:
            return False
        if kind is not None and true_token.kind != kind:
            return False
        self._tokens[self._key(name, true_token.kind)] = Token(
            name, true_token.kind, true_token.description, target=target)
        logging.debug("Adding alias %s -> %s", name, target)
        return True

    def set_default(self, kind: str, token: str):
        """Set the default token for a kind."""
        self._defaults[kind] = token

    def has_kind(self, kind) -> bool:
        return kind in self._kinds

    def has_default(self, kind) -> bool:
        return kind in self._defaults

    def has_token(self, token, kind=None) -> bool:
        """Whether a token or an alias (of the given kind) exists."""
        return self.get_kind(token, kind) is not None

    def has_true_token(self, token, kind=None) -> bool:
        entry = self._get(token, kind)
        if entry is None or entry.is_alias:
            return False
        return kind is None or entry.kind == kind

    def has_alias(self, token, kind=None) -> bool:
        entry = self._get(token, kind)
        if entry is None or not entry.is_alias:
            return False
        return kind is None or entry.kind == kind

    def get_kind(self, token, kind=None) -> Optional[str]:
        """Look up the kind of a token, or None if it is unknown.

        If ``kind`` is given, the token must belong to it.
        """
        entry = self._get(token, kind)
        if entry is None:
            return None
        if kind is not None and entry.kind != kind:
            return None
        return entry.kind

    def get_true_token(self, token, kind=None) -> Optional[str]:
        """Resolve an alias to its true token.

        True tokens are returned as they are,
        unknown tokens (or tokens of another kind) give None.
        """
        entry = self._get(token, kind)
        if entry is None:
            return None
        if kind is not None and entry.kind != kind:
            return None
        return entry.target if entry.is_alias else entry.name

    def get_target_for_alias(self, alias, kind=None) -> Optional[str]:
        entry = self._get(alias, kind)
        return None if entry is None else entry.target

    def get_default(self, kind) -> Optional[str]:
        return self._defaults.get(kind)

    def get_description(self, token, kind=None) -> Optional[str]:
        entry = self._get(token, kind)
        if entry is None or (kind is not None and entry.kind != kind):
            return None
        return entry.description

    def kinds(self) -> List[str]:
        return list(self._kinds)

    def defaults(self) -> Dict[str, str]:
        return dict(self._defaults)

    def true_tokens(self, kind=None) -> dict:
        """Map true token names to their descriptions."""
        return {
            self._label(token, kind): token.description
            for token in self._entries(kind) if not token.is_alias
        }

    def aliases(self, kind=None) -> dict:
        """Map alias names to the true tokens they point to."""
        return {
            self._label(token, kind): token.target
            for token in self._entries(kind) if token.is_alias
        }

    def raw_tokens(self, kind=None) -> dict:
        """True tokens with descriptions merged with aliases with targets."""
        return {**self.true_tokens(kind), **self.aliases(kind)}

    def tokens(self, kind=None) -> dict:
        """Map every token and alias name to its description."""
        return {
            self._label(token, kind): token.description
            for token in self._entries(kind)
        }

    @property
    def empty(self) -> bool:
        return not self._tokens

    def kind_name(self, kind: str) -> str:
        """Name of the kind as it appears in the raw inflection data."""
        return kind

    def to_tree(self) -> dict:
        """Rebuild the raw inflection data, with aliases flattened."""
        tree: dict = {}
        for kind in self._kinds:
            subtree = tree.setdefault(self.kind_name(kind), {})
            for token in self._entries(kind):
                if token.is_alias:
                    subtree[token.name] = ALIAS_MARKER + token.target
                else:
                    subtree[token.name] = token.description
            if kind in self._defaults:
                subtree[DEFAULT_TOKEN] = self._defaults[kind]
        return tree


class StrictInflectionData(InflectionData):
    """Tokens of strict kinds for a single locale.

    Tokens are indexed by ``(kind, token)`` pairs,
    so the same token name may be used by different kinds.
    Enumerations that are not filtered by kind are keyed
    by ``(kind, token)`` pairs as well.
    """

    strict = True

    def _key(self, token, kind=None) -> Hashable:
        return (kind, token)

    def _label(self, token: Token, kind=None) -> Hashable:
        if kind is None:
            return (token.kind, token.name)
        return token.name

    def kind_name(self, kind: str) -> str:
        return NAMED_MARKER + kind
