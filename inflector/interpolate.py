"""Interpolate inflection patterns in strings.

The Interpolator picks, for every pattern found by the scanner,
the value of the first clause whose token set matches the inflection
option of the pattern's kind. When nothing matches, the value of the
default token (with excluded defaults), the free text or an empty string
is used instead.
"""

import logging
from typing import Dict, List, NamedTuple, Optional

from .constants import DEFAULT_TOKEN, LOUD_VALUE, NAMED_MARKER, OPERATOR_AND
from .errors import (
    ComplexPatternMalformed,
    InflectionOptionIncorrect,
    InflectionOptionNotFound,
    InvalidInflectionKind,
    InvalidInflectionToken,
    MisplacedInflectionToken,
)
from .inflection_data import InflectionData, StrictInflectionData
from .loader import is_valid_name
from .options import InflectionOptions
from .scanner import (
    PATTERN_REGEXP,
    Clause,
    Pattern,
    PatternContent,
    PatternType,
    has_patterns,
    parse_match,
    strip_escape,
)


class Selection(NamedTuple):
    """Outcome of matching the clauses of a single-kind pattern.

    ``matched`` is False when ``value`` comes from a fallback
    (the value of the default token) instead of a matching clause.
    """
    value: Optional[str]
    token: Optional[str] = None
    kind: Optional[str] = None
    matched: bool = False


def is_valid_option(value) -> bool:
    """Options must be set, non-empty and free of reserved characters."""
    return value is not None and is_valid_name(str(value))


class Interpolator:
    """Interpolate the patterns of strings in a single locale.

    Parameters
    ----------
    idb: InflectionData
        Store of the regular kinds of the locale
    idb_strict: StrictInflectionData
        Store of the strict kinds of the locale
    locale: str
    switches: InflectionOptions
        Switches to use for this call
    kinds: dict
        Inflection options, kind name -> token name.
        Strict kinds may be given with the ``@`` prefix.
    """

    def __init__(
            self,
            idb: InflectionData,
            idb_strict: StrictInflectionData,
            locale: str,
            switches: InflectionOptions = None,
            kinds: Dict = None
    ):
        self.idb = idb
        self.idb_strict = idb_strict
        self.locale = locale
        self.switches = InflectionOptions() if switches is None else switches
        self.kinds = {} if kinds is None else kinds

    def interpolate(self, text):
        """Replace every pattern in ``text`` with its interpolated value."""
        if not has_patterns(text):
            return text
        return PATTERN_REGEXP.sub(
            lambda match: self.interpolate_pattern(parse_match(match)), text)

    def interpolate_pattern(self, pattern: Pattern) -> str:
        if pattern.escaped:
            return pattern.unescaped
        return "".join(
            self._interpolate_content(pattern, content)
            for content in pattern.contents
        )

    def _interpolate_content(
            self, pattern: Pattern, content: PatternContent
    ) -> str:
        free_text = content.free_text or ""
        if pattern.pattern_type is PatternType.COMPLEX:
            return self._interpolate_complex(pattern, content)

        if pattern.pattern_type is PatternType.STRICT:
            kind = pattern.kinds[0]
            if not self._check_strict_kind(pattern, kind):
                return free_text
            subdb = self.idb_strict
        else:
            kind = None
            subdb = self.idb

        selection = self.select(pattern, content.clauses, subdb, kind)
        if not selection.matched:
            return free_text if selection.value is None else selection.value
        if selection.value == LOUD_VALUE:
            description = subdb.get_description(
                selection.token, selection.kind)
            return free_text if description is None else description
        return strip_escape(selection.value)

    def _check_strict_kind(self, pattern: Pattern, kind: str) -> bool:
        if is_valid_name(kind) and self.idb_strict.has_kind(kind):
            return True
        if self.switches.raises:
            raise InvalidInflectionKind(
                self.locale, pattern.source, NAMED_MARKER + kind)
        logging.debug("Unknown kind %s in pattern %s", kind, pattern.source)
        return False

    def _lookup_option(self, kind: str, strict: bool):
        """Find the inflection option for a kind.

        Strict kinds are looked up with the ``@`` prefix first.

        Returns
        -------
        tuple: (option key, whether it was given, option value)
        """
        keys = [NAMED_MARKER + kind, kind] if strict else [kind]
        for key in keys:
            if key in self.kinds:
                return key, True, self.kinds[key]
        return keys[0], False, None

    def _error_kind(self, kind, strict):
        if kind is None:
            return None
        return NAMED_MARKER + kind if strict else kind

    def select(
            self,
            pattern: Pattern,
            clauses: List[Clause],
            subdb: InflectionData,
            strict_kind: str = None
    ) -> Selection:
        """Find the first clause matching the option of the pattern's kind.

        Parameters
        ----------
        pattern: Pattern
            The pattern being interpolated, used in error messages
        clauses: list
            Clauses with a single token group each
        subdb: InflectionData
            The store holding the tokens of the pattern
        strict_kind: str
            Kind of a named pattern, or None for regular patterns
            whose kind is taken from their first token

        Returns
        -------
        Selection
        """
        raises = self.switches.raises
        strict = strict_kind is not None
        source = pattern.source
        parsed_kind = strict_kind
        default_token = subdb.get_default(strict_kind) if strict else None
        default_value = None
        option = None
        not_found = None

        for clause in clauses:
            positives = set()
            negatives = set()
            misplaced = False

            for member in clause.groups[0]:
                name = member.name
                if not is_valid_name(name):
                    if raises:
                        raise InvalidInflectionToken(
                            self.locale, source, name,
                            self._error_kind(parsed_kind, strict))
                    continue
                if self.switches.aliased_patterns:
                    name = subdb.get_true_token(name, strict_kind) or name
                kind = subdb.get_kind(name, strict_kind)
                if kind is None:
                    if raises and not strict:
                        raise InvalidInflectionToken(
                            self.locale, source, name, parsed_kind)
                    if raises:
                        raise MisplacedInflectionToken(
                            self.locale, source, name,
                            self._error_kind(strict_kind, strict))
                    logging.debug("Unknown token %s in pattern %s",
                                  name, source)
                    continue
                if parsed_kind is None:
                    parsed_kind = kind
                    default_token = subdb.get_default(kind)
                elif kind != parsed_kind:
                    if raises:
                        raise MisplacedInflectionToken(
                            self.locale, source, name,
                            self._error_kind(parsed_kind, strict))
                    logging.debug("Token %s in pattern %s is not of kind %s",
                                  name, source, parsed_kind)
                    misplaced = True
                    break
                if member.negated:
                    negatives.add(name)
                else:
                    positives.add(name)
                    if name == default_token:
                        default_value = clause.value

            if misplaced:
                continue
            if not positives and not negatives:
                if raises:
                    raise InvalidInflectionToken(
                        self.locale, source, clause.tokens,
                        self._error_kind(parsed_kind, strict))
                continue

            key, given, option = self._lookup_option(parsed_kind, strict)
            passed = self._passed_token(
                subdb, pattern, clause, parsed_kind, default_token,
                key, given, option)
            if not given and raises and not_found is None:
                not_found = InflectionOptionNotFound(
                    self.locale, source, clause.tokens, key)

            if not negatives:
                hit = passed in positives
            elif len(negatives) == 1:
                hit = passed not in negatives
            else:
                hit = True
            if hit:
                return Selection(clause.value, passed, parsed_kind, True)

        if not_found is not None:
            raise not_found

        if (
            self.switches.excluded_defaults
            and parsed_kind is not None
            and option is not None
            and subdb.has_token(str(option), parsed_kind)
        ):
            return Selection(default_value, kind=parsed_kind)
        return Selection(None, kind=parsed_kind)

    def _passed_token(
            self, subdb, pattern, clause, kind, default_token,
            key, given, option
    ) -> Optional[str]:
        """Resolve the inflection option to a true token of the kind."""
        unknown_defaults = self.switches.unknown_defaults
        if not given:
            passed = default_token
        elif not is_valid_option(option):
            if self.switches.raises:
                raise InflectionOptionIncorrect(
                    self.locale, pattern.source, clause.tokens, key, option)
            passed = default_token if unknown_defaults else None
        else:
            passed = str(option)

        if passed == DEFAULT_TOKEN:
            passed = default_token
        if passed is not None:
            passed = subdb.get_true_token(passed, kind)
            if passed is None and unknown_defaults:
                passed = default_token

        if passed is None and given and self.switches.raises:
            raise InflectionOptionIncorrect(
                self.locale, pattern.source, clause.tokens, key, option)
        return passed

    def _interpolate_complex(
            self, pattern: Pattern, content: PatternContent
    ) -> str:
        """Interpolate a pattern using more than one strict kind.

        Each clause is split into one token group per kind
        and matches only if every group matches the option of its kind.
        """
        free_text = content.free_text or ""
        kinds = pattern.kinds
        for kind in kinds:
            if not self._check_strict_kind(pattern, kind):
                return free_text

        for clause in content.clauses:
            parts = clause.tokens.split(OPERATOR_AND)
            if len(clause.groups) != len(kinds) or not all(parts):
                if self.switches.raises:
                    raise ComplexPatternMalformed(
                        self.locale, pattern.source, clause.tokens,
                        pattern.kind_spec)
                logging.debug("Malformed complex pattern %s", pattern.source)
                return free_text

            descriptions = []
            for kind, part, group in zip(kinds, parts, clause.groups):
                component = Clause(part, [group], clause.value)
                selection = self.select(
                    pattern, [component], self.idb_strict, kind)
                # a value without a match comes from excluded defaults
                if not selection.matched and selection.value is None:
                    break
                if clause.value == LOUD_VALUE:
                    description = self.idb_strict.get_description(
                        selection.token, kind)
                    if description is None:
                        break
                    descriptions.append(description)
            else:
                if clause.value == LOUD_VALUE:
                    return strip_escape(" ".join(descriptions))
                return strip_escape(clause.value)
        return free_text


def interpolate(
        text,
        idb: InflectionData,
        idb_strict: StrictInflectionData,
        locale: str = None,
        switches: InflectionOptions = None,
        kinds: dict = None
):
    """Interpolate ``text`` with a one-off Interpolator."""
    return Interpolator(idb, idb_strict, locale, switches, kinds).interpolate(
        text)
