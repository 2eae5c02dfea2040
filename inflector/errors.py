"""Errors raised by inflector.

Configuration errors are raised whenever inflection data cannot be loaded.
Pattern errors are raised by the interpolation routines only when the
``raises`` switch is turned on.
"""

from .constants import NAMED_MARKER, DEFAULT_TOKEN


class InflectionError(ValueError):
    """Base class of all inflection errors."""


class InvalidLocale(InflectionError):
    """The locale identifier is empty or missing."""

    def __init__(self, locale):
        self.locale = locale
        super().__init__(f"locale {locale!r} is not a valid locale identifier")


class InflectionConfigurationError(InflectionError):
    """Inflection data of a locale is corrupted."""

    def __init__(self, message, token=None, kind=None):
        self.token = token
        self.kind = kind
        super().__init__(message)


class BadInflectionToken(InflectionConfigurationError):
    def __init__(self, locale, token, kind=None, description=None):
        self.locale = locale
        self.description = description
        kinn = "" if kind is None else f"of kind {kind!r} "
        if description is None:
            message = (f"inflection token {token!r} {kinn}"
                       f"for language {locale!r} has a bad name")
        else:
            message = (f"inflection token {token!r} {kinn}"
                       f"for language {locale!r} has a bad description "
                       f"{description!r}")
        super().__init__(message, token, kind)


class BadInflectionKind(InflectionConfigurationError):
    def __init__(self, locale, kind):
        self.locale = locale
        super().__init__(
            f"inflection kind {kind!r} for language {locale!r} "
            f"has a bad name", None, kind)


class BadInflectionAlias(InflectionConfigurationError):
    def __init__(self, locale, token, kind, pointer):
        self.locale = locale
        self.pointer = pointer
        what = "default token" if token == DEFAULT_TOKEN else "alias"
        lang = "" if locale is None else f"for language {locale!r} "
        kinn = "" if kind is None else f"of kind {kind!r} "
        super().__init__(
            f"the {what} {token!r} {kinn}{lang}"
            f"points to an unknown token {pointer!r}", token, kind)


class DuplicatedInflectionToken(InflectionConfigurationError):
    def __init__(self, original_kind, kind, token):
        self.original_kind = original_kind
        and_cannot = (
            "" if kind is None else f" and cannot be used with kind {kind!r}"
        )
        super().__init__(
            f"inflection token {token!r} was already assigned "
            f"to kind {original_kind!r}{and_cannot}", token, kind)


class InflectionPatternError(InflectionError):
    """Base class of the errors found while interpolating a pattern.

    Attributes
    ----------
    locale: str
    pattern: str
        The pattern as it appeared in the interpolated string
    token: str
        The offending token, if any
    kind: str
        The kind that was expected or processed, if known
    """

    def __init__(self, message, locale=None, pattern=None, token=None,
                 kind=None):
        self.locale = locale
        self.pattern = pattern
        self.token = token
        self.kind = kind
        super().__init__(message)


class InvalidInflectionToken(InflectionPatternError):
    def __init__(self, locale, pattern, token, kind=None):
        super().__init__(
            f"token {token!r} used in translation pattern {pattern!r} "
            f"is invalid", locale, pattern, token, kind)


class MisplacedInflectionToken(InflectionPatternError):
    def __init__(self, locale, pattern, token, kind):
        super().__init__(
            f"inflection token {token!r} from pattern {pattern!r} "
            f"is not of the expected kind {kind!r}",
            locale, pattern, token, kind)


class InvalidInflectionKind(InflectionPatternError):
    def __init__(self, locale, pattern, kind):
        super().__init__(
            f"kind {kind!r} used in translation pattern {pattern!r} "
            f"is invalid", locale, pattern, None, kind)


class ComplexPatternMalformed(InflectionPatternError):
    def __init__(self, locale, pattern, token, kind):
        super().__init__(
            f"complex pattern {pattern!r} of kinds {kind!r} is malformed: "
            f"the token set {token!r} does not match the number of kinds",
            locale, pattern, token, kind)


class InvalidOptionForKind(InflectionPatternError):
    """An inflection option required by a pattern is missing or wrong."""

    def __init__(self, message, locale, pattern, token, kind, option=None):
        self.option = option
        super().__init__(message, locale, pattern, token, kind)


class InflectionOptionNotFound(InvalidOptionForKind):
    def __init__(self, locale, pattern, token, kind, option=None):
        kind_name = str(kind or "")
        if kind_name.startswith(NAMED_MARKER):
            kind_name = f"{kind_name!r} (or {kind_name[1:]!r})"
        elif kind_name:
            kind_name = repr(kind_name)
        super().__init__(
            f"option {kind_name} required by the pattern {pattern!r} "
            f"was not found", locale, pattern, token, kind, option)


class InflectionOptionIncorrect(InvalidOptionForKind):
    def __init__(self, locale, pattern, token, kind, option):
        super().__init__(
            f"value {option!r} of option {kind!r} required by {pattern!r} "
            f"does not match any token", locale, pattern, token, kind, option)
