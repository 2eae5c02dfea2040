"""Switches controlling the behaviour of the interpolation routines."""

from typing import Tuple

from .constants import RESERVED_OPTION_KEYS, SWITCH_PREFIX


class InflectionOptions:
    """Engine-wide inflection switches.

    Parameters
    ----------
    raises: bool
        Raise pattern errors instead of falling back to free text.
    aliased_patterns: bool
        Allow aliases to be used as tokens inside patterns.
    unknown_defaults: bool
        Use the default token of a kind when the given option
        is empty, invalid or unknown.
    excluded_defaults: bool
        Use the value of the default token when the given option
        is a known token that is missing from the pattern.
    """

    SWITCHES = ("raises", "aliased_patterns", "unknown_defaults",
                "excluded_defaults")

    def __init__(
            self,
            raises: bool = False,
            aliased_patterns: bool = False,
            unknown_defaults: bool = True,
            excluded_defaults: bool = False,
    ):
        self.raises = raises
        self.aliased_patterns = aliased_patterns
        self.unknown_defaults = unknown_defaults
        self.excluded_defaults = excluded_defaults

    def __repr__(self):
        switches = ", ".join(
            f"{name}={getattr(self, name)!r}" for name in self.SWITCHES)
        return f"{self.__class__.__name__}({switches})"

    def __eq__(self, other):
        if not isinstance(other, InflectionOptions):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def reset(self):
        """Restore the default values of all switches."""
        self.raises = False
        self.aliased_patterns = False
        self.unknown_defaults = True
        self.excluded_defaults = False

    def to_dict(self) -> dict:
        return {name: getattr(self, name) for name in self.SWITCHES}

    @property
    def known(self) -> dict:
        """Mapping of the reserved option keys to switch names."""
        return {SWITCH_PREFIX + name: name for name in self.SWITCHES}

    def merge(self, overrides: dict) -> "InflectionOptions":
        """Create a new instance with the switches from ``overrides``.

        ``overrides`` is keyed by the reserved option names,
        e.g. ``inflector_raises``. ``None`` values are ignored.
        """
        values = self.to_dict()
        for key, name in self.known.items():
            value = overrides.get(key)
            if value is not None:
                values[name] = bool(value)
        return self.__class__(**values)

    def split(self, options: dict = None) -> Tuple["InflectionOptions", dict]:
        """Separate per-call switches from inflection options.

        Returns
        -------
        tuple[InflectionOptions, dict]
            The switches to use for a single call, and the remaining
            kind -> token options.
        """
        options = {} if options is None else options
        switches = self.merge(options)
        kinds = {
            key: value for key, value in options.items()
            if key not in RESERVED_OPTION_KEYS
        }
        return switches, kinds
