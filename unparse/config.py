from typing import Any, Optional

from lexicon import Lexicon

from .platform import WINDOWS, quote_posix_if_needed, quote_windows_if_needed
from .util import debug


#: Platform names understood by `Config`.
PLATFORMS = ("posix", "windows")

#: Settings for which an empty string means "use the platform default".
DELIMITERS = (
    "short_option_delimiter",
    "long_option_delimiter",
    "option_argument_delimiter",
    "option_optional_argument_delimiter",
)

#: Alternate setting names, mapped to the canonical ones.
ALIASES = {
    "disable_short_option": "disable_short_name",
    "name_value_delimiter": "option_optional_argument_delimiter",
}


class Config:
    """
    Policy controlling how the builder renders arguments.

    **Access**

    Settings are read via attribute syntax::

        config.short_option_delimiter

    or dict syntax::

        config["short_option_delimiter"]

    A few settings are also reachable under an alias, e.g.
    ``disable_short_option`` for ``disable_short_name`` and
    ``name_value_delimiter`` for ``option_optional_argument_delimiter``.

    **Settings**

    - ``disable_short_name``: render options by long name even when they have
      a short name.
    - ``disable_combining_short_options``: don't merge bare short boolean
      flags into one token (``-a -b -c`` instead of ``-abc``).
    - ``short_option_delimiter`` / ``long_option_delimiter``: written before
      short and long option names.
    - ``option_argument_delimiter``: written between an option and its
      required value when rendering a single command-line string.
    - ``option_optional_argument_delimiter``: written between an option and
      an explicitly given optional value (``--opt=value``). A literal space
      places the value in its own token instead.
    - ``options_terminator``: emitted between options and positional
      arguments, if non-empty.
    - ``argument_quoter``: callable quoting a value for shell reproduction.
      Only used when rendering a command-line string; a false value disables
      quoting entirely.

    **Lifecycle**

    A `Config` is built once from a platform's defaults (see
    `posix_defaults` and `windows_defaults`) plus any overrides, and is
    read-only afterwards; use `clone` to derive a modified copy.

    .. versionadded:: 1.0
    """

    @staticmethod
    def posix_defaults():
        """
        Return the default settings for POSIX-style command lines.
        """
        return {
            "disable_short_name": False,
            "disable_combining_short_options": False,
            "short_option_delimiter": "-",
            "long_option_delimiter": "--",
            "option_argument_delimiter": " ",
            "option_optional_argument_delimiter": "=",
            "options_terminator": "",
            "argument_quoter": quote_posix_if_needed,
        }

    @staticmethod
    def windows_defaults():
        """
        Return the default settings for Windows-style command lines.

        Windows programs don't generally understand combined short flags, so
        combining is disabled.
        """
        return {
            "disable_short_name": False,
            "disable_combining_short_options": True,
            "short_option_delimiter": "/",
            "long_option_delimiter": "/",
            "option_argument_delimiter": " ",
            "option_optional_argument_delimiter": ":",
            "options_terminator": "",
            "argument_quoter": quote_windows_if_needed,
        }

    @classmethod
    def platform_defaults(cls, platform):
        """
        Return the default settings for ``platform``.

        :param platform: One of ``"posix"`` or ``"windows"``.

        :raises: ``ValueError`` if ``platform`` is not recognized.
        """
        if platform == "posix":
            return cls.posix_defaults()
        if platform == "windows":
            return cls.windows_defaults()
        err = "Unknown platform {!r}! Valid platforms are: {}"
        raise ValueError(err.format(platform, ", ".join(PLATFORMS)))

    def __init__(self, platform: Optional[str] = None, **overrides: Any):
        """
        Create a new config from ``platform``'s defaults plus ``overrides``.

        :param platform:
            ``"posix"``, ``"windows"`` or ``None`` (the default), which selects
            whatever the running interpreter is on.
        :param overrides:
            Individual settings to replace. ``None`` leaves a setting at its
            default, as does an empty string for the four delimiter settings.

        :raises: ``TypeError`` if an override names an unknown setting.
        """
        if platform is None:
            platform = "windows" if WINDOWS else "posix"
        settings = Lexicon(self.platform_defaults(platform))
        for alias, to in ALIASES.items():
            settings.alias(alias, to=to)
        given = {}
        for key, value in overrides.items():
            if key not in settings:
                err = "{!r} is not a valid setting! Valid settings are: {}"
                valid = ", ".join(sorted(list(settings) + list(ALIASES)))
                raise TypeError(err.format(key, valid))
            if value is None:
                continue
            if value == "" and ALIASES.get(key, key) in DELIMITERS:
                continue
            settings[key] = value
            given[ALIASES.get(key, key)] = value
        object.__setattr__(self, "_platform", platform)
        object.__setattr__(self, "_settings", settings)
        object.__setattr__(self, "_overrides", given)
        debug("Config({!r}) overrides: {!r}".format(platform, given))

    @property
    def platform(self):
        return self._platform

    def __getattr__(self, key):
        # Only reached for names not found normally, i.e. settings.
        if key.startswith("_"):
            raise AttributeError(key)
        try:
            return self._settings[key]
        except KeyError:
            raise AttributeError(key)

    def __setattr__(self, key, value):
        err = "Config objects are read-only; use .clone({}=...) instead."
        raise AttributeError(err.format(key))

    def __getitem__(self, key):
        return self._settings[key]

    def __contains__(self, key):
        return key in self._settings

    def __eq__(self, other):
        if not isinstance(other, Config):
            return NotImplemented
        return dict(self._settings) == dict(other._settings)

    def __repr__(self):
        return "<{}: {} {!r}>".format(
            self.__class__.__name__, self._platform, self._overrides
        )

    def clone(self, **overrides: Any) -> "Config":
        """
        Return a new config with this one's platform & overrides, updated
        with ``overrides``.

        As with the constructor, a ``None`` override leaves the setting
        alone, i.e. at this config's current value.
        """
        merged = dict(self._overrides)
        for key, value in overrides.items():
            key = ALIASES.get(key, key)
            if value is None:
                merged.setdefault(key, None)
            else:
                merged[key] = value
        return self.__class__(platform=self._platform, **merged)

    def quote(self, value):
        """
        Quote ``value`` with ``argument_quoter``, if one is set.
        """
        quoter = self._settings["argument_quoter"]
        if quoter and callable(quoter):
            return quoter(value)
        return value


def default_config():
    """
    Return a fresh `Config` with the running platform's defaults.

    .. versionadded:: 1.0
    """
    return Config()
