from typing import Iterable, List, Optional

from .arg import Arg, is_arg
from .config import Config, default_config
from .exceptions import FieldError, InvalidSource
from .util import debug


class Builder:
    """
    Turn an ordered sequence of `.Arg` back into command-line tokens.

    The inverse of an argument parser: given the resolved state of a
    program's options and positional arguments, emit something a user could
    have typed to arrive at that state.

    Rendering happens in three passes over the arguments, always preserving
    their relative order:

    - bare short boolean flags are combined into one token (``-abc``), unless
      disabled by the config;
    - every other provided option is rendered, by short name where possible;
    - positional argument values are appended last.

    :param config:
        A `.Config` controlling delimiters, quoting and so on. Defaults to the
        running platform's defaults via `.default_config`.

    .. versionadded:: 1.0
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = default_config() if config is None else config

    def args(self, args: Iterable[Arg]) -> List[str]:
        """
        Return the tokens for ``args``, suitable for use as ``argv`` entries.

        Values are never quoted; each token is exactly one argument.

        :raises:
            `.InvalidSource` if ``args`` contains something that isn't an
            argument; `.FieldError` if an option must be rendered by long
            name and has none.
        """
        return self._build(args, cmdline=False)

    def command_line(self, args: Iterable[Arg]) -> str:
        """
        Return ``args`` rendered as a single, shell-ready string.

        Values are passed through the config's ``argument_quoter`` and tokens
        are joined by single spaces.

        :raises: Same as `args`.
        """
        return " ".join(self._build(args, cmdline=True))

    def _build(self, args, cmdline):
        args = self._validate(args)
        remaining, tokens = self._combine_shorts(args)
        for arg in remaining:
            if not arg.is_option or not arg.is_provided:
                continue
            tokens.extend(self._render_option(arg, cmdline))
        positionals = []
        for arg in remaining:
            if arg.is_option or not arg.is_provided:
                continue
            for value in arg.value:
                positionals.append(self._value(value, cmdline))
        if positionals and self.config.options_terminator:
            tokens.append(self.config.options_terminator)
        tokens.extend(positionals)
        debug("Built tokens: {!r}".format(tokens))
        return tokens

    def _validate(self, args):
        if args is None or isinstance(args, (str, bytes)):
            err = "expected a sequence of arguments, got {}"
            raise InvalidSource(err.format(type(args).__name__))
        try:
            args = list(args)
        except TypeError:
            err = "expected a sequence of arguments, got {}"
            raise InvalidSource(err.format(type(args).__name__))
        for arg in args:
            if not is_arg(arg):
                err = "expected an argument, got {!r}"
                raise InvalidSource(err.format(arg))
        return args

    def _combine_shorts(self, args):
        """
        Pull bare short boolean flags out of ``args`` into a single token.

        :returns:
            Two-tuple of ``(remaining_args, tokens)``, where ``tokens`` holds
            the combined flag token, if any.
        """
        config = self.config
        if config.disable_combining_short_options or config.disable_short_name:
            return list(args), []
        shorts = []
        remaining = []
        for arg in args:
            if (
                arg.is_option
                and arg.is_provided
                and arg.is_value_optional
                and not arg.is_value_provided
                and arg.short_name
            ):
                # One repetition per value, so e.g. [True, True] => -vv
                shorts.extend(arg.short_name for _ in arg.value)
            else:
                remaining.append(arg)
        if not shorts:
            return remaining, []
        combined = config.short_option_delimiter + "".join(shorts)
        debug("Combined short flags into {!r}".format(combined))
        return remaining, [combined]

    def _render_option(self, arg, cmdline):
        config = self.config
        explicit = arg.is_value_optional and arg.is_value_provided
        optional_delimiter = config.option_optional_argument_delimiter
        if config.disable_short_name or not arg.short_name or explicit:
            if not arg.name:
                raise FieldError(
                    "option does not have long name",
                    path=getattr(arg, "path", arg.name or arg.short_name),
                    kind=getattr(arg, "kind", None),
                )
            name = config.long_option_delimiter + arg.name
            if explicit and optional_delimiter != " ":
                name += optional_delimiter
        else:
            name = config.short_option_delimiter + arg.short_name
        tokens = []
        for value in arg.value:
            if arg.is_value_optional:
                if not explicit:
                    tokens.append(name)
                    # Bare flags aren't repeated per value when combining.
                    if not config.disable_combining_short_options:
                        break
                elif optional_delimiter == " ":
                    tokens.extend([name, self._value(value, cmdline)])
                else:
                    tokens.append(name + self._value(value, cmdline))
            elif cmdline and config.option_argument_delimiter != " ":
                delimiter = config.option_argument_delimiter
                tokens.append(name + delimiter + self._value(value, cmdline))
            else:
                tokens.extend([name, self._value(value, cmdline)])
        debug("Rendered {!r} as {!r}".format(arg, tokens))
        return tokens

    def _value(self, value, cmdline):
        return self.config.quote(value) if cmdline else value


def args(args: Iterable[Arg], config: Optional[Config] = None) -> List[str]:
    """
    Render ``args`` to tokens using ``config`` (or the platform defaults).

    See `.Builder.args`.

    .. versionadded:: 1.0
    """
    return Builder(config).args(args)


def command_line(
    args: Iterable[Arg], config: Optional[Config] = None
) -> str:
    """
    Render ``args`` to one shell-ready string using ``config`` (or the
    platform defaults).

    See `.Builder.command_line`.

    .. versionadded:: 1.0
    """
    return Builder(config).command_line(args)
