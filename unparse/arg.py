class Arg:
    """
    Read-only view of a single command-line argument (option or positional).

    This is the only thing the builder knows about. Source adapters (see
    `.args_from_dataclass` and `.args_from_parser`) subclass it, as may
    anybody holding argument state in some other shape.

    Implementations must return stable values for the duration of a build:
    reading a property twice must not give two different answers.

    .. versionadded:: 1.0
    """

    @property
    def is_option(self):
        """
        Whether this is a named option (``True``) or a positional argument.
        """
        raise NotImplementedError

    @property
    def is_provided(self):
        """
        Whether the argument's state differs from its default, i.e. whether it
        must appear in the output at all.
        """
        raise NotImplementedError

    @property
    def is_value_optional(self):
        """
        Whether the argument may be given without an explicit value.

        Always ``True`` for boolean-shaped options.
        """
        raise NotImplementedError

    @property
    def is_value_provided(self):
        """
        Whether an explicit value must be rendered, vs. the bare flag alone.

        Only interesting when `is_value_optional` is ``True``; for all other
        arguments it equals `is_provided`.
        """
        raise NotImplementedError

    @property
    def name(self):
        raise NotImplementedError

    @property
    def short_name(self):
        raise NotImplementedError

    @property
    def value(self):
        raise NotImplementedError

    @property
    def path(self):
        """
        Human-oriented identifier used when reporting errors.

        Adapters override this with e.g. a dotted field path.
        """
        return self.name or self.short_name or "<positional>"

    @property
    def kind(self):
        """
        Description of the underlying value's type, if known.
        """
        return None

    def __repr__(self):
        if not self.is_option:
            return "<{}: {!r}>".format(self.__class__.__name__, self.value)
        short = " (-{})".format(self.short_name) if self.short_name else ""
        return "<{}: {}{}{}>".format(
            self.__class__.__name__,
            self.name,
            short,
            "?" if self.is_value_optional else "",
        )


class Option(Arg):
    """
    An option whose state is given directly.

    Handy when argument state doesn't live in a supported source, and for
    testing.

    :param name: Long name, e.g. ``"verbose"``. May be empty.
    :param short_name: One-character short name, e.g. ``"v"``. May be empty.
    :param value:
        The option's string values. A lone string is treated as a single
        value.
    :param provided:
        Whether the option was supplied at all. Default: ``True``.
    :param value_optional:
        Whether the value may be omitted (as for boolean flags). Default:
        ``False``.
    :param value_provided:
        For optional-value options, whether the value must be rendered
        explicitly. Ignored otherwise. Default: ``False``.

    .. versionadded:: 1.0
    """

    def __init__(
        self,
        name="",
        short_name="",
        value=(),
        provided=True,
        value_optional=False,
        value_provided=False,
    ):
        if not (name or short_name):
            raise TypeError("An Option must have at least one name.")
        if len(short_name) > 1:
            msg = "Short names must be a single character, got {!r}!"
            raise ValueError(msg.format(short_name))
        self._name = name
        self._short_name = short_name
        self._value = (value,) if isinstance(value, str) else tuple(value)
        self._provided = provided
        self._value_optional = value_optional
        self._value_provided = value_provided

    @property
    def is_option(self):
        return True

    @property
    def is_provided(self):
        return self._provided

    @property
    def is_value_optional(self):
        return self._value_optional

    @property
    def is_value_provided(self):
        if not self._provided:
            return False
        if not self._value_optional:
            return True
        return self._value_provided

    @property
    def name(self):
        return self._name

    @property
    def short_name(self):
        return self._short_name

    @property
    def value(self):
        return self._value


class Positional(Arg):
    """
    A positional argument holding zero or more values.

    Considered provided whenever it holds at least one value.

    .. versionadded:: 1.0
    """

    def __init__(self, *values):
        self._value = tuple(values)

    @property
    def is_option(self):
        return False

    @property
    def is_provided(self):
        return bool(self._value)

    @property
    def is_value_optional(self):
        return False

    @property
    def is_value_provided(self):
        return self.is_provided

    @property
    def name(self):
        return ""

    @property
    def short_name(self):
        return ""

    @property
    def value(self):
        return self._value


#: The accessors every argument source must supply.
ACCESSORS = (
    "is_option",
    "is_provided",
    "is_value_optional",
    "is_value_provided",
    "name",
    "short_name",
    "value",
)


def is_arg(obj):
    """
    Return ``True`` if ``obj`` can be handed to the builder.

    Instances of `Arg` always qualify; anything else must at least supply all
    of the `ACCESSORS`.
    """
    if isinstance(obj, Arg):
        return True
    return all(hasattr(obj, name) for name in ACCESSORS)
