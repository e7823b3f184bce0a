"""
Custom exception classes.

Each one expresses a distinct, deterministic way that turning argument state
back into a command line can fail. None of them are retried or swallowed by
the builder; the build is aborted and no partial output is returned.
"""


class InvalidSource(TypeError):
    """
    Raised when an argument source is not a supported kind of value.

    E.g. handing `.args_from_dataclass` something which is not a dataclass
    instance, or handing the builder a sequence containing non-`.Arg` items.
    """

    pass


class FieldError(Exception):
    """
    An error arising from a single argument declaration.

    Raised when a declaration cannot be interpreted (bad metadata, an
    overlong short name, etc), when an option holds values it cannot be
    rendered with (e.g. several values per occurrence), and when the builder
    must render an option in long form but it has no long name.

    Three attributes allow introspection:

    * ``path``: dotted path of the offending field or flag, e.g.
      ``"Options.verbose"``.
    * ``kind``: description of the field's type, or ``None`` if unknown.
    * ``msg``: what went wrong.
    """

    def __init__(self, msg, path="", kind=None):
        self.msg = msg
        self.path = path
        self.kind = kind
        super().__init__(msg)

    def __str__(self):
        kind = " of type {}".format(self.kind) if self.kind else ""
        return "failed to convert field {}{}: {}".format(
            self.path, kind, self.msg
        )


class MarshalError(Exception):
    """
    A value's ``marshal_flag`` hook failed while its value was being read.

    Treated as fatal: it surfaces at the point of value access (usually from
    deep inside a build) and is never caught by the builder. The original
    exception is chained as ``__cause__``.
    """

    def __init__(self, value, reason):
        self.value = value
        self.reason = reason
        super().__init__(value, reason)

    def __str__(self):
        return "failed to marshal value {!r}: {}".format(
            self.value, self.reason
        )
