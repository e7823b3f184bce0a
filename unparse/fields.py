"""
Argument source for dataclasses whose fields declare command-line options.

Declarations live in each field's metadata, under the ``"unparse"`` key, and
are most easily written with the `option`, `positional_args` and `positional`
helpers::

    @dataclass
    class Options:
        verbose: List[bool] = option("v", "verbose", default_factory=list)
        name: str = option(long="name", optional=True, default="")
        files: Files = positional_args(default_factory=Files)

Supported declaration keys:

- ``short``: the option's one-character short name.
- ``long``: the option's long name.
- ``optional``: the option's value may be omitted (``--name`` vs
  ``--name=value``). Boolean fields are always value-optional.
- ``optional_value``: the value(s) the option takes when given bare; a field
  holding exactly these is rendered as the bare flag.
- ``value_default``: the value(s) the option has when not given at all, if
  different from the field's own default.
- ``no_flag``: ignore the field entirely.
- ``positional_args``: on a field holding a nested dataclass, treat each of
  that dataclass' fields as a positional argument, in order.
- ``positional_name``: display name of such a positional argument.

Fields with neither a short nor a long name (and no nested dataclass) are
not arguments and are skipped, as are underscore-prefixed fields.
"""

import dataclasses
import datetime
import types
import typing
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from .arg import Arg
from .exceptions import FieldError, InvalidSource
from .util import debug
from .values import value_list


#: Field metadata key holding an argument declaration.
METADATA_KEY = "unparse"

DECLARATION_KEYS = frozenset(
    (
        "short",
        "long",
        "optional",
        "optional_value",
        "value_default",
        "no_flag",
        "positional_args",
        "positional_name",
    )
)

_SEQUENCES = (list, tuple, set, frozenset)
_UNIONS = (typing.Union, getattr(types, "UnionType", typing.Union))
_ZEROES = {
    bool: False,
    int: 0,
    float: 0.0,
    str: "",
    datetime.timedelta: datetime.timedelta(0),
}


def _field(declaration, kwargs):
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[METADATA_KEY] = declaration
    return dataclasses.field(metadata=metadata, **kwargs)


def option(
    short: Optional[str] = None,
    long: Optional[str] = None,
    optional: bool = False,
    optional_value: Any = None,
    value_default: Any = None,
    no_flag: bool = False,
    **kwargs: Any
) -> Any:
    """
    Return a `dataclasses.field` declaring a command-line option.

    Any extra keyword arguments (``default``, ``default_factory``, ``repr``
    etc) are handed to `dataclasses.field`; existing ``metadata`` is kept.

    .. versionadded:: 1.0
    """
    declaration: Dict[str, Any] = {}
    if short is not None:
        declaration["short"] = short
    if long is not None:
        declaration["long"] = long
    if optional:
        declaration["optional"] = True
    if optional_value is not None:
        declaration["optional_value"] = optional_value
    if value_default is not None:
        declaration["value_default"] = value_default
    if no_flag:
        declaration["no_flag"] = True
    return _field(declaration, kwargs)


def positional_args(**kwargs: Any) -> Any:
    """
    Return a `dataclasses.field` whose nested dataclass holds positionals.

    .. versionadded:: 1.0
    """
    return _field({"positional_args": True}, kwargs)


def positional(name: Optional[str] = None, **kwargs: Any) -> Any:
    """
    Return a `dataclasses.field` for one positional argument, optionally
    giving it a display ``name``.

    .. versionadded:: 1.0
    """
    declaration = {"positional_name": name} if name else {}
    return _field(declaration, kwargs)


class FieldArg(Arg):
    """
    `.Arg` view over one dataclass field.

    Values are read from the live instance on every access, so the instance
    should not be mutated mid-build.

    .. versionadded:: 1.0
    """

    def __init__(self, instance, field, path, type_, declaration, is_option):
        self.instance = instance
        self.field = field
        self.type = type_
        self.declaration = declaration
        self._path = path
        self._is_option = is_option

    @property
    def is_option(self):
        return self._is_option

    @property
    def is_provided(self):
        return self.value != self.default

    @property
    def is_value_optional(self):
        return self._is_option and bool(
            self.declaration.get("optional") or self.is_boolean
        )

    @property
    def is_value_provided(self):
        if not self.is_provided:
            return False
        if not self.is_value_optional:
            return True
        value = self.value
        bare = value_list(self.declaration.get("optional_value"))
        if value == bare:
            return False
        return not (self.is_boolean and all(x == "true" for x in value))

    @property
    def name(self):
        if not self._is_option:
            return ""
        return self.declaration.get("long") or ""

    @property
    def short_name(self):
        if not self._is_option:
            return ""
        return self.declaration.get("short") or ""

    @property
    def value(self):
        return value_list(getattr(self.instance, self.field.name))

    @property
    def default(self):
        """
        The string values this field holds when not given on a command line.

        Positionals always compare against their type's zero value: leaving
        out one that merely equals its field default would shift every later
        positional into its slot.
        """
        if not self._is_option:
            return value_list(zero_value(self.type))
        if "value_default" in self.declaration:
            return value_list(self.declaration["value_default"])
        if self.field.default is not dataclasses.MISSING:
            return value_list(self.field.default)
        if self.field.default_factory is not dataclasses.MISSING:
            return value_list(self.field.default_factory())
        return value_list(zero_value(self.type))

    @property
    def is_boolean(self):
        return is_boolean_type(self.type)

    @property
    def path(self):
        name = self.declaration.get("positional_name")
        if name:
            return "{}({})".format(self._path, name)
        return self._path

    @property
    def kind(self):
        return type_name(self.type)


def args_from_dataclass(obj: Any) -> List[Arg]:
    """
    Return `.Arg` views over every argument declared by dataclass ``obj``.

    Nested dataclass fields are flattened in place, in field order.

    :raises:
        `.InvalidSource` if ``obj`` is not a dataclass instance;
        `.FieldError` if a field's declaration is malformed.

    .. versionadded:: 1.0
    """
    if obj is None:
        raise InvalidSource("expected value, got None")
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        err = "expected dataclass instance, got {}"
        raise InvalidSource(err.format(type(obj).__name__))
    args: List[Arg] = []
    _extract(obj, type(obj).__name__, args)
    debug("Extracted {} args from {!r}".format(len(args), type(obj)))
    return args


def _extract(obj, prefix, args):
    hints = _type_hints(type(obj))
    for field in dataclasses.fields(obj):
        if field.name.startswith("_"):
            continue
        path = "{}.{}".format(prefix, field.name)
        type_ = hints.get(field.name, field.type)
        declaration = _declaration(field, path, type_)
        if declaration.get("no_flag"):
            continue
        value = getattr(obj, field.name)
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            if declaration.get("positional_args"):
                _extract_positionals(value, path, args)
            else:
                _extract(value, path, args)
            continue
        if not (declaration.get("short") or declaration.get("long")):
            continue
        args.append(FieldArg(obj, field, path, type_, declaration, True))


def _extract_positionals(obj, prefix, args):
    hints = _type_hints(type(obj))
    for field in dataclasses.fields(obj):
        path = "{}.{}".format(prefix, field.name)
        type_ = hints.get(field.name, field.type)
        declaration = _declaration(field, path, type_)
        args.append(FieldArg(obj, field, path, type_, declaration, False))


def _declaration(field, path, type_):
    kind = type_name(type_)
    declaration = field.metadata.get(METADATA_KEY, {})
    if not isinstance(declaration, Mapping):
        err = "declaration must be a mapping, got {}"
        raise FieldError(
            err.format(type(declaration).__name__), path=path, kind=kind
        )
    unknown = set(declaration) - DECLARATION_KEYS
    if unknown:
        err = "unknown declaration keys: {}"
        raise FieldError(
            err.format(", ".join(sorted(unknown))), path=path, kind=kind
        )
    short = declaration.get("short")
    if short and (not isinstance(short, str) or len(short) != 1):
        err = "short name must be a single character, got {!r}"
        raise FieldError(err.format(short), path=path, kind=kind)
    long = declaration.get("long")
    if long and (not isinstance(long, str) or len(long) < 2):
        err = "long name must be longer than one character, got {!r}"
        raise FieldError(err.format(long), path=path, kind=kind)
    return dict(declaration)


def _type_hints(cls):
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError):
        # Unresolvable string annotations; fall back to raw Field.type.
        debug("Could not resolve type hints for {!r}".format(cls))
        return {}


def _strip_optional(type_):
    """
    Return ``(inner_type, was_optional)`` for ``Optional[inner_type]``.
    """
    if typing.get_origin(type_) in _UNIONS:
        members = [x for x in typing.get_args(type_) if x is not type(None)]
        if len(members) == 1:
            return members[0], True
    return type_, False


def is_boolean_type(type_):
    """
    Return whether ``type_`` is boolean-shaped: `bool`, a sequence of `bool`,
    or an ``Optional`` of either.
    """
    type_, _ = _strip_optional(type_)
    if type_ is bool:
        return True
    if typing.get_origin(type_) in _SEQUENCES:
        members = typing.get_args(type_)
        if members:
            return _strip_optional(members[0])[0] is bool
    return False


def zero_value(type_):
    """
    Return the value a field of ``type_`` holds when never set.

    ``Optional`` types and unknown types give ``None``; collections give an
    empty one.
    """
    type_, optional = _strip_optional(type_)
    if optional:
        return None
    if type_ in _ZEROES:
        return _ZEROES[type_]
    origin = typing.get_origin(type_) or type_
    if origin in _SEQUENCES or origin is dict:
        return ()
    return None


def type_name(type_):
    if isinstance(type_, type) and not typing.get_args(type_):
        return type_.__name__
    return str(type_)
