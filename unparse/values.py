"""
Turning typed values into the strings an `.Arg` hands to the builder.

Adapters funnel every value they read through `stringify` (scalars) or
`value_list` (anything, including collections), so the set of supported value
kinds is defined once, here:

- booleans: ``"true"`` / ``"false"``
- integers: plain decimal
- floats: shortest round-tripping form, with integral values losing their
  ``.0``
- durations (`datetime.timedelta`): ``1h2m3.5s`` style, e.g. ``"1m30s"``
- custom-encodable values: anything with a ``marshal_flag()`` method
- text: `str` and path-like objects
- enums: their ``.value``, stringified

Anything else stringifies to the empty string.
"""

import datetime
import enum
import os
from typing import Any, Tuple

from .exceptions import MarshalError


def stringify(value: Any) -> str:
    """
    Return the command-line string form of scalar ``value``.

    :raises:
        `.MarshalError` if ``value`` has a ``marshal_flag`` method and calling
        it fails.
    """
    if value is None:
        return ""
    marshal = getattr(value, "marshal_flag", None)
    if marshal is not None and callable(marshal):
        try:
            return marshal()
        except Exception as e:
            raise MarshalError(value, e) from e
    # NOTE: bool before int, as bool is an int subclass.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return stringify(value.value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, datetime.timedelta):
        return format_duration(value)
    if isinstance(value, str):
        return value
    if isinstance(value, os.PathLike):
        return os.fspath(value)
    return ""


def value_list(value: Any) -> Tuple[str, ...]:
    """
    Return ``value`` as the tuple of strings an `.Arg` exposes.

    Lists and tuples give one entry per member, sets are sorted first, and
    mappings give ``key:value`` entries sorted by rendered key so output is
    reproducible. Scalars give a single entry, or none at all if they
    stringify to an empty string.
    """
    if value is None:
        return ()
    if isinstance(value, dict):
        pairs = [(stringify(k), stringify(v)) for k, v in value.items()]
        return tuple("{}:{}".format(k, v) for k, v in sorted(pairs))
    if isinstance(value, (set, frozenset)):
        return tuple(sorted(stringify(x) for x in value))
    if isinstance(value, (list, tuple)):
        return tuple(stringify(x) for x in value)
    string = stringify(value)
    return (string,) if string else ()


def format_float(value):
    """
    Return the shortest string that round-trips ``value``.

    Integral values drop the trailing ``.0`` (``2.0`` becomes ``"2"``).
    """
    string = repr(value)
    if string.endswith(".0"):
        string = string[:-2]
    return string


_UNITS = (
    ("h", 3600 * 10 ** 6),
    ("m", 60 * 10 ** 6),
)

_SUBSECOND_UNITS = (
    ("ms", 10 ** 3),
    ("us", 1),
)


def format_duration(value):
    """
    Render ``value`` in the compact ``72h3m0.5s`` form.

    Leading zero units are omitted; durations under a second use the largest
    fitting unit (``"1.5ms"``, ``"250us"``) and zero is ``"0s"``.
    """
    micros = (
        value.days * 86400 + value.seconds
    ) * 10 ** 6 + value.microseconds
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)
    if micros < 10 ** 6:
        for unit, size in _SUBSECOND_UNITS:
            if micros >= size:
                return sign + _fraction(micros, size) + unit
    parts = []
    for unit, size in _UNITS:
        count, micros = divmod(micros, size)
        if count or parts:
            parts.append("{}{}".format(count, unit))
    parts.append(_fraction(micros, 10 ** 6) + "s")
    return sign + "".join(parts)


def _fraction(micros, size):
    whole, rest = divmod(micros, size)
    if not rest:
        return str(whole)
    digits = len(str(size)) - 1
    return "{}.{}".format(whole, str(rest).zfill(digits).rstrip("0"))
