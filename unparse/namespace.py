"""
Argument source for `argparse`: a parser plus the namespace it produced.

Each of the parser's actions becomes one `.Arg`, in declaration order:

- ``store_true``, ``store_false``, ``store_const``, ``append_const``,
  ``count`` and `argparse.BooleanOptionalAction` are bare flags;
- ``store`` with ``nargs="?"`` and a ``const`` takes an optional value, which
  is explicit whenever it differs from ``const``;
- ``append`` and ``extend`` give one value per appended item;
- everything else (plain ``store``) takes a required value;
- actions without option strings are positionals.

Help, version and subparser actions are skipped.

Rendering ``parse_args`` output back through the builder reproduces the same
namespace, with two limits:

- ``store`` and ``append`` with a multi-value ``nargs`` (``"+"``, ``"*"``,
  ``2``...) can only be rendered when each occurrence holds a single value;
  otherwise reading `ActionArg.value` raises `.FieldError`.
- repeated ``count`` and ``append_const`` flags only keep their repetitions
  when they have a short name (``-vvv``) or short option combining is
  disabled; a long-only ``--verbose`` given twice renders once.
"""

import argparse
from typing import List

from .arg import Arg
from .exceptions import FieldError, InvalidSource
from .util import debug
from .values import stringify, value_list


_SKIPPED = (
    argparse._HelpAction,
    argparse._VersionAction,
    argparse._SubParsersAction,
)
_FLAGS = (
    argparse._StoreConstAction,
    argparse._AppendConstAction,
    argparse._CountAction,
    argparse.BooleanOptionalAction,
)
_APPENDS = (argparse._AppendAction, argparse._AppendConstAction)
_MULTI_NARGS = (argparse._StoreAction, argparse._AppendAction)


class ActionArg(Arg):
    """
    `.Arg` view over one `argparse.Action` and its namespace value.

    .. versionadded:: 1.0
    """

    def __init__(self, parser, action, namespace):
        self.parser = parser
        self.action = action
        self.namespace = namespace

    @property
    def raw(self):
        """
        The action's current value in the namespace.
        """
        return getattr(self.namespace, self.action.dest, self.action.default)

    @property
    def is_flag(self):
        return isinstance(self.action, _FLAGS)

    @property
    def takes_optional_value(self):
        action = self.action
        return (
            isinstance(action, argparse._StoreAction)
            and action.nargs == argparse.OPTIONAL
            and action.const is not None
        )

    @property
    def takes_several_values(self):
        """
        Whether one occurrence of the option may consume several values, as
        with ``nargs="+"`` or ``nargs=2`` on ``store`` and ``append``.
        """
        action = self.action
        return (
            self.is_option
            and isinstance(action, _MULTI_NARGS)
            and not isinstance(action, argparse._ExtendAction)
            and action.nargs not in (None, argparse.OPTIONAL)
        )

    @property
    def is_option(self):
        return bool(self.action.option_strings)

    @property
    def is_provided(self):
        if not self.is_option:
            return bool(self.value)
        # Compared as strings; argparse type-converts string defaults.
        return value_list(self.raw) != value_list(self.action.default)

    @property
    def is_value_optional(self):
        return self.is_option and (self.is_flag or self.takes_optional_value)

    @property
    def is_value_provided(self):
        if not self.is_provided:
            return False
        if not self.is_value_optional:
            return True
        if self.is_flag:
            return False
        return value_list(self.raw) != value_list(self.action.const)

    @property
    def name(self):
        if isinstance(self.action, argparse.BooleanOptionalAction):
            if self.raw is False:
                return self._long_name(negated=True)
        return self._long_name()

    @property
    def short_name(self):
        if isinstance(self.action, argparse.BooleanOptionalAction):
            if self.raw is False:
                return ""
        prefixes = self.parser.prefix_chars
        for string in self.action.option_strings:
            if (
                len(string) == 2
                and string[0] in prefixes
                and string[1] not in prefixes
            ):
                return string[1]
        return ""

    @property
    def value(self):
        action, raw = self.action, self.raw
        if isinstance(action, argparse._CountAction):
            count = (raw or 0) - (action.default or 0)
            return ("true",) * max(count, 0)
        if isinstance(action, _APPENDS):
            # argparse appends to a copy of the default; only render new items
            items = list(raw or [])
            default = list(action.default or [])
            if items[: len(default)] == default:
                items = items[len(default) :]
            if isinstance(action, argparse._AppendConstAction):
                return tuple(stringify(x) or "true" for x in items)
            if self.takes_several_values:
                return self._one_per_occurrence(items)
            return value_list(items)
        if self.is_flag:
            return (stringify(raw),)
        if self.takes_several_values and isinstance(raw, list):
            return self._one_per_occurrence([raw])
        return value_list(raw)

    @property
    def path(self):
        return "/".join(self.action.option_strings) or self.action.dest

    @property
    def kind(self):
        type_ = self.action.type
        if type_ is None:
            return None
        return getattr(type_, "__name__", repr(type_))

    def _one_per_occurrence(self, groups):
        # Every value is rendered behind its own copy of the option name.
        values = []
        for group in groups:
            if len(group) > 1:
                err = "nargs={!r} gave {} values in one occurrence"
                raise FieldError(
                    err.format(self.action.nargs, len(group)),
                    path=self.path,
                    kind=self.kind,
                )
            values.extend(group)
        return value_list(values)

    def _long_name(self, negated=False):
        prefixes = self.parser.prefix_chars
        names = [x.lstrip(prefixes) for x in self.action.option_strings]
        longs = [x for x in names if len(x) > 1]
        if not negated:
            return longs[0] if longs else ""
        # BooleanOptionalAction pairs each --foo with a --no-foo
        for name in longs:
            if name.startswith("no-") and name[3:] in longs:
                return name
        return ""


def args_from_parser(
    parser: argparse.ArgumentParser, namespace: argparse.Namespace
) -> List[Arg]:
    """
    Return `.Arg` views over ``parser``'s actions, valued from ``namespace``.

    ``namespace`` is typically the result of ``parser.parse_args(...)``, but
    may be built or modified by hand.

    :raises:
        `.InvalidSource` if ``parser`` is not an `argparse.ArgumentParser` or
        ``namespace`` is not an `argparse.Namespace`.

    .. versionadded:: 1.0
    """
    if not isinstance(parser, argparse.ArgumentParser):
        err = "expected ArgumentParser, got {}"
        raise InvalidSource(err.format(type(parser).__name__))
    if not isinstance(namespace, argparse.Namespace):
        err = "expected Namespace, got {}"
        raise InvalidSource(err.format(type(namespace).__name__))
    args: List[Arg] = []
    for action in parser._actions:
        if isinstance(action, _SKIPPED) or action.dest == argparse.SUPPRESS:
            continue
        args.append(ActionArg(parser, action, namespace))
    debug("Extracted {} args from {!r}".format(len(args), parser.prog))
    return args
