__all__ = (
    "ActionArg",
    "Arg",
    "Builder",
    "Config",
    "FieldArg",
    "FieldError",
    "InvalidSource",
    "MarshalError",
    "Option",
    "Positional",
    "__version__",
    "__version_info__",
    "args",
    "args_from_dataclass",
    "args_from_parser",
    "command_line",
    "default_config",
    "option",
    "positional",
    "positional_args",
)


from ._version import __version__, __version_info__
from .arg import Arg, Option, Positional
from .builder import Builder, args, command_line
from .config import Config, default_config
from .exceptions import FieldError, InvalidSource, MarshalError
from .fields import (
    FieldArg,
    args_from_dataclass,
    option,
    positional,
    positional_args,
)
from .namespace import ActionArg, args_from_parser
