"""
Platform-specific code lives here.

Mostly this means the quoting rules used when rendering a shell-ready command
line: POSIX shells get double-quote style quoting, Windows gets the argv
escaping understood by ``CommandLineToArgvW`` and the MS C runtime.
"""

import subprocess
import sys


WINDOWS = sys.platform == "win32"
"""
Whether or not the current platform appears to be Windows in nature.

Note that Cygwin's Python is actually close enough to "real" UNIXes that it
doesn't need (or want!) Windows-style command lines -- so we only test for
literal Win32 setups (vanilla Python, ActiveState etc) here.
"""

#: Characters with special meaning to a POSIX shell when left unquoted.
POSIX_METACHARACTERS = frozenset("|&;<>()$`\\\"'*?[]#~{}!")

#: Characters which, when escaped with a backslash, lose their special meaning
#: inside a double-quoted POSIX shell string.
POSIX_DOUBLE_QUOTE_ESCAPES = frozenset('\\"$`')

WINDOWS_SPECIALS = frozenset(' \t"')


def posix_must_quote(value):
    """
    Return ``True`` if ``value`` cannot be given to a POSIX shell as-is.

    Empty strings, whitespace, shell metacharacters and non-printable
    characters all require quoting.
    """
    if not value:
        return True
    for char in value:
        if char.isspace() or char in POSIX_METACHARACTERS:
            return True
        if not char.isprintable():
            return True
    return False


def posix_quote(value):
    """
    Wrap ``value`` in double quotes, escaping what is still special inside.
    """
    escaped = "".join(
        "\\" + char if char in POSIX_DOUBLE_QUOTE_ESCAPES else char
        for char in value
    )
    return '"{}"'.format(escaped)


def windows_must_quote(value):
    """
    Return ``True`` if ``value`` would be split or mangled by Windows argv
    parsing when given as-is.
    """
    return not value or any(char in WINDOWS_SPECIALS for char in value)


def windows_quote(value):
    """
    Quote ``value`` per the MS C runtime rules.

    Delegates to `subprocess.list2cmdline`, which implements the same rules
    ``CommandLineToArgvW`` uses to split a command line back up.
    """
    return subprocess.list2cmdline([value])


def quote_posix_if_needed(value):
    """
    Default POSIX argument quoter: pass-through unless quoting is required.
    """
    if posix_must_quote(value):
        return posix_quote(value)
    return value


def quote_windows_if_needed(value):
    """
    Default Windows argument quoter: pass-through unless quoting is required.
    """
    if windows_must_quote(value):
        return windows_quote(value)
    return value
