import builtins
import re
from types import SimpleNamespace
from .types import *
from .exceptions import InvalidParameterError

_PLACEHOLDER = re.compile(r"\{(\d+)\}")


def format(template: str, *format_args: Any) -> str:
    """
    positional formatting with {0}, {1}, ... placeholders.
    placeholders without a matching argument and any other braces are left untouched,
    so templates containing literal json or set notation need no escaping.
    """
    def replace(match: re.Match) -> str:
        index = int(match.group(1))
        return str(format_args[index]) if index < len(format_args) else match.group(0)

    return _PLACEHOLDER.sub(replace, template)


def join(separator: str, items: Iterable[Any]) -> str:
    """join the string form of every item with separator"""
    return separator.join(str(item) for item in items)


def ord(char: str) -> int:
    """code point of a single character"""
    if not isinstance(char, str) or len(char) != 1:
        raise InvalidParameterError('char', "Expected a string of length 1.")
    return builtins.ord(char)


def _ignore_case(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


# equality comparers, usable wherever an EqualityComparer is accepted
comparers = SimpleNamespace(ignore_case=_ignore_case)
