"""printf-style message formatting for domain errors."""

import json
import re
from typing import Any

_PLACEHOLDER = re.compile(r"%[sdifjoOc%]")


def format_message(*args: Any) -> str:
    """Build an error message from printf-style arguments.

    ``format_message("User %s not found", "alice")`` gives
    ``"User alice not found"``. Placeholders without a matching value are
    kept verbatim and surplus values are appended, space separated.
    Never raises.
    """
    if not args:
        return ""

    if len(args) == 1:
        return str(args[0])

    template, *values = args
    if not isinstance(template, str):
        return " ".join(_render(value) for value in args)

    def substitute(match: re.Match[str]) -> str:
        token = match.group(0)
        if token == "%%":
            return "%"
        if not values:
            return token
        return _CONVERTERS[token[1]](values.pop(0))

    message = _PLACEHOLDER.sub(substitute, template)
    if values:
        message = " ".join([message, *(_render(value) for value in values)])
    return message


def _render(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def _number(value: Any) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return _int_text(value)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return "NaN"
    return str(int(number)) if number.is_integer() else str(number)


def _integer(value: Any) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return _int_text(value)
    try:
        return str(int(float(value)))
    except (TypeError, ValueError, OverflowError):
        return "NaN"


def _int_text(value: int) -> str:
    # str() refuses ints beyond sys.get_int_max_str_digits()
    try:
        return str(value)
    except ValueError:
        return "Infinity" if value > 0 else "-Infinity"


def _float(value: Any) -> str:
    try:
        return str(float(value))
    except (TypeError, ValueError, OverflowError):
        return "NaN"


def _json(value: Any) -> str:
    try:
        return json.dumps(value, default=str)
    except (TypeError, ValueError):
        return repr(value)


_CONVERTERS = {
    "s": str,
    "d": _number,
    "i": _integer,
    "f": _float,
    "j": _json,
    "o": repr,
    "O": repr,
    "c": lambda value: "",
}
