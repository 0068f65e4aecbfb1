"""Type coercion table.

Maps each WireType to a pure function that turns arbitrary form input into
the value the ABI encoder expects for that tag. Coercion runs against
half-filled forms on every keystroke, so it never raises: missing or
malformed input degrades to a fixed default instead. Range checks are left
to form validation and, ultimately, to the ABI encoder.
"""

from collections.abc import Callable, Mapping
import math
from typing import Any

from jobwire.constants import ADDRESS_PATTERN, LINE_SEPARATOR
from jobwire.types.wire_type import WireType, parse_wire_type

type Coercion = Callable[[Any], Any]

_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}


def _parse_numeric_text(text: str) -> int | float:
    text = text.strip()
    if not text:
        return 0

    prefix = text[:2].lower()
    if prefix in _RADIX_PREFIXES:
        try:
            return int(text[2:], _RADIX_PREFIXES[prefix])
        except ValueError:
            return 0

    try:
        return int(text)
    except ValueError:
        pass

    try:
        return float(text)
    except ValueError:
        return 0


def coerce_number(value: Any) -> int | float:
    """Coerce a value to an unsigned-integer candidate.

    Missing, non-numeric, NaN and infinite input all become 0. Integral
    floats become ints. Fractional and negative numbers are returned as-is
    so the ABI encoder can reject them.
    """

    if value is None:
        return 0

    if isinstance(value, bool):
        return int(value)

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        value = _parse_numeric_text(value)
        if isinstance(value, int):
            return value

    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        return int(value) if value.is_integer() else value

    return 0


def coerce_bool(value: Any) -> bool:
    return bool(value)


def coerce_string(value: Any) -> str:
    if value is None:
        return ""

    # render like the browser forms that produce these values
    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, float) and value.is_integer():
        return str(int(value))

    return str(value)


def _split_lines(value: Any) -> list[str]:
    lines = (line.strip() for line in coerce_string(value).split(LINE_SEPARATOR))
    return [line for line in lines if line]


def coerce_string_array(value: Any) -> list[str]:
    """Coerce to a list of strings.

    Sequences pass through with each element stringified; text is split into
    one entry per non-blank line.
    """

    if isinstance(value, (list, tuple)):
        return [coerce_string(item) for item in value]

    return _split_lines(value)


def coerce_address_array(value: Any) -> Any:
    """Coerce to a list of addresses.

    Sequences pass through untouched. Text is split into lines and any line
    that is not a 0x-prefixed 40 hex digit address is dropped. Parsed
    addresses are lower-cased; the encoded bytes do not depend on case.
    """

    if isinstance(value, (list, tuple)):
        return value

    return [line.lower() for line in _split_lines(value) if ADDRESS_PATTERN.match(line)]


COERCIONS: Mapping[WireType, Coercion] = {
    WireType.BOOL: coerce_bool,
    WireType.UINT8: coerce_number,
    WireType.UINT16: coerce_number,
    WireType.UINT32: coerce_number,
    WireType.UINT64: coerce_number,
    WireType.UINT128: coerce_number,
    WireType.UINT256: coerce_number,
    WireType.STRING: coerce_string,
    WireType.STRING_ARRAY: coerce_string_array,
    WireType.ADDRESS_ARRAY: coerce_address_array,
}


def check_coercion_coverage() -> None:
    """Ensure every wire type has a coercion function."""

    missing = set(WireType) - set(COERCIONS)
    if missing:
        raise ValueError(f"Coercion table is incomplete. Missing wire types: {missing}")


check_coercion_coverage()


def coerce_value(value: Any, wire_type: "WireType | str") -> Any:
    """Coerce a form value for the given wire type.

    Unknown tags pass the value through unchanged.

    @param value: The raw form or context value; None means missing
    @param wire_type: The ABI type tag
    @return: The coerced value
    """

    tag = parse_wire_type(wire_type)
    if not isinstance(tag, WireType):
        return value

    return COERCIONS[tag](value)
