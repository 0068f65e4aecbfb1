"""Wire type tags.

Contains the WireType enum, the tag groupings used by the coercion
table, and tag parsing. No internal jobwire imports needed.
"""

from enum import StrEnum


class WireType(StrEnum):
    """The closed set of ABI type tags jobwire knows how to coerce"""

    BOOL = "bool"

    # Small unsigned integers, coerced to a plain int
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"

    # Wide unsigned integers, coerced to an arbitrary-precision int
    UINT64 = "uint64"
    UINT128 = "uint128"
    UINT256 = "uint256"

    STRING = "string"

    # Dynamic arrays, accepted as sequences or newline-separated text
    STRING_ARRAY = "string[]"
    ADDRESS_ARRAY = "address[]"


SMALL_UINT_TYPES = {
    WireType.UINT8,
    WireType.UINT16,
    WireType.UINT32,
}

BIG_UINT_TYPES = {
    WireType.UINT64,
    WireType.UINT128,
    WireType.UINT256,
}

ARRAY_TYPES = {
    WireType.STRING_ARRAY,
    WireType.ADDRESS_ARRAY,
}


def parse_wire_type(tag: "WireType | str") -> "WireType | str":
    """Resolve a tag to its WireType member.

    Tags outside the known set (bytes32, int256, ...) are returned unchanged;
    they are legal and encode their value as given.

    @param tag: The ABI type tag
    @return: The WireType member, or the original tag
    """

    if isinstance(tag, WireType):
        return tag

    try:
        return WireType(tag)
    except ValueError:
        return tag
