"""ABI parameter encoding.

A thin layer over eth_abi. The remote decoder reads the standard contract
ABI encoding of a fixed parameter list, so parameter order and type tags are
the entire wire contract. Nothing here coerces or validates values: eth_abi
rejects what it cannot encode and that error reaches the caller as-is.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from eth_abi import decode, encode


@dataclass(frozen=True)
class AbiParam:
    """A named ABI parameter."""

    # Parameter name, as declared by the remote struct
    name: str
    # ABI type tag; "tuple" (or "tuple[]") for nested records
    type: str
    # Fields of a tuple parameter, in declared order
    components: tuple["AbiParam", ...] = field(default_factory=tuple)

    @property
    def canonical_type(self) -> str:
        """The type string eth_abi understands, with tuples expanded."""

        if not self.type.startswith("tuple"):
            return self.type

        inner = ",".join(component.canonical_type for component in self.components)
        return f"({inner}){self.type[len('tuple'):]}"


def canonical_types(params: Sequence[AbiParam]) -> list[str]:
    return [param.canonical_type for param in params]


def encode_parameters(params: Sequence[AbiParam], values: Sequence[Any]) -> bytes:
    """Encode values against an ordered parameter list.

    @param params: The parameters, in wire order
    @param values: One value per parameter; tuples take a sequence of component values
    @return: The encoded bytes
    @raises ValueError: If the number of values does not match the parameters
    """

    if len(params) != len(values):
        raise ValueError(f"Expected {len(params)} values for ABI parameters, got {len(values)}")

    return encode(canonical_types(params), list(values))


def decode_parameters(params: Sequence[AbiParam], data: bytes | str) -> tuple[Any, ...]:
    """Decode ABI-encoded bytes against an ordered parameter list.

    @param params: The parameters, in wire order
    @param data: The encoded bytes, or a 0x-prefixed hex string
    @return: One decoded value per parameter
    """

    if isinstance(data, str):
        data = from_hex(data)

    return decode(canonical_types(params), data)


def to_hex(data: bytes) -> str:
    """Render bytes as a 0x-prefixed lowercase hex string."""

    return "0x" + data.hex()


def from_hex(text: str) -> bytes:
    if text.startswith(("0x", "0X")):
        text = text[2:]
    return bytes.fromhex(text)
