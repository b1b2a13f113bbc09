from typing import Any, List, Sequence

from eth_abi import encode
from eth_abi.exceptions import EncodingError, ParseError
from eth_utils import remove_0x_prefix
from hexbytes import HexBytes

from verification.result import ArgumentEncodingError


def _is_bytes_type(abi_type: str) -> bool:
    return abi_type.startswith("bytes") and not abi_type.endswith("]")


def _prepare_value(abi_type: str, value: Any) -> Any:
    """Converts params file values into what the ABI encoder accepts."""
    if _is_bytes_type(abi_type) and isinstance(value, str):
        return bytes(HexBytes(value))
    if abi_type.endswith("]") and isinstance(value, list):
        inner_type = abi_type[: abi_type.rindex("[")]
        return [_prepare_value(inner_type, item) for item in value]
    return value


def encode_constructor_args(types: Sequence[str], values: Sequence[Any]) -> str:
    """
    ABI-encodes constructor arguments and returns them as lowercase hex
    without the 0x prefix, as explorers expect.
    """
    if len(types) != len(values):
        raise ArgumentEncodingError(
            f"Got {len(types)} constructor types but {len(values)} values"
        )
    if not types:
        return ""

    prepared = [_prepare_value(abi_type, value) for abi_type, value in zip(types, values)]
    try:
        encoded = encode(list(types), prepared)
    except (EncodingError, ParseError, ValueError, TypeError) as e:
        raise ArgumentEncodingError(f"Unable to encode constructor arguments: {e}")
    return encoded.hex()


def normalize_constructor_args(hexstr: str) -> str:
    """Validates pre-encoded constructor arguments; returns bare lowercase hex."""
    unprefixed = remove_0x_prefix(hexstr.strip())
    if not unprefixed:
        return ""
    try:
        bytes.fromhex(unprefixed)
    except ValueError:
        raise ArgumentEncodingError(f"Constructor arguments are not valid hex: '{hexstr}'")
    return unprefixed.lower()


def split_args(constructor: List[dict]) -> tuple:
    """Splits params file constructor entries into (types, values)."""
    types, values = list(), list()
    for index, entry in enumerate(constructor):
        try:
            types.append(entry["type"])
            values.append(entry["value"])
        except (KeyError, TypeError):
            raise ArgumentEncodingError(
                f"Constructor entry #{index} must have 'type' and 'value' fields"
            )
    return types, values
