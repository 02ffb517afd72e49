from typing import Callable, Iterable, Optional

from eth_abi import decode
from eth_abi.exceptions import DecodingError

from utils.logger_utils import get_logger

logger = get_logger("ABI Decode Utils")

# A decode strategy returns the decoded value, or None if it could not parse the data
DecodeStrategy = Callable[[bytes], Optional[str]]


def decode_abi_string(raw: bytes) -> Optional[str]:
    """
    Decodes ``raw`` as an ABI-encoded ``string`` return value.
    An empty string counts as a failure so the next strategy gets a chance.
    """
    try:
        decoded = decode(["string"], bytes(raw))[0]
    except (DecodingError, OverflowError, ValueError):
        logger.debug(f"Result {_preview(raw)} is not an ABI encoded string", exc_info=True)
        return None
    return decoded or None


def decode_utf8_bytes(raw: bytes) -> Optional[str]:
    """
    Decodes ``raw`` as UTF-8 text after stripping zero padding, which covers
    tokens that return ``bytes32`` instead of ``string``.
    """
    try:
        return bytes(raw).strip(b"\x00").decode("utf-8")
    except UnicodeDecodeError:
        logger.debug(f"Result {_preview(raw)} is not valid UTF-8", exc_info=True)
        return None


# Order matters: first match wins
STRING_OR_BYTES_STRATEGIES: tuple[DecodeStrategy, ...] = (decode_abi_string, decode_utf8_bytes)


def decode_first_match(raw: bytes, strategies: Iterable[DecodeStrategy] = STRING_OR_BYTES_STRATEGIES) -> Optional[str]:
    for strategy in strategies:
        result = strategy(raw)
        if result is not None:
            return result
    return None


def _preview(raw: bytes, limit: int = 64) -> str:
    hex_str = bytes(raw).hex()
    return "0x" + (hex_str if len(hex_str) <= limit else hex_str[:limit] + "...")
