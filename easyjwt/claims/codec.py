"""Bidirectional mapping between typed claim maps and tagged claim lists.

Encoding flattens sequence values into repeated claims and tags every value
with its runtime kind. Decoding regroups claims by name and re-parses each
value according to its tag. A value that fails to parse, or carries a tag
this module does not know, decodes to its raw string so that one foreign
claim never prevents reading the rest of a token.
"""

import re
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from easyjwt.claims.types import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    Claim,
    ClaimValue,
    ClaimValueType,
    TypedClaimMap,
)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def is_claim_sequence(value: Any) -> bool:
    """Whether a claim value expands to one claim per element."""
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(value, Iterable)


def infer_value_type(value: Any) -> ClaimValueType:
    """Map a runtime value to its claim tag."""
    if isinstance(value, bool):
        return ClaimValueType.BOOLEAN
    if isinstance(value, int):
        if INT32_MIN <= value <= INT32_MAX:
            return ClaimValueType.INTEGER32
        if INT64_MIN <= value <= INT64_MAX:
            return ClaimValueType.INTEGER64
        return ClaimValueType.STRING
    if isinstance(value, (Decimal, float)):
        return ClaimValueType.DOUBLE
    if isinstance(value, datetime):
        return ClaimValueType.DATE_TIME
    return ClaimValueType.STRING


def format_claim_value(value: Any) -> str:
    """Render a value in the string form stored on a claim."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, float):
        return repr(value)
    return str(value)


def encode_claim(name: str, value: Any) -> Claim:
    return Claim(
        name=name,
        value=format_claim_value(value),
        value_type=infer_value_type(value),
    )


def encode_claims(claims: Mapping[str, Any] | None) -> list[Claim]:
    """Flatten a typed claim map into a tagged claim list."""
    if not claims:
        return []
    encoded: list[Claim] = []
    for name, value in claims.items():
        if is_claim_sequence(value):
            encoded.extend(encode_claim(name, item) for item in value)
        else:
            encoded.append(encode_claim(name, value))
    return encoded


def _parse_boolean(raw: str) -> bool:
    text = raw.strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _integer_parser(low: int, high: int) -> Callable[[str], int]:
    def parse(raw: str) -> int:
        text = raw.strip()
        if not _INTEGER_PATTERN.fullmatch(text):
            raise ValueError(f"not an integer: {raw!r}")
        number = int(text)
        if not low <= number <= high:
            raise ValueError(f"integer out of range: {raw!r}")
        return number

    return parse


def _parse_decimal(raw: str) -> Decimal:
    try:
        return Decimal(raw.strip())
    except InvalidOperation as exc:
        raise ValueError(f"not a decimal: {raw!r}") from exc


_PARSERS: dict[str, Callable[[str], ClaimValue]] = {
    ClaimValueType.BOOLEAN: _parse_boolean,
    ClaimValueType.INTEGER: _integer_parser(INT32_MIN, INT32_MAX),
    ClaimValueType.INTEGER32: _integer_parser(INT32_MIN, INT32_MAX),
    ClaimValueType.INTEGER64: _integer_parser(INT64_MIN, INT64_MAX),
    ClaimValueType.DOUBLE: _parse_decimal,
    ClaimValueType.DATE_TIME: datetime.fromisoformat,
}


def parse_claim_value(claim: Claim) -> ClaimValue:
    """Re-parse a claim's string value according to its tag."""
    parser = _PARSERS.get(claim.value_type)
    if parser is None:
        return claim.value
    try:
        return parser(claim.value)
    except ValueError:
        return claim.value


def decode_claims(claims: Iterable[Claim]) -> TypedClaimMap:
    """Group claims by name into scalars and, for repeated names, lists."""
    grouped: dict[str, list[Claim]] = {}
    for claim in claims:
        grouped.setdefault(claim.name, []).append(claim)

    decoded: TypedClaimMap = {}
    for name, group in grouped.items():
        if len(group) == 1:
            decoded[name] = parse_claim_value(group[0])
        else:
            decoded[name] = [parse_claim_value(claim) for claim in group]
    return decoded
