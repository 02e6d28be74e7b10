"""Conversion between tagged claim lists and JSON token payloads."""

import json
from collections.abc import Iterable, Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any

from easyjwt.claims.codec import encode_claim, parse_claim_value
from easyjwt.claims.types import Claim, ClaimValueType

_JSON_SEPARATORS = (",", ":")


def _looks_like_timestamp(text: str) -> bool:
    if "T" not in text:
        return False
    try:
        datetime.fromisoformat(text)
    except ValueError:
        return False
    return True


def _claim_from_json(name: str, value: Any) -> Claim:
    if value is None or isinstance(value, (dict, list)):
        return Claim(
            name=name,
            value=json.dumps(value, separators=_JSON_SEPARATORS),
            value_type=ClaimValueType.JSON,
        )
    if isinstance(value, str) and _looks_like_timestamp(value):
        return Claim(name=name, value=value, value_type=ClaimValueType.DATE_TIME)
    return encode_claim(name, value)


def payload_to_claims(payload: Mapping[str, Any]) -> list[Claim]:
    """Flatten a decoded JSON payload into tagged claims.

    Top-level arrays expand into one claim per element; anything deeper is
    kept as a ``json`` claim.
    """
    claims: list[Claim] = []
    for name, value in payload.items():
        if isinstance(value, list):
            claims.extend(_claim_from_json(name, item) for item in value)
        else:
            claims.append(_claim_from_json(name, value))
    return claims


def _json_value(claim: Claim) -> Any:
    if claim.value_type == ClaimValueType.JSON:
        try:
            return json.loads(claim.value)
        except ValueError:
            return claim.value
    parsed = parse_claim_value(claim)
    if isinstance(parsed, Decimal):
        return float(parsed)
    if isinstance(parsed, datetime):
        return claim.value
    return parsed


def claims_to_payload(claims: Iterable[Claim]) -> dict[str, Any]:
    """Build a JSON payload, folding repeated claim names into arrays.

    ``double`` claims become JSON numbers, so only about 15 significant
    digits of a ``Decimal`` survive the trip through a token. Timestamps
    are written as ISO-8601 strings.
    """
    grouped: dict[str, list[Any]] = {}
    for claim in claims:
        grouped.setdefault(claim.name, []).append(_json_value(claim))
    return {
        name: values[0] if len(values) == 1 else values
        for name, values in grouped.items()
    }
