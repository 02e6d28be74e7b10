"""Tests for claim list and JSON payload conversion."""

from decimal import Decimal

from easyjwt.claims.codec import decode_claims, encode_claims
from easyjwt.claims.types import Claim, ClaimValueType
from easyjwt.tokens.payload import claims_to_payload, payload_to_claims


class TestPayloadToClaims:
    """Tests for reading JSON payloads into tagged claims."""

    def test_json_kinds_are_tagged(self) -> None:
        claims = payload_to_claims(
            {
                "flag": False,
                "small": 123456,
                "big": 253402300800,
                "ratio": 0.5,
                "name": "alice",
            }
        )
        assert [c.value_type for c in claims] == [
            ClaimValueType.BOOLEAN,
            ClaimValueType.INTEGER32,
            ClaimValueType.INTEGER64,
            ClaimValueType.DOUBLE,
            ClaimValueType.STRING,
        ]
        assert claims[0].value == "false"
        assert claims[3].value == "0.5"

    def test_iso_timestamp_string_is_datetime(self) -> None:
        claims = payload_to_claims({"at": "2024-05-17T10:30:15+00:00"})
        assert claims[0].value_type == ClaimValueType.DATE_TIME

    def test_date_only_string_stays_string(self) -> None:
        claims = payload_to_claims({"day": "2024-05-17"})
        assert claims[0].value_type == ClaimValueType.STRING

    def test_array_expands_to_repeated_claims(self) -> None:
        claims = payload_to_claims({"some-claim-array": ["item1", "item2"]})
        assert claims == [
            Claim(name="some-claim-array", value="item1"),
            Claim(name="some-claim-array", value="item2"),
        ]

    def test_nested_values_are_json_tagged(self) -> None:
        claims = payload_to_claims({"obj": {"a": 1}, "none": None, "deep": [[1]]})
        assert [(c.name, c.value, c.value_type) for c in claims] == [
            ("obj", '{"a":1}', ClaimValueType.JSON),
            ("none", "null", ClaimValueType.JSON),
            ("deep", "[1]", ClaimValueType.JSON),
        ]

    def test_nested_values_decode_as_raw_strings(self) -> None:
        decoded = decode_claims(payload_to_claims({"obj": {"a": 1}}))
        assert decoded == {"obj": '{"a":1}'}


class TestClaimsToPayload:
    """Tests for building JSON payloads from tagged claims."""

    def test_values_become_json_native(self) -> None:
        payload = claims_to_payload(
            encode_claims(
                {
                    "some-claim-int": 123456,
                    "some-claim-bool": False,
                    "price": Decimal("9.75"),
                }
            )
        )
        assert payload == {
            "some-claim-int": 123456,
            "some-claim-bool": False,
            "price": 9.75,
        }

    def test_repeated_names_become_arrays(self) -> None:
        payload = claims_to_payload(encode_claims({"roles": ["a", "b"]}))
        assert payload == {"roles": ["a", "b"]}

    def test_unparsable_tagged_value_kept_as_string(self) -> None:
        payload = claims_to_payload(
            [Claim(name="n", value="abc", value_type=ClaimValueType.INTEGER32)]
        )
        assert payload == {"n": "abc"}

    def test_decimal_precision_limited_to_float(self) -> None:
        payload = claims_to_payload(
            encode_claims({"big": Decimal("12345678901234567890.123")})
        )
        assert isinstance(payload["big"], float)
        claims = decode_claims(payload_to_claims(payload))
        assert claims["big"] == Decimal("1.2345678901234567E+19")

    def test_json_claims_are_restored(self) -> None:
        payload = {"obj": {"a": [1, 2]}, "none": None}
        assert claims_to_payload(payload_to_claims(payload)) == payload

    def test_payload_survives_claim_round_trip(self) -> None:
        payload = {
            "some-claim-int": 123456,
            "some-claim-bool": False,
            "some-claim-array": ["item1", "item2"],
            "exp": 253402300800,
            "iss": "some-issuer",
        }
        assert claims_to_payload(payload_to_claims(payload)) == payload
