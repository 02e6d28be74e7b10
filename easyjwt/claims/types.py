"""Type definitions for claims and typed claim maps."""

from datetime import datetime
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ClaimValueType(StrEnum):
    """Value-type tag carried next to each string claim value."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    INTEGER32 = "integer32"
    INTEGER64 = "integer64"
    DOUBLE = "double"
    DATE_TIME = "dateTime"
    STRING = "string"
    JSON = "json"


class Claim(BaseModel):
    """A single name/value pair with its value-type tag.

    Names repeat across a claim list to express array-valued claims. Tags
    outside ``ClaimValueType`` are kept as plain strings.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    value_type: ClaimValueType | str = ClaimValueType.STRING


ClaimValue = bool | int | Decimal | datetime | str
TypedClaimMap = dict[str, ClaimValue | list[ClaimValue]]
