from typing import Any, Optional

from core.errors import ValidationError


def compact(mapping: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None."""
    return {k: v for k, v in mapping.items() if v is not None}


def build_lookup_request(
    *,
    state: str,
    street: Optional[str] = None,
    city: Optional[str] = None,
    zip: Optional[str] = None,
    county: Optional[str] = None,
    apn: Optional[str] = None,
    skip_trace: bool = False,
) -> dict[str, Any]:
    """Build a property lookup request.

    APN + county selects a parcel lookup; otherwise a street address is required.
    """
    if apn and county:
        request = {"address": {"county": county, "state": state}, "apn": apn}
    elif street:
        request = {"address": compact({"street": street, "city": city, "state": state, "zip": zip})}
    else:
        raise ValidationError("Either provide street address details or APN with county")

    document: dict[str, Any] = {"requests": [request]}
    if skip_trace:
        document["options"] = {"skipTrace": True}
    return document
