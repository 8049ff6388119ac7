from typing import Any, Optional


def build_verify_request(
    *, street: str, city: str, state: str, zip: str, request_id: Optional[str] = None
) -> dict[str, Any]:
    return {
        "requests": [
            {
                "street": street,
                "city": city,
                "state": state,
                "zip": zip,
                "requestId": request_id or "",
            }
        ]
    }


def build_autocomplete_request(*, query: str, usps_verified: bool = True, skip: int = 0, take: int = 4) -> dict[str, Any]:
    return {
        "searchCriteria": {"query": query},
        "options": {
            "uspsVerifiedAddresses": usps_verified,
            "skip": skip,
            "take": take,
        },
    }


def build_geocode_request(*, address: str) -> dict[str, Any]:
    return {"requests": [{"address": address}]}


def build_reverse_geocode_request(*, latitude: int | float, longitude: int | float) -> dict[str, Any]:
    return {"request": {"latitude": latitude, "longitude": longitude}}
