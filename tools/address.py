from typing import Annotated, Any, Optional
import logging

from pydantic import Field

from core.client import ApiClient  # type: ignore
from core.envelope import tool_envelope  # type: ignore
from queries import (  # type: ignore
    build_autocomplete_request,
    build_geocode_request,
    build_reverse_geocode_request,
    build_verify_request,
)
from utils import Endpoint, pretty_json  # type: ignore

logger = logging.getLogger(__name__)


def get_tools(client: ApiClient) -> dict[str, Any]:
    """Address tools bound to a shared API client."""

    @tool_envelope("verifying address")
    async def verify_address(
        street: Annotated[str, Field(description="Street address")],
        city: Annotated[str, Field(description="City name")],
        state: Annotated[str, Field(description="State name or abbreviation")],
        zip: Annotated[str, Field(description="ZIP code")],
        request_id: Annotated[Optional[str], Field(description="Optional request ID for tracking")] = None,
    ) -> str:
        logger.info("verify-address: %s, %s, %s %s", street, city, state, zip)
        result = await client.execute(
            Endpoint.ADDRESS_VERIFY,
            build_verify_request(street=street, city=city, state=state, zip=zip, request_id=request_id),
        )
        return pretty_json(result)

    @tool_envelope("autocompleting address")
    async def autocomplete_address(
        query: Annotated[str, Field(description="Partial or full address to search")],
        usps_verified: Annotated[bool, Field(description="Only return USPS verified addresses")] = True,
        skip: Annotated[int, Field(description="Number of results to skip")] = 0,
        take: Annotated[int, Field(description="Number of results to return")] = 4,
    ) -> str:
        logger.info("autocomplete-address: query=%r skip=%s take=%s", query, skip, take)
        result = await client.execute(
            Endpoint.ADDRESS_AUTOCOMPLETE,
            build_autocomplete_request(query=query, usps_verified=usps_verified, skip=skip, take=take),
        )
        return pretty_json(result)

    @tool_envelope("geocoding address")
    async def geocode_address(
        address: Annotated[str, Field(description="Full address to geocode")],
    ) -> str:
        logger.info("geocode-address: %r", address)
        result = await client.execute(Endpoint.ADDRESS_GEOCODE, build_geocode_request(address=address))
        return pretty_json(result)

    @tool_envelope("reverse geocoding")
    async def reverse_geocode(
        latitude: Annotated[int | float, Field(description="Latitude coordinate")],
        longitude: Annotated[int | float, Field(description="Longitude coordinate")],
    ) -> str:
        logger.info("reverse-geocode: %s, %s", latitude, longitude)
        result = await client.execute(
            Endpoint.ADDRESS_REVERSE_GEOCODE, build_reverse_geocode_request(latitude=latitude, longitude=longitude)
        )
        return pretty_json(result)

    return {
        "verify-address": {
            "func": verify_address,
            "title": "Verify address",
            "description": "Verify and standardize a US postal address.",
        },
        "autocomplete-address": {
            "func": autocomplete_address,
            "title": "Autocomplete address",
            "description": "Suggest complete addresses for a partial address query.",
        },
        "geocode-address": {
            "func": geocode_address,
            "title": "Geocode address",
            "description": "Convert a full address to latitude/longitude coordinates.",
        },
        "reverse-geocode": {
            "func": reverse_geocode,
            "title": "Reverse geocode",
            "description": "Find the address closest to a latitude/longitude coordinate.",
        },
    }
