from typing import Annotated, Any, Optional
import logging

from pydantic import Field

from core.client import ApiClient  # type: ignore
from core.envelope import tool_envelope  # type: ignore
from queries import (  # type: ignore
    build_boundary_search_request,
    build_count_request,
    build_lookup_request,
    build_search_request,
)
from utils import (  # type: ignore
    Endpoint,
    format_boundary_result,
    format_count_result,
    format_search_result,
    pretty_json,
)

logger = logging.getLogger(__name__)

OptStr = Optional[str]
OptNum = Optional[int | float]


def get_tools(client: ApiClient) -> dict[str, Any]:
    """Property lookup and search tools bound to a shared API client."""

    @tool_envelope("looking up property")
    async def lookup_property(
        state: Annotated[str, Field(description="State name or abbreviation")],
        street: Annotated[OptStr, Field(description="Street address")] = None,
        city: Annotated[OptStr, Field(description="City name")] = None,
        zip: Annotated[OptStr, Field(description="ZIP code")] = None,
        county: Annotated[OptStr, Field(description="County name (for APN lookup)")] = None,
        apn: Annotated[OptStr, Field(description="Assessor Parcel Number")] = None,
        skip_trace: Annotated[bool, Field(description="Include skip trace data")] = False,
    ) -> str:
        document = build_lookup_request(
            state=state, street=street, city=city, zip=zip, county=county, apn=apn, skip_trace=skip_trace
        )
        logger.info("lookup-property: mode=%s skip_trace=%s", "apn" if "apn" in document["requests"][0] else "street", skip_trace)
        result = await client.execute(Endpoint.PROPERTY_LOOKUP, document)
        return pretty_json(result)

    @tool_envelope("searching properties")
    async def search_properties(
        query: Annotated[OptStr, Field(description="Location query (city, state, etc.)")] = None,
        comp_street: Annotated[OptStr, Field(description="Comparison property street address")] = None,
        comp_city: Annotated[OptStr, Field(description="Comparison property city")] = None,
        comp_state: Annotated[OptStr, Field(description="Comparison property state")] = None,
        comp_zip: Annotated[OptStr, Field(description="Comparison property ZIP")] = None,
        min_estimated_value: Annotated[OptNum, Field(description="Minimum estimated property value")] = None,
        max_estimated_value: Annotated[OptNum, Field(description="Maximum estimated property value")] = None,
        min_equity_percent: Annotated[OptNum, Field(description="Minimum equity percentage")] = None,
        property_type: Annotated[OptStr, Field(description="Property type (e.g., 'Single Family')")] = None,
        use_distance: Annotated[bool, Field(description="Use distance-based comparison")] = False,
        distance_miles: Annotated[OptNum, Field(description="Distance in miles for comparison")] = None,
        use_bedrooms: Annotated[bool, Field(description="Use bedroom count in comparison")] = False,
        min_bedrooms: Annotated[OptNum, Field(description="Minimum bedrooms (relative to comp property)")] = None,
        max_bedrooms: Annotated[OptNum, Field(description="Maximum bedrooms (relative to comp property)")] = None,
        use_bathrooms: Annotated[bool, Field(description="Use bathroom count in comparison")] = False,
        min_bathrooms: Annotated[OptNum, Field(description="Minimum bathrooms (relative to comp property)")] = None,
        max_bathrooms: Annotated[OptNum, Field(description="Maximum bathrooms (relative to comp property)")] = None,
        use_year_built: Annotated[bool, Field(description="Use year built in comparison")] = False,
        min_year_built: Annotated[OptNum, Field(description="Minimum year built (relative to comp property)")] = None,
        max_year_built: Annotated[OptNum, Field(description="Maximum year built (relative to comp property)")] = None,
        skip: Annotated[int, Field(description="Number of results to skip")] = 0,
        take: Annotated[int, Field(description="Number of results to return")] = 10,
        skip_trace: Annotated[bool, Field(description="Include skip trace data")] = False,
    ) -> str:
        document = build_search_request(
            query=query,
            comp_street=comp_street,
            comp_city=comp_city,
            comp_state=comp_state,
            comp_zip=comp_zip,
            min_estimated_value=min_estimated_value,
            max_estimated_value=max_estimated_value,
            min_equity_percent=min_equity_percent,
            property_type=property_type,
            use_distance=use_distance,
            distance_miles=distance_miles,
            use_bedrooms=use_bedrooms,
            min_bedrooms=min_bedrooms,
            max_bedrooms=max_bedrooms,
            use_bathrooms=use_bathrooms,
            min_bathrooms=min_bathrooms,
            max_bathrooms=max_bathrooms,
            use_year_built=use_year_built,
            min_year_built=min_year_built,
            max_year_built=max_year_built,
            skip=skip,
            take=take,
            skip_trace=skip_trace,
        )
        logger.info("search-properties: criteria=%s options=%s", sorted(document["searchCriteria"]), document["options"])
        result = await client.execute(Endpoint.PROPERTY_SEARCH, document)
        return format_search_result(result)

    @tool_envelope("searching properties by boundary")
    async def search_properties_by_boundary(
        nw_latitude: Annotated[OptNum, Field(description="Northwest bounding box latitude")] = None,
        nw_longitude: Annotated[OptNum, Field(description="Northwest bounding box longitude")] = None,
        se_latitude: Annotated[OptNum, Field(description="Southeast bounding box latitude")] = None,
        se_longitude: Annotated[OptNum, Field(description="Southeast bounding box longitude")] = None,
        center_latitude: Annotated[OptNum, Field(description="Center point latitude for radius search")] = None,
        center_longitude: Annotated[OptNum, Field(description="Center point longitude for radius search")] = None,
        radius_kilometers: Annotated[OptNum, Field(description="Search radius in kilometers")] = None,
        min_sold_date: Annotated[OptStr, Field(description="Minimum last sold date (YYYY-MM-DD)")] = None,
        skip: Annotated[int, Field(description="Number of results to skip")] = 0,
        take: Annotated[int, Field(description="Number of results to return")] = 10,
    ) -> str:
        document = build_boundary_search_request(
            nw_latitude=nw_latitude,
            nw_longitude=nw_longitude,
            se_latitude=se_latitude,
            se_longitude=se_longitude,
            center_latitude=center_latitude,
            center_longitude=center_longitude,
            radius_kilometers=radius_kilometers,
            min_sold_date=min_sold_date,
            skip=skip,
            take=take,
        )
        logger.info("search-properties-by-boundary: address=%s", sorted(document["searchCriteria"].get("address", {})))
        result = await client.execute(Endpoint.PROPERTY_SEARCH, document)
        return format_boundary_result(result)

    @tool_envelope("counting properties")
    async def count_properties(
        query: Annotated[OptStr, Field(description="Location query (city, state, etc.)")] = None,
        min_estimated_value: Annotated[OptNum, Field(description="Minimum estimated property value")] = None,
        max_estimated_value: Annotated[OptNum, Field(description="Maximum estimated property value")] = None,
        min_equity_percent: Annotated[OptNum, Field(description="Minimum equity percentage")] = None,
        property_type: Annotated[OptStr, Field(description="Property type (e.g., 'Single Family')")] = None,
    ) -> str:
        document = build_count_request(
            query=query,
            min_estimated_value=min_estimated_value,
            max_estimated_value=max_estimated_value,
            min_equity_percent=min_equity_percent,
            property_type=property_type,
        )
        logger.info("count-properties: criteria=%s", sorted(document["searchCriteria"]))
        result = await client.execute(Endpoint.PROPERTY_SEARCH, document)
        return format_count_result(result)

    return {
        "lookup-property": {
            "func": lookup_property,
            "title": "Look up property",
            "description": "Get detailed property information by street address or by APN with county.",
        },
        "search-properties": {
            "func": search_properties,
            "title": "Search properties",
            "description": "Search properties by location, valuation, equity and property type, optionally comparing against a reference property.",
        },
        "search-properties-by-boundary": {
            "func": search_properties_by_boundary,
            "title": "Search properties by boundary",
            "description": "Search properties inside a bounding box and/or within a radius of a point, optionally filtered by last sold date.",
        },
        "count-properties": {
            "func": count_properties,
            "title": "Count properties",
            "description": "Count properties matching search criteria without returning property records.",
        },
    }
