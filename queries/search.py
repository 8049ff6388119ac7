"""Property search request builders.

Each filter group is produced by its own helper returning a sub-document or
None, and the builders merge only the groups that came back non-empty.

Inclusion rules differ on purpose between groups:

- valuation bounds, equity floor and distanceMiles are included only when
  truthy, so 0 counts as "not supplied"
- bedroom, bathroom and year-built bounds are included whenever they are not
  None, so 0 is sent
- boundary coordinates are included whenever they are not None (0 is a valid
  latitude or longitude)
"""
from typing import Any, Optional

from queries.property import compact

Number = int | float

DEFAULT_SKIP = 0
DEFAULT_TAKE = 10


# ---------------------------------------------------------------------------
# searchCriteria groups
# ---------------------------------------------------------------------------

def comp_address_criteria(
    street: Optional[str] = None,
    city: Optional[str] = None,
    state: Optional[str] = None,
    zip: Optional[str] = None,
) -> Optional[dict[str, Any]]:
    if not street:
        return None
    return compact({"street": street, "city": city, "state": state, "zip": zip})


def valuation_criteria(
    min_estimated_value: Optional[Number] = None,
    max_estimated_value: Optional[Number] = None,
    min_equity_percent: Optional[Number] = None,
) -> Optional[dict[str, Any]]:
    valuation: dict[str, Any] = {}
    if min_estimated_value or max_estimated_value:
        estimated: dict[str, Any] = {}
        if min_estimated_value:
            estimated["min"] = min_estimated_value
        if max_estimated_value:
            estimated["max"] = max_estimated_value
        valuation["estimatedValue"] = estimated
    if min_equity_percent:
        valuation["equityPercent"] = {"min": min_equity_percent}
    return valuation or None


def general_criteria(property_type: Optional[str] = None) -> Optional[dict[str, Any]]:
    if not property_type:
        return None
    return {"propertyTypeDetail": {"equals": property_type}}


def _coordinate_text(value: Number) -> str:
    # 40.0 -> "40", 40.5 -> "40.5"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def bounding_box(
    nw_latitude: Optional[Number] = None,
    nw_longitude: Optional[Number] = None,
    se_latitude: Optional[Number] = None,
    se_longitude: Optional[Number] = None,
) -> Optional[dict[str, Any]]:
    corners = (nw_latitude, nw_longitude, se_latitude, se_longitude)
    if any(c is None for c in corners):
        return None
    return {
        "nwGeoPoint": {"latitude": _coordinate_text(nw_latitude), "longitude": _coordinate_text(nw_longitude)},
        "seGeoPoint": {"latitude": _coordinate_text(se_latitude), "longitude": _coordinate_text(se_longitude)},
    }


def radius_circle(
    center_latitude: Optional[Number] = None,
    center_longitude: Optional[Number] = None,
    radius_kilometers: Optional[Number] = None,
) -> Optional[dict[str, Any]]:
    if center_latitude is None or center_longitude is None or radius_kilometers is None:
        return None
    return {
        "geoPoint": {"latitude": center_latitude, "longitude": center_longitude},
        "distanceKilometers": radius_kilometers,
    }


def sold_date_criteria(min_sold_date: Optional[str] = None) -> Optional[dict[str, Any]]:
    if not min_sold_date:
        return None
    return {"lastSoldDate": {"minDate": min_sold_date}}


def _criteria(query: Optional[str] = None, **groups: Optional[dict[str, Any]]) -> dict[str, Any]:
    criteria: dict[str, Any] = {}
    if query:
        criteria["query"] = query
    for key, group in groups.items():
        if group:
            criteria[key] = group
    return criteria


# ---------------------------------------------------------------------------
# options groups
# ---------------------------------------------------------------------------

def comparison_toggle(flag: str, enabled: bool, **bounds: Optional[Number]) -> dict[str, Any]:
    """Options for one comparison toggle: the flag plus any bound that is not None."""
    if not enabled:
        return {}
    return {flag: True, **compact(bounds)}


def distance_option(use_distance: bool = False, distance_miles: Optional[Number] = None) -> dict[str, Any]:
    if not use_distance:
        return {}
    option: dict[str, Any] = {"useDistance": True}
    if distance_miles:
        option["distanceMiles"] = distance_miles
    return option


# ---------------------------------------------------------------------------
# builders
# ---------------------------------------------------------------------------

def build_search_request(
    *,
    query: Optional[str] = None,
    comp_street: Optional[str] = None,
    comp_city: Optional[str] = None,
    comp_state: Optional[str] = None,
    comp_zip: Optional[str] = None,
    min_estimated_value: Optional[Number] = None,
    max_estimated_value: Optional[Number] = None,
    min_equity_percent: Optional[Number] = None,
    property_type: Optional[str] = None,
    use_distance: bool = False,
    distance_miles: Optional[Number] = None,
    use_bedrooms: bool = False,
    min_bedrooms: Optional[Number] = None,
    max_bedrooms: Optional[Number] = None,
    use_bathrooms: bool = False,
    min_bathrooms: Optional[Number] = None,
    max_bathrooms: Optional[Number] = None,
    use_year_built: bool = False,
    min_year_built: Optional[Number] = None,
    max_year_built: Optional[Number] = None,
    skip: int = DEFAULT_SKIP,
    take: int = DEFAULT_TAKE,
    skip_trace: bool = False,
) -> dict[str, Any]:
    """Build a property search document with optional comparison settings."""
    criteria = _criteria(
        query,
        compAddress=comp_address_criteria(comp_street, comp_city, comp_state, comp_zip),
        valuation=valuation_criteria(min_estimated_value, max_estimated_value, min_equity_percent),
        general=general_criteria(property_type),
    )

    options: dict[str, Any] = {"skip": skip, "take": take}
    options.update(distance_option(use_distance, distance_miles))
    options.update(comparison_toggle("useBedrooms", use_bedrooms, minBedrooms=min_bedrooms, maxBedrooms=max_bedrooms))
    options.update(comparison_toggle("useBathrooms", use_bathrooms, minBathrooms=min_bathrooms, maxBathrooms=max_bathrooms))
    options.update(comparison_toggle("useYearBuilt", use_year_built, minYearBuilt=min_year_built, maxYearBuilt=max_year_built))
    if skip_trace:
        options["skipTrace"] = True

    return {"searchCriteria": criteria, "options": options}


def build_boundary_search_request(
    *,
    nw_latitude: Optional[Number] = None,
    nw_longitude: Optional[Number] = None,
    se_latitude: Optional[Number] = None,
    se_longitude: Optional[Number] = None,
    center_latitude: Optional[Number] = None,
    center_longitude: Optional[Number] = None,
    radius_kilometers: Optional[Number] = None,
    min_sold_date: Optional[str] = None,
    skip: int = DEFAULT_SKIP,
    take: int = DEFAULT_TAKE,
) -> dict[str, Any]:
    """Build a search document for a bounding box and/or a radius around a point."""
    address = compact({
        "geoLocationBoundingBox": bounding_box(nw_latitude, nw_longitude, se_latitude, se_longitude),
        "geoLocationDistance": radius_circle(center_latitude, center_longitude, radius_kilometers),
    })
    criteria = _criteria(address=address, intel=sold_date_criteria(min_sold_date))
    return {"searchCriteria": criteria, "options": {"skip": skip, "take": take}}


def build_count_request(
    *,
    query: Optional[str] = None,
    min_estimated_value: Optional[Number] = None,
    max_estimated_value: Optional[Number] = None,
    min_equity_percent: Optional[Number] = None,
    property_type: Optional[str] = None,
) -> dict[str, Any]:
    """Build a search document that asks only for the total (take=0)."""
    criteria = _criteria(
        query,
        valuation=valuation_criteria(min_estimated_value, max_estimated_value, min_equity_percent),
        general=general_criteria(property_type),
    )
    return {"searchCriteria": criteria, "options": {"skip": 0, "take": 0}}
