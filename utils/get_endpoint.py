from enum import Enum


class Endpoint(str, Enum):
    """The fixed set of BatchData endpoints this server calls."""

    ADDRESS_VERIFY = "/address/verify"
    ADDRESS_AUTOCOMPLETE = "/address/autocomplete"
    ADDRESS_GEOCODE = "/address/geocode"
    ADDRESS_REVERSE_GEOCODE = "/address/reverse-geocode"
    PROPERTY_LOOKUP = "/property/lookup/sync"
    PROPERTY_SEARCH = "/property/search/sync"


def get_endpoint(base_url: str, endpoint: Endpoint | str) -> str:
    """Join the configured API base URL with one of the endpoint paths.

    Raises ValueError for a path outside the Endpoint set.
    """
    path = Endpoint(endpoint).value
    return f"{base_url.rstrip('/')}{path}"
