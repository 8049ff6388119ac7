# Query builders: pure functions mapping tool parameters to BatchData request documents.
from queries.address import (  # noqa: F401
    build_autocomplete_request,
    build_geocode_request,
    build_reverse_geocode_request,
    build_verify_request,
)
from queries.property import build_lookup_request  # noqa: F401
from queries.search import (  # noqa: F401
    build_boundary_search_request,
    build_count_request,
    build_search_request,
)
