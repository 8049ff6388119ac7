from utils.get_endpoint import Endpoint, get_endpoint  # noqa: F401
from utils.response_utils import (  # noqa: F401
    format_boundary_result,
    format_count_result,
    format_search_result,
    pretty_json,
    total_count,
)
