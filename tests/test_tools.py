"""
End-to-end tests for the tool handlers: parameters in, one mocked HTTP call,
envelope out.
"""

import httpx
import pytest

from tools import address, properties


@pytest.fixture
def tools(client):
    mapping = {}
    mapping.update(address.get_tools(client))
    mapping.update(properties.get_tools(client))
    return {name: meta["func"] for name, meta in mapping.items()}


def _text(envelope) -> str:
    assert len(envelope["content"]) == 1
    assert envelope["content"][0]["type"] == "text"
    return envelope["content"][0]["text"]


def test_all_tools_are_exposed(tools):
    assert set(tools) == {
        "verify-address",
        "autocomplete-address",
        "geocode-address",
        "reverse-geocode",
        "lookup-property",
        "search-properties",
        "search-properties-by-boundary",
        "count-properties",
    }


@pytest.mark.asyncio
async def test_verify_address_sends_one_request(tools, recorder):
    recorder.body = {"results": {"addresses": []}}

    envelope = await tools["verify-address"](street="1 Main St", city="Springfield", state="IL", zip="62704")

    assert "isError" not in envelope
    assert len(recorder.requests) == 1
    assert recorder.last_path == "/v1/address/verify"
    assert recorder.last_json == {
        "requests": [
            {"street": "1 Main St", "city": "Springfield", "state": "IL", "zip": "62704", "requestId": ""}
        ]
    }
    assert _text(envelope) == '{\n  "results": {\n    "addresses": []\n  }\n}'


@pytest.mark.asyncio
async def test_verify_address_server_error_becomes_error_envelope(tools, recorder):
    recorder.status_code = 500

    envelope = await tools["verify-address"](street="1 Main St", city="Springfield", state="IL", zip="62704")

    assert envelope["isError"] is True
    assert _text(envelope).startswith("Error verifying address:")
    assert "500" in _text(envelope)


@pytest.mark.asyncio
async def test_autocomplete_uses_defaults(tools, recorder):
    await tools["autocomplete-address"](query="1600 Penn")

    assert recorder.last_path == "/v1/address/autocomplete"
    assert recorder.last_json["options"] == {"uspsVerifiedAddresses": True, "skip": 0, "take": 4}


@pytest.mark.asyncio
async def test_geocode_transport_failure(tools, recorder):
    recorder.error = httpx.ConnectError("dns lookup failed")

    envelope = await tools["geocode-address"](address="1 Main St, Springfield, IL")

    assert envelope["isError"] is True
    assert _text(envelope).startswith("Error geocoding address:")
    assert "dns lookup failed" in _text(envelope)


@pytest.mark.asyncio
async def test_reverse_geocode_request_shape(tools, recorder):
    await tools["reverse-geocode"](latitude=39.78, longitude=-89.65)

    assert recorder.last_path == "/v1/address/reverse-geocode"
    assert recorder.last_json == {"request": {"latitude": 39.78, "longitude": -89.65}}


@pytest.mark.asyncio
async def test_lookup_property_apn_mode(tools, recorder):
    await tools["lookup-property"](state="CA", apn="123", county="Orange")

    assert recorder.last_path == "/v1/property/lookup/sync"
    assert recorder.last_json == {"requests": [{"address": {"county": "Orange", "state": "CA"}, "apn": "123"}]}


@pytest.mark.asyncio
async def test_lookup_property_validation_error_skips_network(tools, recorder):
    envelope = await tools["lookup-property"](state="CA", apn="123")

    assert envelope["isError"] is True
    assert _text(envelope) == (
        "Error looking up property: Either provide street address details or APN with county"
    )
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_search_properties_summary(tools, recorder):
    recorder.body = {"properties": [1, 2, 3]}

    envelope = await tools["search-properties"](query="Phoenix, AZ", use_bedrooms=True, min_bedrooms=0)

    assert _text(envelope).startswith("Found 3 properties matching criteria:")
    assert recorder.last_json == {
        "searchCriteria": {"query": "Phoenix, AZ"},
        "options": {"skip": 0, "take": 10, "useBedrooms": True, "minBedrooms": 0},
    }


@pytest.mark.asyncio
async def test_search_properties_by_boundary_summary(tools, recorder):
    recorder.body = {"totalCount": 42, "properties": []}

    envelope = await tools["search-properties-by-boundary"](
        center_latitude=33.45, center_longitude=-112.07, radius_kilometers=2
    )

    assert _text(envelope).startswith("Found 42 properties in specified boundary:")
    assert recorder.last_json["searchCriteria"]["address"]["geoLocationDistance"]["distanceKilometers"] == 2


@pytest.mark.asyncio
async def test_count_properties_ignores_pagination(tools, recorder):
    recorder.body = {"total": 17}

    envelope = await tools["count-properties"](query="Austin, TX")

    assert _text(envelope) == "Total properties matching criteria: 17"
    assert recorder.last_json["options"] == {"skip": 0, "take": 0}


@pytest.mark.asyncio
async def test_count_properties_api_error(tools, recorder):
    recorder.status_code = 401

    envelope = await tools["count-properties"]()

    assert envelope["isError"] is True
    assert _text(envelope) == "Error counting properties: API request failed: 401 Unauthorized"


@pytest.mark.asyncio
async def test_search_timeout_becomes_error_envelope(tools, recorder):
    recorder.error = httpx.ReadTimeout("read timed out")

    envelope = await tools["search-properties"](query="Phoenix, AZ")

    assert envelope["isError"] is True
    assert _text(envelope).startswith("Error searching properties:")
    assert "read timed out" in _text(envelope)
