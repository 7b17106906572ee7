import asyncio

import httpx

from adapters.flyover import fetch_iss_flyover_times
from core.domain.errors import ResponseParseError, UnexpectedStatusError
from core.domain.models import Coordinates
from core.domain.result import Err, Ok

COORDS = Coordinates(latitude=38.897, longitude=-77.036)


def _run(settings, client, coords=COORDS):
    async def go():
        async with client:
            return await fetch_iss_flyover_times(coords, settings=settings, client=client)

    return asyncio.run(go())


def test_sends_lat_lon_and_returns_passes(settings, make_client):
    seen = []

    def handler(request):
        seen.append(dict(request.url.params))
        return httpx.Response(
            200,
            json={
                "message": "success",
                "request": {"latitude": 38.897, "longitude": -77.036, "passes": 2},
                "response": [
                    {"risetime": 134564234, "duration": 600},
                    {"risetime": 134570000, "duration": 420},
                ],
            },
        )

    result = _run(settings, make_client(handler))

    assert isinstance(result, Ok)
    assert [p.model_dump() for p in result.value] == [
        {"risetime": 134564234, "duration": 600},
        {"risetime": 134570000, "duration": 420},
    ]
    assert seen == [{"lat": "38.897", "lon": "-77.036"}]


def test_accepts_bare_array(settings, make_client):
    body = [{"risetime": 134564234, "duration": 600}]
    result = _run(settings, make_client(lambda request: httpx.Response(200, json=body)))

    assert isinstance(result, Ok)
    assert result.value[0].duration == 600


def test_extra_fields_are_kept(settings, make_client):
    body = {"response": [{"risetime": 1, "duration": 2, "max_elevation": 45}]}
    result = _run(settings, make_client(lambda request: httpx.Response(200, json=body)))

    assert result.value[0].model_dump() == {"risetime": 1, "duration": 2, "max_elevation": 45}


def test_transport_failure_is_forwarded_verbatim(settings, make_client):
    raised = []

    def handler(request):
        exc = httpx.ReadTimeout("timed out", request=request)
        raised.append(exc)
        raise exc

    result = _run(settings, make_client(handler))

    assert isinstance(result, Err)
    assert result.error is raised[0]


def test_non_200_status_carries_code_and_body(settings, make_client):
    result = _run(settings, make_client(lambda request: httpx.Response(404, text="no such endpoint")))

    assert isinstance(result, Err)
    assert isinstance(result.error, UnexpectedStatusError)
    assert "404" in str(result.error)
    assert "no such endpoint" in str(result.error)
    assert "ISS flyover times" in str(result.error)


def test_missing_response_array_is_a_parse_error(settings, make_client):
    body = {"message": "failure", "reason": "Latitude must be number between -90.0 and 90.0"}
    result = _run(settings, make_client(lambda request: httpx.Response(200, json=body)))

    assert isinstance(result, Err)
    assert isinstance(result.error, ResponseParseError)


def test_record_without_duration_is_a_parse_error(settings, make_client):
    body = {"response": [{"risetime": 134564234}]}
    result = _run(settings, make_client(lambda request: httpx.Response(200, json=body)))

    assert isinstance(result, Err)
    assert isinstance(result.error, ResponseParseError)


def test_malformed_json_is_a_parse_error(settings, make_client):
    result = _run(settings, make_client(lambda request: httpx.Response(200, text="<html>oops</html>")))

    assert isinstance(result, Err)
    assert isinstance(result.error, ResponseParseError)


def test_server_error_carries_code_and_body(settings, make_client):
    result = _run(settings, make_client(lambda request: httpx.Response(500, text="Internal Server Error")))

    assert isinstance(result, Err)
    assert isinstance(result.error, UnexpectedStatusError)
    assert result.error.status_code == 500
    assert "Internal Server Error" in str(result.error)


def test_fractional_values_are_accepted(settings, make_client):
    body = {"response": [{"risetime": 134564234.5, "duration": 600}]}
    result = _run(settings, make_client(lambda request: httpx.Response(200, json=body)))

    assert isinstance(result, Ok)
    flyover = result.value[0]
    assert flyover.risetime == 134564234.5
    assert isinstance(flyover.duration, int)
