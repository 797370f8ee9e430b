import httpx
import pytest

from prediction_relay.config import RelayConfig
from prediction_relay.upstream import build_prediction_url, classify_image

CONFIG = RelayConfig(
    prediction_key="secret-key",
    endpoint="https://cv.example.com/",
    project_id="1234-abcd",
    iteration_name="Iteration3",
)


def test_build_prediction_url() -> None:
    assert build_prediction_url(CONFIG) == (
        "https://cv.example.com/customvision/v3.0/Prediction/1234-abcd"
        "/classify/iterations/Iteration3/image"
    )


@pytest.mark.asyncio
async def test_classify_image_sends_raw_bytes_with_headers() -> None:
    seen: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"predictions": []})

    response = await classify_image(CONFIG, b"\x00\x01raw", transport=httpx.MockTransport(_handler))

    assert response.status_code == 200
    assert response.json() == {"predictions": []}
    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == build_prediction_url(CONFIG)
    assert request.headers["Prediction-Key"] == "secret-key"
    assert request.headers["Content-Type"] == "application/octet-stream"
    assert request.content == b"\x00\x01raw"


@pytest.mark.asyncio
async def test_classify_image_timeout_defaults_to_none() -> None:
    timeouts: list[dict] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        timeouts.append(request.extensions["timeout"])
        return httpx.Response(200, json={})

    transport = httpx.MockTransport(_handler)
    await classify_image(CONFIG, b"img", transport=transport)
    await classify_image(CONFIG, b"img", timeout_s=5.0, transport=transport)

    assert timeouts[0]["read"] is None
    assert timeouts[1]["read"] == 5.0
