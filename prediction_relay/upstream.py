import httpx

from prediction_relay.config import RelayConfig

PREDICTION_PATH = "/customvision/v3.0/Prediction/{project_id}/classify/iterations/{iteration_name}/image"


def build_prediction_url(config: RelayConfig) -> str:
    path = PREDICTION_PATH.format(project_id=config.project_id, iteration_name=config.iteration_name)
    return f"{config.endpoint.rstrip('/')}{path}"


async def classify_image(
    config: RelayConfig,
    image: bytes,
    timeout_s: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.Response:
    headers = {
        "Prediction-Key": config.prediction_key,
        "Content-Type": "application/octet-stream",
    }
    async with httpx.AsyncClient(timeout=timeout_s, transport=transport, follow_redirects=True) as client:
        return await client.post(build_prediction_url(config), content=image, headers=headers)
