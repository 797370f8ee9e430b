import logging

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from prediction_relay.config import RelayConfig, Settings, settings as default_settings
from prediction_relay.handler import PredictionRelay
from prediction_relay.observability import RequestLoggingMiddleware, configure_logging
from prediction_relay.schemas import HealthResponse

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

logger = logging.getLogger("prediction_relay")


def create_app(
    config: RelayConfig | None = None,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    settings = settings or default_settings
    config = config or RelayConfig.from_env()
    configure_logging(settings)
    if not config.is_complete:
        logger.warning("relay_config_incomplete", extra={"missing": config.missing_fields()})

    relay = PredictionRelay(config, settings, transport=transport)
    app = FastAPI(title="Prediction Relay", version="0.1.0")
    app.add_middleware(RequestLoggingMiddleware)

    # Every method is routed so that non-POST requests get the relay's own 405 body.
    @app.api_route("/api/predict", methods=ALL_METHODS)
    async def predict(request: Request) -> JSONResponse:
        return await relay.handle(request)

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        missing = config.missing_fields()
        return HealthResponse(status="degraded" if missing else "ok", missing=missing)

    return app


app = create_app()
