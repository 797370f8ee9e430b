import logging

import httpx
from fastapi import Request
from fastapi.responses import JSONResponse

from prediction_relay.body import read_body
from prediction_relay.config import RelayConfig, Settings
from prediction_relay.errors import ErrorKind, RelayError
from prediction_relay.upstream import classify_image

logger = logging.getLogger("prediction_relay.handler")


class PredictionRelay:
    """Forwards a raw image upload to Custom Vision and relays the answer."""

    def __init__(
        self,
        config: RelayConfig,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self.settings = settings
        self.transport = transport

    async def handle(self, request: Request) -> JSONResponse:
        if request.method != "POST":
            return RelayError(ErrorKind.METHOD_NOT_ALLOWED, status_code=405).to_response()

        try:
            return await self._relay(request)
        except RelayError as err:
            return err.to_response()
        except Exception as exc:  # noqa: BLE001
            logger.exception("prediction_failed")
            return RelayError(ErrorKind.INTERNAL, status_code=500, message=str(exc)).to_response()

    async def _relay(self, request: Request) -> JSONResponse:
        missing = self.config.missing_fields()
        if missing:
            logger.error("missing_configuration", extra={"missing": missing})
            raise RelayError(
                ErrorKind.CONFIGURATION,
                status_code=500,
                message="Azure configuration is missing",
            )

        image = await read_body(request.stream(), max_bytes=self.settings.max_body_bytes)
        if not image:
            raise RelayError(ErrorKind.EMPTY_BODY, status_code=400)

        response = await classify_image(
            self.config,
            image,
            timeout_s=self.settings.upstream_timeout_s,
            transport=self.transport,
        )
        if not response.is_success:
            logger.error(
                "upstream_error",
                extra={"upstream_status": response.status_code, "upstream_body": response.text},
            )
            raise RelayError(ErrorKind.UPSTREAM, status_code=response.status_code, message=response.text)

        return JSONResponse(status_code=200, content=response.json())
