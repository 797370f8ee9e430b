from collections.abc import AsyncIterator

from prediction_relay.errors import ErrorKind, RelayError


async def read_body(chunks: AsyncIterator[bytes], max_bytes: int = 0) -> bytes:
    """Concatenate the request body chunks in arrival order.

    ``max_bytes`` <= 0 disables the size guard. Transport errors raised by the
    iterator (e.g. a client disconnect) propagate unchanged.
    """
    buffer = bytearray()
    async for chunk in chunks:
        if not chunk:
            continue
        buffer.extend(chunk)
        if max_bytes > 0 and len(buffer) > max_bytes:
            raise RelayError(
                ErrorKind.BODY_TOO_LARGE,
                status_code=413,
                message=f"image exceeds {max_bytes} bytes",
            )
    return bytes(buffer)
