# File: civic_reports/core/limits.py

from starlette.datastructures import Headers
from starlette.responses import JSONResponse


class BodySizeLimitMiddleware:
    """
    Rejects request bodies larger than ``max_bytes`` with a 413.

    The declared Content-Length is checked up front; the body actually
    received is counted as well, so chunked uploads are held to the same
    ceiling. Accepted bodies are buffered and replayed to the app.
    """

    def __init__(self, app, max_bytes: int):
        self.app = app
        self.max_bytes = max_bytes

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        length = Headers(scope=scope).get("content-length")
        if length is not None:
            try:
                declared = int(length)
            except ValueError:
                await self._reject(scope, receive, send, 400, "Invalid Content-Length header")
                return
            if declared > self.max_bytes:
                await self._reject(scope, receive, send, 413, self._too_large())
                return

        messages = []
        received = 0
        more_body = True
        while more_body:
            message = await receive()
            messages.append(message)
            if message["type"] != "http.request":
                break
            received += len(message.get("body", b""))
            if received > self.max_bytes:
                await self._reject(scope, receive, send, 413, self._too_large())
                return
            more_body = message.get("more_body", False)

        async def replay():
            if messages:
                return messages.pop(0)
            return await receive()

        await self.app(scope, replay, send)

    def _too_large(self) -> str:
        return f"Request body exceeds {self.max_bytes} bytes"

    async def _reject(self, scope, receive, send, status_code: int, message: str) -> None:
        response = JSONResponse(status_code=status_code, content={"error": message})
        await response(scope, receive, send)
