from typing import Any, Awaitable, Callable, MutableMapping

from .gate_decision import GateDecision, SERVICE_UNAVAILABLE_STATUS
from .request_gate import RequestGate


Scope = MutableMapping[str, Any]
Message = MutableMapping[str, Any]
Receive = Callable[[], Awaitable[Message]]
Send = Callable[[Message], Awaitable[None]]
ASGIApp = Callable[[Scope, Receive, Send], Awaitable[None]]


class ReadinessMiddleware:
    """
    ASGI middleware that holds back HTTP traffic until the gate opens.

    Rejected requests receive a bare 502 with an empty body. Lifespan
    and websocket scopes are passed through untouched.
    """

    def __init__(self, app: ASGIApp, gate: RequestGate) -> None:
        self._app = app
        self._gate = gate

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self._app(scope, receive, send)
            return

        if self._gate.decide(scope.get("path")) != GateDecision.REJECT:
            await self._app(scope, receive, send)
            return

        await send(
            {
                "type": "http.response.start",
                "status": SERVICE_UNAVAILABLE_STATUS,
                "headers": [(b"content-length", b"0")],
            }
        )
        await send(
            {
                "type": "http.response.body",
                "body": b"",
            }
        )
