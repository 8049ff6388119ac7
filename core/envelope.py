"""Result envelopes returned by every tool.

Success: {"content": [{"type": "text", "text": ...}]}
Failure: the same plus "isError": True, with text "Error <action>: <message>".

Timeouts reach the handler as TransportError and become failure envelopes.
asyncio.CancelledError is not an Exception and is left to propagate, so a
call cancelled by the MCP runtime is unwound by the runtime instead of
reported as a tool result.
"""
from functools import wraps
from typing import Any, Awaitable, Callable
import logging

from core.errors import BatchDataError

logger = logging.getLogger(__name__)

Envelope = dict[str, Any]


def text_result(text: str) -> Envelope:
    return {"content": [{"type": "text", "text": text}]}


def error_result(action: str, exc: BaseException) -> Envelope:
    message = str(exc) or type(exc).__name__
    envelope = text_result(f"Error {action}: {message}")
    envelope["isError"] = True
    return envelope


def tool_envelope(action: str) -> Callable[[Callable[..., Awaitable[str]]], Callable[..., Awaitable[Envelope]]]:
    """Wrap a handler returning text so that it always returns an envelope.

    `action` is the "-ing" phrase used in failure text, e.g. "verifying address".
    No exception escapes the wrapped handler.
    """

    def decorator(func: Callable[..., Awaitable[str]]) -> Callable[..., Awaitable[Envelope]]:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> Envelope:
            try:
                text = await func(*args, **kwargs)
            except BatchDataError as e:
                logger.warning("Tool failed while %s: %s", action, e)
                return error_result(action, e)
            except Exception as e:
                logger.exception("Unexpected failure while %s", action)
                return error_result(action, e)
            return text_result(text)

        return wrapper

    return decorator
