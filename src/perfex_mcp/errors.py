"""
MCP error taxonomy and API error normalization.

Protocol-level failures are raised as ``McpError``:
- INVALID_REQUEST: malformed resource URI
- INVALID_PARAMS: argument validation failure
- METHOD_NOT_FOUND: unknown tool name
- INTERNAL_ERROR: remote API failure, unexpected response shape, anything uncaught

Business failures reported by Perfex (``success: false``) are not errors here;
the pipeline returns them as results flagged ``is_error``.
"""

import logging
from typing import Any, NoReturn

import httpx
from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    ErrorData,
)

logger = logging.getLogger(__name__)

UNKNOWN_API_ERROR = "Unknown API error"


def mcp_error(code: int, message: str) -> McpError:
    return McpError(ErrorData(code=code, message=message))


def invalid_request(message: str) -> McpError:
    return mcp_error(INVALID_REQUEST, message)


def invalid_params(message: str) -> McpError:
    return mcp_error(INVALID_PARAMS, message)


def method_not_found(message: str) -> McpError:
    return mcp_error(METHOD_NOT_FOUND, message)


def internal_error(message: str) -> McpError:
    return mcp_error(INTERNAL_ERROR, message)


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def extract_api_error_message(exc: httpx.HTTPError) -> str:
    """Pick the most useful message from an httpx error.

    Precedence: ``message`` from a JSON body, the raw string body, the HTTP
    status line, then the transport's own message.
    """
    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        body = _response_body(response)
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        if isinstance(body, str) and body:
            return body
        # status line only, never the request URL
        return f"Request failed with status code {response.status_code} {response.reason_phrase}".rstrip()
    return str(exc) or UNKNOWN_API_ERROR


def raise_api_error(exc: BaseException, operation: str) -> NoReturn:
    """Log ``exc`` and raise it as an MCP error.

    McpError passes through unchanged; httpx errors become "Perfex API error"
    and anything else becomes "Tool execution failed". Always raises.
    """
    if isinstance(exc, McpError):
        logger.error("[MCP Error] %s: %s", operation, exc.error.message)
        raise exc

    if isinstance(exc, httpx.HTTPError):
        message = extract_api_error_message(exc)
        response = exc.response if isinstance(exc, httpx.HTTPStatusError) else None
        logger.error(
            "[Perfex API Error] %s: status=%s reason=%s body=%r",
            operation,
            response.status_code if response is not None else None,
            response.reason_phrase if response is not None else None,
            response.text if response is not None else None,
        )
        raise internal_error(f"Perfex API error during {operation}: {message}") from exc

    logger.error("[Unexpected Error] %s: %s", operation, exc, exc_info=exc)
    raise internal_error(f"Tool execution failed during {operation}: {exc}") from exc
