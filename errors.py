import json
import requests

from typing import Any


class InteractionError(Exception):
    pass


class ValidationError(InteractionError):
    pass


class TransportError(InteractionError):
    """A request that Discord answered with a non-2xx status, or that never got an answer.

    ``body`` holds the parsed JSON error body when the response looked like JSON,
    the raw text otherwise. ``status`` is None when no response was received.
    """
    status: int | None
    body: Any
    code: int | None
    message: str

    def __init__(self, status: int | None, body: Any = None, message: str | None = None):
        self.status = status
        self.body = body
        self.code = body.get("code") if isinstance(body, dict) else None
        if message is None:
            if isinstance(body, dict) and body.get("message"):
                message = body["message"]
            else:
                message = f"Request failed with status code {status}"
        self.message = message
        super().__init__(str(self))

    def __str__(self):
        if isinstance(self.body, (dict, list)):
            return json.dumps({"status": self.status, "message": self.message, "error": self.body}, indent=2)
        if self.body:
            return f"{self.message}\n{self.body}"
        return self.message


def looks_like_json(text: str | bytes | None) -> bool:
    if not text:
        return False
    try:
        json.loads(text)
    except ValueError:
        return False
    return True


def parse_body(text: str | bytes | None) -> Any:
    """JSON-decoded body if it looks like JSON, the raw text otherwise."""
    if looks_like_json(text):
        return json.loads(text)  # type: ignore[arg-type]
    if isinstance(text, bytes):
        return text.decode(errors="replace")
    return text


def from_response(resp: requests.Response) -> TransportError:
    return TransportError(resp.status_code, parse_body(resp.content))


def from_exception(exc: Exception) -> InteractionError:
    """Normalizes anything raised while talking to Discord into a library error."""
    if isinstance(exc, InteractionError):
        return exc
    if isinstance(exc, requests.HTTPError) and exc.response is not None:
        return from_response(exc.response)
    if isinstance(exc, requests.RequestException):
        return TransportError(None, None, message=str(exc) or exc.__class__.__name__)
    return InteractionError(str(exc))
