import requests

from datetime import datetime, timezone
from typing import Any

import errors
from errors import parse_body

DISCORD_EPOCH_MS = 1420070400000


def _ok(resp: requests.Response) -> bool:
    return 200 <= resp.status_code < 300


def snowflake_time(snowflake: str | int) -> datetime:
    ms = (int(snowflake) >> 22) + DISCORD_EPOCH_MS
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc)


def extend(payload: Any) -> Any:
    """Adds derived convenience fields to a message payload."""
    if not isinstance(payload, dict):
        return payload
    extended = dict(payload)
    if str(payload.get("id", "")).isdigit():
        extended["created_at"] = snowflake_time(payload["id"]).isoformat()
    extended["edited"] = payload.get("edited_timestamp") is not None
    return extended


def unwrap_callback(resp: requests.Response, return_date: bool = False) -> Any:
    """Interaction callbacks answer 204 with no content.

    Returns True, or the response ``Date`` header when asked for it. A callback
    that does carry a body (``with_response``) returns the parsed body.
    """
    if not _ok(resp):
        raise errors.from_response(resp)
    if return_date:
        return resp.headers.get("Date")
    if resp.status_code == 204 or not resp.content:
        return True
    return parse_body(resp.content)


def unwrap_payload(resp: requests.Response) -> Any:
    if not _ok(resp):
        raise errors.from_response(resp)
    if resp.status_code == 204 or not resp.content:
        return True
    return extend(parse_body(resp.content))
