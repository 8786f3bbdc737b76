import json
import requests

from dataclasses import dataclass
from enum import Enum, unique
from pathlib import Path
from typing import Any, Dict, List, Tuple
from urllib.parse import urlparse

import errors
from config import Config
from errors import TransportError, ValidationError
from logs import logger as base_logger

logger = base_logger.bind(context="AttachmentDispatcher")

BINARY_TYPES = (bytes, bytearray, memoryview)

FileField = Tuple[str, Tuple[str | None, bytes | str, str]]


@unique
class Envelope(Enum):
    TYPED = "data"  # {"type": ..., "data": params}, interaction callbacks
    PLAIN = "body"  # {"data": params} without attachment metadata, webhook endpoints


@dataclass(frozen=True, kw_only=True)
class MultipartRequest:
    method: str
    path: str
    params: Dict[str, Any]
    attachments: List[Dict[str, Any]]
    envelope: Envelope
    type: int | None = None
    query: Dict[str, Any] | None = None


def _is_remote(file: str) -> bool:
    parsed = urlparse(file)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def is_valid_media(file: Any) -> bool:
    if isinstance(file, BINARY_TYPES):
        return True
    if isinstance(file, str):
        return _is_remote(file) or Path(file).is_file()
    return False


def _source(attachment: Dict[str, Any]) -> Any:
    return attachment.get("file") if attachment.get("file") is not None else attachment.get("url")


def validate(attachments: List[Dict[str, Any]]) -> None:
    for (i, attachment) in enumerate(attachments):
        source = _source(attachment)
        if source is None or not attachment.get("filename"):
            raise ValidationError(f"Attachment {i} is missing one or more required properties: 'file' or 'filename'")
        if not is_valid_media(source):
            raise ValidationError(f"Attachment {i} has an invalid file type, must be bytes or a valid media URL or path")


def fetch_file(source: Any) -> bytes:
    if isinstance(source, BINARY_TYPES):
        return bytes(source)
    if _is_remote(source):
        logger.log("OUT", f"FETCH ATTACHMENT {source}")
        resp = requests.get(source)
        resp.raise_for_status()
        logger.log("IN", f"FETCHED ATTACHMENT {source}: {len(resp.content)} bytes")
        return resp.content
    return Path(source).read_bytes()


def attachment_metadata(attachments: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [{"id": i, "filename": a["filename"], "description": a.get("description") or ""}
            for (i, a) in enumerate(attachments)]


def payload_json(request: MultipartRequest) -> Dict[str, Any]:
    params = dict(request.params)
    match request.envelope:
        case Envelope.TYPED:
            params["attachments"] = attachment_metadata(request.attachments)
            return {"type": request.type, "data": params}
        case Envelope.PLAIN:
            params.pop("attachments", None)
            return {"data": params}


def build_form(request: MultipartRequest, contents: List[bytes]) -> List[FileField]:
    """Multipart fields: ``files[i]`` in attachment order, then ``payload_json``."""
    form: List[FileField] = [(f"files[{i}]", (a["filename"], content, "application/octet-stream"))
                             for (i, (a, content)) in enumerate(zip(request.attachments, contents))]
    form.append(("payload_json", (None, json.dumps(payload_json(request)), "application/json")))
    return form


def dispatch(config: Config, request: MultipartRequest) -> requests.Response:
    validate(request.attachments)
    try:
        # Sequential, files[i] has to line up with attachments[i]
        contents = [fetch_file(_source(a)) for a in request.attachments]
        form = build_form(request, contents)
        url = f"{config.base_url}/{request.path}"
        logger.log("OUT", f"{request.method.upper()} {request.path} with {len(contents)} attachment(s)")
        resp = requests.request(request.method.upper(), url,
                                params=request.query,
                                files=form,
                                headers={"Authorization": f"Bot {config.api_token}"})
        logger.log("IN", f"{request.method.upper()} {request.path} GOT STATUS {resp.status_code}")
        if resp.status_code < 200 or resp.status_code >= 300:
            raise errors.from_response(resp)
        return resp
    except TransportError:
        raise
    except Exception as e:
        raise errors.from_exception(e) from e
