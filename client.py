import requests

from typing import Any, Dict, Mapping

import attachments
import payloads
import responses
from attachments import Envelope, MultipartRequest
from config import Config
from errors import TransportError
from http_client import HttpClient, JsonRequest
from interactions import InteractionType, ephemeral_flags
from logs import configure_logging, logger as base_logger
from payloads import InteractionRef, ResponseInput

logger = base_logger.bind(context="InteractionsClient")

Input = ResponseInput | Mapping[str, Any] | None


def _callback_path(ref: InteractionRef) -> str:
    return f"interactions/{ref.id}/{ref.token}/callback"


def _webhook_path(ref: InteractionRef) -> str:
    return f"webhooks/{ref.application_id}/{ref.token}"


def _message_path(ref: InteractionRef, message_id: str) -> str:
    return f"{_webhook_path(ref)}/messages/{message_id}"


def _thread_query(thread_id: str | None) -> Dict[str, Any] | None:
    return {"thread_id": thread_id} if thread_id else None


class InteractionsClient:
    """Interaction responses and followup messages over Discord's REST API.

    Every call is a single blocking request, except edits, which fetch the
    current message first and patch it afterwards.
    """
    config: Config
    callback: "Callback"
    followup: "Followup"
    _http: HttpClient

    def __init__(self, config: Config, http_client: HttpClient | None = None):
        self.config = config
        self._http = http_client or HttpClient(config)
        if config.log_file:
            configure_logging(config.log_file)
        self.callback = Callback(self)
        self.followup = Followup(self)

    def send(self, request: JsonRequest | MultipartRequest) -> requests.Response:
        match request:
            case MultipartRequest():
                return attachments.dispatch(self.config, request)
            case JsonRequest():
                return self._http.send(request)
        raise TypeError(f"Unsupported request: {request!r}")

    def fetch(self, path: str, query: Dict[str, Any] | None = None) -> Any:
        return responses.unwrap_payload(self.send(JsonRequest(method="get", path=path, query=query)))

    def delete(self, path: str) -> Any:
        return responses.unwrap_payload(self.send(JsonRequest(method="delete", path=path)))


class Callback:
    _client: InteractionsClient

    def __init__(self, client: InteractionsClient):
        self._client = client

    def _message_callback(self, ref: InteractionRef, type: int, input: ResponseInput) -> Any:
        path = _callback_path(ref)
        if input.has_attachments:
            request = MultipartRequest(method="post", path=path,
                                       params=payloads.message_data(input),
                                       attachments=input.attachments,
                                       envelope=Envelope.TYPED,
                                       type=type)
        else:
            request = JsonRequest(method="post", path=path,
                                  body={"type": type, "data": payloads.message_data(input)})
        logger.info(f"Responding to interaction {ref.id} with type {type}")
        return responses.unwrap_callback(self._client.send(request), return_date=input.return_date)

    def _typed_callback(self, ref: InteractionRef, type: int, data: Any = None, return_date: bool = False) -> Any:
        body: Dict[str, Any] = {"type": type}
        if data is not None:
            body["data"] = data
        logger.info(f"Responding to interaction {ref.id} with type {type}")
        resp = self._client.send(JsonRequest(method="post", path=_callback_path(ref), body=body))
        return responses.unwrap_callback(resp, return_date=return_date)

    def reply(self, ref: InteractionRef, input: Input = None) -> Any:
        return self._message_callback(ref, InteractionType.CHANNEL_MESSAGE_WITH_SOURCE, payloads.coerce(input))

    def defer(self, ref: InteractionRef, input: Input = None) -> str | None:
        """Acknowledges now, answers later. Returns the response ``Date`` header."""
        data = {"flags": ephemeral_flags(payloads.coerce(input).ephemeral)}
        return self._typed_callback(ref, InteractionType.DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE, data, return_date=True)

    def component_defer(self, ref: InteractionRef, input: Input = None) -> str | None:
        data = {"flags": ephemeral_flags(payloads.coerce(input).ephemeral)}
        return self._typed_callback(ref, InteractionType.DEFERRED_UPDATE_MESSAGE, data, return_date=True)

    def component_update(self, ref: InteractionRef, input: Input = None) -> Any:
        return self._message_callback(ref, InteractionType.UPDATE_MESSAGE, payloads.coerce(input))

    def autocomplete_reply(self, ref: InteractionRef, data: Mapping[str, Any]) -> Any:
        return self._typed_callback(ref, InteractionType.APPLICATION_COMMAND_AUTOCOMPLETE_RESULT, dict(data))

    def modal_reply(self, ref: InteractionRef, data: Mapping[str, Any]) -> Any:
        return self._typed_callback(ref, InteractionType.MODAL, dict(data))

    def upgrade(self, ref: InteractionRef, data: Mapping[str, Any] | None = None) -> Any:
        return self._typed_callback(ref, InteractionType.PREMIUM_REQUIRED, dict(data) if data is not None else None)

    def get_original(self, ref: InteractionRef) -> Dict[str, Any] | None:
        """The initial response, or None when it can't be fetched for any reason."""
        try:
            return self._client.fetch(f"{_webhook_path(ref)}/messages/@original")
        except Exception as e:
            logger.warning(f"Could not fetch original response of interaction {ref.id}: {e}")
            return None

    def edit_original(self, ref: InteractionRef, input: Input = None) -> Any:
        """Edits the initial response.

        Without attachments the current response is fetched first and fields the
        caller left out are kept. Returns None when there is no response to edit.
        """
        input = payloads.coerce(input)
        path = f"{_webhook_path(ref)}/messages/@original"
        if input.has_attachments:
            request = MultipartRequest(method="patch", path=path,
                                       params=payloads.message_data(input),
                                       attachments=input.attachments,
                                       envelope=Envelope.PLAIN)
            return responses.unwrap_payload(self._client.send(request))

        existing = self.get_original(ref)
        if not isinstance(existing, dict):
            return None
        request = JsonRequest(method="patch", path=path, body=payloads.edit_body(input, existing))
        return responses.unwrap_payload(self._client.send(request))

    def delete_original(self, ref: InteractionRef) -> Any:
        return self._client.delete(f"{_webhook_path(ref)}/messages/@original")


class Followup:
    _client: InteractionsClient

    def __init__(self, client: InteractionsClient):
        self._client = client

    def get(self, ref: InteractionRef, message_id: str, thread_id: str | None = None) -> Any:
        return self._client.fetch(_message_path(ref, message_id), query=_thread_query(thread_id))

    def create(self, ref: InteractionRef, input: Input = None) -> Any:
        input = payloads.coerce(input)
        path = _webhook_path(ref)
        if input.has_attachments:
            request = MultipartRequest(method="post", path=path,
                                       params=payloads.message_data(input),
                                       attachments=input.attachments,
                                       envelope=Envelope.PLAIN)
        else:
            request = JsonRequest(method="post", path=path, body=payloads.followup_create_body(input))
        logger.info(f"Creating followup message for interaction {ref.id}")
        return responses.unwrap_payload(self._client.send(request))

    def edit(self, ref: InteractionRef, message_id: str, input: Input = None, thread_id: str | None = None) -> Any:
        """Edits a followup message, keeping whatever the caller left out.

        Unlike ``Callback.edit_original`` a failed fetch of the current message
        is raised, not turned into None.
        """
        input = payloads.coerce(input)
        path = _message_path(ref, message_id)
        query = _thread_query(thread_id)
        if input.has_attachments:
            request = MultipartRequest(method="patch", path=path,
                                       params=payloads.message_data(input),
                                       attachments=input.attachments,
                                       envelope=Envelope.PLAIN,
                                       query=query)
            return responses.unwrap_payload(self._client.send(request))

        existing = self._client.fetch(path, query=query)
        if not isinstance(existing, dict):
            raise TransportError(None, existing, message=f"Message {message_id} could not be read for editing")
        request = JsonRequest(method="patch", path=path, body=payloads.edit_body(input, existing), query=query)
        return responses.unwrap_payload(self._client.send(request))

    def delete(self, ref: InteractionRef, message_id: str) -> Any:
        return self._client.delete(_message_path(ref, message_id))
