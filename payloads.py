from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping

from embeds import merge_embed, with_placeholders
from interactions import ephemeral_flags

_MESSAGE_FIELDS = ("content", "embeds", "components", "attachments", "tts", "allowed_mentions")


@dataclass(frozen=True)
class InteractionRef:
    id: str
    application_id: str
    token: str

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> "InteractionRef":
        return cls(id=event["id"], application_id=event["application_id"], token=event["token"])


@dataclass(frozen=True, kw_only=True)
class ResponseInput:
    """Caller-supplied message fields.

    None means the field was not given: edits keep the existing value and
    creates use the default. An empty list for ``embeds`` or ``components`` is
    an explicit clear.
    """
    content: str | None = None
    embeds: List[Dict[str, Any]] | None = None
    components: List[Dict[str, Any]] | None = None
    attachments: List[Dict[str, Any]] | None = None
    tts: bool | None = None
    allowed_mentions: Dict[str, Any] | None = None
    ephemeral: bool = False
    flags: int | None = None
    thread_name: str | None = None
    return_date: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "ResponseInput":
        known = {f.name for f in fields(cls)} - {"extra"}
        kwargs = {k: v for (k, v) in d.items() if k in known}
        extra = {k: v for (k, v) in d.items() if k not in known}
        return cls(**kwargs, extra=extra)

    @property
    def flags_value(self) -> int:
        return ephemeral_flags(self.ephemeral)

    @property
    def has_attachments(self) -> bool:
        return bool(self.attachments)

    def given(self) -> Dict[str, Any]:
        """Message fields the caller actually set, plus any unrecognized keys."""
        given = {name: getattr(self, name) for name in _MESSAGE_FIELDS if getattr(self, name) is not None}
        return {**self.extra, **given}


def coerce(input: "ResponseInput | Mapping[str, Any] | None") -> ResponseInput:
    if input is None:
        return ResponseInput()
    if isinstance(input, ResponseInput):
        return input
    return ResponseInput.from_dict(input)


def _placeholdered(embeds: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [with_placeholders(embed) for embed in embeds]


def message_data(input: ResponseInput) -> Dict[str, Any]:
    """Fields the caller set plus flags: callback ``data`` and ``payload_json`` params."""
    data = input.given()
    if data.get("embeds"):
        data["embeds"] = _placeholdered(data["embeds"])
    data["flags"] = input.flags_value
    return data


def followup_create_body(input: ResponseInput) -> Dict[str, Any]:
    return {"content": input.content if input.content is not None else "",
            "embeds": _placeholdered(input.embeds) if input.embeds else [],
            "components": input.components or [],
            "tts": input.tts or False,
            "allowed_mentions": input.allowed_mentions,
            "thread_name": input.thread_name,
            "flags": input.flags_value,
            "attachments": input.attachments or []}


def _merged_embeds(given: List[Dict[str, Any]] | None, existing: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    if given is None:
        return list(existing)
    if not given:
        return []
    return [merge_embed(given[0], existing[0] if existing else None)]


def _merged_components(given: List[Dict[str, Any]] | None, existing: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    # Only an explicit clear is honoured, anything else keeps the existing rows
    if given is not None and not given:
        return []
    return list(existing)


def edit_body(input: ResponseInput, existing: Mapping[str, Any]) -> Dict[str, Any]:
    """PATCH body for an edit: caller values first, the existing message second."""
    existing_embeds = existing.get("embeds") or []
    existing_components = existing.get("components") or []
    if input.attachments is not None:
        attachments = input.attachments
    else:
        attachments = existing.get("attachments") or []
    body = {"content": input.content if input.content is not None else existing.get("content"),
            "embeds": _merged_embeds(input.embeds, existing_embeds),
            "components": _merged_components(input.components, existing_components),
            "attachments": attachments}
    if input.allowed_mentions is not None:
        body["allowed_mentions"] = input.allowed_mentions
    return body

