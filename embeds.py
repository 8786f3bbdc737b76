from dataclasses import dataclass, field
from typing import Any, Dict, List

ZERO_WIDTH_SPACE = "\u200b"


def _first(*values):
    for value in values:
        if value is not None:
            return value
    return None


def _compact(d: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for (k, v) in d.items() if v is not None and v != {}}


@dataclass(frozen=True, kw_only=True)
class EmbedMedia:
    url: str | None = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any] | None) -> "EmbedMedia":
        d = d or {}
        return cls(url=d.get("url"))

    def merged_with(self, existing: "EmbedMedia") -> "EmbedMedia":
        return EmbedMedia(url=_first(self.url, existing.url))

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"url": self.url})


@dataclass(frozen=True, kw_only=True)
class EmbedAuthor:
    name: str | None = None
    icon_url: str | None = None
    url: str | None = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any] | None) -> "EmbedAuthor":
        d = d or {}
        return cls(name=d.get("name"), icon_url=d.get("icon_url"), url=d.get("url"))

    def merged_with(self, existing: "EmbedAuthor") -> "EmbedAuthor":
        return EmbedAuthor(name=_first(self.name, existing.name),
                           icon_url=_first(self.icon_url, existing.icon_url),
                           url=_first(self.url, existing.url))

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"name": self.name, "icon_url": self.icon_url, "url": self.url})


@dataclass(frozen=True, kw_only=True)
class EmbedFooter:
    text: str | None = None
    icon_url: str | None = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any] | None) -> "EmbedFooter":
        d = d or {}
        return cls(text=d.get("text"), icon_url=d.get("icon_url"))

    def merged_with(self, existing: "EmbedFooter") -> "EmbedFooter":
        return EmbedFooter(text=_first(self.text, existing.text),
                           icon_url=_first(self.icon_url, existing.icon_url))

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"text": self.text, "icon_url": self.icon_url})


@dataclass(frozen=True, kw_only=True)
class Embed:
    """The embed fields that survive an edit.

    Every attribute is optional: None means "not given", so merging can tell an
    omitted field apart from one that was set.
    """
    title: str | None = None
    description: str | None = None
    color: int | None = None
    url: str | None = None
    timestamp: str | None = None
    image: EmbedMedia = field(default_factory=EmbedMedia)
    thumbnail: EmbedMedia = field(default_factory=EmbedMedia)
    author: EmbedAuthor = field(default_factory=EmbedAuthor)
    footer: EmbedFooter = field(default_factory=EmbedFooter)
    fields: List[Dict[str, Any]] | None = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any] | None) -> "Embed":
        d = d or {}
        return cls(title=d.get("title"),
                   description=d.get("description"),
                   color=d.get("color"),
                   url=d.get("url"),
                   timestamp=d.get("timestamp"),
                   image=EmbedMedia.from_dict(d.get("image")),
                   thumbnail=EmbedMedia.from_dict(d.get("thumbnail")),
                   author=EmbedAuthor.from_dict(d.get("author")),
                   footer=EmbedFooter.from_dict(d.get("footer")),
                   fields=d.get("fields"))

    def merged_with(self, existing: "Embed") -> "Embed":
        return Embed(title=_first(self.title, existing.title),
                     description=_first(self.description, existing.description),
                     color=_first(self.color, existing.color),
                     url=_first(self.url, existing.url),
                     timestamp=_first(self.timestamp, existing.timestamp),
                     image=self.image.merged_with(existing.image),
                     thumbnail=self.thumbnail.merged_with(existing.thumbnail),
                     author=self.author.merged_with(existing.author),
                     footer=self.footer.merged_with(existing.footer),
                     fields=_first(self.fields, existing.fields))

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"title": self.title,
                         "description": self.description,
                         "color": self.color,
                         "url": self.url,
                         "timestamp": self.timestamp,
                         "image": self.image.to_dict(),
                         "thumbnail": self.thumbnail.to_dict(),
                         "author": self.author.to_dict(),
                         "footer": self.footer.to_dict(),
                         "fields": self.fields})


def merge_embed(given: Dict[str, Any] | None, existing: Dict[str, Any] | None) -> Dict[str, Any]:
    """Field-by-field merge: the caller's value, else the existing embed's value."""
    return Embed.from_dict(given).merged_with(Embed.from_dict(existing)).to_dict()


def with_placeholders(embed: Dict[str, Any]) -> Dict[str, Any]:
    # Discord rejects an icon without text in footers and authors
    embed = dict(embed)
    footer = embed.get("footer")
    if footer and footer.get("icon_url") and not footer.get("text"):
        embed["footer"] = {**footer, "text": ZERO_WIDTH_SPACE}
    author = embed.get("author")
    if author and author.get("icon_url") and not author.get("name"):
        embed["author"] = {**author, "name": ZERO_WIDTH_SPACE}
    return embed
