"""Pydantic data contracts for Clarifai v1 requests and response envelopes.

Attribute names are Python names; wire keys are field aliases. Models accept either
when constructed, ignore unknown wire keys, and are frozen once built.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

STATUS_OK = "OK"


class WireModel(BaseModel):
    """Base for every shape exchanged with the service."""

    model_config = {"frozen": True, "extra": "ignore", "populate_by_name": True}


class WireRequest(WireModel):
    """Request body. Serialized with wire keys; unset and empty fields are left out.

    Sequences are tuples so a built request is hashable and cannot be changed in place."""

    def to_payload(self) -> dict[str, Any]:
        data = self.model_dump(by_alias=True, exclude_none=True, mode="json")
        return {k: v for k, v in data.items() if v != [] and v != ""}


class Envelope(WireModel):
    """Top-level response: status_code is authoritative, payload may be partial on failure."""

    status_code: str = ""
    status_message: str = Field("", alias="status_msg")

    @property
    def ok(self) -> bool:
        return self.status_code == STATUS_OK


def _none_as_empty(v: Any) -> Any:
    """The service sends null for empty lists on failed items."""
    return [] if v is None else v


class DocumentRef(WireModel):
    """
    Mixin for results carrying a service document id.

    docid can exceed 64 bits, so it is kept as a Python int and mirrored in docid_str.
    Whichever of the two the wire carries is used to fill in the other.
    """

    docid: int | None = None
    docid_str: str | None = None

    @model_validator(mode="before")
    @classmethod
    def fill_docid_forms(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        docid = data.get("docid")
        docid_str = data.get("docid_str")
        if docid is not None and not docid_str:
            data = {**data, "docid_str": str(docid)}
        elif docid is None and docid_str:
            data = {**data, "docid": docid_str}
        return data


# --- info ---


class ServiceInfo(WireModel):
    """Service limits and defaults reported by /info/."""

    max_image_size: int | None = None
    min_image_size: int | None = None
    max_image_bytes: int | None = None
    max_video_size: int | None = None
    min_video_size: int | None = None
    max_video_bytes: int | None = None
    max_video_duration: int | None = None
    max_video_batch_size: int | None = None
    max_batch_size: int | None = None
    default_model: str | None = None
    default_language: str | None = None
    api_version: float | None = None


class InfoResp(Envelope):
    results: ServiceInfo = Field(default_factory=ServiceInfo)

    @field_validator("results", mode="before")
    @classmethod
    def null_results(cls, v: Any) -> Any:
        return {} if v is None else v


# --- tag ---


class TagRequest(WireRequest):
    """Image URLs to tag. local_ids, when given, pair positionally with urls."""

    urls: tuple[str, ...] = Field(default_factory=tuple, alias="url")
    local_ids: tuple[str, ...] | None = None
    model: str | None = None


class TagOutcome(WireModel):
    """Parallel sequences: classes[i] has category catids[i] and confidence probs[i]."""

    classes: list[str] = Field(default_factory=list)
    catids: list[str] = Field(default_factory=list)
    probs: list[float] = Field(default_factory=list)

    @field_validator("classes", "catids", "probs", mode="before")
    @classmethod
    def null_lists(cls, v: Any) -> Any:
        return _none_as_empty(v)


class TagResultBody(WireModel):
    tag: TagOutcome = Field(default_factory=TagOutcome)


class TagResult(DocumentRef):
    url: str = ""
    status_code: str = ""
    status_message: str = Field("", alias="status_msg")
    local_id: str = ""
    result: TagResultBody = Field(default_factory=TagResultBody)

    @property
    def tag(self) -> TagOutcome:
        return self.result.tag


class TagMetaDetail(WireModel):
    timestamp: float | None = None
    model: str | None = None
    config: str | None = None


class TagMeta(WireModel):
    tag: TagMetaDetail = Field(default_factory=TagMetaDetail)


class TagResp(Envelope):
    meta: TagMeta | None = None
    results: list[TagResult] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def null_lists(cls, v: Any) -> Any:
        return _none_as_empty(v)


# --- color ---


class ColorRequest(WireRequest):
    urls: tuple[str, ...] = Field(default_factory=tuple, alias="url")
    local_ids: tuple[str, ...] | None = None


class W3CColor(WireModel):
    """Nearest named web colour."""

    hex: str = ""
    name: str = ""


class Color(WireModel):
    hex: str = ""
    density: float = 0.0
    w3c: W3CColor = Field(default_factory=W3CColor)


class ColorResult(DocumentRef):
    url: str = ""
    colors: list[Color] = Field(default_factory=list)

    @field_validator("colors", mode="before")
    @classmethod
    def null_lists(cls, v: Any) -> Any:
        return _none_as_empty(v)


class ColorResp(Envelope):
    results: list[ColorResult] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def null_lists(cls, v: Any) -> Any:
        return _none_as_empty(v)


# --- feedback ---


class FeedbackForm(WireRequest):
    """
    Feedback on earlier results. Identifies images by exactly one of docids or urls;
    the remaining fields are optional signals.
    """

    docids: tuple[str, ...] | None = None
    urls: tuple[str, ...] | None = Field(None, alias="url")
    add_tags: tuple[str, ...] | None = None
    remove_tags: tuple[str, ...] | None = None
    dissimilar_docids: tuple[str, ...] | None = None
    similar_docids: tuple[str, ...] | None = None
    search_click: tuple[str, ...] | None = None


class FeedbackResp(Envelope):
    pass
