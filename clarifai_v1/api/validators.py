"""Preconditions checked on request values before anything is sent."""

from clarifai_v1.api.schema import ColorRequest, FeedbackForm, TagRequest
from clarifai_v1.core.exceptions import ValidationError

NO_URLS = "at least one URL required"
NO_FEEDBACK_TARGET = "at least one of document-ids or URLs required"
BOTH_FEEDBACK_TARGETS = "exactly one of document-ids or URLs allowed"


def validate_tag_request(req: TagRequest) -> None:
    if not req.urls:
        raise ValidationError(NO_URLS)


def validate_color_request(req: ColorRequest) -> None:
    if not req.urls:
        raise ValidationError(NO_URLS)


def validate_feedback_form(form: FeedbackForm) -> None:
    """
    Require exactly one of docids / urls to be non-empty.

    None and [] both count as "not given", so the check looks at populated-ness
    rather than at whether the field was set.
    """
    has_docids = bool(form.docids)
    has_urls = bool(form.urls)
    if not has_docids and not has_urls:
        raise ValidationError(NO_FEEDBACK_TARGET)
    if has_docids and has_urls:
        raise ValidationError(BOTH_FEEDBACK_TARGETS)
