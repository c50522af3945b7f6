"""Progressive review submission fields.

The typed model lists the known fields in emission order. The key mapping is
kept separate so wire names can be changed or loaded without touching the model.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict

from flexrecord.kernel.codec import RecordCodec
from flexrecord.kernel.key_mapping import KeyMapping
from flexrecord.kernel.record import ExtensibleRecord


class ProgressiveReviewFields(BaseModel):
    """Typed fields of a progressive review submission (None = absent)."""
    rating: Optional[int] = None
    title: Optional[str] = None
    reviewtext: Optional[str] = None
    agreedToTerms: Optional[bool] = None
    isRecommended: Optional[bool] = None
    sendEmailAlert: Optional[bool] = None
    hostedAuthenticationEmail: Optional[str] = None
    hostedAuthenticationCallbackurl: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)


PROGRESSIVE_REVIEW_KEYS = KeyMapping.from_pairs([
    ("rating", "rating"),
    ("title", "title"),
    ("reviewtext", "reviewtext"),
    ("agreedToTerms", "agreedtotermsandconditions"),
    ("isRecommended", "isrecommended"),
    ("sendEmailAlert", "sendemailalertwhenpublished"),
    ("hostedAuthenticationEmail", "hostedauthentication_authenticationemail"),
    ("hostedAuthenticationCallbackurl", "hostedauthentication_callbackurl"),
])


def progressive_review_codec(
    mapping: Optional[KeyMapping] = None,
    on_diagnostic=None,
) -> RecordCodec[ProgressiveReviewFields]:
    """Build a codec for progressive review fields.

    Args:
        mapping: Key mapping to use instead of PROGRESSIVE_REVIEW_KEYS
        on_diagnostic: Optional callback receiving each Diagnostic
    """
    return RecordCodec(
        ProgressiveReviewFields,
        mapping if mapping is not None else PROGRESSIVE_REVIEW_KEYS,
        on_diagnostic=on_diagnostic,
    )


def new_progressive_review() -> ExtensibleRecord[ProgressiveReviewFields]:
    """Create an empty progressive review record."""
    return ExtensibleRecord.empty(ProgressiveReviewFields)
