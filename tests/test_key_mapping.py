"""Tests for key_mapping.py."""

import json

import pytest
from pydantic import ValidationError

from flexrecord.errors import UnknownFieldError
from flexrecord.kernel.key_mapping import FieldKey, KeyMapping
from flexrecord._internal.io.key_mapping import load_key_mapping_from_path
from flexrecord.reviews import PROGRESSIVE_REVIEW_KEYS


def test_default_review_mapping_both_directions():
    """Internal names and wire keys resolve in both directions."""
    assert PROGRESSIVE_REVIEW_KEYS.wire_key("agreedToTerms") == "agreedtotermsandconditions"
    assert PROGRESSIVE_REVIEW_KEYS.field_name("agreedtotermsandconditions") == "agreedToTerms"
    assert PROGRESSIVE_REVIEW_KEYS.wire_key("hostedAuthenticationCallbackurl") == "hostedauthentication_callbackurl"
    assert PROGRESSIVE_REVIEW_KEYS.field_name("rating") == "rating"


def test_default_review_mapping_order():
    """Mapping keeps the declared table order."""
    assert PROGRESSIVE_REVIEW_KEYS.wire_keys() == [
        "rating",
        "title",
        "reviewtext",
        "agreedtotermsandconditions",
        "isrecommended",
        "sendemailalertwhenpublished",
        "hostedauthentication_authenticationemail",
        "hostedauthentication_callbackurl",
    ]


def test_unmapped_wire_key_is_not_an_error():
    """Unknown wire keys return None."""
    assert PROGRESSIVE_REVIEW_KEYS.field_name("photourl_1") is None
    assert PROGRESSIVE_REVIEW_KEYS.is_mapped("photourl_1") is False
    # Internal names are not wire keys
    assert PROGRESSIVE_REVIEW_KEYS.field_name("agreedToTerms") is None


def test_unknown_internal_name_raises():
    """Asking for the wire key of an undefined field is a programming error."""
    with pytest.raises(UnknownFieldError):
        PROGRESSIVE_REVIEW_KEYS.wire_key("photourl_1")
    with pytest.raises(KeyError):
        PROGRESSIVE_REVIEW_KEYS.wire_key("nope")


def test_duplicate_wire_keys_rejected():
    """Two fields may not share a wire key."""
    with pytest.raises(ValueError, match="Duplicate wire keys"):
        KeyMapping.from_pairs([("a", "x"), ("b", "x")])


def test_duplicate_names_rejected():
    """Two entries may not share an internal name."""
    with pytest.raises(ValueError, match="Duplicate field names"):
        KeyMapping.from_pairs([("a", "x"), ("a", "y")])


def test_blank_keys_rejected():
    with pytest.raises(ValidationError):
        FieldKey(name="rating", wire_key="")
    with pytest.raises(ValidationError):
        FieldKey(name="  ", wire_key="rating")


def test_name_may_equal_another_fields_wire_key():
    """The two namespaces are independent."""
    mapping = KeyMapping.from_pairs([("a", "b"), ("b", "c")])
    assert mapping.field_name("b") == "a"
    assert mapping.wire_key("b") == "c"


def test_extra_fields_rejected():
    """Unknown top-level fields in a mapping document are rejected."""
    with pytest.raises(ValidationError):
        KeyMapping(fields=(), owner="me")


def test_mapping_is_frozen():
    with pytest.raises(ValidationError):
        PROGRESSIVE_REVIEW_KEYS.version = "9.9"


def test_from_json_bytes():
    data = json.dumps({
        "format": "flexrecord.key_mapping",
        "version": "0.1",
        "fields": [
            {"name": "score", "wire_key": "user_score"},
            {"name": "nickname", "wire_key": "usernickname"},
        ],
    }).encode("utf-8")
    mapping = KeyMapping.from_json_bytes(data)
    assert mapping.names() == ["score", "nickname"]
    assert mapping.as_dict() == {"score": "user_score", "nickname": "usernickname"}


def test_load_key_mapping_from_path(tmp_path):
    """A mapping document round-trips through a file."""
    path = tmp_path / "keys.json"
    path.write_text(PROGRESSIVE_REVIEW_KEYS.model_dump_json(), encoding="utf-8")

    loaded = load_key_mapping_from_path(path)
    assert loaded == PROGRESSIVE_REVIEW_KEYS
    assert loaded.field_name("isrecommended") == "isRecommended"


def test_load_key_mapping_rejects_duplicates(tmp_path):
    path = tmp_path / "keys.json"
    path.write_text(json.dumps({
        "fields": [
            {"name": "a", "wire_key": "same"},
            {"name": "b", "wire_key": "same"},
        ]
    }), encoding="utf-8")

    with pytest.raises(ValueError, match="Duplicate wire keys"):
        load_key_mapping_from_path(str(path))


def test_lookups_survive_copy():
    """Lookup indexes carry over to copies and reloads of a mapping."""
    copied = PROGRESSIVE_REVIEW_KEYS.model_copy()
    assert copied.field_name("isrecommended") == "isRecommended"
    assert copied.wire_key("sendEmailAlert") == "sendemailalertwhenpublished"

    reloaded = KeyMapping.model_validate(PROGRESSIVE_REVIEW_KEYS.model_dump())
    assert reloaded.is_mapped("hostedauthentication_callbackurl") is True
    assert reloaded.is_mapped("photourl_1") is False
    assert reloaded == PROGRESSIVE_REVIEW_KEYS
