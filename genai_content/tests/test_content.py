"""Tests for Content decoding, encoding, speaker builders and helpers."""

from __future__ import annotations

import pytest

from genai_content import (
    MODEL_ROLE,
    USER_ROLE,
    Content,
    ContentBlob,
    InlineDataPart,
    InvalidBlobError,
    InvalidContentError,
    InvalidPartError,
    TextPart,
)


def _image_part() -> InlineDataPart:
    return InlineDataPart(ContentBlob(mime_type="image/png", data="iVBORw0KGgo="))


def test_string_shorthand_becomes_single_text_part():
    content = Content.from_json({"parts": "hello"})
    assert content.parts == (TextPart("hello"),)  # nosec B101 - test assertion
    assert content.role is None  # nosec B101 - test assertion
    assert content.to_json() == {"parts": [{"text": "hello"}]}  # nosec B101


def test_parts_array_preserves_order_and_role():
    wire = {
        "parts": [
            {"text": "Describe this image."},
            {"inlineData": {"mimeType": "image/png", "data": "iVBORw0KGgo="}},
            {"text": "Be brief."},
        ],
        "role": "user",
    }
    content = Content.from_json(wire)
    assert content.parts == (  # nosec B101
        TextPart("Describe this image."),
        _image_part(),
        TextPart("Be brief."),
    )
    assert content.role == "user"  # nosec B101
    assert content.to_json() == wire  # nosec B101


def test_parts_accepts_any_iterable_of_objects():
    content = Content.from_json({"parts": ({"text": "a"}, {"text": "b"})})
    assert [p.text for p in content.parts] == ["a", "b"]  # nosec B101


@pytest.mark.parametrize("wire", [{}, {"parts": None}, {"parts": []}])
def test_missing_or_empty_parts_yield_empty_sequence(wire):
    content = Content.from_json(wire)
    assert content.parts == ()  # nosec B101
    assert content.to_json() == {"parts": []}  # nosec B101


def test_null_role_is_preserved_as_absent():
    content = Content.from_json({"parts": "x", "role": None})
    assert content.role is None  # nosec B101
    assert "role" not in content.to_json()  # nosec B101


def test_role_key_omitted_when_absent():
    encoded = Content(parts=[TextPart("system prompt")]).to_json()
    assert encoded == {"parts": [{"text": "system prompt"}]}  # nosec B101


def test_speaker_builders_fix_roles():
    assert Content.for_user([TextPart("hi")]).role == "user"  # nosec B101
    assert Content.for_model([TextPart("hello")]).role == "model"  # nosec B101
    assert USER_ROLE == "user" and MODEL_ROLE == "model"  # nosec B101


def test_direct_construction_round_trips():
    original = Content.for_model([TextPart("Here you go:"), _image_part()])
    assert Content.from_json(original.to_json()) == original  # nosec B101


def test_lists_are_normalized_to_tuples():
    parts = [TextPart("a")]
    content = Content(parts=parts)
    parts.append(TextPart("b"))
    assert content.parts == (TextPart("a"),)  # nosec B101


def test_invalid_part_reports_its_index():
    with pytest.raises(InvalidPartError) as excinfo:
        Content.from_json({"parts": [{"text": "ok"}, {"text": "ok"}, {}]})
    assert excinfo.value.index == 2  # nosec B101


def test_invalid_blob_inside_turn_propagates():
    with pytest.raises(InvalidBlobError) as excinfo:
        Content.from_json({"parts": [{"inlineData": {"data": "x"}}]})
    assert excinfo.value.index == 0  # nosec B101


@pytest.mark.parametrize("parts", [5, True, {"text": "hi"}, b"bytes"])
def test_unsupported_parts_shape_raises(parts):
    with pytest.raises(InvalidContentError) as excinfo:
        Content.from_json({"parts": parts})
    assert excinfo.value.field == "parts"  # nosec B101


def test_non_string_role_and_non_object_turn_raise():
    with pytest.raises(InvalidContentError):
        Content.from_json({"parts": "x", "role": 1})
    with pytest.raises(InvalidContentError):
        Content.from_json("hello")


def test_text_and_data_builders():
    assert Content.text("hi").to_json() == {"parts": [{"text": "hi"}], "role": "user"}  # nosec B101
    system = Content.text("rules", role=None)
    assert "role" not in system.to_json()  # nosec B101
    image = Content.data("image/png", "iVBORw0KGgo=", role=MODEL_ROLE)
    assert image.parts == (_image_part(),)  # nosec B101
    assert image.role == "model"  # nosec B101


def test_joined_text_and_inline_detection():
    content = Content.for_user([TextPart("look"), _image_part(), TextPart("here")])
    assert content.joined_text() == "look\n[image/png]\nhere"  # nosec B101
    assert content.has_inline_data()  # nosec B101
    assert not Content.text("plain").has_inline_data()  # nosec B101


@pytest.mark.parametrize("parts", ["hello", b"hello"])
def test_string_parts_rejected_at_construction(parts):
    with pytest.raises(TypeError):
        Content.for_user(parts)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Content(parts=parts)  # type: ignore[arg-type]


def test_non_part_elements_rejected_at_construction():
    with pytest.raises(TypeError) as excinfo:
        Content.for_model([TextPart("ok"), {"text": "raw wire dict"}])  # type: ignore[list-item]
    assert "parts[1]" in str(excinfo.value)  # nosec B101
