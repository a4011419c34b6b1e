"""Tests for domain helpers."""

import base64

import pytest

from brickpress.domain.errors import ValidationError
from brickpress.domain.generations import GeneratedImage, parse_data_uri
from brickpress.domain.identity import ANONYMOUS, Authenticated, identity_from_user_id
from brickpress.domain.themes import ModelType, Theme, parse_model_type, parse_theme


def test_data_uri_rendering() -> None:
    image = GeneratedImage(data=b"abc", mime_type="image/webp")

    assert image.data_uri == "data:image/webp;base64,YWJj"


def test_parse_data_uri_extracts_mime_and_bytes() -> None:
    encoded = base64.b64encode(b"poster").decode()

    image = parse_data_uri(f"data:image/jpeg;base64,{encoded}")

    assert image.mime_type == "image/jpeg"
    assert image.data == b"poster"


@pytest.mark.parametrize(
    "value",
    ["not-a-uri", "data:image/png,plain", "data:image/png;base64,@@@", "data:;base64,"],
)
def test_parse_data_uri_rejects_bad_input(value: str) -> None:
    with pytest.raises(ValidationError):
        parse_data_uri(value)


def test_identity_from_user_id() -> None:
    assert identity_from_user_id(None) == ANONYMOUS
    assert identity_from_user_id("  ") == ANONYMOUS
    assert identity_from_user_id("abc") == Authenticated(id="abc")
    assert ANONYMOUS.user_id is None


def test_parse_theme_and_model_type() -> None:
    assert parse_theme("") is None
    assert parse_theme(None) is None
    assert parse_theme("fantasy-realm") is Theme.FANTASY_REALM
    assert parse_model_type(None) is ModelType.UNKNOWN
    assert parse_model_type("vehicle") is ModelType.VEHICLE
    with pytest.raises(ValueError):
        parse_theme("pirates")
