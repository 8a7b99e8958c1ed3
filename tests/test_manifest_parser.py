"""Tests for manifest parsing."""

import json

import pytest

from podcast_integration.domain import Manifest, ManifestParser
from podcast_integration.exceptions import ManifestParseError
from tests.helpers import VALID_MANIFEST


@pytest.fixture
def parser() -> ManifestParser:
    return ManifestParser()


def test_parses_short_field_names(parser: ManifestParser) -> None:
    manifest = parser.parse(json.dumps(VALID_MANIFEST), "ep1.podcast")

    assert manifest == Manifest(
        interview_file="i.mp3",
        introduction_file="intro.mp3",
        timestamp=1000,
        description="d",
    )


def test_parses_camel_case_field_names(parser: ManifestParser) -> None:
    content = json.dumps(
        {
            "interviewFile": "interview.mp3",
            "introductionFile": "intro.mp3",
            "timestamp": 1700000000000,
            "description": "Season finale",
        }
    )

    manifest = parser.parse(content, "ep2.podcast")

    assert manifest.interview_file == "interview.mp3"
    assert manifest.introduction_file == "intro.mp3"
    assert manifest.timestamp == 1700000000000


def test_ignores_unknown_fields(parser: ManifestParser) -> None:
    content = json.dumps({**VALID_MANIFEST, "fileName": "spoofed.podcast", "extra": 1})

    manifest = parser.parse(content, "ep1.podcast")

    assert not hasattr(manifest, "file_name")


def test_missing_timestamp_raises(parser: ManifestParser) -> None:
    content = {k: v for k, v in VALID_MANIFEST.items() if k != "timestamp"}

    with pytest.raises(ManifestParseError) as exc_info:
        parser.parse(json.dumps(content), "broken.podcast")

    assert exc_info.value.file_name == "broken.podcast"
    assert "timestamp" in exc_info.value.reason


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        '{"interview": "i.mp3",',
        json.dumps([VALID_MANIFEST]),
        json.dumps({**VALID_MANIFEST, "timestamp": "yesterday"}),
    ],
)
def test_malformed_content_raises(parser: ManifestParser, content: str) -> None:
    with pytest.raises(ManifestParseError):
        parser.parse(content, "broken.podcast")
