"""Tests for composed image descriptions."""

from mediameta.features.metadata.usecases.extraction.description_composer import (
    CameraDetails,
    compose_description,
    resolve_description,
)


def test_model_only() -> None:
    assert compose_description(CameraDetails(model="X100")) == "Taken with X100"


def test_all_clauses() -> None:
    details = CameraDetails(model="X100", flash="16", focal_length="23", focal_length_35mm="35")
    assert (
        compose_description(details)
        == "Taken with X100, Flash setting:16, Focal length: 23 (35 mm equivalent: 35)"
    )


def test_leading_clause_spacing() -> None:
    assert compose_description(CameraDetails(flash="0")) == "Flash setting: 0"
    assert compose_description(CameraDetails(focal_length="50")) == "Focal length: 50"
    assert (
        compose_description(CameraDetails(flash="1", focal_length="50"))
        == "Flash setting: 1, Focal length: 50"
    )


def test_equivalent_focal_length_needs_focal_length() -> None:
    assert compose_description(CameraDetails(focal_length_35mm="35")) is None


def test_nothing_to_compose_is_none() -> None:
    assert compose_description(CameraDetails()) is None
    assert compose_description(CameraDetails(model="  ")) is None


def test_comment_precedence() -> None:
    details = CameraDetails(model="X100")
    assert resolve_description("jpeg comment", "user comment", details) == "jpeg comment"
    assert resolve_description("  ", "user comment", details) == "user comment"
    assert resolve_description(None, "", details) == "Taken with X100"
    assert resolve_description(None, None, CameraDetails()) is None
