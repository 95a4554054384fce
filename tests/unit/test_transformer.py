from __future__ import annotations

from tokenmeta.config.variants import DEFAULT_VARIANT, PRODUCT_VARIANT
from tokenmeta.models.metadata import AttributeEntry
from tokenmeta.models.row_record import RowRecord
from tokenmeta.services.transformer import transform_row


def _default_row(**overrides: str) -> RowRecord:
    values = {c: "" for c in DEFAULT_VARIANT.required_columns}
    values.update(overrides)
    return RowRecord(row_number=1, values=values)


def test_sword_scenario():
    record = _default_row(
        TITLE="Sword #1",
        GRADER="  PSA ",
        GRADE="",
        YEAR="2021",
        image="http://x/1.png",
        video="",
    )
    doc = transform_row(record, DEFAULT_VARIANT)
    assert doc.to_dict() == {
        "name": "Sword #1",
        "description": "Sword #1",
        "image": "http://x/1.png",
        "attributes": [
            {"trait_type": "Grader", "value": "PSA", "display_type": "string"},
            {"trait_type": "Year", "value": "2021", "display_type": "string"},
        ],
    }
    assert "video" not in doc.to_dict()
    assert "external_url" not in doc.to_dict()


def test_all_attribute_fields_blank_gives_empty_attributes():
    record = _default_row(
        TITLE="Blank",
        GRADER="   ",
        **{"SERIAL NUMBER": "\t"},
        GRADE=" ",
        YEAR="",
        LANGUAGE="  ",
        SET="",
    )
    doc = transform_row(record, DEFAULT_VARIANT)
    assert doc.attributes == []
    assert doc.to_dict()["attributes"] == []


def test_name_and_description_keep_untrimmed_title():
    doc = transform_row(_default_row(TITLE="  Spaced Title \t"), DEFAULT_VARIANT)
    assert doc.name == "  Spaced Title \t"
    assert doc.description == doc.name


def test_image_is_trimmed_and_always_present():
    assert transform_row(_default_row(image="  http://i/1.png  "), DEFAULT_VARIANT).image == "http://i/1.png"
    doc = transform_row(_default_row(image="   "), DEFAULT_VARIANT)
    assert doc.image == ""
    assert doc.to_dict()["image"] == ""


def test_optional_urls_trimmed_when_present():
    doc = transform_row(
        _default_row(video=" http://v/1.mp4 ", external_url="\thttp://shop/1\n"),
        DEFAULT_VARIANT,
    )
    assert doc.video == "http://v/1.mp4"
    assert doc.external_url == "http://shop/1"


def test_whitespace_only_optional_urls_are_absent():
    doc = transform_row(_default_row(video="  ", external_url=" "), DEFAULT_VARIANT)
    assert doc.video is None
    assert doc.external_url is None
    data = doc.to_dict()
    assert "video" not in data and "external_url" not in data


def test_attribute_order_follows_schema():
    record = _default_row(
        SET="Base",
        LANGUAGE="English",
        YEAR="1999",
        GRADE="9",
        GRADER="BGS",
        **{"SERIAL NUMBER": "42"},
    )
    doc = transform_row(record, DEFAULT_VARIANT)
    assert [a.trait_type for a in doc.attributes] == [
        "Grader", "Serial Number", "Grade", "Year", "Language", "Set",
    ]
    assert all(a.display_type == "string" for a in doc.attributes)


def test_product_variant_columns_and_no_set():
    values = {c: "" for c in PRODUCT_VARIANT.required_columns}
    values.update({
        "TITLE": "Card",
        "IMAGE URL": " http://i/c.png",
        "MP4 URL": "http://v/c.mp4 ",
        "URL TO PRODUCT": "",
        "LANGUAGE": "French",
        "GRADER": "CGC",
        "SET": "ignored, not bound",
    })
    doc = transform_row(RowRecord(row_number=1, values=values), PRODUCT_VARIANT)
    assert doc.image == "http://i/c.png"
    assert doc.video == "http://v/c.mp4"
    assert doc.external_url is None
    assert doc.attributes == [
        AttributeEntry("Grader", "CGC"),
        AttributeEntry("Language", "French"),
    ]
