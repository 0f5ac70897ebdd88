import dataclasses

import pytest

from fwnt.locale_identifier import (
    LANGUAGE_TAGS,
    LanguageTag,
    get_language_tag_description,
    get_language_tag_identifier,
)


@pytest.mark.parametrize(
    ("value", "identifier", "description"),
    [
        (0x0409, "en-US", "English, United States"),
        (0x0001, "ar", "Arabic"),
        (0x0414, "nb-NO", "Norwegian Bokmål, Norway"),
        (0x7C68, "ha-Latn", "Hausa, Latin"),
        (0x0086, "qut", ""),
    ],
)
def test_known_tags(value, identifier, description):
    assert get_language_tag_identifier(value) == identifier
    assert get_language_tag_description(value) == description


@pytest.mark.parametrize("value", [0x0000, 0x0030, 0xFFFF, 0x7FFF])
def test_unknown_tags(value):
    assert get_language_tag_identifier(value) == "_UNKNOWN_"
    assert get_language_tag_description(value) == "Unknown"


def test_every_table_entry_is_found():
    for tag in LANGUAGE_TAGS:
        assert get_language_tag_identifier(tag.lcid_language_tag) == tag.identifier
        assert get_language_tag_description(tag.lcid_language_tag) == tag.description


def test_table_values_are_unique_and_in_range():
    values = [tag.lcid_language_tag for tag in LANGUAGE_TAGS]
    assert len(values) == len(set(values))
    assert all(0 < value < 0xFFFF for value in values)
    identifiers = [get_language_tag_identifier(value) for value in values]
    assert identifiers == [tag.identifier for tag in LANGUAGE_TAGS]


def test_identifiers_are_never_unknown():
    for tag in LANGUAGE_TAGS:
        identifier = get_language_tag_identifier(tag.lcid_language_tag)
        assert identifier == tag.identifier
        assert identifier not in ("", "_UNKNOWN_")
        assert get_language_tag_description(tag.lcid_language_tag) == tag.description


def test_language_tag_is_immutable():
    tag = LanguageTag(0x0409, "en-US", "English, United States")
    with pytest.raises(dataclasses.FrozenInstanceError):
        tag.identifier = "en-GB"
    assert tag.identifier == "en-US"