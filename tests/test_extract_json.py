import json

import pytest

from fodmap_menu.errors import MalformedJson, NoJsonFound
from fodmap_menu.utils import extract_json, to_data_url


def test_extracts_array_between_prose():
    payload = [{"name": "Soup", "fodmapLevel": "low", "concerns": [], "alternatives": []}]
    text = "Here is the analysis:\n" + json.dumps(payload) + "\nLet me know if you need more."
    assert extract_json(text) == payload


def test_extracts_single_object():
    text = 'Result: {"name": "Risotto", "fodmapLevel": "high"} done'
    assert extract_json(text) == {"name": "Risotto", "fodmapLevel": "high"}


def test_extracts_from_markdown_fence():
    text = '```json\n[{"name": "Tacos"}]\n```'
    assert extract_json(text) == [{"name": "Tacos"}]


def test_brackets_inside_strings_are_ignored():
    payload = [
        {"name": "Mix [Spicy]", "description": "with {house} sauce ]}", "concerns": ["Onion"]},
        {"name": "Plain \"quoted\" [dish", "concerns": []},
    ]
    text = "Menu:\n" + json.dumps(payload) + "\nTrailing note [1] {x}"
    assert extract_json(text) == payload


def test_stops_at_first_complete_value():
    text = '[{"name": "A"}] and also [{"name": "B"}]'
    assert extract_json(text) == [{"name": "A"}]


def test_nested_arrays_and_objects():
    payload = {"items": [{"name": "A", "concerns": [["x"], {"y": [1, 2]}]}]}
    assert extract_json("x " + json.dumps(payload) + " y") == payload


@pytest.mark.parametrize("text", ["I cannot analyze this image.", "", "no brackets here )"])
def test_no_json_found(text):
    with pytest.raises(NoJsonFound) as exc_info:
        extract_json(text)
    assert exc_info.value.raw_text == text


def test_truncated_json_is_malformed_and_keeps_raw_text():
    text = '[{"name":"Soup"'
    with pytest.raises(MalformedJson) as exc_info:
        extract_json(text)
    assert exc_info.value.raw_text == text


def test_mismatched_closer_is_malformed():
    with pytest.raises(MalformedJson):
        extract_json('[{"name": "Soup"]}')


def test_invalid_json_syntax_is_malformed():
    text = "Sure! [name: Soup, level: low]"
    with pytest.raises(MalformedJson) as exc_info:
        extract_json(text)
    assert exc_info.value.raw_text == text


def test_unterminated_string_is_malformed():
    with pytest.raises(MalformedJson):
        extract_json('[{"name": "Soup]')


def test_to_data_url():
    assert to_data_url(b"abc", "image/png") == "data:image/png;base64,YWJj"


def test_very_deep_nesting_is_malformed():
    text = "[" * 100000 + "]" * 100000
    with pytest.raises(MalformedJson) as exc_info:
        extract_json(text)
    assert exc_info.value.raw_text == text
