"""Tests for normalizing the model reply into an ExtractedRecipe."""

import json

import pytest

from recipe_organizer.errors import MalformedResponseError
from recipe_organizer.recipe_import.normalizer import (
    extract_image_url,
    normalize_recipe,
    normalize_string_list,
    parse_response,
)


def _reply(**fields) -> str:
    return json.dumps(fields)


class TestParseResponse:

    def test_object(self):
        assert parse_response('{"title": "Soup"}') == {"title": "Soup"}

    def test_invalid_json(self):
        with pytest.raises(MalformedResponseError) as exc_info:
            parse_response("Sure! Here is your recipe: {")
        assert "Sure! Here is your recipe" in exc_info.value.raw

    def test_non_object_json(self):
        with pytest.raises(MalformedResponseError, match="expected an object"):
            parse_response('["2 eggs"]')

    def test_long_reply_is_truncated_in_error(self):
        with pytest.raises(MalformedResponseError) as exc_info:
            parse_response("x" * 1000)
        assert len(exc_info.value.raw) < 300


class TestNormalizeRecipe:

    def test_complete_reply(self):
        recipe = normalize_recipe(_reply(
            title="Miso Soup",
            ingredients=["1 tbsp miso", "2 cups dashi"],
            steps=["Heat dashi.", "Whisk in miso."],
            cuisine="Japanese",
            image="https://img.example/miso.jpg",
            sourceUrl="https://b.example/miso",
        ))

        assert recipe.title == "Miso Soup"
        assert recipe.ingredients == ["1 tbsp miso", "2 cups dashi"]
        assert recipe.steps == ["Heat dashi.", "Whisk in miso."]
        assert recipe.cuisine == "Japanese"
        assert recipe.image == "https://img.example/miso.jpg"
        assert recipe.source_url == "https://b.example/miso"

    def test_empty_object_gets_all_defaults(self):
        recipe = normalize_recipe("{}")
        assert recipe.to_dict() == {
            "title": "",
            "ingredients": [],
            "steps": [],
            "cuisine": "Western",
            "image": "",
            "sourceUrl": "",
        }

    def test_missing_cuisine_defaults_to_western(self):
        recipe = normalize_recipe(_reply(title="Toast", ingredients=["bread"], steps=["Toast it."]))
        assert recipe.cuisine == "Western"

    def test_missing_ingredients_defaults_to_empty_list(self):
        recipe = normalize_recipe(_reply(title="Toast", steps=["Toast it."], cuisine="British"))
        assert recipe.ingredients == []

    def test_falsy_values_treated_as_missing(self):
        recipe = normalize_recipe(_reply(
            title=None, ingredients=None, steps=[], cuisine="", image=0, sourceUrl=None,
        ))
        assert recipe.title == ""
        assert recipe.ingredients == []
        assert recipe.steps == []
        assert recipe.cuisine == "Western"
        assert recipe.image == ""
        assert recipe.source_url == ""

    def test_request_url_beats_model_source_url(self):
        recipe = normalize_recipe(
            _reply(title="X", sourceUrl="https://b.example/y"),
            original_url="https://a.example/x",
        )
        assert recipe.source_url == "https://a.example/x"

    def test_model_source_url_used_without_request_url(self):
        recipe = normalize_recipe(_reply(sourceUrl="https://b.example/y"))
        assert recipe.source_url == "https://b.example/y"

    def test_types_are_always_correct(self):
        recipe = normalize_recipe(_reply(
            title=42,
            ingredients="3 eggs",
            steps=[{"text": "Beat eggs."}, "", 7],
            cuisine=["Italian", "French"],
            image={"url": "https://img.example/a.jpg"},
        ))
        assert recipe.title == "42"
        assert recipe.ingredients == ["3 eggs"]
        assert recipe.steps == ["Beat eggs.", "7"]
        assert recipe.cuisine == "Italian"
        assert recipe.image == "https://img.example/a.jpg"

    def test_whitespace_is_trimmed_and_blank_counts_as_missing(self):
        recipe = normalize_recipe(_reply(title="  Soup ", cuisine=" ", ingredients=["  1 leek  "]))
        assert recipe.title == "Soup"
        assert recipe.cuisine == "Western"
        assert recipe.ingredients == ["1 leek"]

    def test_malformed_reply_raises(self):
        with pytest.raises(MalformedResponseError):
            normalize_recipe("not json at all")


class TestNormalizeStringList:

    def test_string_list(self):
        assert normalize_string_list(["2 cups flour", "1 tsp salt"]) == ["2 cups flour", "1 tsp salt"]

    def test_dict_list(self):
        assert normalize_string_list([{"text": "2 cups flour"}, {"name": "salt"}]) == ["2 cups flour", "salt"]

    def test_filters_blank_items(self):
        assert normalize_string_list(["Step 1", "", "  ", "Step 2"]) == ["Step 1", "Step 2"]

    def test_empty_or_none(self):
        assert normalize_string_list(None) == []
        assert normalize_string_list([]) == []


class TestExtractImageUrl:

    def test_string(self):
        assert extract_image_url("https://img.example/a.jpg") == "https://img.example/a.jpg"

    def test_dict_content_url(self):
        assert extract_image_url({"contentUrl": "https://img.example/a.jpg"}) == "https://img.example/a.jpg"

    def test_list(self):
        assert extract_image_url(["https://img.example/1.jpg", "https://img.example/2.jpg"]) == "https://img.example/1.jpg"

    def test_none_or_empty(self):
        assert extract_image_url(None) == ""
        assert extract_image_url({}) == ""
        assert extract_image_url([]) == ""
