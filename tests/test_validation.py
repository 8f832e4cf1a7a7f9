"""Tests de validación de la selección de intereses."""

import pytest
from pydantic import ValidationError

from qixi_match.models import Category, Interest
from qixi_match.validation import (
    InterestValidationError,
    parse_interests,
    validate_importance,
    validate_interests,
)


def _raw(interest_id="movies", name="看电影", category="entertainment", **extra):
    return {"id": interest_id, "name": name, "category": category, "icon": "🎬", **extra}


class TestValidateImportance:

    @pytest.mark.parametrize("value, expected", [(1, 1), (5, 5), ("3", 3), (" 4 ", 4), (2.0, 2)])
    def test_valid_values(self, value, expected):
        assert validate_importance(value) == expected

    @pytest.mark.parametrize("value", [0, 6, -1, "abc", "", None, True, 2.5])
    def test_invalid_values(self, value):
        with pytest.raises(InterestValidationError):
            validate_importance(value)


class TestValidateInterests:

    def test_valid_selection(self, catalog, selection):
        interests = selection("movies", "hiking")
        assert validate_interests(interests, catalog) == interests

    def test_empty_selection(self, catalog):
        with pytest.raises(InterestValidationError, match="至少选择一个兴趣"):
            validate_interests([], catalog)

    def test_too_many_interests(self, catalog):
        interests = list(catalog.interests[:21])
        with pytest.raises(InterestValidationError, match="最多只能选择20个兴趣"):
            validate_interests(interests, catalog)

    def test_custom_cap(self, catalog, selection):
        with pytest.raises(InterestValidationError):
            validate_interests(selection("movies", "music"), catalog, max_interests=1)

    def test_id_must_belong_to_its_category(self, catalog):
        misplaced = Interest(id="hiking", name="徒步", category=Category.ENTERTAINMENT)
        with pytest.raises(InterestValidationError, match="徒步"):
            validate_interests([misplaced], catalog)


class TestParseInterests:

    def test_parses_raw_dicts(self, catalog):
        interests = parse_interests([_raw(importance=4), _raw("coffee", "咖啡", "food")], catalog)
        assert [i.id for i in interests] == ["movies", "coffee"]
        assert interests[0].importance == 4
        assert interests[1].importance == 1
        assert interests[1].category == Category.FOOD

    def test_null_importance_defaults_to_one(self, catalog):
        interests = parse_interests([_raw(importance=None)], catalog)
        assert interests[0].importance == 1

    def test_importance_out_of_range(self, catalog):
        with pytest.raises(InterestValidationError, match="重要程度"):
            parse_interests([_raw(importance=0)], catalog)

    def test_unknown_category(self, catalog):
        with pytest.raises(InterestValidationError, match="nightlife") as excinfo:
            parse_interests([_raw(category="nightlife")], catalog)
        assert isinstance(excinfo.value.__cause__, ValidationError)

    def test_missing_fields(self, catalog):
        raw = _raw()
        del raw["name"]
        with pytest.raises(InterestValidationError, match="缺少必要字段"):
            parse_interests([raw], catalog)

    def test_unknown_id(self, catalog):
        with pytest.raises(InterestValidationError, match="不存在"):
            parse_interests([_raw("karaoke", "唱K")], catalog)

    @pytest.mark.parametrize("raw", [None, "movies", {"id": "movies"}, ["movies"]])
    def test_bad_structure(self, catalog, raw):
        with pytest.raises(InterestValidationError, match="格式不正确"):
            parse_interests(raw, catalog)

    def test_size_is_checked_before_structure(self, catalog):
        raw = [_raw() for _ in range(20)] + [{"id": "movies"}]
        with pytest.raises(InterestValidationError, match="最多只能选择20个兴趣"):
            parse_interests(raw, catalog, max_interests=20)

    def test_empty_list_reported_before_anything_else(self, catalog):
        with pytest.raises(InterestValidationError, match="至少选择一个兴趣"):
            parse_interests(iter([]), catalog)

    def test_non_iterable_input(self, catalog):
        with pytest.raises(InterestValidationError, match="格式不正确"):
            parse_interests(42, catalog)

    def test_is_a_value_error(self, catalog):
        with pytest.raises(ValueError):
            parse_interests([], catalog)
