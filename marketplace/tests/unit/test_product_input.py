from decimal import Decimal

import pytest

from marketplace.catalog.domain.services.product_input import (
    build_color_variants,
    clean_url,
    parse_color_map,
    parse_decimal,
    parse_flag,
    parse_list,
    variant_colors,
)
from marketplace.categories import LMART, is_valid_category, normalize_category


@pytest.mark.unit
class TestParseList:
    def test_json_array(self):
        assert parse_list('["Red", " Blue ", ""]') == ["Red", "Blue"]

    def test_comma_string(self):
        assert parse_list("s, m ,l") == ["s", "m", "l"]

    def test_custom_separators(self):
        assert parse_list("green;red,gray", separators=",;") == ["green", "red", "gray"]

    def test_list_passthrough(self):
        assert parse_list(["a", " b", ""]) == ["a", "b"]

    def test_empty_values(self):
        assert parse_list(None) == []
        assert parse_list("") == []

    def test_broken_json_falls_back_to_split(self):
        assert parse_list("[red, blue") == ["[red", "blue"]


@pytest.mark.unit
class TestColorVariants:
    def test_colors_pair_with_images_by_index(self):
        variants = build_color_variants(["Red", "Blue", "Green"], ["u0", "u1"])

        assert variants == [
            {"color": "red", "images": ["u0"]},
            {"color": "blue", "images": ["u1"]},
            {"color": "green", "images": []},
        ]

    def test_color_map_wins_over_index_pairing(self):
        variants = build_color_variants(["ignored"], ["u0", "u1", "u2"], {"Red": [0, 2], "blue": "1, 9"})

        assert variants == [
            {"color": "red", "images": ["u0", "u2"]},
            {"color": "blue", "images": ["u1"]},
        ]

    def test_parse_color_map(self):
        assert parse_color_map('{"red": [0]}') == {"red": [0]}
        assert parse_color_map("not json") == {}
        assert parse_color_map("[1, 2]") == {}
        assert parse_color_map(None) == {}

    def test_variant_colors_handles_legacy_strings(self):
        assert variant_colors([{"color": "red", "images": []}, "blue", {"images": []}]) == ["red", "blue"]


@pytest.mark.unit
class TestScalarParsing:
    def test_parse_decimal(self):
        assert parse_decimal("12.50") == Decimal("12.50")
        assert parse_decimal(" ") is None
        assert parse_decimal(None) is None

    def test_parse_decimal_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_decimal("abc")
        with pytest.raises(ValueError):
            parse_decimal("NaN")

    def test_parse_flag_only_true_is_true(self):
        assert parse_flag("TRUE", default=False) is True
        assert parse_flag("yes", default=True) is False
        assert parse_flag("", default=True) is True
        assert parse_flag(None, default=False) is False

    def test_clean_url_strips_quotes(self):
        assert clean_url(" `'https://cdn.example.com/a.jpg'` ") == "https://cdn.example.com/a.jpg"


@pytest.mark.unit
class TestCategories:
    @pytest.mark.parametrize("raw", ["emart", "E-Mart", " lmart ", "L-MART"])
    def test_aliases_normalize_to_lmart(self, raw):
        assert normalize_category(raw) == LMART

    def test_other_categories_are_lowercased(self):
        assert normalize_category(" Printing ") == "printing"

    def test_validity(self):
        assert is_valid_category("emart") is True
        assert is_valid_category("news") is True
        assert is_valid_category("electronics") is False
        assert is_valid_category(None) is False
