"""Tests for use-code matching and the use catalog."""

from __future__ import annotations

import itertools

import pytest

from firecode.uses import ALL_USE_CODES, TableUseCatalog, code_matches, is_composite

ITEM_PREFIXES = sorted({code[:2] for code in ALL_USE_CODES})


# ---------------------------------------------------------------------------
# Prefix matching
# ---------------------------------------------------------------------------


class TestCodeMatches:
    def test_longer_code_matches_shorter_prefix(self) -> None:
        assert code_matches("11", ["1"]) is True

    def test_shorter_code_does_not_match_longer_prefix(self) -> None:
        assert code_matches("2", ["11"]) is False

    def test_subdivision_matches_item(self) -> None:
        assert code_matches("06_i_2", ["06"]) is True
        assert code_matches("06_ro_2", ["06_ro"]) is True

    def test_sibling_subdivision_does_not_match(self) -> None:
        assert code_matches("06_ro_2", ["06_i"]) is False
        assert code_matches("02_ni", ["02_i"]) is False

    def test_none_and_empty_never_match(self) -> None:
        assert code_matches(None, ["01"]) is False
        assert code_matches("", ["01", ""]) is False

    def test_empty_prefix_list(self) -> None:
        assert code_matches("01_i", []) is False

    def test_any_prefix_suffices(self) -> None:
        assert code_matches("14", ["01", "14"]) is True

    def test_no_case_folding(self) -> None:
        assert code_matches("06_RO_1", ["06_ro"]) is False

    @pytest.mark.parametrize("code", ALL_USE_CODES)
    def test_code_matches_only_its_own_item(self, code: str) -> None:
        own = code[:2]
        assert code_matches(code, [own])
        for other in ITEM_PREFIXES:
            if other != own:
                assert not code_matches(code, [other]), f"{code} matched item {other}"

    def test_no_code_is_a_prefix_of_another(self) -> None:
        for a, b in itertools.permutations(ALL_USE_CODES, 2):
            assert not b.startswith(a), f"{a} is a prefix of {b}"

    @pytest.mark.parametrize("code", ALL_USE_CODES)
    def test_every_code_matches_itself(self, code: str) -> None:
        assert code_matches(code, [code])


class TestIsComposite:
    @pytest.mark.parametrize("code", ["16_i", "16_ro"])
    def test_composite_codes(self, code: str) -> None:
        assert is_composite(code)

    @pytest.mark.parametrize("code", ["16_2", "16_3", "15", "01_i", None, ""])
    def test_non_composite_codes(self, code: str | None) -> None:
        assert not is_composite(code)

    def test_only_two_composite_codes_in_vocabulary(self) -> None:
        assert [c for c in ALL_USE_CODES if is_composite(c)] == ["16_i", "16_ro"]


# ---------------------------------------------------------------------------
# Use catalog
# ---------------------------------------------------------------------------


class TestTableUseCatalog:
    def test_every_code_has_a_label(self) -> None:
        catalog = TableUseCatalog()
        for code in ALL_USE_CODES:
            assert catalog.display_name_for(code) != code

    def test_known_label(self) -> None:
        assert TableUseCatalog().display_name_for("14") == "(14) Warehouse"

    def test_unknown_code_renders_as_itself(self) -> None:
        assert TableUseCatalog().display_name_for("99_x") == "99_x"

    def test_missing_code(self) -> None:
        assert TableUseCatalog().display_name_for(None) == "unknown"
        assert TableUseCatalog().display_name_for("") == "unknown"

    def test_overrides(self) -> None:
        catalog = TableUseCatalog(labels={"14": "Storehouse"})
        assert catalog.display_name_for("14") == "Storehouse"
        assert catalog.display_name_for("15") == "(15) Other business premises"
