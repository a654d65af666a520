"""Tests for StyleRecord and Catalogue."""

from __future__ import annotations

import pytest

from rum.errors import NotFoundError
from rum.model.style import Catalogue, OriginKind, StyleRecord


def _record(id: int = 0, name: str = "", enabled: bool = True, path: str = "/c/userContent.css") -> StyleRecord:
    return StyleRecord(
        id=id,
        name=name,
        uri="/tmp/style.css",
        origin_kind=OriginKind.LOCAL,
        target_path=path,
        enabled=enabled,
    )


def _catalogue(*ids: int) -> Catalogue:
    return Catalogue(chrome_path="/c", styles=[_record(id=i, name=f"style-{i}") for i in ids])


# ---------------------------------------------------------------------------
# next_id
# ---------------------------------------------------------------------------


class TestNextId:
    def test_fills_gap(self) -> None:
        assert _catalogue(0, 2).next_id() == 1

    def test_empty_catalogue_starts_at_zero(self) -> None:
        assert _catalogue().next_id() == 0

    def test_dense_ids_return_one_past_max(self) -> None:
        assert _catalogue(0, 1, 2).next_id() == 3

    def test_unsorted_ids(self) -> None:
        assert _catalogue(3, 0, 1).next_id() == 2

    def test_missing_zero(self) -> None:
        assert _catalogue(1, 2).next_id() == 0

    def test_does_not_mutate(self) -> None:
        catalogue = _catalogue(0, 2)
        catalogue.next_id()
        assert [s.id for s in catalogue.styles] == [0, 2]


# ---------------------------------------------------------------------------
# find_id
# ---------------------------------------------------------------------------


class TestFindId:
    def test_by_id(self) -> None:
        assert _catalogue(0, 1, 2).find_id("2") == 2

    def test_by_name(self) -> None:
        assert _catalogue(0, 1, 2).find_id("style-1") == 1

    def test_name_is_case_sensitive(self) -> None:
        with pytest.raises(NotFoundError):
            _catalogue(0, 1).find_id("STYLE-1")

    def test_first_matching_name_wins(self) -> None:
        catalogue = Catalogue(chrome_path="/c", styles=[_record(4, "dup"), _record(1, "dup")])
        assert catalogue.find_id("dup") == 4

    def test_numeric_name_when_id_unknown(self) -> None:
        catalogue = Catalogue(chrome_path="/c", styles=[_record(0, "42")])
        assert catalogue.find_id("42") == 0

    @pytest.mark.parametrize("token", ["1_0", "+1", " 1"])
    def test_only_plain_digits_are_ids(self, token) -> None:
        catalogue = Catalogue(chrome_path="/c", styles=[_record(1, "one"), _record(10, "ten"), _record(2, token)])
        assert catalogue.find_id(token) == 2

    def test_leading_zeros(self) -> None:
        assert _catalogue(0, 1, 2).find_id("002") == 2

    def test_very_long_number(self) -> None:
        with pytest.raises(NotFoundError):
            _catalogue(0).find_id("9" * 5000)

    def test_unknown_token(self) -> None:
        with pytest.raises(NotFoundError):
            _catalogue(0).find_id("nope")

    def test_unknown_id(self) -> None:
        with pytest.raises(NotFoundError):
            _catalogue(0).find_id("7")


# ---------------------------------------------------------------------------
# remove / toggle
# ---------------------------------------------------------------------------


class TestMutation:
    def test_remove_returns_record(self) -> None:
        catalogue = _catalogue(0, 1, 2)
        removed = catalogue.remove(1)
        assert removed.id == 1
        assert [s.id for s in catalogue.styles] == [0, 2]

    def test_remove_unknown(self) -> None:
        with pytest.raises(NotFoundError):
            _catalogue(0).remove(5)

    def test_toggle_disables(self) -> None:
        catalogue = _catalogue(0)
        assert catalogue.toggle(0) is False
        assert catalogue.styles[0].enabled is False

    def test_toggle_enables(self) -> None:
        catalogue = Catalogue(chrome_path="/c", styles=[_record(3, enabled=False)])
        assert catalogue.toggle(3) is True
        assert catalogue.styles[0].enabled is True

    def test_toggle_unknown(self) -> None:
        with pytest.raises(NotFoundError):
            _catalogue().toggle(15)


class TestPaths:
    def test_user_content(self) -> None:
        assert _catalogue().target_path() == "/c/userContent.css"

    def test_user_chrome(self) -> None:
        assert _catalogue().target_path(chrome=True) == "/c/userChrome.css"

    def test_is_chrome(self) -> None:
        assert _record(path="/c/userChrome.css").is_chrome
        assert not _record(path="/c/userContent.css").is_chrome

    def test_css_not_part_of_equality(self) -> None:
        a = _record()
        b = _record()
        b.css = "body {}"
        assert a == b
