# tests/unit/core/test_triad.py
# Target: antifragile/core/triad.py

import numpy as np
import pytest

from antifragile.core.exceptions import InvalidTriadValue, ParseTriadError, TriadError
from antifragile.core.triad import TRIAD_ALL, Triad


class TestMembers:
    def test_exactly_three_members(self):
        assert set(Triad) == {Triad.FRAGILE, Triad.ROBUST, Triad.ANTIFRAGILE}

    def test_values_are_lowercase_tokens(self):
        assert {t.value for t in Triad} == {"fragile", "robust", "antifragile"}

    def test_exact_lookup_by_token(self):
        assert Triad("robust") is Triad.ROBUST

    def test_triad_all_in_rank_order(self):
        assert TRIAD_ALL == (Triad.FRAGILE, Triad.ROBUST, Triad.ANTIFRAGILE)

    def test_iter_yields_rank_order(self):
        assert list(Triad.iter()) == list(TRIAD_ALL)

    def test_default_is_robust(self):
        assert Triad.default() is Triad.ROBUST


class TestRank:
    def test_ranks(self):
        assert Triad.FRAGILE.rank() == 0
        assert Triad.ROBUST.rank() == 1
        assert Triad.ANTIFRAGILE.rank() == 2

    def test_rank_is_bijection(self):
        assert sorted(t.rank() for t in Triad) == [0, 1, 2]

    def test_int_conversion_matches_rank(self):
        for t in Triad:
            assert int(t) == t.rank()

    def test_to_byte_matches_rank(self):
        for t in Triad:
            assert t.to_byte() == t.rank()


class TestOrdering:
    def test_strict_chain(self):
        assert Triad.FRAGILE < Triad.ROBUST < Triad.ANTIFRAGILE

    def test_reverse_comparisons(self):
        assert Triad.ANTIFRAGILE > Triad.FRAGILE
        assert Triad.ROBUST >= Triad.ROBUST
        assert Triad.ROBUST <= Triad.ROBUST

    def test_sort_any_order(self):
        shuffled = [Triad.ANTIFRAGILE, Triad.FRAGILE, Triad.ROBUST, Triad.FRAGILE]
        assert sorted(shuffled) == [
            Triad.FRAGILE, Triad.FRAGILE, Triad.ROBUST, Triad.ANTIFRAGILE,
        ]

    def test_max_and_min(self):
        assert max(Triad) is Triad.ANTIFRAGILE
        assert min(Triad) is Triad.FRAGILE

    def test_comparison_with_other_type_raises(self):
        with pytest.raises(TypeError):
            Triad.ROBUST < 1  # noqa: B015

    def test_equal_members_hash_equal(self):
        assert len({Triad.ROBUST, Triad.ROBUST, Triad.FRAGILE}) == 2


class TestPredicates:
    @pytest.mark.parametrize("member", list(Triad))
    def test_exactly_one_predicate_true(self, member):
        flags = [member.is_fragile(), member.is_robust(), member.is_antifragile()]
        assert flags.count(True) == 1

    def test_predicates_match_member(self):
        assert Triad.ANTIFRAGILE.is_antifragile()
        assert Triad.FRAGILE.is_fragile()
        assert Triad.ROBUST.is_robust()


class TestOpposite:
    def test_swaps_extremes(self):
        assert Triad.ANTIFRAGILE.opposite() is Triad.FRAGILE
        assert Triad.FRAGILE.opposite() is Triad.ANTIFRAGILE

    def test_robust_is_fixed_point(self):
        assert Triad.ROBUST.opposite() is Triad.ROBUST

    @pytest.mark.parametrize("member", list(Triad))
    def test_involution(self, member):
        assert member.opposite().opposite() is member


class TestFromByte:
    @pytest.mark.parametrize("member", list(Triad))
    def test_inverse_of_to_byte(self, member):
        assert Triad.from_byte(member.to_byte()) is member

    @pytest.mark.parametrize("value", [3, 255, -1, 1000])
    def test_out_of_range_rejected(self, value):
        with pytest.raises(InvalidTriadValue) as exc_info:
            Triad.from_byte(value)
        assert exc_info.value.value == value

    def test_message_names_value(self):
        with pytest.raises(InvalidTriadValue) as exc_info:
            Triad.from_byte(42)
        assert str(exc_info.value) == "invalid triad value: 42 (expected 0, 1, or 2)"

    def test_bool_rejected(self):
        with pytest.raises(InvalidTriadValue):
            Triad.from_byte(True)

    def test_non_int_rejected(self):
        with pytest.raises(InvalidTriadValue):
            Triad.from_byte(1.0)

    @pytest.mark.parametrize(
        "value, expected",
        [(np.uint8(2), Triad.ANTIFRAGILE), (np.int64(0), Triad.FRAGILE), (np.int32(1), Triad.ROBUST)],
    )
    def test_numpy_integers_accepted(self, value, expected):
        assert Triad.from_byte(value) is expected

    def test_numpy_integer_out_of_range_rejected(self):
        with pytest.raises(InvalidTriadValue):
            Triad.from_byte(np.uint8(7))

    def test_string_rejected(self):
        with pytest.raises(InvalidTriadValue):
            Triad.from_byte("1")

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            Triad.from_byte(7)


class TestParse:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("antifragile", Triad.ANTIFRAGILE),
            ("ANTIFRAGILE", Triad.ANTIFRAGILE),
            ("AntiFragile", Triad.ANTIFRAGILE),
            ("fragile", Triad.FRAGILE),
            ("Fragile", Triad.FRAGILE),
            ("robust", Triad.ROBUST),
            ("ROBUST", Triad.ROBUST),
        ],
    )
    def test_case_insensitive(self, text, expected):
        assert Triad.parse(text) is expected

    @pytest.mark.parametrize("text", ["invalid", "", " robust", "robust ", "anti-fragile"])
    def test_unknown_rejected(self, text):
        with pytest.raises(ParseTriadError):
            Triad.parse(text)

    def test_non_ascii_rejected(self):
        with pytest.raises(ParseTriadError):
            Triad.parse("robüst")

    def test_non_str_rejected(self):
        with pytest.raises(ParseTriadError):
            Triad.parse(1)

    def test_error_does_not_echo_input(self):
        with pytest.raises(ParseTriadError) as exc_info:
            Triad.parse("secret-token")
        assert "secret-token" not in str(exc_info.value)
        assert exc_info.value.value is None

    @pytest.mark.parametrize("member", list(Triad))
    def test_round_trip_through_token(self, member):
        assert Triad.parse(member.as_str()) is member

    def test_parse_error_is_triad_error(self):
        with pytest.raises(TriadError):
            Triad.parse("nope")


class TestText:
    def test_as_str(self):
        assert Triad.ANTIFRAGILE.as_str() == "antifragile"
        assert Triad.FRAGILE.as_str() == "fragile"
        assert Triad.ROBUST.as_str() == "robust"

    def test_description_mentions_volatility(self):
        assert str(Triad.ANTIFRAGILE) == "Antifragile (benefits from volatility)"
        assert str(Triad.FRAGILE) == "Fragile (harmed by volatility)"
        assert str(Triad.ROBUST) == "Robust (unaffected by volatility)"

    def test_description_property_matches_str(self):
        for t in Triad:
            assert t.description == str(t)
