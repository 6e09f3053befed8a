"""Tests for hand classification and comparison.

Test coverage:
- Every category in the cascade, including the ace-low wheel
- Cascade precedence (royal before straight flush, full house before trips...)
- Category ordering and labels
- Comparison: category first, then raw sorted values, ties
"""

import pytest

from mini_poker.rules import (
    HandCategory,
    CATEGORY_LABELS,
    category_strength,
    classify,
    compare,
    make_hand_from_string,
)
from mini_poker.rules.evaluation import derive_facts


def _classify(s: str) -> HandCategory:
    return classify(make_hand_from_string(s))


def _compare(a: str, b: str) -> int:
    return compare(make_hand_from_string(a), make_hand_from_string(b))


class TestHandCategory:
    """Test category ordering and display labels."""

    def test_strength_order(self):
        expected_order = [
            HandCategory.HIGH_CARD,
            HandCategory.PAIR,
            HandCategory.TWO_PAIR,
            HandCategory.THREE_OF_A_KIND,
            HandCategory.STRAIGHT,
            HandCategory.FLUSH,
            HandCategory.FULL_HOUSE,
            HandCategory.FOUR_OF_A_KIND,
            HandCategory.STRAIGHT_FLUSH,
            HandCategory.ROYAL_FLUSH,
        ]
        for i in range(len(expected_order) - 1):
            assert expected_order[i] < expected_order[i + 1]

    def test_strength_ordinals(self):
        assert category_strength(HandCategory.HIGH_CARD) == 0
        assert category_strength(HandCategory.ROYAL_FLUSH) == 9

    def test_labels(self):
        assert HandCategory.THREE_OF_A_KIND.label == "Three of a Kind"
        assert str(HandCategory.ROYAL_FLUSH) == "Royal Flush"
        assert set(CATEGORY_LABELS) == set(HandCategory)


class TestClassify:
    """Test that each category is recognised."""

    @pytest.mark.parametrize(
        "cards,expected",
        [
            ("AH 5D 9C 2S 7H", HandCategory.HIGH_CARD),
            ("10H 10D 9C 2S 7H", HandCategory.PAIR),
            ("10H 10D 7C 7S 2H", HandCategory.TWO_PAIR),
            ("10H 10D 10C 2S 7H", HandCategory.THREE_OF_A_KIND),
            ("3H 4D 5C 6S 7H", HandCategory.STRAIGHT),
            ("2H 5H 9H KH 7H", HandCategory.FLUSH),
            ("10H 10D 10C 7S 7H", HandCategory.FULL_HOUSE),
            ("10H 10D 10C 10S 7H", HandCategory.FOUR_OF_A_KIND),
            ("3H 4H 5H 6H 7H", HandCategory.STRAIGHT_FLUSH),
            ("10H JH QH KH AH", HandCategory.ROYAL_FLUSH),
        ],
    )
    def test_categories(self, cards, expected):
        assert _classify(cards) == expected

    def test_royal_flush_order_independent(self):
        assert _classify("AH KH QH JH 10H") == HandCategory.ROYAL_FLUSH

    def test_ace_low_straight(self):
        assert _classify("AH 2D 3C 4S 5H") == HandCategory.STRAIGHT

    def test_ace_low_straight_flush(self):
        assert _classify("AS 2S 3S 4S 5S") == HandCategory.STRAIGHT_FLUSH

    def test_broadway_straight(self):
        assert _classify("10H JD QC KS AH") == HandCategory.STRAIGHT

    def test_no_wraparound_straight(self):
        assert _classify("QH KD AC 2S 3H") == HandCategory.HIGH_CARD

    def test_near_straight_is_high_card(self):
        assert _classify("3H 4D 5C 6S 8H") == HandCategory.HIGH_CARD

    def test_pair_with_royal_ranks(self):
        assert _classify("AH AS KH QH JH") == HandCategory.PAIR

    def test_full_house_beats_trips_in_cascade(self):
        assert _classify("2H 2D 2C AS AH") == HandCategory.FULL_HOUSE

    def test_deterministic(self):
        hand = make_hand_from_string("10H 10D 7C 7S 2H")
        assert classify(hand) == classify(hand)


class TestDerivedFacts:
    """Test the facts computed once per hand."""

    def test_facts_for_wheel(self):
        facts = derive_facts(make_hand_from_string("5H 4D 3C 2S AH"))
        assert facts.values == (2, 3, 4, 5, 14)
        assert facts.is_straight
        assert not facts.is_flush

    def test_facts_for_full_house(self):
        facts = derive_facts(make_hand_from_string("10H 10D 10C 7S 7H"))
        assert facts.counts == {10: 3, 7: 2}
        assert facts.has_multiplicity(3)
        assert facts.multiplicity_count(2) == 1
        assert not facts.is_straight


class TestCompare:
    """Test hand comparison."""

    def test_trips_lose_to_quads(self):
        assert _compare("10H 10D 10C 2S 7H", "9H 9D 9C 9S 7H") == -1
        assert _compare("9H 9D 9C 9S 7H", "10H 10D 10C 2S 7H") == 1

    def test_royal_flush_tie(self):
        assert _compare("AH KH QH JH 10H", "AD KD QD JD 10D") == 0

    def test_flush_high_card_decides(self):
        assert _compare("AH 9H 7H 5H 2H", "KD 9D 7D 5D 2D") == 1

    def test_high_card_kicker(self):
        assert _compare("AH KD 9C 5S 3H", "AS KC 9D 5H 2D") == 1

    def test_same_values_different_suits_tie(self):
        assert _compare("AH KD 9C 5S 3H", "AS KC 9D 5H 3D") == 0

    def test_higher_straight_wins(self):
        assert _compare("4H 5D 6C 7S 8H", "3H 4D 5C 6S 7D") == 1

    def test_wheel_compares_with_ace_high(self):
        # raw sorted values: A-5-4-3-2 puts the ace first
        assert _compare("AH 2D 3C 4S 5H", "2S 3H 4D 5C 6S") == 1

    def test_pair_compared_by_raw_values(self):
        # nines with an ace beat tens with a king: no kicker grouping
        assert _compare("9H 9D AC 3S 2H", "10H 10D KC 4S 3D") == 1

    def test_two_pair_compared_by_raw_values(self):
        assert _compare("KH KD 2C 2S AH", "KS KC QD QH 3D") == 1

    def test_antisymmetric(self):
        a = "AH KD 9C 5S 3H"
        b = "QS QC 9D 5H 2D"
        assert _compare(a, b) == -_compare(b, a)

    def test_low_pair_beats_high_card(self):
        assert _compare("2H 2D 5C 7S 9H", "AH KD 6C 8S 10D") == 1
