"""
Tests for hand evaluation.
"""

import pytest
from pokertable.core.card import Card, Rank, Suit, parse_cards
from pokertable.core.errors import CardValidationError
from pokertable.core.hand import (
    evaluate, best_hand, compare_hands, describe_hand, HandCategory, HandRank,
)


class TestHandRanking:
    """Tests for hand ranking against literal fixtures."""

    @pytest.mark.parametrize("cards,expected", [
        ("Ac Kc Qc Jc 10c", {"name": "royal flush"}),
        ("3h 4h 5h 6h 7h", {"name": "straight flush", "from": "3", "to": "7"}),
        ("3h Kh Kc Ks Kd", {"name": "4 of a kind", "of": "king", "kicker": "3"}),
        ("3h 3d 10h 10c 10s", {"name": "full house", "of": "10", "and": "3"}),
        ("Qd 10d 7d 4d 2d", {
            "name": "flush", "high": "queen", "kickers": ["10", "7", "4", "2"],
        }),
        ("Ac 2d 3h 4s 5h", {"name": "straight", "from": "ace", "to": "5"}),
        ("Ac 5h 2d 2h 2s", {"name": "3 of a kind", "of": "2", "kickers": ["ace", "5"]}),
        ("Jc Jh 4d 4h 9s", {"name": "2 pair", "of": "jack", "and": "4", "kicker": "9"}),
        ("3c Jh 4d 4h 9s", {"name": "1 pair", "of": "4", "kickers": ["jack", "9", "3"]}),
        ("3c Jh 4d Kh 9s", {
            "name": "high card", "rank": "king", "kickers": ["jack", "9", "4", "3"],
        }),
    ])
    def test_fixtures(self, cards, expected):
        """Each category is recognized with its tie-break fields."""
        assert evaluate(parse_cards(cards)).to_dict() == expected

    def test_royal_flush(self, royal_flush):
        """Royal flush carries nothing but its name."""
        result = evaluate(royal_flush)
        assert result.name == HandCategory.ROYAL_FLUSH
        assert result.to_dict() == {"name": "royal flush"}

    def test_straight_flush(self, straight_flush):
        """Straight flush reports its run."""
        result = evaluate(straight_flush)
        assert result.name == HandCategory.STRAIGHT_FLUSH
        assert result.from_ == Rank.THREE
        assert result.to == Rank.SEVEN

    def test_wheel_straight(self, wheel_straight):
        """The wheel runs from ace to 5."""
        result = evaluate(wheel_straight)
        assert result.name == HandCategory.STRAIGHT
        assert result.get("from") == "ace"
        assert result.get("to") == "5"

    def test_steel_wheel(self):
        """A suited wheel is a straight flush, not a royal flush."""
        result = evaluate(parse_cards("Ah 2h 3h 4h 5h"))
        assert result.to_dict() == {"name": "straight flush", "from": "ace", "to": "5"}

    def test_broadway_straight(self):
        """10 to ace off-suit is a plain straight."""
        result = evaluate(parse_cards("Ac Kd Qh Js 10c"))
        assert result.to_dict() == {"name": "straight", "from": "10", "to": "ace"}

    def test_no_wraparound_straight(self):
        """Q-K-A-2-3 is not a straight."""
        result = evaluate(parse_cards("Qc Kd Ah 2s 3c"))
        assert result.name == HandCategory.HIGH_CARD
        assert result.rank == Rank.ACE

    def test_ace_high_in_kickers(self):
        """Ace is never low outside straights."""
        result = evaluate(parse_cards("2c 2d Ah 7s 3c"))
        assert result.kickers == (Rank.ACE, Rank.SEVEN, Rank.THREE)

    def test_accepts_wire_mappings(self):
        """Cards may be passed in their wire form."""
        cards = [
            {"rank": "queen", "suit": "clubs"},
            {"rank": "jack", "suit": "clubs"},
            {"rank": "ace", "suit": "clubs"},
            {"rank": "10", "suit": "clubs"},
            {"rank": "king", "suit": "clubs"},
        ]
        assert evaluate(cards).name == HandCategory.ROYAL_FLUSH


class TestHandValidation:
    """Tests for evaluator input checks."""

    def test_too_few_cards(self):
        with pytest.raises(CardValidationError):
            evaluate(parse_cards("Ac Kc Qc Jc"))

    def test_too_many_cards(self):
        with pytest.raises(CardValidationError):
            evaluate(parse_cards("Ac Kc Qc Jc 10c 9c"))

    def test_bad_suit(self):
        """A misspelled suit is rejected."""
        cards = [{"rank": "4", "suit": "splades"}] + [
            c.to_dict() for c in parse_cards("2d 5h 3h Ac")
        ]
        with pytest.raises(CardValidationError):
            evaluate(cards)

    def test_duplicate_cards(self):
        with pytest.raises(CardValidationError):
            evaluate(parse_cards("Ac Ac Qc Jc 10c"))

    def test_not_a_sequence(self):
        with pytest.raises(CardValidationError):
            evaluate("Ac Kc Qc Jc 10c")


class TestHandComparison:
    """Tests for comparing hands."""

    def test_category_order(self):
        """Sorting by key orders every category best first."""
        hands = [evaluate(parse_cards(s)) for s in (
            "3c Jh 4d 4h 9s",
            "3h 3d 10h 10c 10s",
            "Ac Kc Qc Jc 10c",
            "3c Jh 4d Kh 9s",
            "Ac 5h 2d 2h 2s",
            "Jc Jh 4d 4h 9s",
            "3h 4h 5h 6h 7h",
            "Qd 10d 7d 4d 2d",
            "3h Kh Kc Ks Kd",
            "Ac 2d 3h 4s 5h",
        )]
        ordered = sorted(hands, key=HandRank.key, reverse=True)
        assert [h.name for h in ordered] == list(HandCategory)

    def test_flush_beats_straight(self):
        flush = evaluate(parse_cards("Ks Js 9s 7s 2s"))
        straight = evaluate(parse_cards("As Kh Qd Jc 10h"))
        assert compare_hands(flush, straight) == -1
        assert compare_hands(straight, flush) == 1

    def test_wheel_loses_to_six_high(self):
        """The wheel is the lowest straight."""
        wheel = evaluate(parse_cards("Ac 2d 3h 4s 5h"))
        six_high = evaluate(parse_cards("2c 3d 4h 5s 6h"))
        assert compare_hands(six_high, wheel) == -1

    def test_kicker_decides(self):
        """Same pair, different kicker."""
        ace_king = evaluate(parse_cards("As Ah Kd 5c 2s"))
        ace_queen = evaluate(parse_cards("Ad Ac Qh 5s 2h"))
        assert compare_hands(ace_king, ace_queen) == -1

    def test_flush_kickers_decide(self):
        """Flushes with the same high card compare further down."""
        higher = evaluate(parse_cards("Qd 10d 7d 4d 3d"))
        lower = evaluate(parse_cards("Qh 10h 7h 4h 2h"))
        assert compare_hands(higher, lower) == -1

    def test_two_pair_kicker(self):
        a = evaluate(parse_cards("Jc Jh 4d 4h 9s"))
        b = evaluate(parse_cards("Jd Js 4c 4s 8s"))
        assert compare_hands(a, b) == -1

    def test_tie(self):
        """Identical ranks in different suits tie."""
        a = evaluate(parse_cards("As Kh Qd Jc 9s"))
        b = evaluate(parse_cards("Ah Kd Qc Js 9h"))
        assert compare_hands(a, b) == 0


class TestBestHand:
    """Tests for picking the best 5 out of 7."""

    def test_full_house_from_seven(self):
        cards = parse_cards("As Ah Ad Kc Ks 2h 3d")
        result, best = best_hand(cards)
        assert result.to_dict() == {"name": "full house", "of": "ace", "and": "king"}
        assert len(best) == 5
        assert Card(Rank.TWO, Suit.HEARTS) not in best

    def test_flush_from_six_suited(self):
        cards = parse_cards("As Ks Qs Js 9s 2s 3h")
        result, _ = best_hand(cards)
        assert result.name == HandCategory.FLUSH
        assert result.high == Rank.ACE
        assert result.kickers == (Rank.KING, Rank.QUEEN, Rank.JACK, Rank.NINE)

    def test_five_cards_is_plain_evaluate(self, royal_flush):
        result, best = best_hand(royal_flush)
        assert result == evaluate(royal_flush)
        assert set(best) == set(royal_flush)

    def test_eight_cards_rejected(self):
        with pytest.raises(CardValidationError):
            best_hand(parse_cards("As Ks Qs Js 9s 2s 3h 4h"))


class TestHandDescription:
    """Tests for hand description."""

    @pytest.mark.parametrize("cards,text", [
        ("Ac Kc Qc Jc 10c", "Royal Flush"),
        ("3h 4h 5h 6h 7h", "Straight Flush, 7 high"),
        ("3h Kh Kc Ks Kd", "Four Kings"),
        ("3h 3d 10h 10c 10s", "Full House, 10s over 3s"),
        ("Qd 10d 7d 4d 2d", "Flush, Queen high"),
        ("Ac 2d 3h 4s 5h", "Straight, 5 high"),
        ("Ac 5h 2d 2h 2s", "Three 2s"),
        ("Jc Jh 4d 4h 9s", "Two Pair, Jacks and 4s"),
        ("3c Jh 4d 4h 9s", "Pair of 4s"),
        ("3c Jh 4d Kh 9s", "King High"),
    ])
    def test_descriptions(self, cards, text):
        assert describe_hand(evaluate(parse_cards(cards))) == text
