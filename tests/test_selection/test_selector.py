"""Tests for the WeightedSelector."""

from __future__ import annotations

import logging

import pytest

from weighted_picker.exceptions import (
    NoEntriesError,
    SelectionError,
    WeightOverflowError,
    ZeroTotalWeightError,
)
from weighted_picker.parsing.entries import parse_entries
from weighted_picker.parsing.types import Entry
from weighted_picker.random.base import RandomSource
from weighted_picker.random.fixed import FixedSequenceSource
from weighted_picker.selection.selector import WeightedSelector, pick
from weighted_picker.selection.types import SelectionResult


class _ConstantSource(RandomSource):
    """Returns the same value forever, even values a real source never would."""

    def __init__(self, value: float) -> None:
        self._value = value

    @property
    def name(self) -> str:
        return "constant"

    @property
    def is_available(self) -> bool:
        return True

    def random(self) -> float:
        return self._value

    def close(self) -> None:
        pass


class TestWeightedSelector:
    """Tests for cumulative-interval selection."""

    @pytest.mark.parametrize(
        ("u", "expected"),
        [
            (0.0, "A"),  # value 0.0 in [0, 1)
            (0.24, "A"),  # value 0.96 in [0, 1)
            (0.25, "B"),  # value 1.0 is the boundary, belongs to [1, 4)
            (0.5, "B"),
            (0.999, "B"),
        ],
    )
    def test_interval_membership(
        self, one_to_three: list[Entry], u: float, expected: str
    ) -> None:
        selector = WeightedSelector(FixedSequenceSource([u]))
        result = selector.select(one_to_three)
        assert result.name == expected
        assert result.value == pytest.approx(u * 4.0)
        assert result.total == 4.0
        assert result.fallback is False

    def test_sequence_of_draws(self) -> None:
        """Each draw consumes one value and maps to the hand-computed interval."""
        entries = [Entry("A", 2.0), Entry("B", 1.0), Entry("C", 1.0)]
        # total 4: A=[0,2) B=[2,3) C=[3,4)
        source = FixedSequenceSource([0.1, 0.49, 0.5, 0.7, 0.75, 0.99])
        selector = WeightedSelector(source)
        names = [selector.select(entries).name for _ in range(6)]
        assert names == ["A", "A", "B", "B", "C", "C"]
        assert source.consumed == 6

    def test_zero_weight_entries_never_chosen(self) -> None:
        entries = [Entry("A", 0.0), Entry("B", 1.0), Entry("C", 0.0), Entry("D", 1.0)]
        source = FixedSequenceSource([0.0, 0.4999, 0.5, 0.9999])
        selector = WeightedSelector(source)
        names = [selector.select(entries).name for _ in range(4)]
        assert names == ["B", "B", "D", "D"]

    def test_trailing_zero_weight(self) -> None:
        entries = [Entry("A", 1.0), Entry("Z", 0.0)]
        result = WeightedSelector(FixedSequenceSource([0.9999])).select(entries)
        assert result.name == "A"

    def test_single_entry(self) -> None:
        result = WeightedSelector(FixedSequenceSource([0.7])).select([Entry("Only", 0.3)])
        assert result.name == "Only"
        assert result.index == 0
        assert result.quality == 0.3

    def test_result_fields(self) -> None:
        entries = [Entry("A", 1.0), Entry("B", 3.0)]
        result = WeightedSelector(FixedSequenceSource([0.5])).select(entries)
        assert result == SelectionResult(
            name="B", index=1, quality=3.0, value=2.0, total=4.0, fallback=False
        )

    def test_duplicate_names_report_position(self) -> None:
        entries = [Entry("A", 1.0), Entry("A", 1.0)]
        result = WeightedSelector(FixedSequenceSource([0.75])).select(entries)
        assert result.index == 1

    def test_no_entries(self) -> None:
        source = FixedSequenceSource([0.5])
        with pytest.raises(NoEntriesError, match="No entries"):
            WeightedSelector(source).select([])
        assert source.consumed == 0

    def test_zero_total_weight(self) -> None:
        source = FixedSequenceSource([0.5])
        with pytest.raises(ZeroTotalWeightError, match="greater than 0"):
            WeightedSelector(source).select([Entry("A", 0.0), Entry("B", 0.0)])
        assert source.consumed == 0

    def test_errors_share_a_base(self) -> None:
        with pytest.raises(SelectionError):
            WeightedSelector(FixedSequenceSource([0.5])).select([])

    def test_total_overflowing_to_infinity(self) -> None:
        """Finite weights whose sum overflows are rejected, not drawn with a bias."""
        entries = parse_entries(["-q1e308", "A", "-q1e308", "B"])
        source = FixedSequenceSource([0.25])
        with pytest.raises(WeightOverflowError, match="1e\\+308"):
            WeightedSelector(source).select(entries)
        assert source.consumed == 0

    def test_largest_finite_total_still_draws(self) -> None:
        entries = [Entry("A", 8e307), Entry("B", 8e307)]
        selector = WeightedSelector(FixedSequenceSource([0.25, 0.75]))
        first = selector.select(entries)
        second = selector.select(entries)
        assert (first.name, second.name) == ("A", "B")
        assert first.fallback is False
        assert second.fallback is False
        assert first.total == 1.6e308

    @pytest.mark.parametrize(
        ("u", "expected"),
        [(0.0, "tiny"), (1e-301, "huge"), (0.5, "huge"), (0.999, "huge")],
    )
    def test_extreme_weight_range(self, u: float, expected: str) -> None:
        """A weight far below the others keeps its own non-empty interval."""
        entries = [Entry("tiny", 1e-300), Entry("huge", 1e300), Entry("zero", 0.0)]
        result = WeightedSelector(FixedSequenceSource([u])).select(entries)
        assert result.name == expected
        assert result.fallback is False

    def test_value_at_total_falls_back_to_last_weighted_entry(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A value at the upper bound matches no interval; the guard picks the last weighted entry."""
        entries = [Entry("A", 1.0), Entry("B", 2.0), Entry("C", 0.0)]
        with caplog.at_level(logging.WARNING, logger="weighted_picker"):
            result = WeightedSelector(_ConstantSource(1.0)).select(entries)
        assert result.name == "B"
        assert result.fallback is True
        assert "did not match any entry" in caplog.text

    def test_source_property(self) -> None:
        source = FixedSequenceSource([0.5])
        assert WeightedSelector(source).source is source


class TestPick:
    """Tests for the name-only convenience wrapper."""

    def test_returns_name(self, one_to_three: list[Entry]) -> None:
        assert pick(one_to_three, FixedSequenceSource([0.1])) == "A"


class TestSelectionResult:
    """Tests for SelectionResult frozen dataclass."""

    def test_frozen(self) -> None:
        result = SelectionResult(name="A", index=0, quality=1.0, value=0.5, total=1.0)
        with pytest.raises(AttributeError):
            result.name = "B"  # type: ignore[misc]

    def test_slots(self) -> None:
        result = SelectionResult(name="A", index=0, quality=1.0, value=0.5, total=1.0)
        assert hasattr(result, "__slots__")
