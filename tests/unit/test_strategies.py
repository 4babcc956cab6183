"""
Unit tests for cost strategies.
"""

import pytest

from lesson_billing.models.lesson import Lesson
from lesson_billing.pricing import (
    ChargeType,
    CostStrategy,
    FixedCostStrategy,
    InvalidInputError,
    InvalidRateError,
    PricingError,
    TimedCostStrategy,
)


def make_lesson(duration=60, **overrides):
    data = {
        "id": "lesson_12345",
        "date": "2025-10-15",
        "student_id": "student_789",
        "student_name": "山田太郎",
        "status": "completed",
        "duration": duration,
        "category": "専属レッスン",
    }
    data.update(overrides)
    return Lesson.from_dict(data)


class TestCostStrategyContract:
    """Test cases for the abstract CostStrategy."""

    def test_cannot_instantiate_abstract_strategy(self):
        """Test the abstract contract cannot be used directly."""
        with pytest.raises(TypeError):
            CostStrategy()

    def test_subclass_missing_charge_type_cannot_be_instantiated(self):
        """Test a variant must implement both operations."""

        class CostOnly(CostStrategy):
            def cost(self, lesson):
                return 1

        with pytest.raises(TypeError):
            CostOnly()

    def test_subclass_missing_cost_cannot_be_instantiated(self):
        """Test a variant must implement cost()."""

        class LabelOnly(CostStrategy):
            def charge_type(self):
                return "label"

        with pytest.raises(TypeError):
            LabelOnly()

    def test_complete_subclass_is_a_strategy(self):
        """Test a complete variant can be used through the interface."""

        class Free(CostStrategy):
            def cost(self, lesson):
                return 0

            def charge_type(self):
                return "free"

        strategy: CostStrategy = Free()
        assert strategy.cost(make_lesson()) == 0
        assert strategy.charge_type() == "free"


class TestFixedCostStrategy:
    """Test cases for FixedCostStrategy."""

    def test_returns_rate_for_any_lesson(self):
        """Test flat rate 50 charges 50 regardless of lesson."""
        strategy = FixedCostStrategy(50)

        assert strategy.cost(make_lesson(duration=60)) == 50
        assert strategy.cost(make_lesson(duration=15)) == 50
        assert strategy.cost(make_lesson(duration=None)) == 50

    def test_charge_type(self):
        """Test charge type label."""
        strategy = FixedCostStrategy(50)

        assert strategy.charge_type() == "flat-rate"
        assert strategy.charge_type() == ChargeType.FLAT_RATE

    def test_zero_rate_allowed(self):
        """Test a zero rate is valid."""
        assert FixedCostStrategy(0).cost(make_lesson()) == 0

    @pytest.mark.parametrize("rate", [-1, 1.5, "50", None, True])
    def test_invalid_rate_rejected(self, rate):
        """Test invalid rates fail at construction."""
        with pytest.raises(InvalidRateError):
            FixedCostStrategy(rate)

    def test_missing_lesson_rejected(self):
        """Test None lesson raises InvalidInputError."""
        with pytest.raises(InvalidInputError):
            FixedCostStrategy(50).cost(None)


class TestTimedCostStrategy:
    """Test cases for TimedCostStrategy."""

    def test_three_hours_at_twenty(self):
        """Test rate 20 for a 3 hour lesson costs 60."""
        strategy = TimedCostStrategy(20)

        assert strategy.cost(make_lesson(duration=180)) == 60

    def test_zero_duration_costs_nothing(self):
        """Test zero duration is not an error."""
        assert TimedCostStrategy(20).cost(make_lesson(duration=0)) == 0

    def test_partial_hour(self):
        """Test 90 minutes at 2300/h."""
        assert TimedCostStrategy(2300).cost(make_lesson(duration=90)) == 3450

    def test_rounds_half_up(self):
        """Test fractional amounts are rounded half up."""
        # 45 * 10 / 60 = 7.5
        assert TimedCostStrategy(10).cost(make_lesson(duration=45)) == 8
        # 20 * 10 / 60 = 3.33...
        assert TimedCostStrategy(10).cost(make_lesson(duration=20)) == 3

    def test_charge_type(self):
        """Test charge type label."""
        assert TimedCostStrategy(20).charge_type() == "hourly"

    def test_missing_duration(self):
        """Test missing duration raises InvalidInputError."""
        strategy = TimedCostStrategy(20)

        with pytest.raises(InvalidInputError) as exc_info:
            strategy.cost(make_lesson(duration=None))

        assert exc_info.value.field == "duration"
        assert exc_info.value.lesson_id == "lesson_12345"

    def test_negative_duration(self):
        """Test negative duration raises InvalidInputError."""
        with pytest.raises(InvalidInputError):
            TimedCostStrategy(20).cost(make_lesson(duration=-30))

    @pytest.mark.parametrize("duration", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_duration(self, duration):
        """Test NaN and infinite durations raise InvalidInputError."""
        with pytest.raises(InvalidInputError) as exc_info:
            TimedCostStrategy(20).cost(make_lesson(duration=duration))

        assert exc_info.value.field == "duration"

    def test_fractional_duration(self):
        """Test fractional minutes are priced."""
        # 2300 * 90.5 / 60 = 3469.17
        assert TimedCostStrategy(2300).cost(make_lesson(duration=90.5)) == 3469

    def test_input_error_is_pricing_and_value_error(self):
        """Test error hierarchy."""
        with pytest.raises(PricingError):
            TimedCostStrategy(20).cost(make_lesson(duration=None))
        with pytest.raises(ValueError):
            TimedCostStrategy(20).cost(make_lesson(duration=None))

    def test_invalid_rate_rejected(self):
        """Test negative hourly rate fails at construction."""
        with pytest.raises(InvalidRateError):
            TimedCostStrategy(-20)


class TestStrategyProperties:
    """Properties shared by every concrete strategy."""

    @pytest.fixture(params=[FixedCostStrategy(50), TimedCostStrategy(2300)], ids=repr)
    def strategy(self, request):
        return request.param

    def test_cost_is_deterministic(self, strategy):
        """Test repeated calls return the same amount."""
        lesson = make_lesson(duration=75)

        assert strategy.cost(lesson) == strategy.cost(lesson)

    def test_cost_is_non_negative_int(self, strategy):
        """Test amounts are non-negative integers."""
        amount = strategy.cost(make_lesson(duration=75))

        assert isinstance(amount, int)
        assert amount >= 0

    def test_charge_type_is_stable_and_non_empty(self, strategy):
        """Test charge type label."""
        first = strategy.charge_type()

        assert first
        assert isinstance(first, str)
        assert strategy.charge_type() == first

    def test_lesson_not_modified(self, strategy):
        """Test pricing leaves the lesson unchanged."""
        lesson = make_lesson(duration=75)
        before = lesson.to_dict()

        strategy.cost(lesson)

        assert lesson.to_dict() == before
