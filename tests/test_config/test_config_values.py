"""Tests for config value kinds, restart requirements and bounds."""

import math

import pytest

from modcore.config.exceptions import UnsupportedValueTypeError
from modcore.config.values import (
    Bound,
    RestartRequirement,
    Single,
    ValueKind,
    narrow_to_single,
)


class TestValueKindOf:
    """Tests for classifying default values."""

    @pytest.mark.parametrize(
        "value, kind",
        [
            (5, ValueKind.INTEGER),
            (True, ValueKind.BOOLEAN),
            ("text", ValueKind.STRING),
            ([1, 2, 3], ValueKind.INTEGER_LIST),
            (["a", "b"], ValueKind.STRING_LIST),
            (("a", "b"), ValueKind.STRING_LIST),
            (Single(1.5), ValueKind.SINGLE),
            (1.5, ValueKind.DOUBLE),
        ],
    )
    def test_supported_types(self, value, kind):
        """Each supported default maps to its kind."""
        assert ValueKind.of(value) is kind

    def test_bool_is_not_integer(self):
        """bool is an int subclass but must classify as BOOLEAN."""
        assert ValueKind.of(False) is ValueKind.BOOLEAN

    def test_empty_list_is_string_list(self):
        """An empty list cannot be told apart and is treated as strings."""
        assert ValueKind.of([]) is ValueKind.STRING_LIST

    @pytest.mark.parametrize(
        "value",
        [None, {"a": 1}, [{"a": 1}], [1, "a"], [True, False], 2**31, -(2**31) - 1, object()],
    )
    def test_unsupported_types_raise(self, value):
        """Anything outside the closed set is rejected."""
        with pytest.raises(UnsupportedValueTypeError):
            ValueKind.of(value)

    def test_error_names_key(self):
        """The error message names the key being resolved."""
        with pytest.raises(UnsupportedValueTypeError, match="colors"):
            ValueKind.of([{"r": 1}], key="colors")

    def test_error_is_value_error(self):
        """Unsupported values are a ValueError."""
        with pytest.raises(ValueError):
            ValueKind.of(None)

    def test_storage_kind(self):
        """Single values are stored as doubles."""
        assert ValueKind.SINGLE.storage_kind is ValueKind.DOUBLE
        assert ValueKind.INTEGER.storage_kind is ValueKind.INTEGER


class TestSingle:
    """Tests for 32-bit float narrowing."""

    def test_narrowing_is_lossy(self):
        """0.1 is not representable exactly in single precision."""
        assert float(Single(0.1)) != 0.1
        assert float(Single(0.1)) == pytest.approx(0.1, abs=1e-8)

    def test_exact_values_survive(self):
        """Values representable in 32 bits are unchanged."""
        assert float(Single(1.5)) == 1.5

    def test_narrowing_is_idempotent(self):
        """Narrowing an already narrowed value changes nothing."""
        once = Single(0.1)
        assert Single(once) == once

    def test_overflow_becomes_infinity(self):
        """Doubles beyond the float range become signed infinity."""
        assert narrow_to_single(1e300) == math.inf
        assert narrow_to_single(-1e300) == -math.inf

    def test_is_a_float(self):
        """Single can be used anywhere a float is expected."""
        assert isinstance(Single(2.0), float)


class TestRestartRequirement:
    """Tests for applying restart requirements."""

    def test_none_leaves_flags(self, config):
        """NONE does not touch the property."""
        prop = config.get("general", "a", 1, ValueKind.INTEGER)
        RestartRequirement.NONE.apply(prop)
        assert prop.requires_world_restart is False
        assert prop.requires_game_restart is False

    def test_world_restart(self, config):
        """World restart sets only the world flag."""
        prop = config.get("general", "a", 1, ValueKind.INTEGER)
        RestartRequirement.REQUIRES_WORLD_RESTART.apply(prop)
        assert prop.requires_world_restart is True
        assert prop.requires_game_restart is False

    def test_game_restart_implies_world_restart(self, config):
        """Game restart sets both flags."""
        prop = config.get("general", "a", 1, ValueKind.INTEGER)
        RestartRequirement.REQUIRES_GAME_RESTART.apply(prop)
        assert prop.requires_game_restart is True
        assert prop.requires_world_restart is True


class TestBound:
    """Tests for bound kinds."""

    def test_integer_bound(self):
        bound = Bound.of(1, 10)
        assert bound.kind is ValueKind.INTEGER
        assert bound.accepts(ValueKind.INTEGER)
        assert not bound.accepts(ValueKind.DOUBLE)
        assert not bound.accepts(ValueKind.STRING)

    def test_float_bound_accepts_single_and_double(self):
        bound = Bound.of(0.0, 1.0)
        assert bound.kind is ValueKind.DOUBLE
        assert bound.accepts(ValueKind.SINGLE)
        assert bound.accepts(ValueKind.DOUBLE)
        assert not bound.accepts(ValueKind.INTEGER)

    def test_mixed_bound_has_no_kind(self):
        """A bound mixing int and float matches nothing."""
        assert Bound.of(1, 2.5).kind is None
        assert not Bound.of(1, 2.5).accepts(ValueKind.INTEGER)

    def test_non_numeric_bound(self):
        assert Bound.of("a", "z").kind is None
        assert Bound.of(True, False).kind is None
