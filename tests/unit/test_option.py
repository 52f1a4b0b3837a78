"""Tests for the Option container."""
from __future__ import annotations

import dataclasses

import pytest

from fallible import EmptyValueError, Just, Nothing, Option, from_nullable, just, nothing


class TestConstruction:
    """Tests for Option factories."""

    def test_just(self) -> None:
        """Test just wraps the value."""
        assert Option.just(5) == Just(5)
        assert just(5) == Just(5)

    def test_none(self) -> None:
        """Test none creates an empty option."""
        assert Option.none() == Nothing()
        assert nothing() == Nothing()

    @pytest.mark.parametrize("value", [0, "", [], False, {"a": 1}])
    def test_from_nullable_keeps_falsy_values(self, value: object) -> None:
        """Test that only None counts as absence."""
        assert Option.from_nullable(value) == Just(value)
        assert from_nullable(value) == Just(value)

    def test_from_nullable_none(self) -> None:
        """Test None becomes Nothing."""
        assert Option.from_nullable(None) == Nothing()


class TestRetrieval:
    """Tests for Option accessors."""

    def test_get_just(self) -> None:
        """Test get returns the held value."""
        assert Option.just("v").get() == "v"

    def test_get_nothing_raises(self) -> None:
        """Test get on Nothing raises EmptyValueError."""
        with pytest.raises(EmptyValueError, match="empty Option"):
            Option.none().get()

    def test_get_or_default(self) -> None:
        """Test get_or_default picks the held value first."""
        assert Option.just(1).get_or_default(2) == 1
        assert Option.none().get_or_default(2) == 2

    def test_get_or_else_not_called_on_just(self, counter) -> None:
        """Test supplier is never invoked when a value is present."""
        supplier = counter(lambda: 99)
        assert Option.just(1).get_or_else(supplier) == 1
        assert supplier.count == 0

    def test_get_or_else_called_once_on_nothing(self, counter) -> None:
        """Test supplier is invoked exactly once when empty."""
        supplier = counter(lambda: 99)
        assert Option.none().get_or_else(supplier) == 99
        assert supplier.count == 1

    def test_get_or_none(self) -> None:
        """Test get_or_none returns None only for Nothing."""
        assert Option.just(3).get_or_none() == 3
        assert Option.none().get_or_none() is None

    def test_inspection(self) -> None:
        """Test is_just and is_nothing."""
        assert Option.just(1).is_just()
        assert not Option.just(1).is_nothing()
        assert Option.none().is_nothing()
        assert not Option.none().is_just()


class TestTransformation:
    """Tests for map, flat_map, flatten and filter."""

    def test_map_just(self, counter) -> None:
        """Test map applies the function exactly once."""
        double = counter(lambda x: x * 2)
        assert Option.just(4).map(double) == Just(8)
        assert double.count == 1

    def test_map_nothing_skips_function(self, counter) -> None:
        """Test map on Nothing never calls the function."""
        double = counter(lambda x: x * 2)
        assert Option.none().map(double) == Nothing()
        assert double.count == 0

    @pytest.mark.parametrize("value", [0, 3, -7])
    def test_functor_composition(self, value: int) -> None:
        """Test map(f).map(g) equals map(g . f)."""
        f = lambda x: x + 1  # noqa: E731
        g = lambda x: x * 10  # noqa: E731
        assert Option.just(value).map(f).map(g) == Option.just(value).map(lambda x: g(f(x)))

    def test_map_leaves_receiver_unchanged(self) -> None:
        """Test transformations return new containers."""
        original = Option.just([1, 2])
        mapped = original.map(lambda xs: [*xs, 3])
        assert original == Just([1, 2])
        assert mapped == Just([1, 2, 3])

    def test_flat_map_does_not_nest(self) -> None:
        """Test flat_map returns the function's Option directly."""
        half = lambda x: Option.just(x // 2) if x % 2 == 0 else Option.none()  # noqa: E731
        assert Option.just(4).flat_map(half) == Just(2)
        assert Option.just(3).flat_map(half) == Nothing()
        assert Option.none().flat_map(half) == Nothing()

    def test_flat_map_requires_option(self) -> None:
        """Test flat_map rejects functions returning plain values."""
        with pytest.raises(TypeError, match="nested Option"):
            Option.just(1).flat_map(lambda x: x)

    def test_flatten(self) -> None:
        """Test flatten removes one level of nesting."""
        assert Option.just(Option.just(1)).flatten() == Option.just(1)
        assert Option.just(Option.none()).flatten() == Option.none()
        assert Option.none().flatten() == Option.none()

    def test_flatten_only_one_level(self) -> None:
        """Test flatten does not collapse deeper nesting."""
        nested = Option.just(Option.just(Option.just(1)))
        assert nested.flatten() == Just(Just(1))

    def test_flatten_non_option_raises(self) -> None:
        """Test flatten on a plain value is a type error."""
        with pytest.raises(TypeError):
            Option.just(1).flatten()

    def test_filter(self) -> None:
        """Test filter keeps values matching the predicate."""
        is_even = lambda x: x % 2 == 0  # noqa: E731
        assert Option.just(4).filter(is_even) == Option.just(4)
        assert Option.just(3).filter(is_even) == Option.none()

    def test_filter_nothing_skips_predicate(self, counter) -> None:
        """Test the predicate is not called on Nothing."""
        pred = counter(lambda x: True)
        assert Option.none().filter(pred) == Nothing()
        assert pred.count == 0

    def test_filter_calls_predicate_once(self, counter) -> None:
        """Test the predicate is called at most once."""
        pred = counter(lambda x: x > 0)
        Option.just(1).filter(pred)
        assert pred.count == 1


class TestValueSemantics:
    """Tests for equality, hashing and immutability."""

    def test_equality(self) -> None:
        """Test structural equality between variants."""
        assert Just(1) == Just(1)
        assert Just(1) != Just(2)
        assert Just(None) != Nothing()
        assert Nothing() == Nothing()

    def test_hashable(self) -> None:
        """Test options with hashable content can live in sets."""
        assert len({Just(1), Just(1), Nothing(), Nothing()}) == 2

    def test_no_ordering(self) -> None:
        """Test options are not ordered."""
        with pytest.raises(TypeError):
            Just(1) < Just(2)  # noqa: B015

    def test_frozen(self) -> None:
        """Test the held value cannot be reassigned."""
        option = Just(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            option.value = 2  # type: ignore[misc]

    def test_pattern_matching(self) -> None:
        """Test variants support structural pattern matching."""
        match Option.from_nullable("x"):
            case Just(value):
                matched = value
            case Nothing():
                matched = None
        assert matched == "x"

    def test_repr(self) -> None:
        """Test debug representation."""
        assert repr(Just("a")) == "Just('a')"
        assert repr(Nothing()) == "Nothing()"
