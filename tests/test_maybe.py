"""Tests for the Maybe type (Present and Absent)."""

import pytest
from hypothesis import given

from monad_maniac import Absent, AbsentType, Left, MatchError, NullValueError, Present, Right, maybe
from tests.strategies import int_functions, integers, nullable_values, present_values


def double(x: int) -> int:
    return x * 2


def to_none(_x: object) -> None:
    return None


def concat(a: str):
    return lambda b: f'{b}{a}'


class TestMaybeOf:
    """Tests for maybe.of and direct construction."""

    def test_of_none_is_absent(self):
        """of(None) gives Absent."""
        assert maybe.of(None) is Absent
        assert str(maybe.of(None)) == 'Absent()'

    def test_of_number(self):
        assert str(maybe.of(10)) == 'Present(10)'

    def test_of_string(self):
        """Strings render without quotes."""
        assert str(maybe.of('foo')) == 'Present(foo)'

    def test_of_dict(self):
        assert str(maybe.of({'foo': 'bar'})) == "Present({'foo': 'bar'})"

    def test_of_falsy_values_are_present(self):
        """Falsy values other than None are still Present."""
        assert maybe.of(0).is_just()
        assert maybe.of('').is_just()
        assert maybe.of(False).is_just()
        assert maybe.of([]).is_just()

    def test_present_rejects_none(self):
        """Present never holds None."""
        with pytest.raises(NullValueError):
            Present(None)

    def test_present_is_frozen(self):
        present = Present(42)
        with pytest.raises(AttributeError):
            present.value = 100  # type: ignore[misc]

    def test_absent_instances_equal(self):
        assert AbsentType() == Absent
        assert hash(AbsentType()) == hash(Absent)

    def test_repr(self):
        assert repr(Present(5)) == 'Present(value=5)'


class TestMaybeMap:
    """Tests for map, including the None-collapsing behaviour."""

    def test_map_present(self, sample_present):
        assert str(sample_present.map(double)) == 'Present(10)'
        assert str(sample_present.map(double).map(double)) == 'Present(20)'

    def test_map_to_none_gives_absent(self, sample_present):
        result = sample_present.map(double).map(double).map(to_none)
        assert result is Absent
        assert str(result.map(double)) == 'Absent()'

    def test_map_absent_never_calls_function(self, sample_absent):
        calls = []

        def spy(x):
            calls.append(x)
            return x

        assert sample_absent.map(spy) is Absent
        assert calls == []

    def test_spec_example(self):
        assert str(maybe.of(10).map(lambda x: x * 2)) == 'Present(20)'
        assert str(maybe.of(None).map(lambda x: x * 2)) == 'Absent()'

    def test_nested_lookups(self):
        """Missing keys short-circuit a chain of lookups."""
        partial = maybe.of({'a': {}})
        full = maybe.of({'a': {'b': {'c': 'monad-maniac'}}})

        def lookup(obj):
            return obj.map(lambda o: o['a']).map(lambda o: o.get('b')).map(lambda o: o.get('c'))

        assert str(lookup(partial).map(lambda s: f'this is {s}')) == 'Absent()'
        assert str(lookup(full).map(lambda s: f'this is {s}')) == 'Present(this is monad-maniac)'
        assert lookup(full).filter(lambda s: len(s) < 3).map(lambda s: f'this is {s}') is Absent

    @given(value=integers, f=int_functions)
    def test_map_get_or_else_property(self, value, f):
        """of(v).map(f).get_or_else(d) is f(v), or d when f(v) is None."""
        expected = f(value)
        result = maybe.of(value).map(f).get_or_else('default')
        if expected is None:
            assert result == 'default'
        else:
            assert result == expected


class TestMaybeChain:
    """Tests for chain."""

    def test_chain_present_returns_raw(self, sample_present):
        assert sample_present.chain(double) == 10
        assert sample_present.map(double).chain(double) == 20

    def test_chain_present_to_none(self, sample_present):
        assert sample_present.chain(to_none) is None

    def test_chain_absent_returns_absent(self, sample_absent):
        assert sample_absent.chain(double) is Absent
        assert maybe.of(5).map(to_none).chain(double) is Absent


class TestMaybeFilter:
    """Tests for filter."""

    def test_filter(self, sample_present):
        assert sample_present.filter(lambda x: x > 5).get_or_else('Not bigger 5') == 'Not bigger 5'
        assert sample_present.filter(lambda x: x == 5).get_or_else('Not 5') == 5
        assert sample_present.map(double).filter(lambda x: x == 5).get_or_else('Not 5') == 'Not 5'
        assert sample_present.map(double).filter(lambda x: x > 5).get_or_else('Not bigger 5') == 10

    def test_filter_absent(self, sample_absent):
        calls = []
        assert sample_absent.filter(lambda x: calls.append(x) or True) is Absent
        assert calls == []

    def test_filter_keeps_falsy_value(self):
        assert maybe.of(0).filter(lambda x: x == 0).equals(Present(0))

    def test_filter_uses_predicate_truthiness(self):
        """A non-bool predicate result counts by its truthiness."""
        assert maybe.of('abc').filter(len) == Present('abc')
        assert maybe.of('').filter(len) is Absent
        assert maybe.of(3).filter(lambda x: None) is Absent


class TestMaybeGetOrElse:
    def test_present(self, sample_present):
        assert sample_present.map(double).get_or_else('No value') == 10

    def test_absent(self, sample_present):
        assert sample_present.map(to_none).get_or_else('No value') == 'No value'
        assert sample_present.map(to_none).get_or_else(None) is None


class TestMaybeDiscriminants:
    """Tests for is_just and is_nothing."""

    def test_present(self, sample_present):
        assert sample_present.is_just() is True
        assert sample_present.is_nothing() is False

    def test_absent(self, sample_absent):
        assert sample_absent.is_just() is False
        assert sample_absent.is_nothing() is True

    @given(value=present_values)
    def test_present_always_just(self, value):
        assert Present(value).is_just()
        assert not Present(value).is_nothing()


class TestMaybeCaseOf:
    """Tests for case_of pattern matching."""

    matcher = {'Just': lambda x: x + 5, 'Nothing': lambda: 0}

    def test_case_of_present(self, sample_present):
        assert sample_present.map(double).case_of(self.matcher) == 15

    def test_case_of_absent(self, sample_present):
        assert sample_present.map(double).map(to_none).map(double).case_of(self.matcher) == 0

    def test_missing_branch_raises(self):
        with pytest.raises(MatchError) as exc_info:
            Absent.case_of({'Just': lambda x: x})
        assert exc_info.value.branch == 'Nothing'
        assert exc_info.value.variant == 'Absent'

    def test_match_statement(self):
        """Present supports structural pattern matching."""
        match maybe.of(3):
            case Present(value):
                assert value == 3
            case _:
                pytest.fail('expected Present')


class TestMaybeApply:
    """Tests for the applicative apply."""

    def test_apply(self, sample_present, sample_absent):
        maybe_double = maybe.of(double)
        assert str(sample_present.apply(maybe_double).map(lambda x: x + 15)) == 'Present(25)'
        assert str(sample_present.apply(sample_absent).map(lambda x: x + 15)) == 'Absent()'
        assert str(sample_absent.apply(maybe_double)) == 'Absent()'

    def test_apply_none_result_collapses(self, sample_present):
        assert sample_present.apply(maybe.of(to_none)) is Absent


class TestMaybeJoin:
    """Tests for join."""

    def test_join_nested(self):
        assert maybe.of(maybe.of(5)).join().equals(Present(5))
        assert Present(Absent).join() is Absent

    def test_join_non_nested_is_absent(self):
        assert maybe.of(5).join() is Absent

    def test_join_absent(self):
        assert Absent.join() is Absent


class TestMaybeEquality:
    """Tests for equals and equals_value."""

    def test_equals_value(self):
        assert maybe.of(5).equals_value(5)
        assert not maybe.of(5).equals_value(6)
        assert Absent.equals_value(None)
        assert not Absent.equals_value(5)

    def test_equals_value_by_identity_for_objects(self):
        """Containers compare by identity, not deeply."""
        items = [1, 2]
        assert maybe.of(items).equals_value(items)
        assert not maybe.of(items).equals_value([1, 2])

    def test_equals_value_bool_is_not_int(self):
        assert not maybe.of(1).equals_value(True)

    def test_equals(self):
        assert maybe.of(5).equals(maybe.of(5))
        assert not maybe.of(5).equals(maybe.of(6))
        assert not maybe.of(5).equals(Absent)
        assert Absent.equals(maybe.of(None))
        assert not Absent.equals(maybe.of(5))
        assert not maybe.of(5).equals(5)


class TestMaybeToEither:
    def test_present_to_right(self):
        assert maybe.of(5).to_either('missing') == Right(5)

    def test_absent_to_left(self):
        assert Absent.to_either('missing') == Left('missing')


class TestMaybeFreeFunctions:
    """Tests for the curried free-function forms."""

    def test_map(self):
        just = maybe.of('foo')
        assert str(maybe.map(concat('bar'), just)) == 'Present(foobar)'
        assert str(maybe.map(to_none, maybe.of(234))) == 'Absent()'
        assert str(maybe.map(double, maybe.of(None))) == 'Absent()'

    def test_map_curried(self):
        curried = maybe.map(concat('bar'))
        assert callable(curried)
        assert str(curried(maybe.of('foo'))) == 'Present(foobar)'

    def test_chain(self):
        assert maybe.chain(concat('bar'), maybe.of('foo')) == 'foobar'
        assert maybe.chain(double, maybe.of(None)) is Absent
        assert maybe.chain(concat('bar'))(maybe.of('foo')) == 'foobar'

    def test_apply(self):
        maybe_concat = maybe.of(concat('bar'))
        assert str(maybe.apply(maybe_concat, maybe.of('foo'))) == 'Present(foobar)'
        assert str(maybe.apply(maybe.of(double), maybe.of(None))) == 'Absent()'
        assert str(maybe.apply(maybe_concat)(maybe.of('foo'))) == 'Present(foobar)'

    def test_get_or_else(self):
        assert maybe.get_or_else('none', maybe.of('foo')) == 'foo'
        assert maybe.get_or_else('none', maybe.of(None)) == 'none'
        assert maybe.get_or_else('none')(maybe.of(None)) == 'none'

    def test_filter(self):
        assert maybe.filter(lambda x: x > 1, maybe.of(2)).equals(Present(2))
        assert maybe.filter(lambda x: x > 1)(maybe.of(0)) is Absent

    def test_case_of(self):
        matcher = {'Just': double, 'Nothing': lambda: -1}
        assert maybe.case_of(matcher, maybe.of(2)) == 4
        assert maybe.case_of(matcher)(Absent) == -1

    def test_equality_helpers(self):
        assert maybe.equals_value(5, maybe.of(5))
        assert maybe.equals_value(None)(Absent)
        assert maybe.equals(maybe.of('a'), maybe.of('a'))
        assert maybe.equals(Absent)(Absent)

    def test_to_either(self):
        assert maybe.to_either('err', maybe.of(1)) == Right(1)
        assert maybe.to_either('err')(Absent) == Left('err')

    def test_unary_helpers(self):
        assert maybe.is_just(maybe.of(1))
        assert maybe.is_nothing(Absent)
        assert maybe.join(maybe.of(maybe.of(1))).equals(Present(1))
        assert maybe.to_string(maybe.of(1)) == 'Present(1)'

    def test_lift(self):
        assert maybe.lift(double, 4).equals(Present(8))
        assert maybe.lift(double, None) is Absent
        assert maybe.lift(to_none, 4) is Absent

    @given(value=nullable_values)
    def test_lift_matches_of_map(self, value):
        assert maybe.lift(str, value) == maybe.of(value).map(str)
