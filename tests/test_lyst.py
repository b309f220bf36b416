import copy
import dataclasses
import pickle

import numpy as np
import pytest
from lystrym.core.enums import Tag
from lystrym.functional import lyst as L
from lystrym.functional.lyst import Node, Empty, empty, cons


def add(a, b):
    return a + b


def strcat(a, b):
    return a + b


def negate(a):
    return -a


def is_even(a):
    return a % 2 == 0


@pytest.fixture
def one_to_four():
    return L.from_array([1, 2, 3, 4])


@pytest.fixture
def long_list():
    return L.range(0, 100_000)


def test_cons_builds_nested_structure():
    xs = cons(1, cons(2, cons(3, empty)))
    assert xs.length == 3
    assert xs.tag is Tag.NODE
    assert xs.value == 1
    assert xs.next.next.next is empty


def test_cons_shares_tail():
    tail = L.from_array([2, 3])
    a = cons(1, tail)
    b = cons(0, tail)
    assert a.next is tail
    assert b.next is tail
    assert L.to_array(tail) == [2, 3]


def test_cons_rejects_non_list_tail():
    with pytest.raises(TypeError):
        cons(1, [2, 3])


def test_nodes_are_immutable():
    xs = L.singleton(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        xs.value = 2
    with pytest.raises(dataclasses.FrozenInstanceError):
        xs.length = 10


def test_empty_is_singleton():
    assert Empty() is empty
    assert empty.length == 0
    assert empty.tag is Tag.EMPTY
    assert copy.copy(empty) is empty
    assert copy.deepcopy(empty) is empty
    assert pickle.loads(pickle.dumps(empty)) is empty


def test_singleton():
    xs = L.singleton("a")
    assert xs.length == 1
    assert xs.next is empty


def test_join():
    assert L.join("$")(L.from_array([1, 2, 3])) == "1$2$3"


def test_join_empty():
    assert L.join("$")(empty) == ""


def test_show():
    assert L.show(cons(1, L.singleton(2))) == "Lyst[1, 2]"
    assert L.show(empty) == "Lyst[]"
    assert repr(L.from_array([3, 4])) == "Lyst[3, 4]"


def test_range():
    assert L.equals(L.range(2, 10, 2))(L.from_array([2, 4, 6, 8]))


def test_range_default_step():
    assert L.to_array(L.range(0, 3)) == [0, 1, 2]


def test_range_start_past_end_is_empty():
    assert L.is_empty(L.range(5, 5))
    assert L.is_empty(L.range(10, 2, 2))


def test_range_negative_step():
    assert L.to_array(L.range(10, 2, -3)) == [10, 7, 4]


def test_range_zero_step():
    with pytest.raises(ValueError):
        L.range(0, 10, 0)


def test_is_empty():
    assert L.is_empty(empty)
    assert not L.is_empty(cons(1, empty))


def test_foldr():
    xs = cons("5", cons("4", cons("3", empty)))
    assert L.foldr(strcat)("")(xs) == "345"


def test_foldl():
    xs = cons("5", cons("4", cons("3", empty)))
    assert L.foldl(strcat)("")(xs) == "543"


def test_folds_on_empty_return_accumulator():
    assert L.foldr(add)(7)(empty) == 7
    assert L.foldl(add)(7)(empty) == 7


def test_foldr_with_cons_rebuilds_list(one_to_four):
    rebuilt = L.foldr(lambda acc, x: cons(x, acc))(empty)(one_to_four)
    assert rebuilt == one_to_four


def test_to_array():
    assert L.to_array(cons(1, cons(2, cons(3, empty)))) == [1, 2, 3]
    assert L.to_array(empty) == []


def test_from_array():
    xs = L.from_array([1, 2, 3, 4])
    assert xs.length == 4
    assert L.head_or(None)(xs) == 1


def test_from_array_accepts_iterables():
    assert L.to_array(L.from_array(x * 2 for x in [1, 2])) == [2, 4]
    assert L.to_array(L.from_array((1, 2))) == [1, 2]


def test_array_round_trip(one_to_four):
    assert L.to_array(L.from_array([5, 6, 7])) == [5, 6, 7]
    assert L.from_array(L.to_array(one_to_four)) == one_to_four


def test_to_numpy(one_to_four):
    arr = L.to_numpy(one_to_four)
    assert isinstance(arr, np.ndarray)
    assert arr.shape == (4,)
    np.testing.assert_array_equal(arr, np.array([1, 2, 3, 4]))
    assert L.to_numpy(one_to_four, dtype=float).dtype == np.float64


def test_from_numpy():
    xs = L.from_array(np.arange(3))
    assert xs.length == 3
    assert L.to_array(xs) == [0, 1, 2]


def test_reverse(one_to_four):
    assert L.to_array(L.reverse(one_to_four)) == [4, 3, 2, 1]
    assert L.reverse(empty) is empty


def test_equals_fails_on_empty_vs_non_empty():
    assert not L.equals(empty)(cons(1, empty))
    assert not L.equals(cons(1, empty))(empty)


def test_equals_fails_on_different_lengths_without_comparing():
    class Exploding:
        def __eq__(self, other):
            raise AssertionError("elements should not be compared")

    xs = L.from_array([Exploding(), Exploding()])
    ys = L.from_array([Exploding()])
    assert not L.equals(xs)(ys)


def test_equals_fails_on_different_values():
    assert not L.equals(L.from_array([1, 2, 3, 4]))(L.from_array([1, 2, 3, 5]))


def test_equals_passes_on_equal_lists(one_to_four):
    assert L.equals(empty)(empty)
    assert L.equals(one_to_four)(L.from_array([1, 2, 3, 4]))
    assert L.equals(one_to_four)(one_to_four)


def test_equals_is_symmetric(one_to_four):
    other = L.from_array([1, 2, 3, 4])
    assert L.equals(one_to_four)(other) == L.equals(other)(one_to_four)


def test_dunder_eq_and_hash(one_to_four):
    other = L.from_array([1, 2, 3, 4])
    assert one_to_four == other
    assert one_to_four != L.from_array([1, 2])
    assert one_to_four != [1, 2, 3, 4]
    assert hash(one_to_four) == hash(other)
    assert len({one_to_four, other}) == 1


def test_python_protocols(one_to_four):
    assert len(one_to_four) == 4
    assert list(one_to_four) == [1, 2, 3, 4]
    assert list(reversed(one_to_four)) == [4, 3, 2, 1]
    assert not empty
    assert one_to_four


def test_filter(one_to_four):
    assert L.filter(lambda a: a > 2)(one_to_four) == L.from_array([3, 4])
    assert L.filter(is_even)(empty) is empty


def test_concat():
    xs = L.from_array([1, 2])
    ys = L.from_array([3, 4])
    assert L.concat(xs)(ys) == L.from_array([1, 2, 3, 4])
    assert L.to_array(xs) == [1, 2]
    assert L.to_array(ys) == [3, 4]


def test_concat_shares_right_list():
    ys = L.from_array([3, 4])
    joined = L.concat(L.singleton(1))(ys)
    assert joined.next is ys


def test_concat_rejects_non_list(one_to_four):
    with pytest.raises(TypeError):
        L.concat(empty)([1, 2])
    with pytest.raises(TypeError):
        L.concat(one_to_four)((5, 6))


def test_concat_identity(one_to_four):
    assert L.concat(empty)(one_to_four) == one_to_four
    assert L.concat(one_to_four)(empty) == one_to_four


def test_concat_associative():
    xs, ys, zs = L.from_array([1]), L.from_array([2, 3]), L.from_array([4, 5, 6])
    left = L.concat(L.concat(xs)(ys))(zs)
    right = L.concat(xs)(L.concat(ys)(zs))
    assert left == right


def test_map_transforms_items(one_to_four):
    assert L.map(negate)(one_to_four) == L.from_array([-1, -2, -3, -4])


def test_map_converts_types(one_to_four):
    assert L.map(str)(one_to_four) == L.from_array(["1", "2", "3", "4"])


def test_map_identity(one_to_four):
    assert L.map(lambda x: x)(one_to_four) == one_to_four


def test_map_composition(one_to_four):
    f = lambda x: x + 1  # noqa: E731
    g = lambda x: x * 3  # noqa: E731
    assert L.map(lambda x: g(f(x)))(one_to_four) == L.map(g)(L.map(f)(one_to_four))


def test_flat_map():
    xs = L.from_array([[1], [2, 3], [4, 5, 6], []])
    flat = L.flat_map(L.from_array)(xs)
    assert flat == L.from_array([1, 2, 3, 4, 5, 6])


def test_flatten():
    nested = L.from_array([L.from_array([1, 2]), empty, L.singleton(3)])
    assert L.flatten(nested) == L.from_array([1, 2, 3])
    assert L.flatten(empty) is empty


def test_head_or(one_to_four):
    assert L.head_or(5)(one_to_four) == 1
    assert L.head_or(5)(empty) == 5


def test_find_or_extracts_first_match(one_to_four):
    assert L.find_or(is_even, 5)(one_to_four) == 2


def test_find_or_uses_fallback():
    assert L.find_or(is_even, 5)(empty) == 5
    assert L.find_or(is_even, 5)(L.from_array([1, 3, 5, 7])) == 5


def test_find_or_short_circuits(one_to_four):
    seen = []

    def pred(x):
        seen.append(x)
        return x == 2

    assert L.find_or(pred, None)(one_to_four) == 2
    assert seen == [1, 2]


def test_zip_with(one_to_four):
    assert L.zip_with(add)(one_to_four)(one_to_four) == L.from_array([2, 4, 6, 8])


def test_zip_with_ignores_values_of_longer_list(one_to_four):
    longer = L.from_array([1, 2, 3, 4, 5, 6])
    result = L.zip_with(add)(one_to_four)(longer)
    assert result.length == 4
    assert result == L.from_array([2, 4, 6, 8])
    assert L.zip_with(add)(longer)(one_to_four).length == 4


def test_zip_with_handles_empty(one_to_four):
    assert L.is_empty(L.zip_with(add)(one_to_four)(empty))
    assert L.is_empty(L.zip_with(add)(empty)(one_to_four))


def test_zip_interleaves():
    xs = L.from_array([1, 2, 3])
    assert L.zip(xs)(xs) == L.from_array([1, 1, 2, 2, 3, 3])


def test_zip_truncates():
    xs = L.from_array(["a", "b", "c"])
    ys = L.from_array(["x"])
    assert L.to_array(L.zip(xs)(ys)) == ["a", "x"]


def test_curried_operations_are_reusable(one_to_four):
    double_all = L.map(lambda x: x * 2)
    assert double_all(one_to_four) == L.from_array([2, 4, 6, 8])
    assert double_all(L.singleton(5)) == L.singleton(10)


def test_deep_lists_do_not_recurse(long_list):
    assert long_list.length == 100_000
    assert L.foldr(add)(0)(long_list) == sum(range(100_000))
    assert L.map(negate)(long_list).length == 100_000
    assert L.equals(long_list)(L.range(0, 100_000))
    assert L.find_or(lambda x: x == 99_999, None)(long_list) == 99_999
    assert L.zip_with(add)(long_list)(long_list).length == 100_000
    assert L.concat(long_list)(long_list).length == 200_000
    assert L.show(long_list).startswith("Lyst[0, 1, 2")
