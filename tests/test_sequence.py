import pytest
from kungfu import Error, Ok

from lazyseq import NONE, ArraySequence, EmptySequenceError, Grouping, Present, Sequence, seq


def gen(*values):
    """Generator-backed sequence over values (never array-backed)."""

    def cursor():
        yield from values

    return seq.from_generator(cursor)


class TestElementwise:
    def test_map(self):
        assert gen(1, 2, 3).map(lambda x: x * 10).to_array() == [10, 20, 30]

    def test_map_with_index(self):
        assert gen("a", "b").map(lambda x, i: f"{i}:{x}").to_array() == ["0:a", "1:b"]

    def test_map_with_builtin(self):
        assert gen(1, 2).map(str).to_array() == ["1", "2"]

    def test_map_with_optional_second_parameter(self):
        assert gen(" a ", " b ").map(str.strip).to_array() == ["a", "b"]

    def test_map_with_round(self):
        assert gen(1.26, 2.71).map(round).to_array() == [1, 3]

    def test_defaulted_parameter_does_not_receive_index(self):
        assert gen(1, 2).map(lambda x, scale=10: x * scale).to_array() == [10, 20]

    def test_flat_map(self):
        result = gen(1, 2, 3).flat_map(lambda x: seq.repeat(x, x)).to_array()
        assert result == [1, 2, 2, 3, 3, 3]

    def test_flat_map_accepts_plain_iterables(self):
        assert gen("ab", "c").flat_map(list).to_array() == ["a", "b", "c"]

    def test_filter(self):
        assert gen(1, 2, 3, 4).filter(lambda x: x % 2 == 0).to_array() == [2, 4]

    def test_filter_index_is_input_position(self):
        result = gen(10, 11, 12, 13).filter(lambda _, i: i % 2 == 1).to_array()
        assert result == [11, 13]

    def test_index_after_filter_restarts(self):
        result = gen(1, 2, 3, 4).filter(lambda x: x > 2).map(lambda x, i: (x, i)).to_array()
        assert result == [(3, 0), (4, 1)]

    def test_for_each(self):
        seen = []
        gen("x", "y").for_each(lambda x, i: seen.append((i, x)))
        assert seen == [(0, "x"), (1, "y")]

    def test_transformations_do_not_mutate_receiver(self):
        source = gen(1, 2, 3)
        source.map(lambda x: x * 2)
        source.filter(lambda x: x > 1)
        assert source.to_array() == [1, 2, 3]


class TestDistinct:
    def test_distinct_keeps_first_occurrence(self):
        assert gen(3, 1, 3, 2, 1).distinct().to_array() == [3, 1, 2]

    def test_distinct_unhashable(self):
        assert gen([1], [2], [1]).distinct().to_array() == [[1], [2]]

    def test_distinct_by(self):
        words = gen("apple", "avocado", "banana", "blueberry", "cherry")
        assert words.distinct_by(lambda w: w[0]).to_array() == ["apple", "banana", "cherry"]

    def test_distinct_restarts_per_traversal(self):
        unique = gen(1, 1, 2).distinct()
        assert unique.to_array() == [1, 2]
        assert unique.to_array() == [1, 2], "seen-set must not leak between traversals"


class TestSlicing:
    def test_take(self):
        assert gen(1, 2, 3).take(2).to_array() == [1, 2]
        assert gen(1, 2).take(5).to_array() == [1, 2]
        assert gen(1, 2).take(0).to_array() == []
        assert gen(1, 2).take(-1).to_array() == []

    def test_skip(self):
        assert gen(1, 2, 3).skip(1).to_array() == [2, 3]
        assert gen(1, 2).skip(5).to_array() == []
        assert gen(1, 2).skip(-3).to_array() == [1, 2]

    def test_take_while_stops_at_first_failure(self):
        assert gen(1, 2, 5, 1).take_while(lambda x: x < 3).to_array() == [1, 2]

    def test_skip_while_never_reenters(self):
        assert gen(1, 2, 5, 1, 2).skip_while(lambda x: x < 3).to_array() == [5, 1, 2]

    def test_skip_while_restarts_per_traversal(self):
        rest = gen(1, 5, 1).skip_while(lambda x: x < 3)
        assert rest.to_array() == [5, 1]
        assert rest.to_array() == [5, 1]

    def test_skip_while_with_index(self):
        assert gen("a", "b", "c").skip_while(lambda _, i: i < 2).to_array() == ["c"]


class TestCombining:
    def test_concat(self):
        assert gen(1, 2).concat(gen(3)).to_array() == [1, 2, 3]
        assert gen(1).concat([2, 3]).to_array() == [1, 2, 3]

    def test_zip_truncates(self):
        assert seq.of([1, 2, 3]).zip(seq.of([10, 20])).to_array() == [(1, 10), (2, 20)]

    def test_zip_with_zipper(self):
        assert gen(1, 2).zip(gen(10, 20, 30), lambda a, b: a + b).to_array() == [11, 22]

    def test_zip_with_infinite(self):
        assert gen("a", "b").zip(seq.infinite()).to_array() == [("a", 0), ("b", 1)]

    def test_default_with_substitutes_only_when_empty(self):
        assert seq.empty().default_with(7).to_array() == [7]
        assert gen(1, 2).default_with(7).to_array() == [1, 2]


class TestEager:
    def test_group_by(self):
        groups = seq.of([1, 2, 3, 4]).group_by(lambda x: x % 2).to_array()
        assert [g.key for g in groups] == [1, 0]
        assert groups[0].values.to_array() == [1, 3]
        assert groups[1].values.to_array() == [2, 4]
        assert all(isinstance(g, Grouping) for g in groups)
        assert isinstance(groups[0].values, ArraySequence)

    def test_group_by_unhashable_keys(self):
        groups = seq.of([1, 2, 3]).group_by(lambda x: [x % 2]).to_array()
        assert [(g.key, g.values.to_array()) for g in groups] == [([1], [1, 3]), ([0], [2])]

    def test_group_by_mixed_keys_keep_first_seen_order(self):
        groups = gen(1, "a", 2, "b").group_by(lambda x: x if isinstance(x, int) else [x]).to_array()
        assert [g.key for g in groups] == [1, ["a"], 2, ["b"]]

    def test_group_by_with_index(self):
        groups = gen("a", "b", "c").group_by(lambda _, i: i < 1).to_array()
        assert [(g.key, g.values.to_array()) for g in groups] == [(True, ["a"]), (False, ["b", "c"])]

    def test_group_by_is_eager(self):
        calls = []
        gen(1, 2).group_by(lambda x: calls.append(x))
        assert calls == [1, 2]

    def test_sort_natural(self):
        assert gen(3, 1, 2).sort().to_array() == [1, 2, 3]

    def test_sort_compare(self):
        assert gen(3, 1, 2).sort(lambda a, b: b - a).to_array() == [3, 2, 1]

    def test_sort_key_is_stable(self):
        pairs = gen(("b", 1), ("a", 2), ("b", 0))
        assert pairs.sort(key=lambda p: p[0]).to_array() == [("a", 2), ("b", 1), ("b", 0)]

    def test_sort_rejects_both(self):
        with pytest.raises(ValueError):
            gen(1).sort(lambda a, b: a - b, key=abs)

    def test_reverse(self):
        assert gen(1, 2, 3).reverse().to_array() == [3, 2, 1]


class TestReduce:
    def test_reduce_with_initial(self):
        assert gen(1, 2, 3).reduce(lambda acc, x: acc + x, 10) == 16

    def test_reduce_without_initial(self):
        assert gen(1, 2, 3).reduce(lambda acc, x: acc * 10 + x) == 123

    def test_reduce_receives_index_and_source(self):
        source = gen(5, 6, 7)
        calls = []

        def reducer(acc, x, index, src):
            calls.append((index, src is source))
            return acc + x

        assert source.reduce(reducer) == 18
        assert calls == [(1, True), (2, True)], "seeded fold starts at index 1"
        calls.clear()
        source.reduce(reducer, 0)
        assert [i for i, _ in calls] == [0, 1, 2]

    def test_reduce_empty_without_initial_raises(self):
        with pytest.raises(EmptySequenceError):
            seq.empty().reduce(lambda a, b: a + b)

    def test_reduce_empty_with_initial(self):
        assert seq.empty().reduce(lambda a, b: a + b, 0) == 0

    def test_reduce_none_initial_is_a_seed(self):
        assert gen(1).reduce(lambda acc, x: (acc, x), None) == (None, 1)

    def test_try_reduce(self):
        match gen(1, 2).try_reduce(lambda a, b: a + b):
            case Ok(total):
                assert total == 3
            case _:
                pytest.fail("expected Ok")
        match seq.empty().try_reduce(lambda a, b: a + b):
            case Error(e):
                assert isinstance(e, EmptySequenceError)
            case _:
                pytest.fail("expected Error")


class TestTerminal:
    def test_first_last(self):
        assert gen(1, 2, 3).first() == 1
        assert gen(1, 2, 3).last() == 3

    def test_first_last_empty(self):
        assert seq.empty().first() is None
        assert seq.empty().last() is None

    def test_optional_variants(self):
        assert gen(1, 2).first_optional() == Present(1)
        assert gen(1, 2).last_optional() == Present(2)
        assert seq.empty().first_optional() is NONE
        assert seq.empty().last_optional() is NONE

    def test_count(self):
        assert gen(1, 2, 3).count() == 3
        assert seq.empty().count() == 0

    def test_to_array_returns_new_list(self):
        s = gen(1, 2)
        first = s.to_array()
        first.append(99)
        assert s.to_array() == [1, 2]

    def test_iterable_protocol(self):
        assert list(gen(1, 2)) == [1, 2]
        assert [x for x in gen(3)] == [3]

    def test_repr_does_not_evaluate(self):
        assert repr(seq.infinite()) == "Sequence(<lazy>)"

    def test_callback_errors_propagate(self):
        def boom(x):
            raise RuntimeError(f"bad {x}")

        mapped = gen(1).map(boom)
        with pytest.raises(RuntimeError, match="bad 1"):
            mapped.to_array()

    def test_is_a_sequence(self):
        assert isinstance(gen(1), Sequence)
