import suite
from cursory import A, NO_VALUE, ArrayEnumerable, MapEnumerable, FindAllEnumerable

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal


class CallCounter:
    """wraps a callable and counts how many times it ran"""

    def __init__(self, func):
        self.func = func
        self.calls = 0

    def __call__(self, *args):
        self.calls += 1
        return self.func(*args)


# laziness

@test("map and find_all do no work until traversed")
def test_lazy_composition():
    selector = CallCounter(lambda x: x * 2)
    predicate = CallCounter(lambda x: x > 2)
    seq = A([1, 2, 3]).map(selector).find_all(predicate)
    assert_that(isinstance(seq, FindAllEnumerable), "find_all returns a filtered sequence")
    assert_that(isinstance(seq.enumerable, MapEnumerable), "map returns a mapped sequence")
    assert_equal(selector.calls, 0, "selector not called on construction")
    assert_equal(predicate.calls, 0, "predicate not called on construction")
    assert_equal(seq.to_array(), [4, 6], "chain result")


@test("each traversal reruns an unsaved chain")
def test_unsaved_chain_reruns():
    selector = CallCounter(lambda x: x)
    seq = A([1, 2, 3]).map(selector)
    seq.to_array()
    seq.to_array()
    assert_equal(selector.calls, 6, "two traversals, three calls each")


@test("save runs the chain exactly once")
def test_save_runs_once():
    selector = CallCounter(lambda x: x + 100)
    saved = A([1, 2, 3]).map(selector).save()
    assert_equal(saved.to_array(), [101, 102, 103], "first read")
    assert_equal(saved.to_array(), [101, 102, 103], "second read")
    assert_equal(selector.calls, 3, "selector ran once per element in total")


@test("find stops pulling after the first match")
def test_find_short_circuits_chain():
    selector = CallCounter(lambda x: x * x)
    result = A(list(range(100))).map(selector).find(lambda x: x > 10)
    assert_equal(result, 16, "first square above ten")
    assert_equal(selector.calls, 5, "only 0..4 were mapped")


# mapped overrides

@test("map nth applies the selector once")
def test_map_nth_single_call():
    selector = CallCounter(lambda x: x * 10)
    assert_equal(A([1, 2, 3]).map(selector).nth(1), 20, "mapped nth")
    assert_equal(selector.calls, 1, "selector invoked exactly once")


@test("map first and last apply the selector once")
def test_map_first_last_single_call():
    selector = CallCounter(str)
    seq = A([1, 2, 3]).map(selector)
    assert_equal(seq.first(), '1', "mapped first")
    assert_equal(seq.last(), '3', "mapped last")
    assert_equal(selector.calls, 2, "one call each")


@test("map length and empty skip the selector")
def test_map_length_no_calls():
    selector = CallCounter(lambda x: x)
    seq = A([1, 2, 3, 4]).map(selector)
    assert_equal(seq.length(), 4, "length delegated")
    assert_that(not seq.empty(), "empty delegated")
    assert_equal(selector.calls, 0, "selector never ran")


@test("map positional misses skip the selector")
def test_map_missing_no_calls():
    selector = CallCounter(lambda x: x)
    seq = A([]).map(selector)
    assert_that(seq.first() is NO_VALUE, "first of empty map")
    assert_that(seq.last() is NO_VALUE, "last of empty map")
    assert_that(A([1]).map(selector).nth(5) is NO_VALUE, "nth past end")
    assert_equal(selector.calls, 0, "selector never saw the sentinel")


@test("map over a filtered sequence")
def test_map_over_filter():
    seq = A(list(range(10))).find_all(lambda x: x % 2 == 1).map(lambda x: -x)
    assert_equal(seq.length(), 5, "length through the filter")
    assert_equal(seq.nth(2), -5, "third odd number negated")
    assert_equal(seq.to_array(), [-1, -3, -5, -7, -9], "full chain")


# filtered (no overrides)

@test("filter preserves order of matches")
def test_filter_order():
    data = [5, 2, 9, 4, 7, 6]
    result = A(data).find_all(lambda x: x > 4).to_array()
    assert_equal(result, [x for x in data if x > 4], "subsequence in order")


@test("filter positional operations")
def test_filter_positional():
    seq = A([1, 2, 3, 4, 5, 6]).find_all(lambda x: x % 2 == 0)
    assert_equal(seq.first(), 2, "first even")
    assert_equal(seq.last(), 6, "last even")
    assert_equal(seq.nth(1), 4, "second even")
    assert_equal(seq.length(), 3, "three evens")
    assert_that(A([1, 3]).find_all(lambda x: x % 2 == 0).empty(), "no evens")


@test("nested filters")
def test_nested_filters():
    seq = A(list(range(30))).find_all(lambda x: x % 2 == 0).find_all(lambda x: x % 3 == 0)
    assert_equal(seq.to_array(), [0, 6, 12, 18, 24], "multiples of six")


# array-backed

@test("array to_array is a shallow copy")
def test_array_to_array_copy():
    backing = [{'k': 1}]
    seq = A(backing)
    copy = seq.to_array()
    copy.append({'k': 2})
    assert_equal(len(backing), 1, "backing list untouched")
    assert_that(copy[0] is backing[0], "elements are shared, not cloned")


@test("array sequence sees later writes to the backing list")
def test_array_aliasing():
    backing = [1, 2]
    seq = A(backing)
    backing.append(3)
    assert_equal(seq.length(), 3, "wrapped list is not copied")
    assert_equal(seq.last(), 3, "new last element visible")


@test("array sequences over tuples and ranges")
def test_array_other_sequences():
    assert_equal(A((1, 2, 3)).nth(2), 3, "tuple backing")
    seq = A(range(5, 10))
    assert_that(isinstance(seq, ArrayEnumerable), "range wraps directly")
    assert_equal(seq.last(), 9, "range last")
    assert_that(seq.contains_value(7), "range membership")


@test("generators are read once into a list")
def test_generator_source():
    seq = A(x * x for x in range(4))
    assert_equal(seq.to_array(), [0, 1, 4, 9], "first read")
    assert_equal(seq.to_array(), [0, 1, 4, 9], "second read sees the same data")


if __name__ == "__main__":
    suite.main("cursory sequence variants test suite")
