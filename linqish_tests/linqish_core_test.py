import suite
from linqish import (
    P, linqish, from_iterable, from_range, repeat, empty, Enumerable, InvalidParameterError
)

test = suite.test
assert_that = suite.assert_that

# helper data
numbers = P(range(1, 11))  # 1 through 10
words = P(['one', 'two', 'three'])
flags = [{'a': True, 'id': 1}, {'b': True, 'id': 2}, {'a': True, 'id': 3}]


# --- factories ---

@test("factory functions create enumerables correctly")
def test_factories():
    data = [1, 2, 3]
    assert_that(isinstance(from_iterable(data), Enumerable), "from_iterable should be an enumerable instance")
    assert_that(from_iterable(data).to.list() == data, "from_iterable should return the original data")
    assert_that(P(data).to.list() == data and linqish(data).to.list() == data, "aliases should match from_iterable")

    assert_that(repeat("a", 3).to.list() == ["a", "a", "a"], "repeat should repeat the item")
    assert_that(empty().to.list() == [], "empty should have no elements")


@test("from_range follows [begin, end) by step")
def test_from_range():
    assert_that(from_range(3).to.list() == [0, 1, 2], "single argument should count from zero")
    assert_that(from_range(1, 4).to.list() == [1, 2, 3], "two arguments should be [begin, end)")
    assert_that(from_range(0, 10, 3).to.list() == [0, 3, 6, 9], "step should be honoured")
    assert_that(from_range(0, 1, 0.25).to.list() == [0, 0.25, 0.5, 0.75], "fractional steps should work")


@test("from_range rejects non-positive steps immediately")
def test_from_range_step():
    try:
        from_range(0, 5, 0)
        assert_that(False, "zero step should raise")
    except InvalidParameterError as e:
        assert_that(e.param_name == 'step', f"unexpected parameter: {e.param_name}")


@test("from_iterable accepts generators and evaluates them once")
def test_from_iterable_generator():
    source = P(x * x for x in range(4))
    assert_that(source.to.list() == [0, 1, 4, 9], "generator should be materialized")
    assert_that(source.to.count() == 4, "cached data should be reused")


# --- where() ---

@test("where filters elements correctly")
def test_where_basic():
    evens = numbers.where(lambda x: x % 2 == 0).to.list()
    assert_that(evens == [2, 4, 6, 8, 10], "should filter even numbers")


@test("where treats predicate results by truthiness")
def test_where_truthy():
    assert_that(P([1, 2, 3]).where(lambda x: x % 2).to.list() == [1, 3], "non-zero remainders should pass")
    filtered = P(flags).where(lambda el: el.get('a')).to.list()
    assert_that(filtered == [flags[0], flags[2]], f"unexpected filter result: {filtered}")


@test("where handles empty result")
def test_where_empty_result():
    assert_that(numbers.where(lambda x: x > 100).to.list() == [], "should return empty list for no matches")


@test("where is lazy until a terminal operation runs")
def test_where_lazy():
    seen = []
    query = P([1, 2, 3]).where(lambda x: seen.append(x) or x > 1)
    assert_that(seen == [], "predicate should not run before evaluation")
    assert_that(query.to.list() == [2, 3], "unexpected filter result")
    assert_that(seen == [1, 2, 3], f"predicate should run once per element: {seen}")


# --- select() ---

@test("select transforms elements")
def test_select_basic():
    assert_that(words.select(len).to.list() == [3, 3, 5], "should map to lengths")
    objects = P([{'a': 1}, {'a': 2}, {'b': 3}])
    assert_that(objects.select(lambda o: o.get('a')).to.list() == [1, 2, None], "missing keys should map to None")


@test("select builds new objects")
def test_select_objects():
    selected = words.select(lambda s: {'length': len(s), 'content': s}).to.list()
    assert_that(selected[2] == {'length': 5, 'content': 'three'}, f"unexpected projection: {selected[2]}")


# --- take() / skip() ---

@test("take returns the first n elements")
def test_take():
    source = from_range(1, 7)
    assert_that(source.take(3).to.list() == [1, 2, 3], "should take three")
    assert_that(source.take(0).to.list() == [], "take(0) should be empty")
    assert_that(source.take(-2).to.list() == [], "negative counts take nothing")
    assert_that(source.take(50).to.list() == [1, 2, 3, 4, 5, 6], "taking more than available returns all")


@test("skip returns everything after the first n elements")
def test_skip():
    source = from_range(1, 7)
    assert_that(source.skip(3).to.list() == [4, 5, 6], "should skip three")
    assert_that(source.skip(-1).to.list() == [1, 2, 3, 4, 5, 6], "negative counts skip nothing")
    assert_that(source.skip(10).to.list() == [], "skipping everything leaves nothing")


# --- take_while() / skip_while() ---

@test("take_while stops at the first non-match")
def test_take_while():
    data = P([1, 2, 3, 4, 1])
    assert_that(data.take_while(lambda x: x < 3).to.list() == [1, 2], "should stop at 3")
    assert_that(P(flags).take_while(lambda el: el.get('a')).to.list() == [flags[0]], "should stop at the first falsy")


@test("take_while passes the index to two-parameter predicates")
def test_take_while_index():
    data = P([5, 6, 7, 8])
    assert_that(data.take_while(lambda x, i: i < 2).to.list() == [5, 6], "index should drive the predicate")


@test("skip_while yields everything after the first non-match")
def test_skip_while():
    data = P([1, 2, 3, 4, 1])
    assert_that(data.skip_while(lambda x: x < 3).to.list() == [3, 4, 1], "later matches should be kept")
    assert_that(data.skip_while(lambda x, i: i < 3).to.list() == [4, 1], "index should drive the predicate")


# --- reverse() ---

@test("reverse inverts the order")
def test_reverse():
    assert_that(from_range(1, 4).reverse().to.list() == [3, 2, 1], "should reverse")
    assert_that(empty().reverse().to.list() == [], "reversing empty stays empty")


# --- chaining ---

@test("operations chain into a pipeline")
def test_pipeline():
    result = (from_range(1, 21)
              .where(lambda x: x % 3 == 0)
              .select(lambda x: x * 10)
              .skip(1)
              .take(3)
              .to.list())
    assert_that(result == [60, 90, 120], f"unexpected pipeline result: {result}")
    assert_that(len(from_range(5)) == 5, "len should count elements")
    assert_that(list(from_range(3)) == [0, 1, 2], "enumerables should be iterable")


if __name__ == "__main__":
    suite.run(title="linqish core operations test suite")
