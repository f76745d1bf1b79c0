import operator

import pytest

from tenet.comparators import (
    Comparator,
    approx,
    contains,
    endswith,
    ge,
    gt,
    is_instance,
    le,
    length,
    lt,
    matches,
    ne,
    startswith,
)


class TestComparator:
    def test_compare_calls_predicate_with_actual_then_rhs(self):
        seen = []

        def record(actual, rhs):
            seen.append((actual, rhs))
            return True

        assert Comparator(record, "rhs").compare("actual") is True
        assert seen == [("actual", "rhs")]

    def test_compare_returns_bool(self):
        assert Comparator(lambda a, b: "yes", None).compare(1) is True
        assert Comparator(lambda a, b: 0, None).compare(1) is False

    def test_operator_names(self):
        assert Comparator(operator.gt, 10).name == ">"
        assert Comparator(operator.ne, 10).name == "!="

    def test_name_falls_back_to_predicate_name(self):
        def roughly(actual, rhs):
            return True

        assert Comparator(roughly, 1).name == "roughly"
        assert Comparator(roughly, 1, name="~").describe() == "~ 1"

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            Comparator("gt", 1)

    def test_reusable(self):
        over_ten = gt(10)

        assert [over_ten.compare(v) for v in (5, 11, 10)] == [False, True, False]


@pytest.mark.parametrize(
    ("comparator", "actual", "expected"),
    [
        (gt(1), 2, True),
        (ge(2), 2, True),
        (lt(1), 2, False),
        (le(2), 2, True),
        (ne(2), 2, False),
        (contains("ell"), "hello", True),
        (contains(3), [1, 2], False),
        (startswith("he"), "hello", True),
        (endswith("lo"), "hello", True),
        (matches(r"\d{3}"), "abc 123", True),
        (matches(r"^\d+$"), "abc", False),
        (approx(0.3, abs=1e-9), 0.1 + 0.2, True),
        (approx(1.0, rel=0.01), 1.5, False),
        (length(2), "ab", True),
        (is_instance(str), 1, False),
    ],
)
def test_factories(comparator, actual, expected):
    assert comparator.compare(actual) is expected
