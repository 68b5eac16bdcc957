"""测试链式断言 Chain"""

import functools
import math
import operator

import pytest

from chaining_assertion import Chain, that


class TestIs:
    """测试 is_ 的各种重载"""

    def test_equal(self):
        that(math.pow(5, 2)).is_(25)

    def test_not_equal_fails(self):
        with pytest.raises(AssertionError, match="25 != 26"):
            that(25).is_(26)

    def test_predicate(self):
        that("foobar").is_(lambda s: s.startswith("foo") and s.endswith("bar"))

    def test_predicate_false_fails(self):
        def is_short(s):
            return len(s) < 3

        with pytest.raises(AssertionError, match="predicate is_short is false"):
            that("foobar").is_(is_short)

    def test_varargs_sequence(self):
        that(range(1, 6)).is_(1, 2, 3, 4, 5)

    def test_varargs_sequence_mismatch(self):
        with pytest.raises(AssertionError):
            that(range(1, 6)).is_(1, 2, 3, 4)

    def test_generator_against_list(self):
        that(x * 2 for x in range(3)).is_([0, 2, 4])

    def test_sequence_order_matters(self):
        with pytest.raises(AssertionError):
            that([1, 2, 3]).is_([3, 2, 1])

    def test_sorted_sequence(self):
        array = [1, 5, 10, 100]
        that(array).is_(sorted(array))

    def test_strings_compare_as_values(self):
        """字符串不按字符序列比较"""
        with pytest.raises(AssertionError):
            that("ab").is_(["a", "b"])

    def test_dicts_compare_as_values(self):
        that({"a": 1}).is_({"a": 1})

    def test_sets_compare_as_values(self):
        that({1, 2, 3}).is_({3, 2, 1})

    def test_key(self):
        that(["a", "b", "c"]).is_(["A", "B", "C"], key=str.casefold)

    def test_key_mismatch(self):
        with pytest.raises(AssertionError):
            that(["a", "b"]).is_(["A", "C"], key=str.casefold)

    def test_comparer(self):
        that(["a", "b", "c"]).is_(["A", "B", "C"], comparer=lambda x, y: x.upper() == y.upper())

    def test_comparer_reports_index(self):
        with pytest.raises(AssertionError, match="first differing element 1"):
            that(["a", "b"]).is_(["A", "C"], comparer=lambda x, y: x.upper() == y.upper())

    def test_comparer_reports_length(self):
        with pytest.raises(AssertionError, match="lengths differ: 2 != 3"):
            that([1, 2]).is_([1, 2, 3], comparer=lambda x, y: x == y)

    def test_callable_value_compares_by_equality(self):
        that(len).is_(len)

    def test_class_is_not_predicate(self):
        that(int).is_(int)

    def test_custom_message(self):
        with pytest.raises(AssertionError, match="totals"):
            that(1).is_(2, msg="totals")

    def test_requires_expected(self):
        with pytest.raises(TypeError):
            that(1).is_()

    def test_varargs_with_key(self):
        """多个 expected 同样按 key 映射后比较"""
        that(["a", "b"]).is_("A", "B", key=str.casefold)

    def test_varargs_with_comparer(self):
        that(["a", "b"]).is_("A", "B", comparer=lambda x, y: x.upper() == y.upper())

    def test_varargs_with_key_mismatch(self):
        with pytest.raises(AssertionError):
            that(["a", "b"]).is_("A", "C", key=str.casefold)

    def test_key_and_comparer_together(self):
        with pytest.raises(TypeError, match="either key or comparer"):
            that(["a"]).is_(["A"], key=str.casefold, comparer=lambda x, y: True)

    def test_callable_object_is_used_as_predicate(self):
        """partial 等可调用对象按谓词处理，放进序列里才按相等比较"""
        is_positive = functools.partial(operator.lt, 0)
        that(5).is_(is_positive)
        that([is_positive]).is_([is_positive])


class TestIsNot:
    """测试 is_not"""

    def test_value(self):
        that("foobar").is_not("fooooooo")

    def test_value_equal_fails(self):
        with pytest.raises(AssertionError):
            that("foobar").is_not("foobar")

    def test_varargs_sequence(self):
        that(["a", "z", "x"]).is_not("a", "x", "z")

    def test_sequence_equal_fails(self):
        with pytest.raises(AssertionError):
            that((1, 2)).is_not([1, 2])


class TestOthers:
    """测试 null / 引用 / 类型断言"""

    def test_null(self):
        that(None).is_null()
        that(object()).is_not_null()

    def test_null_fails(self):
        with pytest.raises(AssertionError):
            that(0).is_null()
        with pytest.raises(AssertionError):
            that(None).is_not_null()

    def test_same_reference(self):
        item = ["foo"]
        that(item).is_same_reference_as(item)
        that(item).is_not_same_reference_as(["foo"])

    def test_same_reference_fails_for_equal_copies(self):
        with pytest.raises(AssertionError):
            that([1]).is_same_reference_as([1])

    def test_instance(self):
        that("foobar").is_instance_of(str)
        that(999).is_not_instance_of(float)

    def test_instance_fails(self):
        with pytest.raises(AssertionError):
            that(999).is_instance_of(str)
        with pytest.raises(AssertionError):
            that(True).is_not_instance_of(int)

    def test_chaining(self):
        chain = that([1, 2]).is_not_null().is_instance_of(list).is_(1, 2)
        assert isinstance(chain, Chain)
        assert chain.value == [1, 2]

    def test_repr(self):
        assert repr(that(1)) == "that(1)"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
