"""链式断言 - 给任意值加上 is_ / is_not / is_null 等断言方法

所有断言都委托给 unittest.TestCase 的断言 API，失败时抛出宿主框架的
failureException（AssertionError），每个断言返回 Chain 本身以便继续链式调用。
"""

from collections.abc import Callable, Iterable, Mapping, Set
from typing import Any

from ..utils.logger import logger
from .host import host

Comparer = Callable[[Any, Any], bool]


def _is_sequence_like(value: object) -> bool:
    """可按顺序逐个比较的集合（排除字符串、映射和集合）"""
    if isinstance(value, (str, bytes, bytearray, Mapping, Set)):
        return False
    return isinstance(value, Iterable)


def _is_predicate(candidate: object, actual: object) -> bool:
    return (
        callable(candidate)
        and not isinstance(candidate, type)
        and not callable(actual)
    )


class Chain:
    """包装一个值，提供链式断言"""

    __slots__ = ("_value",)

    def __init__(self, value: Any):
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def __repr__(self) -> str:
        return f"that({self._value!r})"

    def is_(
        self,
        *expected: Any,
        comparer: Comparer | None = None,
        key: Callable[[Any], Any] | None = None,
        msg: str | None = None,
    ) -> "Chain":
        """断言值等于 expected

        - 多个 expected：与 list(value) 按顺序逐个比较（也可配合 key / comparer）
        - 指定 key / comparer：按 key 映射后比较 / 用 comparer 逐个比较，两者不能同时指定
        - 单个谓词函数：断言 predicate(value) 为真

          任何不是类的可调用对象都会被当作谓词调用，包括 functools.partial、
          Mock 和定义了 __call__ 的实例。要按相等比较这类对象，请直接用
          assert 或把它们放进序列里比较。

        - 两边都是序列：按顺序逐个比较
        - 其他情况：assertEqual
        """
        if not expected:
            raise TypeError("is_() requires at least one expected value")
        if key is not None and comparer is not None:
            raise TypeError("is_() accepts either key or comparer, not both")

        several = len(expected) > 1
        other = list(expected) if several else expected[0]

        if key is not None:
            host.assertSequenceEqual(
                [key(x) for x in self._value], [key(x) for x in other], msg=msg
            )
        elif comparer is not None:
            self._compare_each(list(other), comparer, msg)
        elif not several and _is_predicate(other, self._value):
            name = getattr(other, "__name__", repr(other))
            host.assertTrue(
                other(self._value),
                msg=msg or f"predicate {name} is false for {self._value!r}",
            )
        elif several or (_is_sequence_like(self._value) and _is_sequence_like(other)):
            host.assertSequenceEqual(list(self._value), list(other), msg=msg)
        else:
            host.assertEqual(self._value, other, msg=msg)

        return self

    def _compare_each(
        self, expected: list[Any], comparer: Comparer, msg: str | None
    ) -> None:
        actual = list(self._value)
        if len(actual) != len(expected):
            host.fail(
                msg
                or f"sequence lengths differ: {len(actual)} != {len(expected)}"
                f"\nactual:   {actual!r}\nexpected: {expected!r}"
            )

        for index, (left, right) in enumerate(zip(actual, expected)):
            if not comparer(left, right):
                logger.debug(f"[Is] comparer mismatch at index {index}")
                host.fail(
                    msg
                    or f"first differing element {index}: {left!r} != {right!r}"
                    f"\nactual:   {actual!r}\nexpected: {expected!r}"
                )

    def is_not(self, *expected: Any, msg: str | None = None) -> "Chain":
        """断言值不等于 expected（序列按 list 比较）"""
        if not expected:
            raise TypeError("is_not() requires at least one expected value")

        if len(expected) > 1:
            host.assertNotEqual(list(self._value), list(expected), msg=msg)
            return self

        (other,) = expected
        if _is_sequence_like(self._value) and _is_sequence_like(other):
            host.assertNotEqual(list(self._value), list(other), msg=msg)
        else:
            host.assertNotEqual(self._value, other, msg=msg)
        return self

    def is_null(self, msg: str | None = None) -> "Chain":
        host.assertIsNone(self._value, msg=msg)
        return self

    def is_not_null(self, msg: str | None = None) -> "Chain":
        host.assertIsNotNone(self._value, msg=msg)
        return self

    def is_same_reference_as(self, other: Any, msg: str | None = None) -> "Chain":
        host.assertIs(self._value, other, msg=msg)
        return self

    def is_not_same_reference_as(
        self, other: Any, msg: str | None = None
    ) -> "Chain":
        host.assertIsNot(self._value, other, msg=msg)
        return self

    def is_instance_of(
        self, kind: type | tuple[type, ...], msg: str | None = None
    ) -> "Chain":
        host.assertIsInstance(self._value, kind, msg=msg)
        return self

    def is_not_instance_of(
        self, kind: type | tuple[type, ...], msg: str | None = None
    ) -> "Chain":
        host.assertNotIsInstance(self._value, kind, msg=msg)
        return self


def that(value: Any) -> Chain:
    """为 value 创建链式断言"""
    return Chain(value)
