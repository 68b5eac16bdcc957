"""参数化测试用例 - 用同一个测试函数体依次运行多组参数

    @test_case(1, 2, 3)
    @test_case(10, 20, 30)
    def test_add(self, x, y, z):
        that(x + y).is_(z)

每组参数绑定到 self/cls 之后的前几个位置参数，剩余参数（例如 pytest
fixture）保留在包装函数的签名中。
"""

import functools
import inspect
from collections.abc import Callable, Iterable
from typing import Any

from .config import MAX_REPR_LENGTH
from .utils.logger import logger

_LOADERS_ATTR = "_case_loaders"
_TARGET_ATTR = "_case_target"
_BOUND_NAMES = ("self", "cls")

Source = Iterable | Callable[[], Iterable] | str


def _normalize(rows: Iterable) -> list[tuple]:
    return [tuple(row) if isinstance(row, (tuple, list)) else (row,) for row in rows]


class _CaseRows:
    """装饰时就已确定的参数行"""

    def __init__(self, rows: list[tuple]):
        self.rows = rows

    @property
    def width(self) -> int | None:
        return max((len(row) for row in self.rows), default=None)

    def load(self, func: Callable, args: tuple) -> list[tuple]:
        return self.rows


class _LazySource:
    """测试运行时才解析的数据源（零参数函数或属性名）"""

    width = None

    def __init__(self, source: Callable[[], Iterable] | str):
        self.source = source

    def load(self, func: Callable, args: tuple) -> list[tuple]:
        source = self.source
        if isinstance(source, str):
            source = _lookup_source(source, func, args)
        if callable(source):
            source = source()

        rows = _normalize(source)
        if not rows:
            raise ValueError(f"test case source {self.source!r} is empty")
        return rows


def _lookup_source(name: str, func: Callable, args: tuple) -> Any:
    """按名字查找数据源：先在测试实例/类上找，再到定义测试的模块里找"""
    if args and hasattr(args[0], name):
        return getattr(args[0], name)
    if name in func.__globals__:
        return func.__globals__[name]
    raise LookupError(
        f"test case source {name!r} not found on the test class "
        f"or in module {func.__module__!r}"
    )


def _short_repr(row: tuple) -> str:
    text = repr(row)
    if len(text) > MAX_REPR_LENGTH:
        return text[: MAX_REPR_LENGTH - 3] + "..."
    return text


def _leading_count(signature: inspect.Signature) -> int:
    params = list(signature.parameters)
    return 1 if params and params[0] in _BOUND_NAMES else 0


def _expand(func: Callable) -> Callable:
    """把 func 包装成依次运行所有参数行的测试函数"""
    leading = _leading_count(inspect.signature(func))
    loaders: list = []

    @functools.wraps(func)
    def runner(*args, **kwargs):
        bound_args = args[:leading]
        rows = [row for loader in loaders for row in loader.load(func, bound_args)]
        if not rows:
            raise ValueError(f"{func.__qualname__} has no test cases")

        for index, row in enumerate(rows):
            logger.debug(f"[TestCase] {func.__qualname__} #{index}: {_short_repr(row)}")
            try:
                func(*bound_args, *row, *args[leading:], **kwargs)
            except Exception as exc:
                exc.add_note(f"test case #{index}: {_short_repr(row)}")
                raise

    setattr(runner, _LOADERS_ATTR, loaders)
    setattr(runner, _TARGET_ATTR, func)
    return runner


def _rebind_signature(runner: Callable) -> None:
    """从签名中去掉被参数行占用的位置参数，pytest 只会看到剩余的 fixture"""
    signature = inspect.signature(getattr(runner, _TARGET_ATTR))
    leading = _leading_count(signature)
    params = list(signature.parameters.values())

    widths = [loader.width for loader in getattr(runner, _LOADERS_ATTR)]
    if None not in widths:
        width = max(widths)
    else:
        # 有数据源的宽度要到运行时才知道：self 之后的位置参数都视为由参数行提供
        width = 0
        for param in params[leading:]:
            if param.kind not in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
                break
            width += 1

    kept = params[:leading] + params[leading + width :]
    runner.__signature__ = signature.replace(parameters=kept)


def _register(loader: _CaseRows | _LazySource) -> Callable[[Callable], Callable]:
    def decorator(func: Callable) -> Callable:
        runner = func if hasattr(func, _LOADERS_ATTR) else _expand(func)
        # 装饰器自下而上应用，插到最前面才能保持源码中的顺序
        getattr(runner, _LOADERS_ATTR).insert(0, loader)
        _rebind_signature(runner)
        return runner

    return decorator


def test_case(*args: Any) -> Callable[[Callable], Callable]:
    """添加一组参数，可叠加使用"""
    return _register(_CaseRows([args]))


def test_case_source(source: Source) -> Callable[[Callable], Callable]:
    """添加数据源中的所有参数行

    Args:
        source: 参数行的可迭代对象、返回参数行的零参数函数，或在测试运行时
            才解析的属性名（先查测试实例，再查模块全局变量）。可迭代对象在
            装饰时就会被展开。
    """
    if isinstance(source, str) or callable(source):
        return _register(_LazySource(source))

    rows = _normalize(source)
    if not rows:
        raise ValueError("test case source is empty")
    return _register(_CaseRows(rows))


# 避免 pytest 把两个装饰器当成测试函数收集
test_case.__test__ = False
test_case_source.__test__ = False
