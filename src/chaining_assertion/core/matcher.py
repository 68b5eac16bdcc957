"""异常匹配器 - 执行 action 并按精确类型或子类型匹配抛出的异常

throws 要求异常类型完全相同（不接受子类），catch 接受期望类型及其子类，
does_not_throw 要求不抛出任何异常。匹配成功时把捕获到的异常返回给调用方，
以便继续对 message 或字段做断言。
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar, overload

from rusty_results.prelude import Err, Ok, Result

from ..utils.logger import logger
from .host import failure_exception
from .validators import (
    ExceptionKinds,
    FailureHint,
    describe_kind,
    validate_action,
    validate_expected_kind,
)


@dataclass(frozen=True)
class NoFailureRaised:
    """action 正常返回"""


@dataclass(frozen=True)
class FailureOfExpectedKind:
    """抛出了期望类型的异常"""

    payload: BaseException


@dataclass(frozen=True)
class FailureOfOtherKind:
    """抛出了其他类型的异常（包括 throws 下的子类）"""

    actual: type[BaseException]
    payload: BaseException


Outcome = NoFailureRaised | FailureOfExpectedKind | FailureOfOtherKind

E = TypeVar("E", bound=BaseException)


def invoke(
    action: Callable[[], object], catchable: ExceptionKinds = (Exception,)
) -> BaseException | None:
    """调用 action 一次，返回抛出的异常（没有则返回 None）

    不在 catchable 内的异常（例如 KeyboardInterrupt）原样向上传播。
    """
    try:
        action()
    except catchable as exc:
        return exc
    return None


def classify(
    raised: BaseException | None, expected: ExceptionKinds, exact: bool
) -> Outcome:
    """把 invoke 的结果归类为 Outcome"""
    if raised is None:
        return NoFailureRaised()

    if exact:
        matched = type(raised) in expected
    else:
        matched = isinstance(raised, expected)

    if matched:
        return FailureOfExpectedKind(raised)
    return FailureOfOtherKind(type(raised), raised)


def resolve(
    outcome: Outcome, expected: ExceptionKinds, operation: str, exact: bool
) -> Result[BaseException, FailureHint]:
    """把 Outcome 映射为 Result：成功时为捕获的异常，失败时为 FailureHint"""
    kind = describe_kind(expected)
    header = f"{operation}({kind}) failed"

    match outcome:
        case FailureOfExpectedKind(payload):
            return Ok(payload)
        case NoFailureRaised():
            return Err(FailureHint(f"{header}: no exception was raised"))
        case FailureOfOtherKind(actual, payload):
            message = f"{header}: raised {actual.__name__}: {payload}"
            if exact and issubclass(actual, expected):
                return Err(
                    FailureHint(
                        message,
                        suggestion=f"{actual.__name__} is a subclass of {kind}; "
                        "use catch() to accept subclasses",
                    )
                )
            return Err(FailureHint(message))


def _expect(expected: object, action: object, operation: str, exact: bool):
    match validate_expected_kind(expected):
        case Err(e):
            raise TypeError(str(e))
        case Ok(kinds):
            pass

    match validate_action(action):
        case Err(e):
            raise TypeError(str(e))
        case Ok(func):
            pass

    # 期望类型中的非 Exception 子类（如 KeyboardInterrupt）也需要被捕获
    raised = invoke(func, (Exception, *kinds))
    outcome = classify(raised, kinds, exact)
    logger.debug(f"[{operation}] {describe_kind(kinds)}: {outcome}")

    match resolve(outcome, kinds, operation, exact):
        case Ok(exc):
            return exc
        case Err(hint):
            raise failure_exception(str(hint)) from raised


@overload
def throws(expected: type[E], action: Callable[[], object]) -> E: ...
@overload
def throws(
    expected: ExceptionKinds, action: Callable[[], object]
) -> BaseException: ...


def throws(
    expected: type[BaseException] | ExceptionKinds, action: Callable[[], object]
) -> BaseException:
    """断言 action 抛出的异常类型恰好是 expected（不接受子类）

    Returns:
        捕获到的异常，可继续断言其 message 或字段
    """
    return _expect(expected, action, "throws", exact=True)


@overload
def catch(expected: type[E], action: Callable[[], object]) -> E: ...
@overload
def catch(
    expected: ExceptionKinds, action: Callable[[], object]
) -> BaseException: ...


def catch(
    expected: type[BaseException] | ExceptionKinds, action: Callable[[], object]
) -> BaseException:
    """断言 action 抛出 expected 或其子类的异常

    Returns:
        捕获到的异常
    """
    return _expect(expected, action, "catch", exact=False)


def does_not_throw(action: Callable[[], object]) -> None:
    """断言 action 不抛出任何异常"""
    match validate_action(action):
        case Err(e):
            raise TypeError(str(e))
        case Ok(func):
            pass

    raised = invoke(func)
    if raised is None:
        return

    logger.debug(f"[does_not_throw] raised {type(raised).__name__}")
    hint = FailureHint(
        f"does_not_throw failed: raised {type(raised).__name__}: {raised}"
    )
    raise failure_exception(str(hint)) from raised
