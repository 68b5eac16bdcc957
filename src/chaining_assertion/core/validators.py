"""参数验证函数 - 断言输入的验证层"""

from collections.abc import Callable
from dataclasses import dataclass

from rusty_results.prelude import Err, Ok, Result

ExceptionKinds = tuple[type[BaseException], ...]


@dataclass(frozen=True)
class FailureHint:
    """带建议的失败信息"""

    message: str
    suggestion: str | None = None

    def __str__(self) -> str:
        if self.suggestion is None:
            return self.message
        return f"{self.message}. {self.suggestion}"


def _is_exception_class(kind: object) -> bool:
    return isinstance(kind, type) and issubclass(kind, BaseException)


def validate_expected_kind(kind: object) -> Result[ExceptionKinds, FailureHint]:
    """验证期望的异常类型（单个异常类，或非空的异常类 tuple）"""
    if _is_exception_class(kind):
        return Ok((kind,))

    if isinstance(kind, tuple):
        if not kind:
            return Err(FailureHint("expected exception tuple is empty"))

        errors = [repr(k) for k in kind if not _is_exception_class(k)]
        if errors:
            return Err(
                FailureHint(
                    "expected kinds must be exception classes, got: "
                    + "; ".join(errors)
                )
            )
        return Ok(kind)

    return Err(
        FailureHint(
            f"expected kind must be an exception class, got {kind!r}",
            suggestion="pass the class itself, e.g. ValueError rather than ValueError()",
        )
    )


def validate_action(action: object) -> Result[Callable[[], object], FailureHint]:
    """验证 action 可调用（零参数，由调用方保证）"""
    if not callable(action):
        return Err(
            FailureHint(
                f"action must be callable, got {type(action).__name__}",
                suggestion="wrap the code under test in a lambda",
            )
        )
    return Ok(action)


def describe_kind(kinds: ExceptionKinds) -> str:
    """异常类型的可读名称，例如 "KeyError | IndexError" """
    return " | ".join(kind.__name__ for kind in kinds)
