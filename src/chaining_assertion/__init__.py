"""链式断言 - unittest 断言 API 之上的流式断言扩展"""

from .cases import test_case, test_case_source
from .core import Chain, FailureHint, catch, does_not_throw, that, throws
from .dynamic import DynamicAccessor, as_dynamic

__all__ = [
    "Chain",
    "that",
    "throws",
    "catch",
    "does_not_throw",
    "as_dynamic",
    "DynamicAccessor",
    "test_case",
    "test_case_source",
    "FailureHint",
]
