"""核心模块 - 异常匹配、链式断言和参数验证"""

from . import fuzzy, matcher, validators
from .chain import Chain, that
from .matcher import catch, does_not_throw, throws
from .validators import FailureHint

__all__ = [
    "fuzzy",
    "matcher",
    "validators",
    "Chain",
    "that",
    "throws",
    "catch",
    "does_not_throw",
    "FailureHint",
]
