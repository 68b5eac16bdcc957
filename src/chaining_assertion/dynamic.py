"""动态成员访问 - 测试专用的私有成员访问器

as_dynamic(obj) 返回一个代理，通过裸名字即可读写对象的 _private 成员和
名字改写后的 __private 成员::

    as_dynamic(account).private_method()        # account._private_method()
    as_dynamic(account).balance = 10            # account._Account__balance = 10
"""

from typing import Any

from rusty_results.prelude import Err, Ok, Result

from .core.fuzzy import bare_name, suggest_names
from .core.validators import FailureHint
from .utils.logger import logger

_TARGET = "_dynamic_target"
_MISSING = object()


def _owner_type(target: object) -> type:
    return target if isinstance(target, type) else type(target)


def candidate_names(target: object, name: str) -> list[str]:
    """按解析顺序列出 name 可能对应的真实属性名"""
    bare = bare_name(name)
    candidates = [name, f"_{bare}", f"__{bare}"]

    for cls in _owner_type(target).__mro__:
        candidates.append(f"_{cls.__name__.lstrip('_')}__{bare}")

    # 去重并保持顺序
    return list(dict.fromkeys(candidates))


def resolve_member(target: object, name: str) -> Result[str, FailureHint]:
    """找到 target 上与 name 对应的真实属性名"""
    for candidate in candidate_names(target, name):
        if getattr(target, candidate, _MISSING) is not _MISSING:
            return Ok(candidate)

    owner = _owner_type(target).__name__
    suggestions = suggest_names(name, dir(target))
    if suggestions:
        return Err(
            FailureHint(
                f"{owner!r} object has no member {bare_name(name)!r}",
                suggestion="did you mean " + ", ".join(suggestions) + "?",
            )
        )
    return Err(FailureHint(f"{owner!r} object has no member {bare_name(name)!r}"))


class DynamicAccessor:
    """对象的私有成员代理"""

    def __init__(self, target: Any):
        object.__setattr__(self, _TARGET, target)

    def __getattr__(self, name: str) -> Any:
        target = object.__getattribute__(self, _TARGET)

        match resolve_member(target, name):
            case Err(e):
                raise AttributeError(str(e))
            case Ok(member):
                pass

        logger.debug(f"[Dynamic] get {name} -> {member}")
        return getattr(target, member)

    def __setattr__(self, name: str, value: Any) -> None:
        target = object.__getattribute__(self, _TARGET)

        # 不允许通过代理新建属性，拼写错误时直接报错
        match resolve_member(target, name):
            case Err(e):
                raise AttributeError(str(e))
            case Ok(member):
                pass

        logger.debug(f"[Dynamic] set {name} -> {member}")
        setattr(target, member, value)

    def __dir__(self) -> list[str]:
        return dir(object.__getattribute__(self, _TARGET))

    def __repr__(self) -> str:
        return f"as_dynamic({object.__getattribute__(self, _TARGET)!r})"


def as_dynamic(target: Any) -> DynamicAccessor:
    """创建 target 的私有成员代理"""
    return DynamicAccessor(target)
