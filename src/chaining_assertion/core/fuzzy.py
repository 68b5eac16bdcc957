"""成员名匹配器 - 负责成员名模糊匹配和排序"""

import re
from collections.abc import Iterable

from thefuzz import fuzz

from ..config import FUZZY_MATCH_THRESHOLD, MAX_SUGGESTIONS

_MANGLED = re.compile(r"_[A-Za-z0-9]\w*?__(?P<name>\w+)")


def bare_name(name: str) -> str:
    """去掉名字改写前缀和前导下划线，例如 "_Foo__bar" -> "bar" """
    match = _MANGLED.fullmatch(name)
    if match:
        name = match.group("name")
    return name.lstrip("_")


def fuzzy_match(name1: str, name2: str) -> float:
    """计算两个名字的相似度（使用 Levenshtein Distance）

    Args:
        name1: 第一个名字
        name2: 第二个名字

    Returns:
        相似度分数 (0-1)
    """
    return fuzz.ratio(name1.lower(), name2.lower()) / 100.0


def suggest_names(query: str, names: Iterable[str]) -> list[str]:
    """找出与 query 相似的名字（按相似度降序，最多 MAX_SUGGESTIONS 个）

    Args:
        query: 查询的名字
        names: 候选名字

    Returns:
        相似度达到阈值的候选名字
    """
    query_bare = bare_name(query)
    scored = []

    for name in set(names):
        score = fuzzy_match(query_bare, bare_name(name))
        if score >= FUZZY_MATCH_THRESHOLD:
            scored.append((score, name))

    # 分数相同时按名字排序，保证结果稳定
    scored.sort(key=lambda item: (-item[0], item[1]))
    return [name for _, name in scored[:MAX_SUGGESTIONS]]
