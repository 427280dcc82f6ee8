"""
片段序号集合

以合并后的闭区间列表保存序号，内存占用与区间个数成正比，
与区间覆盖的序号个数无关（例如 "0-4294967295" 只占一个区间）。
对外表现为一个只读的集合，可以直接与 set / frozenset 比较。
"""
from bisect import bisect_right
from collections.abc import Set
from typing import Iterable, Iterator, Tuple


class IndexSet(Set):
    """
    只读的非负整数集合

    Args:
        ranges: 闭区间 (begin, end) 序列，可以重叠、无序
    """

    def __init__(self, ranges: Iterable[Tuple[int, int]] = ()):
        merged = []
        for begin, end in sorted(ranges):
            if begin < 0 or begin > end:
                raise ValueError(f"非法区间: {begin}-{end}")
            if merged and begin <= merged[-1][1] + 1:
                merged[-1] = (merged[-1][0], max(merged[-1][1], end))
            else:
                merged.append((begin, end))

        self._ranges = tuple(merged)
        self._starts = [begin for begin, _ in merged]

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "IndexSet":
        """由单个序号构建集合"""
        return cls((value, value) for value in values)

    @classmethod
    def _from_iterable(cls, it):
        return cls.from_values(it)

    def ranges(self) -> Tuple[Tuple[int, int], ...]:
        """获取合并后的闭区间"""
        return self._ranges

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        pos = bisect_right(self._starts, value) - 1
        return pos >= 0 and value <= self._ranges[pos][1]

    def __iter__(self) -> Iterator[int]:
        for begin, end in self._ranges:
            yield from range(begin, end + 1)

    def __len__(self) -> int:
        return sum(end - begin + 1 for begin, end in self._ranges)

    def __bool__(self) -> bool:
        return bool(self._ranges)

    def __repr__(self) -> str:
        parts = [
            str(begin) if begin == end else f"{begin}-{end}"
            for begin, end in self._ranges
        ]
        return f"IndexSet({','.join(parts)!r})"
