"""Binary search over a sorted sequence, with a small interactive demo."""

from __future__ import annotations

import sys
from collections.abc import Sequence

__all__ = ["binary_search", "main"]

DEMO_DATA = (1, 3, 5, 7, 9)


def binary_search(data: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in sorted ``data``, or None if absent."""
    low, high = 0, len(data) - 1
    while low <= high:
        mid = (low + high) // 2
        value = data[mid]
        if value == target:
            return mid
        if value > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def main(argv: list[str] | None = None) -> int:
    """Search the demo data for a number given as argument or read from stdin."""
    args = sys.argv[1:] if argv is None else argv
    raw = args[0] if args else sys.stdin.readline()
    try:
        search = int(raw.strip())
    except ValueError:
        print(f"not a number: {raw.strip()!r}", file=sys.stderr)
        return 1
    index = binary_search(DEMO_DATA, search)
    if index is None:
        print("찾지 못했습니다")
    else:
        print(f"{search}을 {index}에서 찾았습니다")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())