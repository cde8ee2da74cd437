"""
`project.pbxproj` 中 `PRODUCT_BUNDLE_IDENTIFIER` 的按行读写。

读取时用一个三态扫描器逐行跟踪 `buildSettings = {` ... `};` 块，只有同时含有
主 target `INFOPLIST_FILE` 行的块才算命中：

- `OUTSIDE`：不在任何块内，遇到块起始行进入 `IN_BLOCK`。
- `IN_BLOCK`：块内但尚未看到主 target 标记行。
- `IN_MATCHED_BLOCK`：已确认是主 target 的块。

写入时先读出当前值，再对所有含 `PRODUCT_BUNDLE_IDENTIFIER` 的行做全量替换，
因此 Debug/Release/Profile 等共享同一标识的配置会一起更新。
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace
from enum import Enum

from .line_file import Line

BLOCK_OPEN = "buildSettings = {"
BLOCK_CLOSE = "};"
BUNDLE_ID_KEY = "PRODUCT_BUNDLE_IDENTIFIER"
DEFAULT_COMPANION_MARKER = "INFOPLIST_FILE = Runner/Info.plist"


class ScanState(Enum):
    OUTSIDE = "outside"
    IN_BLOCK = "in_block"
    IN_MATCHED_BLOCK = "in_matched_block"


@dataclass(frozen=True)
class BlockScan:
    """扫描器状态：当前所处状态与本块内最近一次读到的标识。"""

    state: ScanState = ScanState.OUTSIDE
    candidate: str | None = None


def parse_assignment_value(line: str) -> str:
    """取最后一个 `=` 之后的内容，去掉空白与分号。"""
    return line.split("=")[-1].strip().replace(";", "").strip()


def step(
    scan: BlockScan,
    line: Line,
    *,
    companion_marker: str = DEFAULT_COMPANION_MARKER,
) -> tuple[BlockScan, str | None]:
    """
    推进一行，返回 `(新状态, 产出值)`。

    仅当命中的块在关闭时已记录到标识，才产出该值；其余情况产出 `None`。
    块内每行只按顺序匹配一条规则：主 target 标记、赋值行、块结束。
    """
    if line is None:
        return scan, None

    if scan.state is ScanState.OUTSIDE:
        if BLOCK_OPEN in line:
            return BlockScan(state=ScanState.IN_BLOCK), None
        return scan, None

    if companion_marker in line:
        return replace(scan, state=ScanState.IN_MATCHED_BLOCK), None

    if BUNDLE_ID_KEY in line:
        return replace(scan, candidate=parse_assignment_value(line)), None

    if BLOCK_CLOSE in line:
        if scan.state is ScanState.IN_MATCHED_BLOCK and scan.candidate is not None:
            return BlockScan(), scan.candidate
        return BlockScan(), None

    return scan, None


def iter_bundle_ids(
    lines: Sequence[Line],
    *,
    companion_marker: str = DEFAULT_COMPANION_MARKER,
) -> Iterator[str]:
    """按文件顺序惰性产出每个命中块中的标识。"""
    scan = BlockScan()
    for line in lines:
        scan, value = step(scan, line, companion_marker=companion_marker)
        if value is not None:
            yield value


def read_bundle_id(
    lines: Sequence[Line],
    *,
    companion_marker: str = DEFAULT_COMPANION_MARKER,
) -> str | None:
    """返回第一个命中块中的标识，找不到时返回 `None`。"""
    return next(iter_bundle_ids(lines, companion_marker=companion_marker), None)


def replace_bundle_id(lines: Sequence[Line], old_id: str, new_id: str) -> list[Line]:
    """在所有赋值行中把 `old_id` 的每次出现替换为 `new_id`，其余行保持不变。"""
    out: list[Line] = []
    for line in lines:
        if line is not None and BUNDLE_ID_KEY in line:
            line = line.replace(old_id, new_id)
        out.append(line)
    return out


def write_bundle_id(
    lines: Sequence[Line],
    new_id: str,
    *,
    companion_marker: str = DEFAULT_COMPANION_MARKER,
) -> tuple[list[Line], str] | None:
    """
    改写主 target 的标识，返回 `(新行列表, 旧标识)`。

    读不到当前标识（或其为空串）时没有可替换的锚点，返回 `None` 且不修改任何行。
    替换范围覆盖所有块，而不只是用于读取的那个块。
    """
    old_id = read_bundle_id(lines, companion_marker=companion_marker)
    if not old_id:
        return None
    return replace_bundle_id(lines, old_id, new_id), old_id
