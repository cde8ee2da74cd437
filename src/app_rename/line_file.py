"""
按行读写文本配置文件的轻量工具。

读写约定：
- 仅按 `\\n` 切分，`\\r` 等其余字符保留在行内。
- 无法按 UTF-8 解码的行记为 `None`，写回时原样输出其原始字节。
- 保存为整体覆盖写入，不做临时文件替换。
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

Line = str | None


@dataclass
class LineFile:
    """一个文件的有序行序列及其原始字节分段。"""

    path: str
    lines: list[Line]
    raw: list[bytes] = field(default_factory=list, repr=False)


def load_lines(path: str) -> LineFile:
    """读取文件并按行拆分，路径不存在或不可读时抛出 `OSError`。"""
    with open(path, "rb") as f:
        data = f.read()
    raw = data.split(b"\n")
    lines: list[Line] = []
    for chunk in raw:
        try:
            lines.append(chunk.decode("utf-8"))
        except UnicodeDecodeError:
            lines.append(None)
    return LineFile(path=path, lines=lines, raw=raw)


def _encode_line(i: int, line: Line, raw: Sequence[bytes] | None) -> bytes:
    if line is not None:
        return line.encode("utf-8")
    if raw is not None and i < len(raw):
        return raw[i]
    return b""


def save_lines(path: str, lines: Sequence[Line], *, raw: Sequence[bytes] | None = None) -> None:
    """以 `\\n` 连接各行并覆盖写回文件。"""
    data = b"\n".join(_encode_line(i, line, raw) for i, line in enumerate(lines))
    with open(path, "wb") as f:
        f.write(data)


def changed_line_indices(old: Sequence[Line], new: Sequence[Line]) -> list[int]:
    """返回新旧行序列中内容不同的下标。"""
    return [i for i, (a, b) in enumerate(zip(old, new)) if a != b]
