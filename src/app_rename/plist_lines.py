"""
`Info.plist` 的按行字段读写。

不解析 XML 结构，只匹配 `<key>NAME</key>` 行及其紧随的 `<string>` 值行，
其余内容逐字节保留。
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from .line_file import Line

APP_NAME_KEY = "CFBundleName"
DISPLAY_NAME_KEY = "CFBundleDisplayName"

_STRING_RE = re.compile(r"<string>(.*?)</string>")


def key_marker(key: str) -> str:
    return f"<key>{key}</key>"


def format_string_line(value: str) -> str:
    """生成写回的值行：前导制表符、尾随回车，值不做转义。"""
    return f"\t<string>{value}</string>\r"


def find_value_line(lines: Sequence[Line], key: str) -> int:
    """
    返回首个 key 行之后值行的下标。

    key 不存在，或 key 行已是最后一行（没有可读的值行）时返回 -1。
    """
    marker = key_marker(key)
    for i, line in enumerate(lines):
        if line is not None and marker in line:
            # 只看第一次出现的 key。
            return i + 1 if i + 1 < len(lines) else -1
    return -1


def read_field(lines: Sequence[Line], key: str) -> str | None:
    """读取 key 对应的 `<string>` 值（已去除首尾空白），找不到时返回 `None`。"""
    idx = find_value_line(lines, key)
    if idx < 0:
        return None
    value_line = lines[idx]
    if value_line is None:
        return None
    m = _STRING_RE.search(value_line)
    return m.group(1).strip() if m else None


def write_field(lines: Sequence[Line], key: str, value: str) -> list[Line]:
    """返回替换了 key 值行的新行列表；key 不存在时原样返回副本。"""
    out = list(lines)
    idx = find_value_line(out, key)
    if idx >= 0:
        out[idx] = format_string_line(value)
    return out
