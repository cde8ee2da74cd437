"""
编辑器与 CLI 共享的轻量类型定义。
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .build_settings import DEFAULT_COMPANION_MARKER

INFO_PLIST_RELPATH = os.path.join("ios", "Runner", "Info.plist")
PBXPROJ_RELPATH = os.path.join("ios", "Runner.xcodeproj", "project.pbxproj")


@dataclass(frozen=True)
class IosProjectPaths:
    """iOS 工程中需要读写的两个文件，以及识别主 target 的标记行。"""

    info_plist: str
    pbxproj: str
    # `buildSettings` 块中出现该子串即视为主 target 的配置块。
    companion_marker: str = DEFAULT_COMPANION_MARKER

    @classmethod
    def for_project(
        cls,
        project_dir: str,
        *,
        companion_marker: str = DEFAULT_COMPANION_MARKER,
    ) -> IosProjectPaths:
        """按 Flutter 工程默认布局解析文件路径。"""
        return cls(
            info_plist=os.path.join(project_dir, INFO_PLIST_RELPATH),
            pbxproj=os.path.join(project_dir, PBXPROJ_RELPATH),
            companion_marker=companion_marker,
        )
