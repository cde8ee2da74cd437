"""
`app-rename` 的命令行入口模块。

负责解析工程路径与子命令，并调用 `IosPlatformFileEditor` 的四个读写操作。
"""

import argparse
import os
from collections.abc import Sequence

from .build_settings import DEFAULT_COMPANION_MARKER
from .ios_editor import IosPlatformFileEditor
from .types import IosProjectPaths


def _log_step(message: str) -> None:
    """输出简洁的流程阶段提示。"""
    print(f"[app-rename] {message}")


def _abs(p: str) -> str:
    """将输入路径展开为绝对路径。"""
    return os.path.abspath(os.path.expanduser(p))


def _resolve_paths(ns: argparse.Namespace) -> IosProjectPaths:
    """根据工程目录与单独覆盖的文件参数得到最终路径。"""
    defaults = IosProjectPaths.for_project(
        _abs(ns.project_dir or os.getcwd()),
        companion_marker=ns.companion_marker,
    )
    return IosProjectPaths(
        info_plist=_abs(ns.info_plist) if ns.info_plist else defaults.info_plist,
        pbxproj=_abs(ns.pbxproj) if ns.pbxproj else defaults.pbxproj,
        companion_marker=defaults.companion_marker,
    )


def _require_file(path: str, flag: str) -> None:
    if not os.path.isfile(path):
        raise SystemExit(
            f"Error: file not found: {path}\n"
            f"Hint: run inside the project root, or pass -C/--project-dir or {flag}.\n"
        )


def build_parser() -> argparse.ArgumentParser:
    """构建并返回 `app-rename` 命令行参数解析器。"""
    p = argparse.ArgumentParser(
        prog="app-rename",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "Read or change the iOS app name (Info.plist) and bundle id (project.pbxproj).\n"
            "Only the affected lines are rewritten; everything else is kept byte-for-byte."
        ),
    )
    p.add_argument(
        "-C",
        "--project-dir",
        default="",
        help="Project root containing ios/ (default: current directory)",
    )
    p.add_argument("--info-plist", default="", help="Info.plist path (default: ios/Runner/Info.plist)")
    p.add_argument(
        "--pbxproj",
        default="",
        help="project.pbxproj path (default: ios/Runner.xcodeproj/project.pbxproj)",
    )
    p.add_argument(
        "--companion-marker",
        default=DEFAULT_COMPANION_MARKER,
        help=f"Line that marks the main target's buildSettings block (default: {DEFAULT_COMPANION_MARKER})",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would change without writing files",
    )
    p.add_argument("--verbose", action="store_true", help="Print every changed line")

    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True
    sub.add_parser("get-app-name", help="Print CFBundleName from Info.plist")
    set_name = sub.add_parser(
        "set-app-name",
        help="Set CFBundleName and CFBundleDisplayName in Info.plist",
    )
    set_name.add_argument("value", metavar="NAME")
    sub.add_parser("get-bundle-id", help="Print the main target's PRODUCT_BUNDLE_IDENTIFIER")
    set_id = sub.add_parser(
        "set-bundle-id",
        help="Replace the main target's PRODUCT_BUNDLE_IDENTIFIER in every build configuration",
    )
    set_id.add_argument("value", metavar="BUNDLE_ID")
    return p


def _print_value(value: str | None) -> int:
    print(value if value is not None else "-")
    return 0 if value is not None else 1


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 入口：解析参数、校验文件并执行对应的读写操作。"""
    parser = build_parser()
    ns = parser.parse_args(argv)

    paths = _resolve_paths(ns)
    editor = IosPlatformFileEditor(paths, dry_run=bool(ns.dry_run), verbose=bool(ns.verbose))

    if ns.command in ("get-app-name", "set-app-name"):
        target = paths.info_plist
        _require_file(target, "--info-plist")
    else:
        target = paths.pbxproj
        _require_file(target, "--pbxproj")

    try:
        if ns.command == "get-app-name":
            return _print_value(editor.get_app_name())
        if ns.command == "get-bundle-id":
            return _print_value(editor.get_bundle_id())

        if ns.dry_run:
            _log_step("Dry-run mode enabled (no file modifications)")
        _log_step(f"Editing {target}")
        if ns.command == "set-app-name":
            message = editor.set_app_name(ns.value)
            if message is None:
                raise SystemExit(
                    "Error: CFBundleName / CFBundleDisplayName not found in "
                    f"{target}; nothing to update.\n"
                )
        else:
            message = editor.set_bundle_id(ns.value)
            if message is None:
                raise SystemExit(
                    f"Error: current bundle id not found in {target}.\n"
                    "Hint: check that a buildSettings block contains "
                    f"'{paths.companion_marker}' and PRODUCT_BUNDLE_IDENTIFIER "
                    "(see --companion-marker).\n"
                )
    except OSError as e:
        raise SystemExit(f"Error: failed to access {target}\nDetail: {e}\n") from e

    _log_step(message)
    return 0
