from __future__ import annotations

"""
iOS platform file editor.

Exposes the four operations the CLI layer consumes: read/write the app name in
`Info.plist` and read/write the bundle id in `project.pbxproj`. Every call loads
its file once, edits the lines in memory and saves at most once. Nothing is
cached between calls, and "not found" is reported as `None` rather than raised.
"""

from .build_settings import read_bundle_id, write_bundle_id
from .line_file import Line, changed_line_indices, load_lines, save_lines
from .plist_lines import APP_NAME_KEY, DISPLAY_NAME_KEY, find_value_line, read_field, write_field
from .types import IosProjectPaths


class IosPlatformFileEditor:
    def __init__(self, paths: IosProjectPaths, *, dry_run: bool = False, verbose: bool = False) -> None:
        self.paths = paths
        self.dry_run = dry_run
        self.verbose = verbose

    def _save(self, path: str, old: list[Line], new: list[Line], raw: list[bytes]) -> None:
        if self.verbose:
            for i in changed_line_indices(old, new):
                print(f"~ {path}:{i + 1}: {(new[i] or '').strip()}")
        if self.dry_run:
            return
        save_lines(path, new, raw=raw)

    def get_app_name(self) -> str | None:
        lf = load_lines(self.paths.info_plist)
        return read_field(lf.lines, APP_NAME_KEY)

    def set_app_name(self, app_name: str) -> str | None:
        """Write `app_name` under both CFBundleName and CFBundleDisplayName."""
        lf = load_lines(self.paths.info_plist)
        if (
            find_value_line(lf.lines, APP_NAME_KEY) < 0
            and find_value_line(lf.lines, DISPLAY_NAME_KEY) < 0
        ):
            return None

        old_name = read_field(lf.lines, APP_NAME_KEY)
        # Two independent single-match passes, each scanning from the top.
        lines = write_field(lf.lines, APP_NAME_KEY, app_name)
        lines = write_field(lines, DISPLAY_NAME_KEY, app_name)
        self._save(lf.path, lf.lines, lines, lf.raw)

        if old_name is None:
            return f"Changed iOS app name to {app_name}"
        return f"Changed iOS app name from {old_name} to {app_name}"

    def get_bundle_id(self) -> str | None:
        lf = load_lines(self.paths.pbxproj)
        return read_bundle_id(lf.lines, companion_marker=self.paths.companion_marker)

    def set_bundle_id(self, bundle_id: str) -> str | None:
        """
        Rewrite the main target's bundle id everywhere it is assigned.

        Returns None (and leaves the file untouched) when the current id cannot
        be read from the main target's build settings.
        """
        lf = load_lines(self.paths.pbxproj)
        result = write_bundle_id(
            lf.lines,
            bundle_id,
            companion_marker=self.paths.companion_marker,
        )
        if result is None:
            return None

        lines, old_id = result
        self._save(lf.path, lf.lines, lines, lf.raw)
        return f"Changed iOS bundle id from {old_id} to {bundle_id}"
