"""
`python -m app_rename` entrypoint.

This is mainly for convenience; the installed console script `app-rename` calls
the same `app_rename.cli:main`.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
