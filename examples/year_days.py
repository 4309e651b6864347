#!/usr/bin/env python3
"""Print the current year and how many days it has."""

import sys
from pathlib import Path


def get_project_root() -> Path:
    """Locate the repository root containing ``pyproject.toml``."""
    for parent in Path(__file__).resolve().parents:
        if (parent / "pyproject.toml").exists():
            return parent
    raise RuntimeError("Unable to locate project root")


sys.path.insert(0, str(get_project_root() / "src"))

from datetimeutils import EpochTime, days_in_year  # noqa: E402


def main() -> int:
    now = EpochTime.now()
    print(f"The current year is {now.year}, which has {days_in_year(now.year)} days")
    return 0


if __name__ == "__main__":
    sys.exit(main())
