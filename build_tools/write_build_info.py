"""Write textpad/_build_info.py outside of a hatch build."""

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def main() -> None:
    sys.path.insert(0, str(PROJECT_ROOT))
    from hatch_build import write_build_info

    print(write_build_info(PROJECT_ROOT))


if __name__ == "__main__":
    main()
