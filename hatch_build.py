"""Hatchling build hook that embeds git build info into the package."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any

from hatchling.builders.hooks.plugin.interface import BuildHookInterface

BUILD_INFO_PATH = "textpad/_build_info.py"


def render_build_info(commit: str | None, date: str | None) -> str:
    return (
        "# Auto-generated at build time.\n"
        f"COMMIT = {commit!r}\n"
        f"DATE = {date!r}\n"
    )


def run_git(args: list[str], cwd: Path) -> str | None:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd),
                                      stderr=subprocess.DEVNULL)
        return out.decode().strip() or None
    except (subprocess.CalledProcessError, OSError):
        # Building outside a git checkout records unknown commit and date
        return None


def write_build_info(project_root: Path) -> Path:
    target_path = project_root / BUILD_INFO_PATH
    commit = run_git(["rev-parse", "HEAD"], cwd=project_root)
    date = run_git(["show", "-s", "--format=%cI", "HEAD"], cwd=project_root)
    target_path.write_text(render_build_info(commit, date), encoding="utf-8")
    return target_path


class CustomBuildHook(BuildHookInterface):
    """Generate textpad/_build_info.py and ship it with the build."""

    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        write_build_info(Path(self.root))
        build_data.setdefault("artifacts", []).append(BUILD_INFO_PATH)
