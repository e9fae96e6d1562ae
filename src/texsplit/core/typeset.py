"""Run the LaTeX compiler once, or on every change to the project tree"""

import logging
import subprocess
import time
from pathlib import Path
from typing import Callable

from texsplit.config import Settings


logger = logging.getLogger(__name__)

TEMP_SUFFIXES = ("~", ".swp", ".tmp")


def should_ignore(path: Path, build_dir: str = "build") -> bool:
    """Editor temp/swap files and anything under the build directory."""
    name = path.name
    if name.startswith(".#") or name.endswith(TEMP_SUFFIXES) or "undo-tree" in name:
        return True
    return build_dir in path.parts


def snapshot(project_dir: Path, build_dir: str = "build") -> dict[Path, float]:
    """Map each watched file to its modification time."""
    mtimes = {}
    for p in project_dir.rglob("*"):
        rel = p.relative_to(project_dir)
        if should_ignore(rel, build_dir):
            continue
        try:
            if p.is_file():
                mtimes[p] = p.stat().st_mtime
        except FileNotFoundError:
            continue    # removed between listing and stat
    return mtimes


def changed_paths(before: dict[Path, float], after: dict[Path, float]) -> list[Path]:
    """Files that were modified or created between two snapshots."""
    return sorted(p for p, mtime in after.items() if before.get(p) != mtime)


def compile_project(project_dir: Path, settings: Settings) -> None:
    """Compile main_file into build_dir. Raises RuntimeError on failure."""
    build_dir = project_dir / settings.build_dir
    build_dir.mkdir(parents=True, exist_ok=True)
    cmd = [settings.compiler_cmd, "-X", "compile", settings.main_file, f"--outdir={build_dir}"]
    logger.info("Compilation started: %s", " ".join(cmd))
    try:
        subprocess.run(cmd, check=True, cwd=str(project_dir))
    except FileNotFoundError as e:
        raise RuntimeError(f"Compiler not found: {settings.compiler_cmd}") from e
    except subprocess.CalledProcessError as e:
        raise RuntimeError(f"Compilation failed with status {e.returncode}") from e
    logger.info("Compilation succeeded")


def watch_project(
    project_dir: Path,
    settings: Settings,
    should_stop: Callable[[], bool] = lambda: False,
    ) -> None:
    """Poll project_dir and recompile once changes have been quiet for debounce_ms."""
    poll = settings.poll_ms / 1000
    debounce = settings.debounce_ms / 1000
    (project_dir / settings.build_dir).mkdir(parents=True, exist_ok=True)
    previous = snapshot(project_dir, settings.build_dir)
    last_change = None
    logger.info("Watching %s", project_dir)

    while not should_stop():
        time.sleep(poll)
        current = snapshot(project_dir, settings.build_dir)
        changed = changed_paths(previous, current)
        previous = current
        for p in changed:
            logger.info("Detected change: %s", p)
        if changed:
            last_change = time.monotonic()
            continue
        if last_change is not None and time.monotonic() - last_change >= debounce:
            last_change = None
            try:
                compile_project(project_dir, settings)
            except RuntimeError as e:
                logger.error("%s", e)
