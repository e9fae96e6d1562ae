"""Project scaffolding and per-part updates: fragments, media, and main document inputs"""

import logging
import shutil
from pathlib import Path

from texsplit.config import Settings
from texsplit.core.convert import run_pandoc
from texsplit.core.media import extract_media
from texsplit.core.models import PartResult
from texsplit.core.pipeline import process_text


logger = logging.getLogger(__name__)


def create_project(template_dir: Path, project_dir: Path) -> Path:
    """Copy the template tree into project_dir (which may already exist)."""
    if not template_dir.is_dir():
        raise FileNotFoundError(f"Template directory not found: {template_dir}")
    shutil.copytree(template_dir, project_dir, dirs_exist_ok=True)
    logger.info("Created project %s from %s", project_dir, template_dir)
    return project_dir


def fragment_name(index: int) -> str:
    """1-based article index -> '001.tex'."""
    return f"{index:03d}.tex"


def input_lines(part: str, count: int) -> list[str]:
    return [f"\\input{{src/{part}/{fragment_name(i)}}}" for i in range(1, count + 1)]


def insert_inputs(
    main_text: str,
    part: str,
    count: int,
    sentinel: str = Settings.model_fields["sentinel"].default,
    ) -> tuple[str, bool]:
    """Insert one \\input line per article after the first sentinel line.

    Returns (new_text, inserted). Without a sentinel the text comes back unchanged.
    """
    lines = main_text.splitlines(keepends=True)
    for i, line in enumerate(lines):
        if line.strip() == sentinel:
            if not line.endswith("\n"):
                lines[i] = line + "\n"
            block = "".join(f"{s}\n" for s in input_lines(part, count))
            lines.insert(i + 1, block)
            return "".join(lines), True
    logger.warning("Sentinel %r not found; no inputs inserted for %s", sentinel, part)
    return main_text, False


def write_articles(articles: list[str], part_dir: Path) -> list[Path]:
    """Write articles as part_dir/001.tex, 002.tex, ..."""
    part_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for i, article in enumerate(articles, 1):
        path = part_dir / fragment_name(i)
        path.write_text(article, encoding="utf-8")
        paths.append(path)
    return paths


def update_project(input_path: Path, project_dir: Path, settings: Settings) -> PartResult:
    """Convert one .docx part and merge its articles and media into project_dir.

    The main document is read and the part converted before anything is
    written, so a failing part leaves the project untouched.
    """
    part = input_path.stem
    try:
        main_path = project_dir / settings.main_file
        main_source = main_path.read_text(encoding="utf-8")

        latex = run_pandoc(input_path, settings.pandoc_cmd)
        articles = process_text(
            latex, part,
            removed_commands=settings.removed_commands,
            prefixes=settings.marker_prefixes,
            keep_preamble=settings.keep_preamble,
        )
        main_text, inserted = insert_inputs(main_source, part, len(articles), settings.sentinel)

        part_dir = project_dir / "src" / part
        article_paths = write_articles(articles, part_dir)
        shutil.copy(input_path, part_dir / input_path.name)
        logger.info("Wrote %d article(s) for %s", len(article_paths), part)

        media = extract_media(input_path, project_dir / "media" / part, settings.media_prefix)
        main_path.write_text(main_text, encoding="utf-8")
    except Exception as e:
        raise RuntimeError(f"Failed to update {part}: {e}") from e

    return PartResult(part=part, articles=article_paths, media=media, inserted=inserted)
