"""pandoc adapter: .docx -> LaTeX text"""

import logging
import subprocess
from pathlib import Path


logger = logging.getLogger(__name__)


def run_pandoc(input_path: Path, pandoc_cmd: str = "pandoc") -> str:
    """Convert a .docx file to LaTeX and return it as text.

    Output is decoded as strict UTF-8; a bad byte raises UnicodeDecodeError.
    """
    cmd = [pandoc_cmd, str(input_path), "-f", "docx", "-t", "latex"]
    logger.info("Running %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, check=True, capture_output=True)
    except FileNotFoundError as e:
        raise RuntimeError(f"pandoc executable not found: {pandoc_cmd}") from e
    except subprocess.CalledProcessError as e:
        stderr = e.stderr.decode("utf-8", errors="replace").strip()
        raise RuntimeError(f"pandoc failed on {input_path}: {stderr}") from e
    return result.stdout.decode("utf-8")
