"""Copy embedded media out of a .docx container"""

import logging
import zipfile
from pathlib import Path, PurePosixPath


logger = logging.getLogger(__name__)

MEDIA_PREFIX = "word/media/"


def extract_media(docx_path: Path, output_dir: Path, prefix: str = MEDIA_PREFIX) -> list[Path]:
    """Write every archive entry under prefix to output_dir by base name. Returns written paths."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    with zipfile.ZipFile(docx_path, "r") as zf:
        for info in zf.infolist():
            if info.is_dir() or not info.filename.startswith(prefix):
                continue
            out_path = output_dir / PurePosixPath(info.filename).name
            out_path.write_bytes(zf.read(info))
            written.append(out_path)
    logger.info("Extracted %d media file(s) to %s", len(written), output_dir)
    return written
