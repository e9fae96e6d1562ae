"""Root test configuration: environment isolation and .docx fixtures"""

import os
import zipfile
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop TEXSPLIT_* variables so tests only see their own configuration."""
    for name in list(os.environ):
        if name.startswith("TEXSPLIT_"):
            monkeypatch.delenv(name)


@pytest.fixture(name="make_docx")
def make_docx_fixture(tmp_path):
    """Build a minimal .docx-shaped zip with the given entries."""
    def _make(name: str = "part1.docx", entries: dict[str, bytes] = None) -> Path:
        path = tmp_path / name
        entries = entries if entries is not None else {
            "word/document.xml": b"<w:document/>",
            "word/media/image1.png": b"\x89PNG",
            "word/media/nested/image2.emf": b"EMF",
        }
        with zipfile.ZipFile(path, "w") as zf:
            for entry, data in entries.items():
                zf.writestr(entry, data)
        return path
    return _make


@pytest.fixture(name="project_dir")
def project_dir_fixture(tmp_path):
    """Project directory with a main.tex carrying the insertion sentinel."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "main.tex").write_text(
        "\\documentclass{article}\n\\begin{document}\n% Main content\n\\end{document}\n",
        encoding="utf-8",
    )
    return project
