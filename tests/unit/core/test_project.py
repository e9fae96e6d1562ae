"""Unit tests for core/project.py"""

import pytest

from texsplit.config import Settings
from texsplit.core import project
from texsplit.core.project import create_project, insert_inputs, update_project, write_articles


MAIN = "\\begin{document}\n% Main content\n\\end{document}\n"


# --- insert_inputs ---

def test_insert_inputs_after_sentinel():
    """One \\input line per article follows the sentinel, in index order."""
    text, inserted = insert_inputs(MAIN, "p", 2)
    assert inserted
    assert text == (
        "\\begin{document}\n% Main content\n"
        "\\input{src/p/001.tex}\n\\input{src/p/002.tex}\n"
        "\\end{document}\n"
    )


def test_insert_inputs_first_sentinel_only():
    main = "% Main content\nx\n% Main content\n"
    text, _ = insert_inputs(main, "p", 1)
    assert text == "% Main content\n\\input{src/p/001.tex}\nx\n% Main content\n"


def test_insert_inputs_sentinel_with_whitespace():
    text, inserted = insert_inputs("  % Main content  \nend\n", "p", 1)
    assert inserted
    assert text == "  % Main content  \n\\input{src/p/001.tex}\nend\n"


def test_insert_inputs_sentinel_on_last_line():
    text, _ = insert_inputs("% Main content", "p", 1)
    assert text == "% Main content\n\\input{src/p/001.tex}\n"


def test_insert_inputs_missing_sentinel(caplog):
    """Without a sentinel the document is returned unchanged."""
    text, inserted = insert_inputs("\\begin{document}\n\\end{document}\n", "p", 3)
    assert not inserted
    assert text == "\\begin{document}\n\\end{document}\n"
    assert "not found" in caplog.text


def test_insert_inputs_custom_sentinel():
    text, inserted = insert_inputs("%% ARTICLES\n", "p", 1, sentinel="%% ARTICLES")
    assert inserted
    assert "\\input{src/p/001.tex}" in text


# --- write_articles / create_project ---

def test_write_articles_numbered_from_one(tmp_path):
    paths = write_articles(["first", "second"], tmp_path / "src" / "p")
    assert [p.name for p in paths] == ["001.tex", "002.tex"]
    assert paths[1].read_text(encoding="utf-8") == "second"


def test_create_project_copies_template(tmp_path):
    template = tmp_path / "template"
    (template / "fonts").mkdir(parents=True)
    (template / "main.tex").write_text(MAIN)
    (template / "fonts" / "f.otf").write_text("font")

    dest = create_project(template, tmp_path / "new")
    assert (dest / "main.tex").read_text() == MAIN
    assert (dest / "fonts" / "f.otf").exists()


def test_create_project_missing_template(tmp_path):
    with pytest.raises(FileNotFoundError, match="Template"):
        create_project(tmp_path / "nope", tmp_path / "new")


# --- update_project ---

@pytest.fixture(name="fake_pandoc")
def fake_pandoc_fixture(monkeypatch):
    """Replace the pandoc call with canned LaTeX; records the requested paths."""
    calls = []

    def _run(path, pandoc_cmd="pandoc"):
        calls.append(path)
        return "Cover\n\\textbf{IRSTI 1.2}\nOne\n\\textbf{IRSTI 3.4}\nTwo \\includegraphics{media/image1.png}\n"

    monkeypatch.setattr(project, "run_pandoc", _run)
    return calls


def test_update_project_writes_everything(make_docx, project_dir, fake_pandoc):
    docx = make_docx()
    result = update_project(docx, project_dir, Settings())

    assert fake_pandoc == [docx]
    assert result.part == "part1"
    assert result.inserted
    assert [p.name for p in result.articles] == ["001.tex", "002.tex"]

    part_dir = project_dir / "src" / "part1"
    assert (part_dir / "part1.docx").exists()
    assert (part_dir / "001.tex").read_text(encoding="utf-8") == "\\id{IRSTI 1.2}{}\nOne"
    assert "\\fig{part1/image1}{}" in (part_dir / "002.tex").read_text(encoding="utf-8")

    assert (project_dir / "media" / "part1" / "image1.png").exists()
    main = (project_dir / "main.tex").read_text(encoding="utf-8")
    assert "% Main content\n\\input{src/part1/001.tex}\n\\input{src/part1/002.tex}\n" in main


def test_update_project_wraps_failures(make_docx, tmp_path, fake_pandoc):
    """A missing main document fails the part before anything is written."""
    bare = tmp_path / "bare"
    bare.mkdir()
    with pytest.raises(RuntimeError, match="part1"):
        update_project(make_docx(), bare, Settings())
    assert fake_pandoc == []
    assert list(bare.iterdir()) == []


def test_update_project_decode_error(make_docx, project_dir, monkeypatch):
    """Undecodable converter output aborts the part."""
    def _bad(path, pandoc_cmd="pandoc"):
        return b"\xff\xfe".decode("utf-8")

    monkeypatch.setattr(project, "run_pandoc", _bad)
    with pytest.raises(RuntimeError) as excinfo:
        update_project(make_docx(), project_dir, Settings())
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
    assert not (project_dir / "src").exists()
    assert not (project_dir / "media").exists()
    assert "\\input" not in (project_dir / "main.tex").read_text(encoding="utf-8")
