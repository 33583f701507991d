"""Unit tests for core/export.py"""

import json

import pytest
import yaml

from distillmd.core.export import export_document, file_stem, write_export


MD = "## 개요\n\n- 핵심 내용"


def test_export_md_has_frontmatter():
    out = export_document("강의 요약", MD, "md", tags=["python"])
    assert out.startswith("---\n")
    header, body = out[4:].split("---\n\n", 1)
    assert yaml.safe_load(header) == {"title": "강의 요약", "tags": ["python"]}
    assert body == MD


def test_export_txt_is_plain():
    assert export_document("제목", MD, "txt") == "제목\n\n개요\n\n핵심 내용\n"


def test_export_html_is_standalone_page():
    out = export_document("A & B", MD, "html")
    assert out.startswith("<!DOCTYPE html>")
    assert "<title>A &amp; B</title>" in out
    assert "<h2>개요</h2>" in out


def test_export_json():
    data = json.loads(export_document("제목", MD, "json", tags=["t"]))
    assert data == {"title": "제목", "tags": ["t"], "markdown": MD}


def test_export_unknown_format():
    with pytest.raises(ValueError, match="Unknown export format"):
        export_document("제목", MD, "pdf")


@pytest.mark.parametrize("title, expected", [
    ("Hello, World!", "hello-world"),
    ("파이썬 강의 요약", "파이썬-강의-요약"),
    ("  --  ", "document"),
])
def test_file_stem(title, expected):
    assert file_stem(title) == expected


def test_write_export_creates_file(tmp_path):
    path = write_export("My Notes", MD, tmp_path / "out", "md")
    assert path == tmp_path / "out" / "my-notes.md"
    assert path.read_text(encoding="utf-8").startswith("---\n")
