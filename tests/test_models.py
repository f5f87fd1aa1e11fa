import json
from pathlib import Path

from models import OutputPaths, PaperRecord, PersistOptions, normalize_url


def _record(**overrides) -> PaperRecord:
    fields = {
        "paper_id": "http://arxiv.org/abs/2501.00001v1",
        "updated": "2025-01-01T10:00:00Z",
        "published": "2025-01-01T10:00:00Z",
        "title": "A Test Paper",
        "summary": "We test things.",
        "authors": ["Ada Lovelace", "Alan Turing"],
        "primary_category": "cs.CL",
        "categories": ["cs.CL", "cs.AI"],
        "pdf_url": "https://arxiv.org/pdf/2501.00001v1",
        "html_url": "https://arxiv.org/abs/2501.00001v1",
        "comment": None,
    }
    fields.update(overrides)
    return PaperRecord(**fields)


def test_normalize_url_repairs_doubled_scheme() -> None:
    assert normalize_url("httpss://arxiv.org/pdf/1") == "https://arxiv.org/pdf/1"
    assert normalize_url("https://arxiv.org/pdf/1") == "https://arxiv.org/pdf/1"


def test_paper_record_normalizes_urls_on_construction() -> None:
    paper = _record(
        pdf_url="httpss://arxiv.org/pdf/2501.00001v1",
        html_url="httpss://arxiv.org/abs/2501.00001v1",
    )

    assert paper.pdf_url == "https://arxiv.org/pdf/2501.00001v1"
    assert paper.html_url == "https://arxiv.org/abs/2501.00001v1"


def test_to_metadata_excludes_summary() -> None:
    metadata = _record().to_metadata()

    assert "summary" not in metadata
    assert list(metadata) == [
        "id",
        "updated",
        "published",
        "title",
        "authors",
        "primary_category",
        "categories",
        "pdf_url",
        "html_url",
        "comment",
    ]


def test_to_metadata_serializes_null_comment() -> None:
    line = json.dumps(_record().to_metadata())
    assert json.loads(line)["comment"] is None


def test_to_metadata_keeps_comment_when_present() -> None:
    assert _record(comment="12 pages, 3 figures").to_metadata()["comment"] == "12 pages, 3 figures"


def test_output_paths_under_base_dir(tmp_path: Path) -> None:
    paths = OutputPaths.under(tmp_path)

    assert paths.metadata_file == tmp_path / "metadata.jsonl"
    assert paths.pdf_dir == tmp_path / "pdfs"
    assert paths.text_dir == tmp_path / "texts"


def test_persist_options_defaults() -> None:
    options = PersistOptions()

    assert options.save_metadata is True
    assert options.save_pdf is False
    assert options.save_summary is False
    assert options.any_enabled is True
    assert PersistOptions(save_metadata=False).any_enabled is False
