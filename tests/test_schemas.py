import warnings
from datetime import datetime, timezone
from types import SimpleNamespace

from docsearch.schemas.document import DocumentOut, DocumentSummary


def test_summary_reads_orm_attributes() -> None:
    row = SimpleNamespace(id=1, title="Search Engines", content="Search engines crawl.")

    summary = DocumentSummary.model_validate(row)

    assert summary.model_dump() == {"id": 1, "title": "Search Engines", "content": "Search engines crawl."}


def test_document_out_builds_without_deprecation_warnings() -> None:
    row = SimpleNamespace(
        id=2,
        title="Empty",
        content="",
        terms=[],
        term_frequency={},
        created_at=datetime.now(timezone.utc),
    )

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        out = DocumentOut.model_validate(row)

    assert out.terms == []
    assert out.term_frequency == {}
