import pytest

from teleprompter.domain.document import TeleprompterDocument


def test_document_derives_metrics_from_content():
    document = TeleprompterDocument(title="Talk", content="x" * 3000)

    assert document.word_count == 3000
    assert document.estimated_duration == pytest.approx(900.0)
    assert document.last_modified == document.created_at
    assert document.is_empty is False


def test_empty_document_gets_minimum_duration():
    document = TeleprompterDocument(title="Empty", content="")

    assert document.is_empty is True
    assert document.word_count == 0
    assert document.estimated_duration == 30.0


def test_update_content_and_title_refresh_metadata():
    document = TeleprompterDocument(
        title="Draft",
        content="short",
        chars_per_minute=100,
        min_duration_seconds=1,
    )
    created_at = document.created_at

    document.update_content("y" * 200)
    assert document.word_count == 200
    assert document.estimated_duration == pytest.approx(120.0)
    assert document.last_modified >= created_at

    document.update_title("Final")
    assert document.title == "Final"
    assert document.created_at == created_at
