"""
Test suite for the content aggregator.

Pure merge/render helpers are tested directly; ContentAggregator is
exercised against the in-memory SQLite database.

System role: Verification of module context retrieval and deduplication
"""

import uuid

import pytest

from tutorbot.boundary.db.CRUD import module_content_crud, module_crud, processed_document_crud
from tutorbot.boundary.db.models import ModuleContentModel, ProcessedDocumentModel
from tutorbot.core.context import ContentAggregator, merge_documents, render_module_context
from tutorbot.core.prompting import CONTENT_SENTINEL, has_content


def _content_row(**overrides) -> ModuleContentModel:
    fields = {
        "id": uuid.uuid4(),
        "module_id": uuid.uuid4(),
        "file_name": "notes.pdf",
        "file_type": "application/pdf",
        "extracted_text": "raw text",
        "processed_content": None,
        "document_id": None,
    }
    fields.update(overrides)
    return ModuleContentModel(**fields)


def _processed_row(**overrides) -> ProcessedDocumentModel:
    fields = {
        "id": uuid.uuid4(),
        "course_id": uuid.uuid4(),
        "original_filename": "slides.pdf",
        "processed_text": "slide text",
    }
    fields.update(overrides)
    return ProcessedDocumentModel(**fields)


class TestMergeDocuments:
    """Deduplication and field selection."""

    def test_processed_row_linked_from_content_is_dropped(self) -> None:
        # Arrange
        processed = _processed_row(processed_text="shared text")
        content = _content_row(document_id=processed.id, processed_content="shared text")

        # Act
        docs = merge_documents([content], [processed])

        # Assert
        assert [d.source for d in docs] == ["module_content"]

    def test_unlinked_rows_from_both_tables_are_kept(self) -> None:
        # Arrange
        content = _content_row()
        processed = _processed_row()

        # Act
        docs = merge_documents([content], [processed])

        # Assert
        assert {d.id for d in docs} == {content.id, processed.id}

    def test_processed_content_preferred_over_extracted_text(self) -> None:
        # Arrange
        content = _content_row(extracted_text="raw", processed_content="clean")

        # Act
        (doc,) = merge_documents([content], [])

        # Assert
        assert doc.text == "clean"

    def test_extracted_text_used_when_not_processed(self) -> None:
        # Act
        (doc,) = merge_documents([_content_row(extracted_text="raw")], [])

        # Assert
        assert doc.text == "raw"

    @pytest.mark.parametrize(
        "filename,title,expected",
        [
            ("a.pdf", "Title", "a.pdf"),
            ("", "Title", "Title"),
            ("", None, "Unnamed document"),
        ],
    )
    def test_processed_display_name_fallbacks(
        self, filename: str, title: str | None, expected: str
    ) -> None:
        # Act
        (doc,) = merge_documents([], [_processed_row(original_filename=filename, title=title)])

        # Assert
        assert doc.name == expected


class TestRenderModuleContext:
    def test_no_documents_returns_none(self) -> None:
        assert render_module_context([]) is None

    def test_blank_documents_return_none(self) -> None:
        # Arrange
        docs = merge_documents(
            [_content_row(extracted_text="   ", processed_content=None)],
            [_processed_row(processed_text="\n\t")],
        )

        # Act / Assert
        assert render_module_context(docs) is None

    def test_render_format(self) -> None:
        # Arrange
        docs = merge_documents(
            [_content_row(file_name="a.pdf", processed_content="alpha")],
            [_processed_row(original_filename="b.pdf", processed_text="beta")],
        )

        # Act
        context = render_module_context(docs)

        # Assert
        assert context == (
            f"{CONTENT_SENTINEL}\n\n"
            "File: a.pdf\nContent:\nalpha"
            "\n\n---\n\n"
            "File: b.pdf\nContent:\nbeta"
        )
        assert has_content(context)


class TestContentAggregator:
    """ContentAggregator against the SQLite database."""

    @pytest.fixture
    async def module(self, test_async_db, user_id):
        return await module_crud.create(test_async_db, user_id=user_id, name="Algorithms")

    async def test_empty_module_returns_none(self, test_async_db, module) -> None:
        # Arrange
        aggregator = ContentAggregator(test_async_db)

        # Act
        context = await aggregator.get_module_context(module.id)
        counts = await aggregator.count_module_documents(module.id)

        # Assert
        assert context is None
        assert counts.total == 0

    async def test_one_block_per_distinct_document(self, test_async_db, module, timestamps) -> None:
        # Arrange
        await module_content_crud.create(
            test_async_db,
            module_id=module.id,
            file_name="week1.pdf",
            extracted_text="Week one",
            created_at=timestamps(1),
        )
        await processed_document_crud.create(
            test_async_db,
            course_id=module.id,
            original_filename="week2.pdf",
            processed_text="Week two",
            created_at=timestamps(2),
        )
        aggregator = ContentAggregator(test_async_db)

        # Act
        context = await aggregator.get_module_context(module.id)

        # Assert
        assert context.startswith(CONTENT_SENTINEL)
        assert context.count("File: ") == 2
        # Newest first within each table, module_content before processed_documents
        assert context.index("File: week1.pdf") < context.index("File: week2.pdf")

    async def test_other_modules_content_is_ignored(self, test_async_db, module, user_id) -> None:
        # Arrange
        other = await module_crud.create(test_async_db, user_id=user_id, name="Other")
        await module_content_crud.create(
            test_async_db, module_id=other.id, file_name="x.pdf", extracted_text="other text"
        )

        # Act
        context = await ContentAggregator(test_async_db).get_module_context(module.id)

        # Assert
        assert context is None

    async def test_counts_include_rows_without_text(self, test_async_db, module) -> None:
        # Arrange
        await module_content_crud.create(
            test_async_db, module_id=module.id, file_name="empty.pdf", extracted_text=""
        )

        # Act
        aggregator = ContentAggregator(test_async_db)
        counts = await aggregator.count_module_documents(module.id)

        # Assert
        assert counts.module_content == 1
        assert counts.processed_documents == 0
        assert await aggregator.get_module_context(module.id) is None
