"""
Module context package.

Exports:
  - ContentAggregator: merges module_content and processed_documents into prompt context
  - AggregatedDocument, ModuleDocumentCounts: aggregator result types
  - merge_documents, render_module_context: pure merge/render helpers
"""

from tutorbot.core.context.content_aggregator import (
    AggregatedDocument,
    ContentAggregator,
    ModuleDocumentCounts,
    merge_documents,
    render_module_context,
)

__all__ = [
    "AggregatedDocument",
    "ContentAggregator",
    "ModuleDocumentCounts",
    "merge_documents",
    "render_module_context",
]
