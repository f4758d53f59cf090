"""
LLM boundary.

Clients for the hosted chat-completions and metadata-generation endpoints.
"""

from tutorbot.boundary.llm.chat_completion_client import ChatCompletionClient
from tutorbot.boundary.llm.metadata_client import DocumentMetadata, MetadataClient

__all__ = ["ChatCompletionClient", "DocumentMetadata", "MetadataClient"]
