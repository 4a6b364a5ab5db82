"""Built-in documentation tools exposed through the registry."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from authdocs.agent.registry import ToolRegistry, ToolSpec
from authdocs.ingest.corpus import CorpusCache
from authdocs.retrieval.retriever import CorpusRetriever
from authdocs.retrieval.search import search_lines
from authdocs.types import RetrievalResult


class AskToolInput(BaseModel):
    question: str = Field(min_length=1)
    topic: str | None = None

    @field_validator("question")
    @classmethod
    def _reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("question must not be blank")
        return value


class SearchToolInput(BaseModel):
    query: str = Field(min_length=1)
    max_results: int = Field(default=10, ge=1, le=50)


class ListDocumentsInput(BaseModel):
    pass


class GetDocumentInput(BaseModel):
    file_name: str = Field(min_length=1)


def register_builtin_tools(
    registry: ToolRegistry,
    retriever: CorpusRetriever,
    corpus: CorpusCache,
) -> None:
    """Register the default documentation tool set.

    Tools:
    - `ask_documentation`: paragraph retrieval with citations and confidence.
    - `search_documentation`: line-level substring search.
    - `list_documents`: corpus file inventory.
    - `get_document`: full content of one corpus file by display name.
    """

    def _ask(input_data: AskToolInput) -> str:
        result = retriever.retrieve(input_data.topic, input_data.question)
        return format_result(result)

    def _search(input_data: SearchToolInput) -> str:
        matches = search_lines(corpus.documents(), input_data.query, limit=input_data.max_results)
        if not matches:
            return "NO_RESULTS"
        return "\n".join(
            f"[{match.file}:{match.line_number}] relevance={match.relevance} {match.excerpt}"
            for match in matches
        )

    def _list(input_data: ListDocumentsInput) -> str:
        documents = corpus.documents()
        if not documents:
            return "NO_DOCUMENTS"
        return "\n".join(f"{doc.file_name} ({len(doc.lines)} lines)" for doc in documents)

    def _get(input_data: GetDocumentInput) -> str:
        document = corpus.get(input_data.file_name.strip())
        if document is None:
            return "NOT_FOUND"
        return document.content

    registry.register(
        ToolSpec(
            name="ask_documentation",
            description=(
                "Answer a question from the local authentication docs. "
                "Optionally narrow the search with a topic such as 'database' or 'plugins'."
            ),
            args_schema=AskToolInput,
            handler=_ask,
            tags=["retrieval", "docs"],
        )
    )
    registry.register(
        ToolSpec(
            name="search_documentation",
            description="Find documentation lines containing a search phrase.",
            args_schema=SearchToolInput,
            handler=_search,
            tags=["search", "docs"],
        )
    )
    registry.register(
        ToolSpec(
            name="list_documents",
            description="List the documentation files available to the server.",
            args_schema=ListDocumentsInput,
            handler=_list,
            tags=["docs"],
        )
    )
    registry.register(
        ToolSpec(
            name="get_document",
            description="Return the full text of one documentation file, e.g. 'database.md'.",
            args_schema=GetDocumentInput,
            handler=_get,
            tags=["docs"],
        )
    )


def format_result(result: RetrievalResult) -> str:
    lines = [f"Answer (confidence {result.confidence:.2f}):", result.answer, "", "Sources:"]
    if not result.sources:
        lines.append("- none")
    for snippet, source in zip(result.snippets, result.sources, strict=True):
        lines.append(f"- {source.file} lines {source.line_range} score={snippet.score:.4f}")
    return "\n".join(lines)
