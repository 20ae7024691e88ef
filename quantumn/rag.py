"""Keyword-based retrieval of code context and compact prompt helpers."""

from __future__ import annotations

import dataclasses
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

COMPACT_SYSTEM = (
    "QC: Local-first coding AI. Read/write/edit files, shell, analyze, search.\n"
    "MODE: {mode} | TOOLS: read,write,bash,grep,glob | GIT: safe history\n"
    "{context}"
)

ULTRA_COMPACT = "QC AI: {mode}. Tools: read,write,bash,grep. {context}"

_FILLER_PHRASES = (
    "please ",
    "could you ",
    "i would like to ",
    "i want to ",
    "can you ",
    "help me ",
)

_PREVIEW_CHARS = 200


@dataclass
class RagConfig:
    """Retrieval settings."""

    enabled: bool = True
    max_chunks: int = 5
    similarity_threshold: float = 0.3
    chunk_size: int = 512
    chunk_overlap: int = 50


@dataclass
class ContextChunk:
    """A piece of a source file that can be handed to a model as context."""

    file_path: str
    content: str
    start_line: int
    end_line: int
    similarity: float = 0.0
    embedding_hash: int = 0


@dataclass
class RagResult:
    """Chunks retrieved for a query."""

    chunks: list[ContextChunk] = field(default_factory=list)
    retrieval_time_ms: int = 0
    used: bool = False

    @classmethod
    def empty(cls) -> RagResult:
        """A result that holds nothing and was not used."""
        return cls()

    def format_context(self) -> str:
        """Markdown section listing every chunk, or an empty string."""
        if not self.chunks:
            return ""
        parts = ["\n\n## Relevant Context\n\n"]
        for number, chunk in enumerate(self.chunks, start=1):
            parts.append(
                f"### Chunk {number} ({chunk.file_path}:{chunk.start_line}-"
                f"{chunk.end_line}) [similarity: {chunk.similarity:.2f}]\n"
                f"```\n{chunk.content}\n```\n\n"
            )
        return "".join(parts)


def _split_lines(content: str) -> list[str]:
    """Split on newlines, dropping a final empty line and trailing carriage returns."""
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _chunk_content(
    path: str, content: str, chunk_size: int, overlap: int
) -> list[ContextChunk]:
    lines = _split_lines(content)
    chunks: list[ContextChunk] = []
    start = 0
    while start < len(lines):
        end = start
        char_count = 0
        while end < len(lines) and char_count < chunk_size:
            char_count += _byte_len(lines[end]) + 1
            end += 1

        if end > start:
            chunks.append(
                ContextChunk(
                    file_path=path,
                    content="\n".join(lines[start:end]),
                    start_line=start + 1,
                    end_line=end,
                )
            )

        if end >= len(lines) or end <= overlap:
            break
        # Step back by the overlap, but always move forward.
        start = max(end - overlap, start + 1)
    return chunks


@dataclass
class Document:
    """A file with its content split into overlapping chunks."""

    path: str
    content: str
    chunks: list[ContextChunk] = field(default_factory=list)

    @classmethod
    def from_content(
        cls, path: str, content: str, chunk_size: int, overlap: int
    ) -> Document:
        """Build a document and chunk its content by lines."""
        return cls(
            path=path,
            content=content,
            chunks=_chunk_content(path, content, chunk_size, overlap),
        )


@dataclass
class KeywordRetriever:
    """Ranks chunks by keyword overlap with a query."""

    config: RagConfig = field(default_factory=RagConfig)

    def retrieve(self, query: str, documents: Sequence[Document]) -> RagResult:
        """Return the best-scoring chunks above the similarity threshold."""
        started = time.perf_counter()
        if not self.config.enabled or not documents:
            return RagResult.empty()

        terms = [word for word in query.lower().split() if _byte_len(word) > 2]

        scored = [
            (chunk, score)
            for document in documents
            for chunk in document.chunks
            if (score := self._relevance(terms, chunk.content))
            >= self.config.similarity_threshold
        ]
        scored.sort(key=lambda item: item[1], reverse=True)

        chunks = [
            dataclasses.replace(chunk)
            for chunk, _ in scored[: self.config.max_chunks]
        ]
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        return RagResult(chunks=chunks, retrieval_time_ms=elapsed_ms, used=True)

    @staticmethod
    def _relevance(terms: list[str], content: str) -> float:
        if not terms:
            return 0.0
        lowered = content.lower()
        score = 0.0
        for term in terms:
            if term in lowered:
                score += 1.0
                score += lowered.count(term) * 0.5
                if term in content:
                    score += 0.5
        length_factor = 1.0 / (1.0 + _byte_len(content) / 1000.0)
        return score * length_factor


class RagIndex:
    """In-memory index of chunked documents, keyed by path."""

    def __init__(self, config: RagConfig | None = None) -> None:
        self.config = config if config is not None else RagConfig()
        self._documents: dict[str, Document] = {}

    def add_document(self, path: str, content: str) -> None:
        """Chunk and index a document, replacing any with the same path."""
        self._documents[path] = Document.from_content(
            path, content, self.config.chunk_size, self.config.chunk_overlap
        )

    def remove_document(self, path: str) -> None:
        """Drop a document from the index if present."""
        self._documents.pop(path, None)

    def search(self, query: str, token_budget: int | None = None) -> RagResult:
        """Search the index; a token budget caps chunks at 30% of it (1 to 15)."""
        config = dataclasses.replace(self.config)
        if token_budget is not None:
            rag_tokens = int(token_budget * 0.3)
            config.max_chunks = min(max(rag_tokens // config.chunk_size, 1), 15)
        retriever = KeywordRetriever(config)
        return retriever.retrieve(query, list(self._documents.values()))

    def document_count(self) -> int:
        """Number of indexed documents."""
        return len(self._documents)

    def chunk_count(self) -> int:
        """Total number of chunks across all documents."""
        return sum(len(document.chunks) for document in self._documents.values())


def compress_prompt(prompt: str, target_tokens: int) -> str:
    """Shrink a prompt toward a token target by dropping filler, then truncating."""
    target_chars = target_tokens * 4
    if len(prompt) <= target_chars:
        return prompt

    compressed = prompt
    for phrase in _FILLER_PHRASES:
        compressed = compressed.replace(phrase, "")
    compressed = compressed.replace("  ", " ")

    if len(compressed) > target_chars:
        return compressed[: max(target_chars - 3, 0)] + "..."
    return compressed


def format_context_compact(chunks: Sequence[ContextChunk]) -> str:
    """One line per chunk: location and a preview of at most 200 characters."""
    lines = []
    for chunk in chunks:
        preview = chunk.content
        if len(preview) > _PREVIEW_CHARS:
            preview = preview[:_PREVIEW_CHARS] + "..."
        lines.append(
            f"[{chunk.file_path}:{chunk.start_line}-{chunk.end_line}] {preview}\n"
        )
    return "".join(lines)