"""
Text chunking task.

Greedy word-boundary splitter that keeps every chunk within a character
budget so each one fits a single completion request.

Dependencies: pydantic (Chunk model)
System role: Second stage of the analysis pipeline
"""

from ..models import Chunk

DEFAULT_MAX_CHUNK_CHARS = 8000


class ChunkingTask:
    """Split extracted text into ordered chunks of bounded size."""

    def __init__(self, max_chunk_chars: int = DEFAULT_MAX_CHUNK_CHARS) -> None:
        """
        Initialize chunking task.

        Args:
            max_chunk_chars: Maximum chunk size in characters

        Raises:
            ValueError: When max_chunk_chars is below 1
        """
        if max_chunk_chars < 1:
            raise ValueError(f"max_chunk_chars must be >= 1, got {max_chunk_chars}")
        self._max_chunk_chars = max_chunk_chars

    @property
    def max_chunk_chars(self) -> int:
        return self._max_chunk_chars

    def split(self, text: str) -> list[Chunk]:
        """
        Split text into chunks on whitespace.

        Words are accumulated greedily; a chunk is closed when the next word
        (plus its separating space) would push it past the budget. A word
        longer than the budget gets a chunk of its own and is never cut.

        Args:
            text: Extracted document text

        Returns:
            list[Chunk]: Chunks in document order (empty for blank input)
        """
        chunks: list[Chunk] = []
        buffer: list[str] = []
        buffer_len = 0

        for word in text.split():
            projected = buffer_len + len(word) + (1 if buffer else 0)
            if buffer and projected > self._max_chunk_chars:
                chunks.append(Chunk(index=len(chunks), content=" ".join(buffer)))
                buffer = []
                buffer_len = 0
                projected = len(word)
            buffer.append(word)
            buffer_len = projected

        if buffer:
            chunks.append(Chunk(index=len(chunks), content=" ".join(buffer)))

        return chunks
