"""Split knowledge-base files into retrieval-ready chunks."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

import tiktoken

from app.config import settings
from app.models.chunk import Chunk
from app.utils.tokenization import count_tokens

logger = logging.getLogger(__name__)

SOURCE_SUFFIXES = {".txt", ".md"}
PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


def discover_sources(root: Optional[Path] = None) -> List[Path]:
    """Return every text file under the knowledge-base directory."""
    root_path = root or settings.knowledge_base_path_obj
    if not root_path.exists():
        logger.warning("Knowledge base root %s does not exist", root_path)
        return []
    return sorted(path for path in root_path.rglob("*") if path.suffix.lower() in SOURCE_SUFFIXES)


def split_paragraphs(text: str) -> List[str]:
    return [block.strip() for block in PARAGRAPH_BREAK.split(text) if block.strip()]


def split_long_paragraph(
    paragraph: str, max_tokens: int, encoding: Optional[tiktoken.Encoding]
) -> List[str]:
    """Break a paragraph that exceeds the budget on word boundaries."""
    if count_tokens(paragraph, encoding) <= max_tokens:
        return [paragraph]
    pieces: List[str] = []
    words: List[str] = []
    for word in paragraph.split():
        candidate = " ".join([*words, word])
        if words and count_tokens(candidate, encoding) > max_tokens:
            pieces.append(" ".join(words))
            words = [word]
        else:
            words.append(word)
    if words:
        pieces.append(" ".join(words))
    return pieces


def _overlap_tail(text: str, overlap_tokens: int, encoding: Optional[tiktoken.Encoding]) -> str:
    if overlap_tokens <= 0:
        return ""
    tail: List[str] = []
    for word in reversed(text.split()):
        if count_tokens(" ".join([word, *tail]), encoding) > overlap_tokens:
            break
        tail.insert(0, word)
    return " ".join(tail)


def chunk_text(
    text: str,
    source: str,
    encoding: Optional[tiktoken.Encoding],
    max_tokens: Optional[int] = None,
    overlap_tokens: Optional[int] = None,
) -> Iterator[Chunk]:
    """Pack paragraphs into chunks of at most ``max_tokens`` tokens."""
    if max_tokens is None:
        max_tokens = settings.chunk_max_tokens
    if overlap_tokens is None:
        overlap_tokens = settings.chunk_overlap_tokens

    pieces: List[str] = []
    for paragraph in split_paragraphs(text):
        pieces.extend(split_long_paragraph(paragraph, max_tokens, encoding))

    stem = Path(source).stem.lower().replace(" ", "-")
    buffer: List[str] = []
    current_tokens = 0
    counter = 0
    pending = False

    def flush() -> Chunk:
        nonlocal buffer, current_tokens, counter, pending
        counter += 1
        pending = False
        chunk_body = "\n\n".join(buffer)
        tail = _overlap_tail(chunk_body, overlap_tokens, encoding)
        buffer = [tail] if tail else []
        current_tokens = count_tokens(tail, encoding) if tail else 0
        return Chunk(
            chunk_id=f"{stem}-{counter:04d}",
            source=source,
            text=chunk_body,
            metadata={"position": counter},
        )

    for piece in pieces:
        piece_tokens = count_tokens(piece, encoding)
        if buffer and current_tokens + piece_tokens > max_tokens:
            yield flush()
            if buffer and current_tokens + piece_tokens > max_tokens:
                buffer = []
                current_tokens = 0
        buffer.append(piece)
        current_tokens += piece_tokens
        pending = True

    # the carried-over overlap alone is not a chunk
    if pending:
        yield flush()


def chunk_files(paths: Iterable[Path], encoding: Optional[tiktoken.Encoding]) -> Iterator[Chunk]:
    for path in paths:
        text = path.read_text(encoding="utf-8")
        chunks = list(chunk_text(text, path.name, encoding))
        logger.info("Split %s into %s chunks", path, len(chunks))
        yield from chunks
