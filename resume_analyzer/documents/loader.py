"""Read resume and job description text from PDF, TXT or Markdown files."""

import logging
from pathlib import Path

from PyPDF2 import PdfReader

logger = logging.getLogger("resume_analyzer.documents")

TEXT_SUFFIXES = (".txt", ".md", ".markdown")
SUPPORTED_SUFFIXES = (".pdf", *TEXT_SUFFIXES)


def load_document(file_path: str) -> str:
    """Return the plain text of a document file."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Document not found: {file_path}")

    suffix = path.suffix.lower()
    if suffix == ".pdf":
        text = _extract_pdf_text(path)
    elif suffix in TEXT_SUFFIXES:
        text = path.read_text(encoding="utf-8")
    else:
        raise ValueError(
            f"Unsupported document format: {suffix} (supported: {', '.join(SUPPORTED_SUFFIXES)})"
        )

    if not text.strip():
        raise ValueError(f"Document is empty or unreadable: {file_path}")

    logger.info("Loaded %d characters from %s", len(text), path.name)
    return text


def _extract_pdf_text(path: Path) -> str:
    reader = PdfReader(str(path))
    pages = []
    for page in reader.pages:
        text = page.extract_text()
        if text:
            pages.append(text)
    return "\n".join(pages)
