"""
Document parsing task using LangChain PyPDFLoader.

Extracts page text from PDF documents and joins it into one string.

Dependencies: langchain_community.document_loaders, pypdf
System role: Second step of text extraction
"""

from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader


class ParsingError(Exception):
    """Raised when document parsing fails."""

    def __init__(self, message: str, file_path: str | None = None) -> None:
        self.file_path = file_path
        super().__init__(message)


class ParsingTask:
    """Parse PDF documents into plain text."""

    def parse(self, file_path: str) -> str:
        """
        Parse PDF document into text, pages joined by a single space.

        Args:
            file_path: Path to PDF document

        Returns:
            str: Extracted text (may be empty for image-only PDFs)

        Raises:
            ParsingError: When the file is missing, not a PDF, or unreadable
        """
        path = Path(file_path)
        if not path.exists():
            raise ParsingError(f"File not found: {file_path}", file_path)

        if path.suffix.lower() != ".pdf":
            raise ParsingError(
                f"Unsupported file format: {path.suffix}. Only PDF files are supported.",
                file_path,
            )

        try:
            pages = PyPDFLoader(file_path).load()
        except Exception as e:
            raise ParsingError(f"Failed to parse PDF: {e}", file_path) from e

        return " ".join(page.page_content for page in pages)
