"""
Test suite for the extraction tasks.

Covers S3 download error mapping, PDF parsing guards and ExtractionTask
composition with temp-dir cleanup. boto3 and PyPDFLoader are mocked.

System role: Verification of the text extraction stage
"""

import os
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError, NoCredentialsError

from dataroom.core.document_analysis.models import DocumentReference
from dataroom.core.document_analysis.tasks import (
    ExtractionTask,
    ParsingError,
    ParsingTask,
    S3DownloadError,
    S3DownloadTask,
)
from dataroom.core.exceptions import ExtractionError


def _writing_s3_client(payload: bytes = b"%PDF-1.4\n") -> MagicMock:
    client = MagicMock()

    def _download_file(Bucket, Key, Filename):
        Path(Filename).write_bytes(payload)

    client.download_file.side_effect = _download_file
    return client


def _client_error(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, "GetObject")


class TestS3DownloadTask:
    """Test suite for S3DownloadTask.download()."""

    def test_download_should_return_path_and_size(self):
        task = S3DownloadTask(bucket="docs", s3_client=_writing_s3_client(b"12345"))

        local_path, size = task.download("users/u-1/pdfs/deck.pdf")

        try:
            assert Path(local_path).name == "deck.pdf"
            assert size == 5
        finally:
            os.remove(local_path)
            os.rmdir(os.path.dirname(local_path))

    def test_missing_object_should_raise_not_found(self):
        client = MagicMock()
        client.download_file.side_effect = _client_error("404")
        task = S3DownloadTask(bucket="docs", s3_client=client)

        with pytest.raises(S3DownloadError, match="not found"):
            task.download("users/u-1/pdfs/missing.pdf")

    def test_empty_key_should_raise(self):
        with pytest.raises(S3DownloadError):
            S3DownloadTask(bucket="docs", s3_client=MagicMock()).download("")

    def test_missing_credentials_should_raise_and_cleanup(self, tmp_path, monkeypatch):
        temp_dir = tmp_path / "download"
        temp_dir.mkdir()
        monkeypatch.setattr(tempfile, "mkdtemp", lambda prefix: str(temp_dir))
        client = MagicMock()
        client.download_file.side_effect = NoCredentialsError()
        task = S3DownloadTask(bucket="docs", s3_client=client)

        with pytest.raises(S3DownloadError) as exc_info:
            task.download("users/u-1/pdfs/deck.pdf")

        assert isinstance(exc_info.value.__cause__, NoCredentialsError)
        assert not temp_dir.exists()


class TestParsingTask:
    """Test suite for ParsingTask.parse()."""

    def test_missing_file_should_raise(self, tmp_path):
        with pytest.raises(ParsingError, match="File not found"):
            ParsingTask().parse(str(tmp_path / "nope.pdf"))

    def test_non_pdf_should_raise(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello")

        with pytest.raises(ParsingError, match="Unsupported file format"):
            ParsingTask().parse(str(path))

    def test_pages_should_be_joined_with_single_space(self, tmp_path):
        path = tmp_path / "deck.pdf"
        path.write_bytes(b"%PDF-1.4\n")
        pages = [MagicMock(page_content="Page one."), MagicMock(page_content="Page two.")]

        with patch("dataroom.core.document_analysis.tasks.parsing_task.PyPDFLoader") as loader_cls:
            loader_cls.return_value.load.return_value = pages
            text = ParsingTask().parse(str(path))

        assert text == "Page one. Page two."

    def test_loader_failure_should_raise(self, tmp_path):
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"garbage")

        with patch("dataroom.core.document_analysis.tasks.parsing_task.PyPDFLoader") as loader_cls:
            loader_cls.return_value.load.side_effect = ValueError("EOF marker not found")
            with pytest.raises(ParsingError, match="Failed to parse PDF"):
                ParsingTask().parse(str(path))


class TestExtractionTask:
    """Test suite for ExtractionTask.extract()."""

    @pytest.mark.asyncio
    async def test_extract_should_build_document_and_cleanup(self):
        download = S3DownloadTask(bucket="docs", s3_client=_writing_s3_client(b"x" * 2048))
        parser = MagicMock(spec=ParsingTask)
        parser.parse.return_value = "Quarterly revenue grew."
        task = ExtractionTask(download, parser)
        reference = DocumentReference(file_path="users/u-1/pdfs/q3.pdf", owner_id="u-1")

        document = await task.extract(reference)

        assert document.name == "q3.pdf"
        assert document.owner_id == "u-1"
        assert document.document_id == "users/u-1/pdfs/q3.pdf"
        assert document.text == "Quarterly revenue grew."
        assert document.size_bytes == 2048
        parsed_path = parser.parse.call_args.args[0]
        assert not os.path.exists(os.path.dirname(parsed_path))

    @pytest.mark.asyncio
    async def test_download_failure_should_raise_extraction_error(self):
        client = MagicMock()
        client.download_file.side_effect = _client_error("AccessDenied")
        task = ExtractionTask(S3DownloadTask(bucket="docs", s3_client=client))
        reference = DocumentReference(file_path="users/u-1/pdfs/q3.pdf", owner_id="u-1")

        with pytest.raises(ExtractionError) as exc_info:
            await task.extract(reference)

        assert exc_info.value.details["file_path"] == "users/u-1/pdfs/q3.pdf"
        assert isinstance(exc_info.value.__cause__, S3DownloadError)

    @pytest.mark.asyncio
    async def test_parse_failure_should_raise_extraction_error(self):
        parser = MagicMock(spec=ParsingTask)
        parser.parse.side_effect = ParsingError("Failed to parse PDF: bad xref")
        task = ExtractionTask(S3DownloadTask(bucket="docs", s3_client=_writing_s3_client()), parser)

        with pytest.raises(ExtractionError, match="bad xref"):
            await task.extract(DocumentReference(file_path="users/u-1/pdfs/q3.pdf", owner_id="u-1"))

    @pytest.mark.asyncio
    async def test_unreachable_endpoint_should_raise_extraction_error(self):
        client = MagicMock()
        client.download_file.side_effect = EndpointConnectionError(endpoint_url="https://s3.amazonaws.com")
        task = ExtractionTask(S3DownloadTask(bucket="docs", s3_client=client))

        with pytest.raises(ExtractionError) as exc_info:
            await task.extract(DocumentReference(file_path="users/u-1/pdfs/q3.pdf", owner_id="u-1"))

        assert isinstance(exc_info.value.__cause__, S3DownloadError)
