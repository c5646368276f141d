"""
S3 document download task.

Downloads uploaded documents from S3 to a local temp directory for parsing.
Lambda-compatible: uses the system temp directory.

Dependencies: boto3
System role: First step of text extraction
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path

import boto3
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger(__name__)


class S3DownloadError(Exception):
    """Raised when S3 download fails."""

    def __init__(self, message: str, s3_key: str | None = None) -> None:
        self.s3_key = s3_key
        super().__init__(message)


class S3DownloadTask:
    """Download documents from S3 to local temp directory."""

    def __init__(self, bucket: str, region: str = "us-east-1", s3_client=None) -> None:
        """
        Initialize S3 download task.

        Args:
            bucket: S3 bucket name for document storage
            region: AWS region for S3 bucket
            s3_client: Optional preconfigured boto3 S3 client
        """
        self._bucket = bucket
        self._region = region
        self._s3_client = s3_client or boto3.client("s3", region_name=region)

    def download(self, s3_key: str) -> tuple[str, int]:
        """
        Download document from S3 to temp directory.

        Args:
            s3_key: S3 object key (e.g., "users/uid/pdfs/file.pdf")

        Returns:
            tuple[str, int]: Local file path and downloaded size in bytes

        Raises:
            S3DownloadError: When download fails
        """
        if not s3_key:
            raise S3DownloadError("S3 key is required", s3_key)

        filename = Path(s3_key).name
        if not filename:
            raise S3DownloadError(f"Invalid S3 key: {s3_key}", s3_key)

        temp_dir = tempfile.mkdtemp(prefix="doc_analysis_")
        local_path = os.path.join(temp_dir, filename)

        try:
            self._s3_client.download_file(
                Bucket=self._bucket,
                Key=s3_key,
                Filename=local_path,
            )
            size = os.path.getsize(local_path)
            logger.info(
                "%s:download - Downloaded object",
                __name__,
                extra={"s3_key": s3_key, "size_bytes": size},
            )
            return local_path, size

        except ClientError as e:
            shutil.rmtree(temp_dir, ignore_errors=True)
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            if error_code in ("404", "NoSuchKey"):
                raise S3DownloadError(f"File not found in S3: {s3_key}", s3_key) from e
            raise S3DownloadError(f"Failed to download from S3: {e}", s3_key) from e
        except OSError as e:
            shutil.rmtree(temp_dir, ignore_errors=True)
            raise S3DownloadError(f"Failed to write downloaded file: {e}", s3_key) from e
        except BotoCoreError as e:
            shutil.rmtree(temp_dir, ignore_errors=True)
            raise S3DownloadError(f"S3 request failed: {e}", s3_key) from e
