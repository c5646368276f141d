"""
Lambda handler for SQS-triggered document analysis.

Analyzes documents as they are uploaded: S3 ObjectCreated notifications are
delivered through SQS, one AnalysisJob runs per uploaded PDF and the merged
analysis is upserted into the analysis store.

Only keys of the form users/{owner_id}/pdfs/{filename} are analyzed; any
other object is skipped.

Environment variables:
- S3_DOCUMENTS_BUCKET / S3_DOCUMENTS_REGION: Document storage
- POSTGRES_*: Analysis store connection
- OPENAI_API_KEY or OPENAI_SECRET_ARN: Completion service credentials
- DB_SECRET_ARN: Optional Secrets Manager secret holding the DB password
- LOG_LEVEL: Logging level

Dependencies: boto3, python-dotenv, entrypoint, dataroom.boundary.db
System role: Lambda entry point for upload-triggered analysis
"""

import asyncio
import json
import logging
import os
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict

import boto3
from dotenv import load_dotenv
from urllib.parse import unquote_plus

# Load environment variables from .env if present
load_dotenv()

from dataroom.boundary.db.connection import get_async_engine, get_async_session_factory  # noqa: E402
from dataroom.boundary.db.sql_store import SqlAnalysisStore  # noqa: E402
from dataroom.configs import get_settings  # noqa: E402
from dataroom.core.exceptions import DataRoomException  # noqa: E402

from .entrypoint import DocumentAnalysisPipeline  # noqa: E402
from .models import DocumentReference, UploadEvent  # noqa: E402

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("LOG_LEVEL", "INFO"))

OWNER_PREFIX = "users"
DOCUMENT_FOLDER = "pdfs"


class MessageParseError(Exception):
    """Raised when an SQS message cannot be parsed."""

    pass


class SkippedObjectError(Exception):
    """Raised for storage objects that are not analyzable documents."""

    pass


def parse_s3_event_record(record: Dict[str, Any]) -> UploadEvent:
    """
    Parse an S3 notification carried in an SQS record.

    S3 sends event notifications to SQS with this structure:
    {
        "Records": [{
            "eventSource": "aws:s3",
            "s3": {
                "bucket": {"name": "bucket-name"},
                "object": {"key": "users/uid/pdfs/deck.pdf", "size": 1024}
            }
        }]
    }

    Args:
        record: SQS record containing the S3 event

    Returns:
        UploadEvent: Owner, key and size of the uploaded document

    Raises:
        SkippedObjectError: Key is not under users/{owner}/pdfs/
        MessageParseError: Invalid event format or missing fields
    """
    try:
        message_body = record.get("body")
        if not message_body:
            raise ValueError("Empty message body")

        s3_event = json.loads(message_body)

        if s3_event.get("Event") == "s3:TestEvent":
            raise SkippedObjectError("S3 test notification")

        if "Records" in s3_event:
            s3_records = s3_event.get("Records", [])
            if not s3_records:
                raise ValueError("No S3 records in event")
            s3_record = s3_records[0]
        else:
            s3_record = s3_event

        if s3_record.get("eventSource") != "aws:s3":
            raise ValueError(f"Invalid event source: {s3_record.get('eventSource')}")

        object_info = s3_record.get("s3", {}).get("object", {})
        s3_key = unquote_plus(object_info.get("key", ""))
        if not s3_key:
            raise ValueError("Missing S3 object key")

        parts = s3_key.split("/")
        if len(parts) < 4 or parts[0] != OWNER_PREFIX or parts[2] != DOCUMENT_FOLDER or not parts[1]:
            raise SkippedObjectError(f"Skipping non-document object: {s3_key}")

        message = UploadEvent(
            owner_id=parts[1],
            s3_key=s3_key,
            filename=parts[-1],
            file_size_bytes=object_info.get("size", 0),
        )

        logger.info(
            "%s:parse_s3_event_record - Parsed S3 event",
            __name__,
            extra={
                "message_id": record.get("messageId"),
                "owner_id": message.owner_id,
                "s3_key": s3_key,
            },
        )
        return message

    except SkippedObjectError:
        raise
    except json.JSONDecodeError as e:
        logger.error("%s:parse_s3_event_record - JSONDecodeError: %s", __name__, e)
        raise MessageParseError(f"Invalid JSON in message body: {e}") from e
    except ValueError as e:
        # pydantic.ValidationError is a ValueError
        logger.error("%s:parse_s3_event_record - ValueError: %s", __name__, e)
        raise MessageParseError(f"Invalid S3 event format: {e}") from e


def _configure_secrets() -> None:
    """
    Fetch credentials from Secrets Manager into the environment.

    1. OPENAI_SECRET_ARN -> OPENAI_API_KEY (secret key "api_key")
    2. DB_SECRET_ARN -> POSTGRES_PASSWORD (secret key "password")

    Values already present in the environment are kept.
    """
    targets = [
        ("OPENAI_SECRET_ARN", "api_key", "OPENAI_API_KEY"),
        ("DB_SECRET_ARN", "password", "POSTGRES_PASSWORD"),
    ]
    pending = [t for t in targets if os.getenv(t[0]) and not os.getenv(t[2])]
    if not pending:
        return

    client = boto3.session.Session().client("secretsmanager")
    for arn_var, secret_key, env_var in pending:
        try:
            response = client.get_secret_value(SecretId=os.environ[arn_var])
            secret = json.loads(response.get("SecretString") or "{}")
        except Exception as e:
            logger.error("%s:_configure_secrets - Failed to fetch %s: %s", __name__, arn_var, e)
            continue

        value = secret.get(secret_key)
        if value:
            os.environ[env_var] = value
            logger.info("%s:_configure_secrets - Set %s from secret", __name__, env_var)
        else:
            logger.warning("%s:_configure_secrets - Secret %s has no %s", __name__, arn_var, secret_key)

    get_settings.cache_clear()


@asynccontextmanager
async def _analysis_pipeline() -> AsyncIterator[DocumentAnalysisPipeline]:
    """Pipeline bound to a fresh engine for one invocation's event loop."""
    engine = get_async_engine()
    pipeline = None
    try:
        pipeline = DocumentAnalysisPipeline(
            store=SqlAnalysisStore(get_async_session_factory(engine)),
            settings=get_settings(),
        )
        yield pipeline
    finally:
        if pipeline is not None:
            await pipeline.aclose()
        await engine.dispose()


async def _process_message(
    pipeline: DocumentAnalysisPipeline,
    message_id: str | None,
    message: UploadEvent,
) -> Dict[str, Any]:
    reference = DocumentReference(file_path=message.s3_key, owner_id=message.owner_id)
    job = pipeline.create_job(reference)
    try:
        await job.run()
    except DataRoomException as e:
        return {
            "messageId": message_id,
            "status": "failed",
            "document_name": reference.name,
            "error": e.error_kind.value,
            "details": e.message,
        }

    snapshot = job.snapshot()
    return {
        "messageId": message_id,
        "status": "success",
        "document_name": reference.name,
        "owner_id": reference.owner_id,
        "chunk_count": snapshot.total_chunks,
        "skipped_chunks": snapshot.skipped_count,
    }


async def _process_records(records: list[Dict[str, Any]]) -> list[Dict[str, Any]]:
    results: list[Dict[str, Any]] = []
    messages: list[tuple[str | None, UploadEvent]] = []

    for record in records:
        message_id = record.get("messageId")
        try:
            messages.append((message_id, parse_s3_event_record(record)))
        except SkippedObjectError as e:
            logger.info("%s:handler - %s", __name__, e)
            results.append({"messageId": message_id, "status": "skipped", "details": str(e)})
        except MessageParseError as e:
            logger.warning("%s:handler - MessageParseError: %s", __name__, e)
            results.append(
                {
                    "messageId": message_id,
                    "status": "failed",
                    "error": "Invalid message format",
                    "details": str(e),
                }
            )

    if not messages:
        return results

    async with _analysis_pipeline() as pipeline:
        for message_id, message in messages:
            try:
                results.append(await _process_message(pipeline, message_id, message))
            except Exception as e:
                logger.error(
                    "%s:handler - %s: %s",
                    __name__,
                    type(e).__name__,
                    e,
                    extra={"s3_key": message.s3_key},
                )
                results.append(
                    {
                        "messageId": message_id,
                        "status": "failed",
                        "error": "Unexpected error",
                        "details": str(e),
                    }
                )
    return results


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for SQS upload events.

    Records are analyzed sequentially. A failing record never stops the
    batch; the response reports partial failure instead.

    Args:
        event: SQS event with Records array
        context: Lambda context object

    Returns:
        Dict with statusCode (200, or 206 on any failure) and results
    """
    records = event.get("Records", [])
    logger.info("%s:handler - Received SQS event", __name__, extra={"record_count": len(records)})

    _configure_secrets()
    results = asyncio.run(_process_records(records))

    failed_count = sum(1 for r in results if r["status"] == "failed")
    status_code = 200 if failed_count == 0 else 206
    logger.info(
        "%s:handler - Processing complete",
        __name__,
        extra={"processed": len(results), "failed_count": failed_count},
    )

    return {
        "statusCode": status_code,
        "body": json.dumps(
            {
                "processed": len(results),
                "failed": failed_count,
                "results": results,
            }
        ),
    }
