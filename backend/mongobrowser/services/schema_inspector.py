"""
Schema inspector for collection listing and paginated document fetches.
"""
import base64
import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from bson import DBRef, Decimal128, MaxKey, MinKey, ObjectId, Regex, Timestamp, json_util
from fastapi.encoders import jsonable_encoder

from mongobrowser.config import Settings, get_settings
from mongobrowser.core.errors import QueryFailure
from mongobrowser.models.session import Session
from mongobrowser.schemas.table import ColumnInfo, TableDataResponse, TableInfo

logger = logging.getLogger(__name__)


def _extended_json(value: Any) -> Any:
    """Render a BSON value as canonical extended JSON, e.g. {"$minKey": 1}."""
    return jsonable_encoder(json_util.default(value), custom_encoder=BSON_ENCODERS)


BSON_ENCODERS = {
    ObjectId: str,
    Decimal128: lambda d: float(d.to_decimal()),
    Decimal: float,
    Timestamp: lambda t: t.as_datetime().isoformat(),
    bytes: lambda b: base64.b64encode(b).decode("ascii"),
    DBRef: _extended_json,
    MinKey: _extended_json,
    MaxKey: _extended_json,
    Regex: _extended_json,
}


def infer_type(value: Any) -> str:
    """
    Infer the column type of a single BSON value.

    Precedence: objectId, date, array, then the primitive kind. bool is
    checked before number since it subclasses int. Null is an object, as
    in JavaScript.
    """
    if isinstance(value, ObjectId):
        return "objectId"
    if isinstance(value, (datetime, Timestamp)):
        return "date"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float, Decimal, Decimal128)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


def infer_columns(rows: list[dict]) -> list[ColumnInfo]:
    """
    Infer columns from the first row only.

    One-document sampling is cheap and deliberately shallow: fields missing
    from the first row do not appear, and an empty page has no columns.
    """
    if not rows:
        return []
    sample = rows[0]
    return [
        ColumnInfo(column_name=key, data_type=infer_type(value))
        for key, value in sample.items()
    ]


def encode_document(document: dict) -> dict:
    """Convert a BSON document into JSON-safe values."""
    return jsonable_encoder(document, custom_encoder=BSON_ENCODERS)


def parse_non_negative(raw: Any, default: int, allow_zero: bool = True) -> int:
    """
    Parse an untrusted pagination value.

    Non-numeric and negative values fall back to ``default`` instead of
    raising, as does zero when ``allow_zero`` is false.
    """
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    if value < 0 or (value == 0 and not allow_zero):
        return default
    return value


class SchemaInspector:
    """Read-only queries against a session's handle."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def normalize_pagination(self, limit: Any, offset: Any) -> tuple[int, int]:
        """Normalize raw limit/offset query values."""
        # limit(0) means "no limit" to the driver
        return (
            parse_non_negative(limit, self.settings.default_page_limit, allow_zero=False),
            parse_non_negative(offset, self.settings.default_page_offset),
        )

    async def list_collections(self, session: Session) -> list[TableInfo]:
        """
        List collections in the session's database.

        Raises:
            QueryFailure: If the listing fails (closed handle, network drop)
        """
        database = session.database
        try:
            names = await session.handle[database].list_collection_names()
        except Exception as e:
            logger.error(f"Listing collections for session {session.id} failed: {e}")
            raise QueryFailure(str(e), message="Failed to retrieve collections") from e

        return [TableInfo(table_schema=database, table_name=name) for name in names]

    async def fetch_page(
        self,
        session: Session,
        database: str,
        collection_name: str,
        limit: Any = None,
        offset: Any = None,
    ) -> TableDataResponse:
        """
        Fetch one page of a collection in natural order.

        ``total`` is the full document count of the collection, not the page
        size. No sort is imposed, so page boundaries are only stable while the
        collection is not being written to.

        Raises:
            QueryFailure: If counting, fetching or encoding fails
        """
        limit, offset = self.normalize_pagination(limit, offset)
        try:
            collection = session.handle[database][collection_name]
            total = await collection.count_documents({})
            cursor = collection.find({}, skip=offset, limit=limit)
            rows = await cursor.to_list(length=limit)
            data = [encode_document(row) for row in rows]
        except Exception as e:
            logger.error(
                f"Fetching {database}.{collection_name} for session {session.id} failed: {e}"
            )
            raise QueryFailure(str(e)) from e

        return TableDataResponse(
            success=True,
            columns=infer_columns(rows),
            data=data,
            total=total,
        )
