"""
Tables router for browsing collections of an open session.
"""
from typing import Optional

from fastapi import APIRouter, Query, status

from mongobrowser.dependencies.registry import ActiveSession, Inspector
from mongobrowser.schemas.connection import ErrorResponse
from mongobrowser.schemas.table import TableDataResponse, TablesResponse

router = APIRouter(prefix="/api", tags=["Tables"])

ERROR_RESPONSES = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


@router.get(
    "/tables/{connection_id}",
    response_model=TablesResponse,
    summary="List collections",
    responses=ERROR_RESPONSES,
)
async def list_tables(session: ActiveSession, inspector: Inspector):
    """
    List collections of the database the connection was opened for.
    """
    tables = await inspector.list_collections(session)
    return TablesResponse(tables=tables)


@router.get(
    "/tableData/{connection_id}/{schema}/{table}",
    response_model=TableDataResponse,
    summary="Get collection data",
    responses=ERROR_RESPONSES,
)
async def get_table_data(
    schema: str,
    table: str,
    session: ActiveSession,
    inspector: Inspector,
    limit: Optional[str] = Query(None, description="Page size (default: 100; 0 also means 100)"),
    offset: Optional[str] = Query(None, description="Documents to skip (default: 0)"),
):
    """
    Get one page of documents from a collection.

    - **schema**: Database name
    - **table**: Collection name
    - **limit** / **offset**: Pagination; non-numeric or negative values fall back
      to the defaults. `limit=0` also falls back to 100 rather than meaning
      "no limit", so a page is always bounded

    Columns are inferred from the first document of the page only.
    """
    return await inspector.fetch_page(session, schema, table, limit, offset)
