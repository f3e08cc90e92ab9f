"""Setlist lookup endpoints."""

from __future__ import annotations

from logging import getLogger
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from setlistcache.config import SHOW_ID_PARAM
from setlistcache.domain.model import SetlistEntry
from setlistcache.domain.reconciler import SetlistReconciler

log = getLogger(__name__)

router = APIRouter()


def get_reconciler(request: Request) -> SetlistReconciler:
    return request.app.state.reconciler


def setlist_envelope(records: list[SetlistEntry]) -> dict[str, object]:
    """Wrap records in the response envelope clients expect."""

    return {
        "status": status.HTTP_200_OK,
        "statusText": "OK",
        "headers": {"content-type": "application/json"},
        "body": {"data": [record.to_dict() for record in records]},
    }


@router.get("/")
def get_setlists(
    reconciler: Annotated[SetlistReconciler, Depends(get_reconciler)],
    show_ids: Annotated[list[str] | None, Query(alias=SHOW_ID_PARAM)] = None,
) -> JSONResponse:
    requested = [show_id.strip() for show_id in show_ids or [] if show_id.strip()]
    records = reconciler.resolve(requested)
    return JSONResponse(setlist_envelope(records))


@router.options("/")
def preflight() -> Response:
    return Response(status_code=status.HTTP_200_OK)
