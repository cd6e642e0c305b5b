"""Roster endpoints - who is on duty on a given date, and CSV export."""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from application.use_cases import ExportRosterUseCase, RosterQueryEngine
from domain.value_objects import Actor, RosterQuery
from presentation.api.v1.dependencies import (
    get_current_actor,
    get_export_use_case,
    get_roster_engine,
)
from presentation.schemas import ApplicationResponse, RosterFacetsResponse, RosterResponse

router = APIRouter(prefix="/roster", tags=["roster"])


def get_roster_query(
    reference_date: Optional[date] = Query(None, alias="date", description="Defaults to today"),
    year: str = Query("all"),
    section: str = Query("all"),
    od_type: str = Query("all"),
    status_filter: str = Query("approved", alias="status"),
) -> RosterQuery:
    """Parse dashboard filters; "all" disables a filter."""
    try:
        return RosterQuery.from_filters(
            reference_date=reference_date or date.today(),
            year=year,
            section=section,
            od_type=od_type,
            status=status_filter,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


@router.get("", response_model=RosterResponse)
async def get_roster(
    query: RosterQuery = Depends(get_roster_query),
    actor: Actor = Depends(get_current_actor),
    engine: RosterQueryEngine = Depends(get_roster_engine),
) -> RosterResponse:
    applications = await engine.execute(query)
    return RosterResponse(
        reference_date=query.reference_date,
        count=len(applications),
        applications=[ApplicationResponse.from_entity(a) for a in applications],
    )


@router.get("/export")
async def export_roster(
    query: RosterQuery = Depends(get_roster_query),
    actor: Actor = Depends(get_current_actor),
    use_case: ExportRosterUseCase = Depends(get_export_use_case),
) -> Response:
    """Download the roster as CSV."""
    export = await use_case.execute(query)
    return Response(
        content=export.content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


@router.get("/facets", response_model=RosterFacetsResponse)
async def roster_facets(
    actor: Actor = Depends(get_current_actor),
    engine: RosterQueryEngine = Depends(get_roster_engine),
) -> RosterFacetsResponse:
    facets = await engine.facets()
    return RosterFacetsResponse(**facets)
