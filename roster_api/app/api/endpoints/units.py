"""
Roster endpoints.

``GET /tyranids`` lists every unit as ``{name, points}``;
``GET /unit?name=...`` returns the first unit with exactly that name.
Errors from the service layer are turned into plain-text responses
here:

* a roster that cannot be read gives ``500 Failed to read units: ...``
  on the list route;
* on the lookup route an unknown name gives
  ``404 No unit found with name: ...``.  An unreadable roster gives the
  same 404 unless ``split_lookup_errors`` is enabled, in which case it
  gives the list route's 500.
"""

import logging
from typing import List, Union

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import PlainTextResponse

from roster_api.app.core.config import Settings
from roster_api.app.core.errors import DatasetLoadError, UnitNotFoundError
from roster_api.app.schemas.unit import SimpleUnit
from roster_api.app.services.unit_service import UnitService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_unit_service(request: Request) -> UnitService:
    """FastAPI dependency returning the service built by ``create_app``."""
    return request.app.state.unit_service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _load_failure(exc: DatasetLoadError) -> PlainTextResponse:
    return PlainTextResponse(
        f"Failed to read units: {exc.detail}",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


@router.get("/tyranids", response_model=List[SimpleUnit])
async def list_tyranids(
    service: UnitService = Depends(get_unit_service),
) -> Union[List[SimpleUnit], PlainTextResponse]:
    """Return every unit in the roster, in file order."""
    try:
        return await service.list_units()
    except DatasetLoadError as exc:
        logger.error("Failed to read units: %s", exc.detail)
        return _load_failure(exc)


@router.get("/unit", response_model=SimpleUnit)
async def get_unit(
    name: str = Query(..., description="Exact, case-sensitive unit name"),
    service: UnitService = Depends(get_unit_service),
    settings: Settings = Depends(get_settings),
) -> Union[SimpleUnit, PlainTextResponse]:
    """Return the first unit whose name equals ``name``."""
    try:
        return await service.find_unit_by_name(name)
    except UnitNotFoundError:
        logger.info("No unit found with name %r", name)
    except DatasetLoadError as exc:
        if settings.split_lookup_errors:
            logger.error("Failed to read units: %s", exc.detail)
            return _load_failure(exc)
        logger.warning("Roster unavailable while looking up %r: %s", name, exc.detail)
    return PlainTextResponse(
        f"No unit found with name: {name}",
        status_code=status.HTTP_404_NOT_FOUND,
    )
