"""
Top‑level router for the API.

The roster routes live at the application root (``/tyranids``,
``/unit``) rather than under a versioned prefix, since clients already
depend on those paths.
"""

from fastapi import APIRouter

from .endpoints import general, units

router = APIRouter()

router.include_router(general.router, tags=["general"])
router.include_router(units.router, tags=["units"])
