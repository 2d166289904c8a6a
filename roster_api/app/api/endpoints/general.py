"""
Service-level endpoints that do not touch the roster: the usage
banner, an echo route for connectivity checks and a greeting.
"""

from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse

router = APIRouter()

USAGE = (
    "Welcome to the Warhammer 40k army roster API. Here are instructions on how to use this API:\n"
    "To see a full list of all the army units then add a suffix of the army name.\n"
    "For example `/tyranids` will return a list of all the tyranid units\n"
)


@router.get("/", response_class=PlainTextResponse)
async def usage() -> str:
    """Return plain-text usage instructions."""
    return USAGE


@router.post("/echo")
async def echo(request: Request) -> Response:
    """Return the request body unchanged."""
    body = await request.body()
    return Response(content=body, media_type="text/plain")


@router.get("/hey", response_class=PlainTextResponse)
async def hey() -> str:
    return "Hey there!"
