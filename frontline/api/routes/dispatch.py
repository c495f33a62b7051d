"""
Front controller routes.

Every path segment names a request. Query string, form fields, cookies,
session, headers and the environment become parameter sources for that one
dispatch.

Key behaviors:
- Unknown or illegal request names -> 404
- Configuration defects -> 500
- Dispatch runs in the threadpool (commands are synchronous)
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from starlette.concurrency import run_in_threadpool

from frontline.adapters.sources import EnvironSource, MappingSource
from frontline.api.deps import get_dispatcher
from frontline.components.dispatch import (
    Dispatcher,
    DispatchStatus,
    HandleRequestInput,
)
from frontline.components.dispatch import run as run_dispatch
from frontline.components.params import ParameterSources

router = APIRouter()

DEFAULT_REQUEST = "default"
_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def server_metadata(request: Request) -> dict[str, Any]:
    """CGI-style server/request metadata."""
    meta: dict[str, Any] = {
        "REQUEST_METHOD": request.method,
        "PATH_INFO": request.url.path,
        "QUERY_STRING": request.url.query,
        "SERVER_NAME": request.url.hostname or "",
        "SERVER_PORT": request.url.port,
        "REMOTE_ADDR": request.client.host if request.client else None,
    }
    for name, value in request.headers.items():
        meta["HTTP_" + name.upper().replace("-", "_")] = value
    return meta


async def build_sources(request: Request) -> ParameterSources:
    form: dict[str, Any] = {}
    content_type = request.headers.get("content-type", "")
    if request.method == "POST" and content_type.startswith(_FORM_TYPES):
        form = dict(await request.form())

    session = request.scope.get("session")

    return ParameterSources(
        get=MappingSource(dict(request.query_params)),
        post=MappingSource(form),
        cookie=MappingSource(dict(request.cookies)),
        session=MappingSource(session) if session is not None else None,
        env=EnvironSource(),
        server=MappingSource(server_metadata(request)),
    )


async def _handle(request_name: str, request: Request, dispatcher: Dispatcher) -> HTMLResponse:
    sources = await build_sources(request)
    inp = HandleRequestInput(request_name=request_name, sources=sources)

    result = await run_in_threadpool(run_dispatch, inp, dispatcher=dispatcher)

    if result.status is DispatchStatus.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.error)
    if result.status is DispatchStatus.CONFIG_ERROR:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Request is misconfigured",
        )

    return HTMLResponse(content=result.body)


@router.api_route("/", methods=["GET", "POST"])
async def handle_default(
    request: Request,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> HTMLResponse:
    return await _handle(DEFAULT_REQUEST, request, dispatcher)


@router.api_route("/{request_name}", methods=["GET", "POST"])
async def handle_named(
    request_name: str,
    request: Request,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> HTMLResponse:
    return await _handle(request_name, request, dispatcher)
