import json
from fastapi import Request, HTTPException
from pydantic import ValidationError
from starlette.datastructures import UploadFile
from app.models.event import EventPayload, EventFile, EventQuery, MultipartEventPayload

MULTIPART_DATA_MESSAGE = "When using multipart/form-data you need to provide your data in a JSON 'data' field."
FILES_PREFIX = "files."

def is_multipart(request: Request) -> bool:
    return request.headers.get("content-type", "").startswith("multipart/form-data")

def _validate_fields(data, message: str) -> dict:
    try:
        return EventPayload.model_validate(data).model_dump()
    except ValidationError:
        raise HTTPException(status_code=400, detail=message)

async def _parse_multipart(request: Request) -> MultipartEventPayload:
    form = await request.form()
    raw_data = form.get("data")
    if not isinstance(raw_data, str):
        raise HTTPException(status_code=400, detail=MULTIPART_DATA_MESSAGE)
    try:
        data = json.loads(raw_data)
    except ValueError:
        raise HTTPException(status_code=400, detail=MULTIPART_DATA_MESSAGE)
    data = _validate_fields(data, MULTIPART_DATA_MESSAGE)

    files = []
    for key, value in form.multi_items():
        if not key.startswith(FILES_PREFIX) or not isinstance(value, UploadFile):
            continue
        files.append(EventFile(
            field=key[len(FILES_PREFIX):],
            filename=value.filename,
            content_type=value.content_type,
            content=await value.read()
        ))
    return MultipartEventPayload(data=data, files=files)

async def parse_event_body(request: Request) -> MultipartEventPayload:
    """
    Read event fields from a JSON or multipart/form-data body.
    Multipart bodies carry the fields as JSON in ``data`` and files under
    ``files.<field>``.
    """
    if is_multipart(request):
        return await _parse_multipart(request)
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")
    return MultipartEventPayload(data=_validate_fields(body, "Request body must be a JSON object"))

def parse_event_query(request: Request) -> EventQuery:
    params = dict(request.query_params)
    try:
        limit = int(params.pop("_limit")) if "_limit" in params else None
        start = int(params.pop("_start")) if "_start" in params else None
    except ValueError:
        raise HTTPException(status_code=400, detail="_limit and _start must be integers")
    sort = params.pop("_sort", None)
    return EventQuery(filters=params, sort=sort, limit=limit, start=start)
