from typing import Any, Dict, List, Optional
from fastapi import HTTPException, status
from postgrest.exceptions import APIError
from app.models.event import EventFile, EventQuery
from app.repositories.events_repository import (
    insert_event_db,
    find_events_db,
    find_user_events_db,
    find_owned_event_db,
    get_event_db,
    update_event_db,
    delete_event_db,
    count_events_db
)
from app.utils.db_utils import validate_db_response, is_invalid_query_error
from app.utils.field_utils import sanitize_event, filter_update_fields, PROTECTED_UPDATE_FIELDS
from app.utils.logging_utils import log_debug
from app.utils.storage import upload_event_file_to_supabase_storage

UNAUTHORIZED_UPDATE_MESSAGE = "You can't update this entry"
MISSING_AUTH_MESSAGE = "No authorization header was found"

def attach_files(supabase_client, data: Dict[str, Any], files: List[EventFile], user_id: str) -> Dict[str, Any]:
    """
    Upload files and write their storage paths onto the fields they target.
    Several files for the same field become a list of paths.
    """
    uploaded: Dict[str, List[str]] = {}
    for event_file in files:
        path = upload_event_file_to_supabase_storage(
            supabase_client,
            event_file.content,
            user_id,
            event_file.filename,
            event_file.content_type
        )
        uploaded.setdefault(event_file.field, []).append(path)
        log_debug(f"Uploaded file for field '{event_file.field}': {path}", service="events")

    result = dict(data)
    for field, paths in uploaded.items():
        result[field] = paths[0] if len(paths) == 1 else paths
    return result

def _find_owned_event_or_401(supabase_client, event_id: str, user: dict):
    try:
        rows = find_owned_event_db(supabase_client, event_id, user["id"])
    except APIError as e:
        # An id the column cannot hold matches nothing
        if not is_invalid_query_error(e):
            raise
        rows = None
    if not rows:
        # Missing and foreign events are reported the same way
        log_debug(f"User {user['id']} denied access to event {event_id}", service="events")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=UNAUTHORIZED_UPDATE_MESSAGE)
    return rows[0]

async def create_event_service(supabase_client, data: Dict[str, Any], user: dict, files: Optional[List[EventFile]] = None):
    event_data = dict(data)
    if files:
        event_data = attach_files(supabase_client, event_data, files, user["id"])
    event_data["user"] = user["id"]

    rows = insert_event_db(supabase_client, event_data)
    if not validate_db_response(rows, "Insert event"):
        log_debug("Failed to create event", service="events")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create event.")
    log_debug(f"Event created by user {user['id']}", rows[0], service="events")
    return sanitize_event(rows[0])

async def update_event_service(supabase_client, event_id: str, data: Dict[str, Any], user: dict, files: Optional[List[EventFile]] = None):
    event = _find_owned_event_or_401(supabase_client, event_id, user)

    event_data = dict(data)
    files = [f for f in files or [] if f.field not in PROTECTED_UPDATE_FIELDS]
    if files:
        event_data = attach_files(supabase_client, event_data, files, user["id"])
    event_data = filter_update_fields(event_data)

    if not event_data:
        log_debug(f"Nothing to update on event {event_id}", service="events")
        return sanitize_event(event)

    rows = update_event_db(supabase_client, event_id, event_data)
    if not validate_db_response(rows, "Update event"):
        log_debug(f"Failed to update event {event_id}", service="events")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update event.")
    log_debug(f"Event updated: {event_id}", service="events")
    return sanitize_event(rows[0])

async def delete_event_service(supabase_client, event_id: str, user: dict):
    event = _find_owned_event_or_401(supabase_client, event_id, user)

    rows = delete_event_db(supabase_client, event_id)
    log_debug(f"Event deleted: {event_id}", service="events")
    return sanitize_event(rows[0] if rows else event)

async def list_my_events_service(supabase_client, user: Optional[dict]):
    if not user:
        log_debug("Listing own events without an authenticated user", service="events")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_AUTH_MESSAGE)

    events = find_user_events_db(supabase_client, user["id"])
    # An empty list is a valid answer, only a missing result is not
    if events is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    log_debug(f"Listed {len(events)} events for user {user['id']}", service="events")
    return sanitize_event(events)

def _raise_invalid_query(e: APIError):
    if not is_invalid_query_error(e):
        raise e
    log_debug(f"Rejected event query: {e.message}", service="events")
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid event query")

async def find_events_service(supabase_client, query: EventQuery):
    try:
        events = find_events_db(
            supabase_client,
            query.filters,
            sort=query.sort,
            limit=query.limit,
            start=query.start
        )
    except APIError as e:
        _raise_invalid_query(e)
    return sanitize_event(events or [])

async def find_one_event_service(supabase_client, event_id: str):
    try:
        rows = get_event_db(supabase_client, event_id)
    except APIError as e:
        if not is_invalid_query_error(e):
            raise
        rows = None
    if not rows:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return sanitize_event(rows[0])

async def count_events_service(supabase_client, query: EventQuery):
    try:
        return count_events_db(supabase_client, query.filters)
    except APIError as e:
        _raise_invalid_query(e)
