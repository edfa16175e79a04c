from typing import Dict, Any, Optional
from app.config import EVENTS_TABLE
from app.utils.db_utils import db_operation_context, safe_db_operation

DEFAULT_LIMIT = 100

def _apply_filters(query, filters: Optional[Dict[str, Any]]):
    for column, value in (filters or {}).items():
        query = query.eq(column, value)
    return query

def _apply_sort(query, sort: Optional[str]):
    if not sort:
        return query
    column, _, direction = sort.partition(":")
    return query.order(column, desc=direction.upper() == "DESC")

@safe_db_operation("Insert event")
def insert_event_db(supabase_client, event_data: Dict[str, Any]):
    return supabase_client.table(EVENTS_TABLE).insert(event_data).execute()

@safe_db_operation("Find events")
def find_events_db(
    supabase_client,
    filters: Optional[Dict[str, Any]] = None,
    sort: Optional[str] = None,
    limit: Optional[int] = None,
    start: Optional[int] = None
):
    """
    Find events matching equality filters.
    A negative limit disables paging.
    """
    query = _apply_filters(supabase_client.table(EVENTS_TABLE).select("*"), filters)
    query = _apply_sort(query, sort)
    limit = DEFAULT_LIMIT if limit is None else limit
    if limit >= 0:
        start = start or 0
        query = query.range(start, start + limit - 1)
    return query.execute()

@safe_db_operation("Find user events")
def find_user_events_db(supabase_client, user_id: str):
    return supabase_client.table(EVENTS_TABLE).select("*").eq("user", user_id).execute()

@safe_db_operation("Find owned event")
def find_owned_event_db(supabase_client, event_id: str, user_id: str):
    """Look up an event by id, restricted to rows owned by user_id."""
    return supabase_client.table(EVENTS_TABLE).select("*").eq("id", event_id).eq("user", user_id).limit(1).execute()

@safe_db_operation("Get event")
def get_event_db(supabase_client, event_id: str):
    return supabase_client.table(EVENTS_TABLE).select("*").eq("id", event_id).limit(1).execute()

@safe_db_operation("Update event")
def update_event_db(supabase_client, event_id: str, event_data: Dict[str, Any]):
    return supabase_client.table(EVENTS_TABLE).update(event_data).eq("id", event_id).execute()

@safe_db_operation("Delete event")
def delete_event_db(supabase_client, event_id: str):
    return supabase_client.table(EVENTS_TABLE).delete().eq("id", event_id).execute()

def count_events_db(supabase_client, filters: Optional[Dict[str, Any]] = None) -> int:
    with db_operation_context(supabase_client, "Count events") as client:
        query = _apply_filters(client.table(EVENTS_TABLE).select("id", count="exact"), filters)
        response = query.execute()
    return response.count or 0
