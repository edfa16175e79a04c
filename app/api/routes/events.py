from fastapi import APIRouter, Depends
from app.controllers.events_controller import (
    create_event_controller,
    update_event_controller,
    delete_event_controller,
    list_my_events_controller,
    find_events_controller,
    find_one_event_controller,
    count_events_controller
)
from app.core.auth import get_current_user, get_current_user_optional
from app.core.clients import get_supabase_client
from app.utils.request_utils import parse_event_body, parse_event_query

router = APIRouter(tags=["Events"])

@router.post("/events")
async def create_event(user=Depends(get_current_user), payload=Depends(parse_event_body), supabase_client=Depends(get_supabase_client)):
    return await create_event_controller(supabase_client, payload, user)

@router.get("/events")
async def find_events(query=Depends(parse_event_query), supabase_client=Depends(get_supabase_client)):
    return await find_events_controller(supabase_client, query)

@router.get("/events/me")
async def list_my_events(user=Depends(get_current_user_optional), supabase_client=Depends(get_supabase_client)):
    return await list_my_events_controller(supabase_client, user)

@router.get("/events/count")
async def count_events(query=Depends(parse_event_query), supabase_client=Depends(get_supabase_client)):
    return await count_events_controller(supabase_client, query)

@router.get("/events/{event_id}")
async def find_one_event(event_id: str, supabase_client=Depends(get_supabase_client)):
    return await find_one_event_controller(supabase_client, event_id)

@router.put("/events/{event_id}")
async def update_event(event_id: str, user=Depends(get_current_user), payload=Depends(parse_event_body), supabase_client=Depends(get_supabase_client)):
    return await update_event_controller(supabase_client, event_id, payload, user)

@router.delete("/events/{event_id}")
async def delete_event(event_id: str, user=Depends(get_current_user), supabase_client=Depends(get_supabase_client)):
    return await delete_event_controller(supabase_client, event_id, user)
