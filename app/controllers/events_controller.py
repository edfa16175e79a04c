from app.services.events_service import (
    create_event_service,
    update_event_service,
    delete_event_service,
    list_my_events_service,
    find_events_service,
    find_one_event_service,
    count_events_service
)

async def create_event_controller(supabase_client, payload, user):
    return await create_event_service(supabase_client, payload.data, user, payload.files)

async def update_event_controller(supabase_client, event_id: str, payload, user):
    return await update_event_service(supabase_client, event_id, payload.data, user, payload.files)

async def delete_event_controller(supabase_client, event_id: str, user):
    return await delete_event_service(supabase_client, event_id, user)

async def list_my_events_controller(supabase_client, user):
    return await list_my_events_service(supabase_client, user)

async def find_events_controller(supabase_client, query):
    return await find_events_service(supabase_client, query)

async def find_one_event_controller(supabase_client, event_id: str):
    return await find_one_event_service(supabase_client, event_id)

async def count_events_controller(supabase_client, query):
    return await count_events_service(supabase_client, query)
