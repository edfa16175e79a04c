from fastapi import HTTPException
from app.config import PROFILES_TABLE

def get_user_profile_db(supabase_client, user_id: str):
    response = supabase_client.table(PROFILES_TABLE).select("id, email, first_name, last_name, role").eq("id", user_id).maybe_single().execute()
    if not response or not response.data:
        raise HTTPException(status_code=404, detail="User profile not found")
    return response.data
