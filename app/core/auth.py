from typing import Optional
from fastapi import Request, HTTPException, Depends
from jose import jwt, JWTError
from app import config
from app.repositories.auth_repository import get_user_profile_db
from app.core.clients import get_supabase_client
from app.utils.logging_utils import log_debug

def log(msg):
    log_debug(f"[auth] {msg}", service="auth")

def decode_token(token: str) -> dict:
    return jwt.decode(
        token,
        config.SUPABASE_JWT_SECRET,
        algorithms=[config.SUPABASE_JWT_ALGORITHM],
        audience=config.SUPABASE_JWT_AUDIENCE
    )

async def get_current_user(request: Request, supabase_client=Depends(get_supabase_client)):
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        log("❌ Missing or invalid Authorization header")
        raise HTTPException(status_code=401, detail="Missing or invalid Authorization header")
    token = auth_header.split(" ", 1)[1]
    try:
        payload = decode_token(token)
    except JWTError:
        log("❌ Invalid or expired token")
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    user_id = payload.get("sub")
    if not user_id:
        log("❌ User ID not found in token")
        raise HTTPException(status_code=400, detail="User ID not found in token")
    # Fetch the user's profile from the database using the repository
    profile = get_user_profile_db(supabase_client, user_id)
    log(f"✅ Authenticated user_id: {user_id}")
    return profile

async def get_current_user_optional(request: Request, supabase_client=Depends(get_supabase_client)) -> Optional[dict]:
    """Like get_current_user, but an absent Authorization header yields None."""
    if not request.headers.get("Authorization"):
        return None
    return await get_current_user(request, supabase_client)
