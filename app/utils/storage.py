import os
import mimetypes
import uuid
from datetime import datetime

from app.config import EVENTS_BUCKET

def upload_event_file_to_supabase_storage(supabase_client, file_bytes: bytes, user_id: str, original_filename: str, content_type: str = None) -> str:
    file_extension = os.path.splitext(original_filename)[1] if original_filename else ''
    unique_filename = f"{uuid.uuid4()}{file_extension}"
    today = datetime.now().strftime('%Y-%m-%d')
    storage_path = f"{user_id}/{today}/{unique_filename}"
    if not content_type:
        content_type, _ = mimetypes.guess_type(original_filename or '')
    if not content_type:
        content_type = 'application/octet-stream'
    res = supabase_client.storage.from_(EVENTS_BUCKET).upload(
        storage_path,
        file_bytes,
        {"content-type": content_type}
    )
    if hasattr(res, 'error') and res.error:
        raise Exception(f"Supabase Storage upload error: {res.error}")
    return f"{EVENTS_BUCKET}/{storage_path}"
