# app/config.py
import os
from dotenv import load_dotenv

# Load environment variables
if os.path.exists(".env"):
    load_dotenv(dotenv_path=".env")
else:
    print("ℹ️ Info: .env file not found. Relying on system environment variables.")

# Supabase Configuration
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")

# JWT Configuration
SUPABASE_JWT_SECRET = os.getenv("SUPABASE_JWT_SECRET")
SUPABASE_JWT_ALGORITHM = os.getenv("SUPABASE_JWT_ALGORITHM", "HS256")
SUPABASE_JWT_AUDIENCE = os.getenv("SUPABASE_JWT_AUDIENCE", "authenticated")

# Tables and buckets
EVENTS_TABLE = os.getenv("EVENTS_TABLE", "events")
PROFILES_TABLE = os.getenv("PROFILES_TABLE", "profiles")
EVENTS_BUCKET = os.getenv("EVENTS_BUCKET", "events-uploads")

# Logging
LOG_DIR = os.getenv("LOG_DIR", "logs")

# CORS Configuration
_DEFAULT_ORIGINS = [
    "http://localhost:1337",
    "http://localhost:3000",
    "http://127.0.0.1:1337",
    "http://127.0.0.1:3000"
]

ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "").split(",")
    if origin.strip()
] or _DEFAULT_ORIGINS
