from typing import Callable, Any
from functools import wraps
from app.utils.logging_utils import log_debug
from contextlib import contextmanager

@contextmanager
def db_operation_context(supabase_client, operation_name: str = "Database operation"):
    """
    Context manager for logging a record-store operation.
    Note: This does NOT provide transactions. Each call against the store is
    atomic on its own, nothing more.

    Usage:
        with db_operation_context(supabase_client, "Update event") as client:
            client.table("events").update({"title": "B"}).eq("id", event_id).execute()

    Args:
        supabase_client: The Supabase client instance
        operation_name: Name of the operation for logging
    """
    try:
        log_debug(f"Starting database operation: {operation_name}", service="database")
        yield supabase_client
        log_debug(f"Database operation completed successfully: {operation_name}", service="database")
    except Exception as e:
        log_debug(f"Database operation failed: {operation_name}", {
            "error": str(e),
            "type": type(e).__name__
        }, service="database")
        raise

def safe_db_operation(operation_name: str = "Database operation"):
    """
    Decorator for executing record-store operations with logging.
    Unwraps the Supabase response into its ``data`` payload; a response
    without data comes back as ``None``. Errors are logged and re-raised.

    Usage:
        @safe_db_operation("Get event")
        def get_event_db(supabase_client, event_id: str):
            return supabase_client.table("events").select("*").eq("id", event_id).execute()
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(supabase_client, *args, **kwargs):
            with db_operation_context(supabase_client, operation_name) as client:
                result = func(client, *args, **kwargs)

            # Handle Supabase response
            if hasattr(result, 'data'):
                if result.data is None:
                    log_debug(f"No data returned: {operation_name}", service="database")
                    return None
                return result.data
            return result

        return wrapper
    return decorator

def validate_db_response(response: Any, operation_name: str = "Database operation") -> bool:
    """
    Validates unwrapped response data from a write and logs any issues.

    Args:
        response: The data returned by the write (usually a list of rows)
        operation_name: Name of the operation for logging

    Returns:
        bool: True if at least one row came back, False otherwise
    """
    if response is None:
        log_debug(f"Empty response from database: {operation_name}", service="database")
        return False

    if isinstance(response, list) and len(response) == 0:
        log_debug(f"Empty data list in response: {operation_name}", service="database")
        return False

    return True

# PostgREST codes for a value that does not fit its column and for an unknown column
INVALID_QUERY_CODES = ("22P02", "42703")

def is_invalid_query_error(error: Exception) -> bool:
    """True when the store rejected the query itself rather than failing."""
    return getattr(error, "code", None) in INVALID_QUERY_CODES
