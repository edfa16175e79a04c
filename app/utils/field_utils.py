# Field utilities for shaping event records before they leave the API

# Bookkeeping columns that never go out over the wire
EVENT_PRIVATE_FIELDS = [
    'created_by',
    'updated_by',
]

# Credential columns of an expanded user relation
USER_PRIVATE_FIELDS = [
    'password',
    'reset_password_token',
    'confirmation_token',
]

# Fields a caller may never set through an update body
PROTECTED_UPDATE_FIELDS = [
    'id',
    'user',
]


def _strip(record: dict, private_fields: list) -> dict:
    return {key: value for key, value in record.items() if key not in private_fields}


def sanitize_event(entity):
    """
    Remove fields that are not meant for external exposure.

    Accepts a single event record or a list of them and returns new objects,
    the input is left untouched. When the ``user`` relation has been expanded
    into a dict, its credential fields are removed as well.

    Args:
        entity: Event dict, list of event dicts, or None

    Returns:
        Sanitized copy of the input
    """
    if entity is None:
        return None
    if isinstance(entity, list):
        return [sanitize_event(item) for item in entity]

    sanitized = _strip(entity, EVENT_PRIVATE_FIELDS)
    if isinstance(sanitized.get('user'), dict):
        sanitized['user'] = _strip(sanitized['user'], USER_PRIVATE_FIELDS)
    return sanitized


def filter_update_fields(fields: dict) -> dict:
    """Drop the owner and identifier from an update body."""
    return _strip(fields, PROTECTED_UPDATE_FIELDS)
