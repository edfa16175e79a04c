# This file marks the routes directory as a Python package. 

from .events import router as events_router

__all__ = [
    'events_router',
]
