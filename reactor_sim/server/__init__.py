"""
HTTP transport for the reactor simulator: FastAPI app, tick loop and
snapshot broadcasting.
"""

from .api import create_app
from .broadcast import Broadcaster, Subscription
from .config import ServerConfig
from .driver import TickDriver

__all__ = [
    'create_app',
    'Broadcaster',
    'Subscription',
    'ServerConfig',
    'TickDriver',
]
