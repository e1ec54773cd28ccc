from .user import User, Client, Professional, ROLE_MODELS
from .connection import Connection
from .review import Review

__all__ = ['User', 'Client', 'Professional', 'ROLE_MODELS', 'Connection', 'Review']
