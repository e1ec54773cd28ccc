from .auth import auth_bp
from .users import users_bp
from .professionals import professionals_bp
from .connections import connections_bp
from .reviews import reviews_bp
from .trades import trades_bp
from .zones import zones_bp

__all__ = [
    'auth_bp', 'users_bp', 'professionals_bp', 'connections_bp',
    'reviews_bp', 'trades_bp', 'zones_bp'
]
