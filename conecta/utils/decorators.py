from functools import wraps
from flask import request, g
from flask_jwt_extended import jwt_required, get_jwt_identity
from conecta import db
from conecta.models.user import User
from conecta.utils.helpers import create_error_response

def load_current_user():
    """Resolve the JWT subject to an active user, or None"""
    try:
        user_id = int(get_jwt_identity())
    except (TypeError, ValueError):
        return None
    user = db.session.get(User, user_id)
    if not user or not user.is_active:
        return None
    return user

def role_required(*roles):
    """Require an authenticated, active user; optionally restricted to roles.

    The user is stored on ``g.current_user``.
    """
    def decorator(f):
        @wraps(f)
        @jwt_required()
        def decorated_function(*args, **kwargs):
            user = load_current_user()
            if not user:
                return create_error_response('Invalid token', 401)

            if roles and user.role not in roles:
                return create_error_response(f'Only {" or ".join(roles)} accounts can do this', 403)

            g.current_user = user
            return f(*args, **kwargs)
        return decorated_function
    return decorator

user_required = role_required()
client_required = role_required('client')
professional_required = role_required('professional')

def json_required(f):
    """Decorator to require JSON content type"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not request.is_json:
            return create_error_response('Content-Type must be application/json', 400)
        if not isinstance(request.get_json(silent=True), dict):
            return create_error_response('Request body must be a JSON object', 400)
        return f(*args, **kwargs)
    return decorated_function

def validate_json_fields(required_fields):
    """Decorator to validate required JSON fields"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            data = request.get_json(silent=True)
            if not data or not isinstance(data, dict):
                return create_error_response('No JSON data provided', 400)

            missing_fields = []
            for field in required_fields:
                if field not in data or data[field] is None:
                    missing_fields.append(field)

            if missing_fields:
                return create_error_response(f'Missing required fields: {", ".join(missing_fields)}', 400)

            return f(*args, **kwargs)
        return decorated_function
    return decorator
