from flask import Blueprint, request, g
from flask_jwt_extended import jwt_required, get_jwt_identity, create_access_token
from conecta import db, limiter
from conecta.models.user import User
from conecta.services import user_service
from conecta.utils.decorators import json_required, validate_json_fields, user_required
from conecta.utils.helpers import create_response, create_error_response

auth_bp = Blueprint('auth', __name__)

@auth_bp.route('/register', methods=['POST'])
@limiter.limit("5 per minute")
@json_required
@validate_json_fields(['email', 'password', 'role'])
def register():
    """Register a new client or professional"""
    data = request.get_json()

    user = user_service.register_user(
        data['email'],
        data['password'],
        data['role'],
        name=data.get('name')
    )
    access_token, refresh_token = user.generate_tokens()

    return create_response({
        'user': user.to_dict(include_private=True),
        'access_token': access_token,
        'refresh_token': refresh_token
    }, 'User registered successfully', 201)

@auth_bp.route('/login', methods=['POST'])
@limiter.limit("10 per minute")
@json_required
@validate_json_fields(['email', 'password'])
def login():
    """Login user"""
    data = request.get_json()

    user = user_service.authenticate(data['email'], data['password'])
    if not user:
        return create_error_response('Invalid email or password', 401)

    if not user.is_active:
        return create_error_response('Account has been deactivated', 401)

    user.touch_last_login()
    db.session.commit()

    access_token, refresh_token = user.generate_tokens()

    return create_response({
        'access_token': access_token,
        'refresh_token': refresh_token,
        'user': user.to_dict(include_private=True)
    })

@auth_bp.route('/refresh', methods=['POST'])
@jwt_required(refresh=True)
def refresh():
    """Refresh access token"""
    current_user_id = get_jwt_identity()
    user = db.session.get(User, int(current_user_id))

    if not user or not user.is_active:
        return create_error_response('Invalid user', 401)

    access_token = create_access_token(identity=current_user_id)

    return create_response({
        'access_token': access_token
    })

@auth_bp.route('/me', methods=['GET'])
@user_required
def get_current_user():
    """Get current user profile"""
    return create_response({
        'user': g.current_user.to_dict(include_private=True)
    })

@auth_bp.route('/verify-email', methods=['POST'])
@user_required
def verify_email():
    """Mark the current user's email as verified"""
    user = user_service.verify_email(g.current_user)

    return create_response({
        'user': user.to_dict(include_private=True)
    }, 'Email verified successfully')
