from flask import Blueprint, request, g
from conecta.services import user_service
from conecta.utils.decorators import json_required, validate_json_fields, user_required, professional_required
from conecta.utils.helpers import create_response

users_bp = Blueprint('users', __name__)

@users_bp.route('/profile', methods=['GET'])
@user_required
def get_profile():
    """Get current user profile"""
    return create_response({
        'user': g.current_user.to_dict(include_private=True)
    })

@users_bp.route('/profile', methods=['PUT'])
@user_required
@json_required
def update_profile():
    """Update current user profile"""
    user = user_service.update_profile(g.current_user, request.get_json())

    return create_response({
        'user': user.to_dict(include_private=True)
    }, 'Profile updated successfully')

@users_bp.route('/availability', methods=['PUT'])
@professional_required
@json_required
@validate_json_fields(['is_available'])
def update_availability():
    """Toggle whether the professional accepts new connections"""
    user = user_service.set_availability(g.current_user, request.get_json()['is_available'])

    return create_response({
        'is_available': user.is_available
    }, 'Availability updated successfully')

@users_bp.route('/settings', methods=['PUT'])
@user_required
@json_required
@validate_json_fields(['settings'])
def update_settings():
    """Merge the given keys into the user's settings"""
    user = user_service.merge_settings(g.current_user, request.get_json()['settings'])

    return create_response({
        'settings': user.settings
    }, 'Settings updated successfully')

@users_bp.route('/account', methods=['DELETE'])
@user_required
def delete_account():
    """Close the current user's account"""
    user_service.close_account(g.current_user)

    return create_response(message='Account deleted successfully')
