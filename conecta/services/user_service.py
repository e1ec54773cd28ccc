from flask import current_app
from conecta import db
from conecta.models.user import User, ROLE_MODELS
from conecta.services import catalog_service
from conecta.services.errors import ValidationError, AuthorizationError, ConflictError
from conecta.services.rating_service import recompute_professional_rating
from conecta.services.review_service import reviewed_professional_ids
from conecta.utils.helpers import sanitize_input
from conecta.utils.validators import (
    validate_email_format, validate_password_strength, validate_phone_number,
    validate_url, validate_user_role
)

def register_user(email, password, role, name=None):
    email = (email or '').lower().strip()
    if not validate_email_format(email):
        raise ValidationError('Invalid email format')

    is_valid, message = validate_password_strength(password)
    if not is_valid:
        raise ValidationError(message)

    if not validate_user_role(role):
        raise ValidationError('Role must be client or professional')

    if User.query.filter_by(email=email).first():
        raise ConflictError('User with this email already exists')

    user = ROLE_MODELS[role](email=email, settings={})
    if name:
        user.name = _clean_name(name)
    user.set_password(password)
    user.refresh_profile_complete()

    db.session.add(user)
    db.session.commit()

    current_app.logger.info(f"Registered {role} account {user.id}")
    return user

def authenticate(email, password):
    """Return the user owning these credentials, or None; the caller checks is_active"""
    email = (email or '').lower().strip()
    user = User.query.filter_by(email=email).first()
    if not user or not user.check_password(password or ''):
        return None
    return user

def _clean_name(name):
    name = sanitize_input(name, 100)
    if len(name) < 2 or len(name) > 50:
        raise ValidationError('Name must be between 2 and 50 characters')
    return name

def update_profile(user, data):
    """Apply a partial profile update and recompute profile completeness"""
    changes = {}

    if 'name' in data:
        changes['name'] = _clean_name(data['name'])

    if 'phone' in data:
        phone = sanitize_input(data['phone'], 20)
        if not validate_phone_number(phone):
            raise ValidationError('Invalid phone number format')
        changes['phone'] = phone

    if 'zone' in data:
        zone = sanitize_input(data['zone'], 100)
        if len(zone) < 2:
            raise ValidationError('Zone must be at least 2 characters')
        changes['zone'] = zone

    if 'bio' in data:
        bio = sanitize_input(data['bio'])
        if len(bio) > 500:
            raise ValidationError('Bio must be at most 500 characters')
        changes['bio'] = bio or None

    if 'photo_url' in data:
        photo_url = data['photo_url'] or ''
        if not isinstance(photo_url, str):
            raise ValidationError('Invalid photo URL')
        photo_url = photo_url.strip()
        if photo_url and not validate_url(photo_url):
            raise ValidationError('Invalid photo URL')
        changes['photo_url'] = photo_url or None

    if 'trades' in data:
        if not user.is_professional:
            raise ValidationError('Only professionals can list trades')
        trades = data['trades']
        if not isinstance(trades, list) or not trades:
            raise ValidationError('Trades must be a non-empty list')
        invalid = [trade for trade in trades if not catalog_service.is_valid_trade(trade)]
        if invalid:
            raise ValidationError(f'Invalid trades: {", ".join(map(str, invalid))}')
        # Keep first occurrence order
        changes['trades'] = list(dict.fromkeys(trades))

    for field, value in changes.items():
        setattr(user, field, value)
    user.refresh_profile_complete()

    db.session.commit()
    return user

def set_availability(user, is_available):
    if not user.is_professional:
        raise AuthorizationError('Only professionals can change availability')
    if not isinstance(is_available, bool):
        raise ValidationError('is_available must be true or false')

    user.is_available = is_available
    db.session.commit()
    return user

def merge_settings(user, settings):
    if not isinstance(settings, dict):
        raise ValidationError('Settings must be a JSON object')

    merged = dict(user.settings or {})
    merged.update(settings)
    user.settings = merged
    db.session.commit()
    return user

def verify_email(user):
    """Mark the email as verified; no mail is sent"""
    user.email_verified = True
    db.session.commit()
    return user

def close_account(user):
    """Delete the account along with its connections and reviews"""
    user_id = user.id
    affected = reviewed_professional_ids(user_id) if user.is_client else []

    db.session.delete(user)
    db.session.commit()
    current_app.logger.info(f"Closed account {user_id}")

    for professional_id in affected:
        recompute_professional_rating(professional_id)
