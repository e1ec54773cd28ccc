from .decorators import (
    role_required, user_required, client_required, professional_required,
    json_required, validate_json_fields, load_current_user
)
from .validators import *
from .helpers import *

__all__ = [
    'role_required', 'user_required', 'client_required', 'professional_required',
    'json_required', 'validate_json_fields', 'load_current_user',
    'validate_email_format', 'validate_phone_number', 'validate_password_strength',
    'validate_id', 'validate_rating', 'validate_url', 'validate_user_role',
    'validate_string_list', 'validate_search_params',
    'generate_transaction_id', 'paginate_query', 'pagination_meta',
    'parse_datetime_from_string', 'create_response',
    'create_error_response', 'truncate_text', 'sanitize_input', 'parse_bool_arg'
]
