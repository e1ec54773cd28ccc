from urllib.parse import urlparse
from email_validator import validate_email, EmailNotValidError
import phonenumbers
from phonenumbers import NumberParseException

def validate_email_format(email):
    """Validate email format"""
    try:
        validate_email(email, check_deliverability=False)
        return True
    except EmailNotValidError:
        return False

def validate_phone_number(phone, country_code='AR'):
    """Validate phone number format"""
    try:
        parsed = phonenumbers.parse(phone, country_code)
        return phonenumbers.is_valid_number(parsed)
    except NumberParseException:
        return False

def validate_password_strength(password):
    """Validate password strength"""
    if not isinstance(password, str) or len(password) < 6:
        return False, "Password must be at least 6 characters long"

    if len(password) > 255:
        return False, "Password must be at most 255 characters long"

    return True, "Password is valid"

def validate_rating(rating):
    """Validate rating value (1-5)"""
    if isinstance(rating, bool):
        return False
    try:
        return int(rating) == float(rating) and 1 <= int(rating) <= 5
    except (ValueError, TypeError):
        return False

def validate_id(value):
    """Validate a positive integer identifier"""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0

def validate_url(url):
    """Validate an http(s) URL"""
    if not isinstance(url, str):
        return False
    parsed = urlparse(url)
    return parsed.scheme in ('http', 'https') and bool(parsed.netloc)

def validate_user_role(role):
    """Validate user role"""
    allowed_roles = {'client', 'professional'}
    return role in allowed_roles

def validate_string_list(values, max_items=20, max_length=100):
    """Validate a list of short strings"""
    if not isinstance(values, list) or len(values) > max_items:
        return False
    return all(isinstance(value, str) and 0 < len(value.strip()) <= max_length for value in values)

def validate_search_params(params):
    """Validate professional search parameters"""
    valid_params = {
        'search', 'zone', 'trade', 'min_rating', 'available', 'verified',
        'sort', 'page', 'per_page'
    }

    invalid_params = set(params.keys()) - valid_params
    if invalid_params:
        return False, f"Invalid parameters: {', '.join(sorted(invalid_params))}"

    # Validate numeric parameters
    numeric_params = ['min_rating', 'page', 'per_page']
    for param in numeric_params:
        if param in params:
            try:
                float(params[param])
            except (ValueError, TypeError):
                return False, f"Invalid {param}: must be a number"

    if 'sort' in params and params['sort'] not in ('rating', 'reviews', 'recent', 'alphabetical'):
        return False, "Invalid sort: must be one of rating, reviews, recent, alphabetical"

    return True, "Valid parameters"
