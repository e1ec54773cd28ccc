import re
import secrets
import time
from datetime import datetime, timezone

def generate_transaction_id():
    """Generate an opaque transaction id, e.g. TX_1718000000000_k3j9x0q2a"""
    millis = int(time.time() * 1000)
    random_part = secrets.token_hex(5)[:9]
    return f"TX_{millis}_{random_part}"

def paginate_query(query, page, per_page, max_per_page=100):
    """Paginate a SQLAlchemy query"""
    page = max(1, page)
    per_page = min(max_per_page, max(1, per_page))

    pagination = query.paginate(
        page=page,
        per_page=per_page,
        error_out=False
    )

    return {
        'items': pagination.items,
        'total': pagination.total,
        'page': page,
        'per_page': per_page,
        'pages': pagination.pages,
        'has_prev': pagination.has_prev,
        'has_next': pagination.has_next,
        'prev_page': pagination.prev_num if pagination.has_prev else None,
        'next_page': pagination.next_num if pagination.has_next else None
    }

def pagination_meta(pagination):
    """Strip the items out of a paginate_query result"""
    return {key: value for key, value in pagination.items() if key != 'items'}

def parse_datetime_from_string(date_string):
    """Parse datetime from ISO string"""
    if not isinstance(date_string, str):
        return None
    try:
        # Handle timezone info
        if date_string.endswith('Z'):
            date_string = date_string[:-1] + '+00:00'
        parsed = datetime.fromisoformat(date_string)
    except ValueError:
        return None
    # Stored timestamps are naive UTC
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed

def create_response(data=None, message=None, status_code=200):
    """Create standardized API response"""
    response = {}

    if data is not None:
        response['data'] = data

    if message:
        response['message'] = message

    response['status'] = 'success' if status_code < 400 else 'error'
    response['timestamp'] = datetime.utcnow().isoformat()

    return response, status_code

def create_error_response(message, status_code=400, errors=None):
    """Create standardized error response"""
    response = {
        'message': message,
        'status': 'error',
        'timestamp': datetime.utcnow().isoformat()
    }

    if errors:
        response['errors'] = errors

    return response, status_code

def truncate_text(text, max_length, suffix='...'):
    """Truncate text to max length with suffix"""
    if len(text) <= max_length:
        return text
    return text[:max_length] + suffix

def sanitize_input(text, max_length=None):
    """Sanitize text input"""
    if not text:
        return ''

    # Remove any HTML tags
    text = re.sub(r'<[^>]+>', '', str(text))

    # Strip whitespace
    text = text.strip()

    # Truncate if max_length specified
    if max_length and len(text) > max_length:
        text = text[:max_length]

    return text

def parse_bool_arg(value):
    """Interpret a query string flag, None when absent"""
    if value is None:
        return None
    return value.strip().lower() in ('true', '1', 'yes')
