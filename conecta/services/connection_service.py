from datetime import datetime, timedelta
from flask import current_app
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from conecta import db
from conecta.models.user import Professional
from conecta.models.connection import (
    Connection, STATUSES, ROLE_TRANSITIONS, STATUS_ORDER
)
from conecta.services.errors import (
    ValidationError, AuthorizationError, NotFoundError, ConflictError
)
from conecta.services.payment_service import commission_amount, process_commission_payment
from conecta.utils.helpers import parse_datetime_from_string, sanitize_input
from conecta.utils.validators import validate_id

def find_available_professional(professional_id):
    return Professional.query.filter_by(
        id=professional_id,
        is_active=True,
        is_available=True,
        profile_complete=True
    ).first()

def get_connection_for_user(connection_id, user, lock=False):
    """Load a connection the user takes part in, or raise NotFoundError"""
    query = Connection.query.filter(
        Connection.id == connection_id,
        or_(Connection.client_id == user.id, Connection.professional_id == user.id)
    )
    if lock:
        query = query.with_for_update()
    connection = query.first()
    if not connection:
        raise NotFoundError('Connection not found')
    return connection

def _validate_job_fields(data):
    description = sanitize_input(data.get('description'))
    if len(description) < 10 or len(description) > 1000:
        raise ValidationError('Description must be between 10 and 1000 characters')

    is_urgent = data.get('is_urgent', False)
    if not isinstance(is_urgent, bool):
        raise ValidationError('is_urgent must be true or false')

    location = data.get('location') or {}
    if not isinstance(location, dict):
        raise ValidationError('location must be an object')

    budget_estimate = data.get('budget_estimate') or {}
    if not isinstance(budget_estimate, dict):
        raise ValidationError('budget_estimate must be an object')

    return description, is_urgent, location, budget_estimate

def create_connection(client, professional_id, data):
    """Open a new connection from a client to a professional.

    The connection number is 1 + the number of earlier connections of the
    pair. Two concurrent creations for the same pair collide on the
    (client, professional, number) unique constraint; the loser rolls back
    and retries with a fresh count.
    """
    if not client.is_client:
        raise AuthorizationError('Only clients can create connections')

    if not validate_id(professional_id):
        raise ValidationError('professional_id must be a positive integer')

    professional = find_available_professional(professional_id)
    if not professional:
        raise NotFoundError('Professional not found or not available')

    description, is_urgent, location, budget_estimate = _validate_job_fields(data)
    professional_id = professional.id
    client_id = client.id
    amount = commission_amount()

    attempts = current_app.config.get('CONNECTION_NUMBER_ATTEMPTS', 3)
    for attempt in range(1, attempts + 1):
        number = Connection.next_connection_number(client_id, professional_id)
        connection = Connection(
            client_id=client_id,
            professional_id=professional_id,
            connection_number=number,
            payment_required=Connection.requires_payment(number),
            commission_amount=amount,
            status='pending',
            description=description,
            is_urgent=is_urgent,
            location=location,
            budget_estimate=budget_estimate,
            messages=[]
        )
        db.session.add(connection)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            current_app.logger.warning(
                f"Connection number {number} for client {client_id} and professional "
                f"{professional_id} was taken (attempt {attempt}/{attempts})"
            )
            continue

        current_app.logger.info(
            f"Connection {connection.id} created: client {client_id} -> professional "
            f"{professional_id} #{number} (payment required: {connection.payment_required})"
        )
        return connection

    raise ConflictError('Could not register the connection, please try again')

def update_status(connection_id, user, status, job_started_at=None, job_finished_at=None):
    if status not in STATUSES:
        raise ValidationError('Invalid status')

    connection = get_connection_for_user(connection_id, user, lock=True)

    if connection.is_terminal:
        raise ConflictError(f'Connection is already {connection.status}')

    if status not in ROLE_TRANSITIONS.get(user.role, ()):
        raise AuthorizationError('You are not allowed to move the connection to this status')

    if status != 'cancelled' and STATUS_ORDER[status] <= STATUS_ORDER[connection.status]:
        raise ConflictError(f'Cannot move connection from {connection.status} to {status}')

    started = finished = None
    if job_started_at is not None:
        started = parse_datetime_from_string(job_started_at)
        if not started:
            raise ValidationError('Invalid job_started_at format')
    if job_finished_at is not None:
        finished = parse_datetime_from_string(job_finished_at)
        if not finished:
            raise ValidationError('Invalid job_finished_at format')

    if started:
        connection.job_started_at = started
    if finished:
        connection.job_finished_at = finished

    previous = connection.status
    if status == 'completed':
        connection.complete()
    else:
        connection.status = status

    db.session.commit()
    current_app.logger.info(f"Connection {connection.id} moved from {previous} to {status} by user {user.id}")
    return connection

def append_message(connection_id, sender, text):
    text = text.strip() if isinstance(text, str) else ''
    if not text:
        raise ValidationError('Message cannot be empty')

    # Row lock so concurrent appends never overwrite each other's list
    connection = get_connection_for_user(connection_id, sender, lock=True)
    message = connection.add_message(sender.id, text)
    db.session.commit()
    return message

def mark_messages_read(connection_id, reader):
    connection = get_connection_for_user(connection_id, reader, lock=True)
    changed = connection.mark_messages_read(reader.id)
    db.session.commit()
    return connection, changed

def record_payment(connection_id, client, method, details=None):
    """Settle the commission of a connection that requires payment"""
    if not client.is_client:
        raise AuthorizationError('Only clients can make payments')

    if not method or not isinstance(method, str):
        raise ValidationError('payment_method is required')
    if details is not None and not isinstance(details, dict):
        raise ValidationError('payment_details must be an object')

    connection = Connection.query.filter_by(id=connection_id, client_id=client.id).with_for_update().first()
    if not connection:
        raise NotFoundError('Connection not found')
    if not connection.payment_required:
        raise ConflictError('This connection does not require payment')
    if connection.payment_completed:
        raise ConflictError('Payment already completed')

    connection.payment_info = process_commission_payment(
        connection.commission_amount,
        sanitize_input(method, 50),
        details,
        metadata={'connection_id': connection.id, 'client_id': client.id}
    )
    connection.payment_completed = True
    db.session.commit()
    return connection

def list_connections(user, status=None):
    """Query of the user's connections, newest first"""
    if user.is_client:
        query = Connection.query.filter_by(client_id=user.id)
    else:
        query = Connection.query.filter_by(professional_id=user.id)

    if status:
        if status not in STATUSES:
            raise ValidationError('Invalid status')
        query = query.filter_by(status=status)

    return query.order_by(Connection.created_at.desc(), Connection.id.desc())

def connection_stats(user):
    connections = list_connections(user).all()
    six_months_ago = datetime.utcnow() - timedelta(days=182)

    return {
        'total': len(connections),
        'by_status': {
            status: sum(1 for c in connections if c.status == status) for status in STATUSES
        },
        'payments_completed': sum(1 for c in connections if c.payment_completed),
        'recent_activity': sum(1 for c in connections if c.created_at >= six_months_ago)
    }
