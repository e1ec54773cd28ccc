from flask import Blueprint, request, g
from conecta.services import connection_service
from conecta.utils.decorators import (
    json_required, validate_json_fields, user_required, client_required
)
from conecta.utils.helpers import create_response, paginate_query, pagination_meta

connections_bp = Blueprint('connections', __name__)

@connections_bp.route('', methods=['POST'])
@client_required
@json_required
@validate_json_fields(['professional_id', 'description'])
def create_connection():
    """Contact a professional"""
    data = request.get_json()

    connection = connection_service.create_connection(g.current_user, data['professional_id'], data)

    return create_response({
        'connection': connection.to_dict(viewer_id=g.current_user.id, include_participants=True)
    }, 'Connection created successfully', 201)

@connections_bp.route('', methods=['GET'])
@user_required
def get_connections():
    """Get the current user's connections"""
    user = g.current_user
    page = request.args.get('page', 1, type=int)
    per_page = request.args.get('per_page', 10, type=int)

    query = connection_service.list_connections(user, request.args.get('status'))
    pagination = paginate_query(query, page, per_page)

    connections = []
    for connection in pagination['items']:
        data = connection.to_dict(viewer_id=user.id)
        # Show the other side of the connection
        if user.is_client:
            data['professional'] = connection.professional.summary()
        else:
            data['client'] = connection.client.summary()
        connections.append(data)

    return create_response({
        'connections': connections,
        'pagination': pagination_meta(pagination)
    })

@connections_bp.route('/stats', methods=['GET'])
@user_required
def get_connection_stats():
    """Connection counters for the current user"""
    return create_response(connection_service.connection_stats(g.current_user))

@connections_bp.route('/<int:connection_id>', methods=['GET'])
@user_required
def get_connection(connection_id):
    """Get connection details; marks the other side's messages as read"""
    connection, _ = connection_service.mark_messages_read(connection_id, g.current_user)

    return create_response({
        'connection': connection.to_dict(
            viewer_id=g.current_user.id,
            include_messages=True,
            include_participants=True
        )
    })

@connections_bp.route('/<int:connection_id>/status', methods=['PUT'])
@user_required
@json_required
@validate_json_fields(['status'])
def update_connection_status(connection_id):
    """Move a connection through its lifecycle"""
    data = request.get_json()

    connection = connection_service.update_status(
        connection_id,
        g.current_user,
        data['status'],
        job_started_at=data.get('job_started_at'),
        job_finished_at=data.get('job_finished_at')
    )

    return create_response({
        'connection': connection.to_dict(viewer_id=g.current_user.id)
    }, 'Connection status updated successfully')

@connections_bp.route('/<int:connection_id>/messages', methods=['POST'])
@user_required
@json_required
@validate_json_fields(['message'])
def send_message(connection_id):
    """Send a message inside a connection"""
    message = connection_service.append_message(
        connection_id,
        g.current_user,
        request.get_json()['message']
    )

    return create_response({
        'message': message
    }, 'Message sent successfully', 201)

@connections_bp.route('/<int:connection_id>/messages/read', methods=['PUT'])
@user_required
def mark_messages_read(connection_id):
    """Mark the other participant's messages as read"""
    _, changed = connection_service.mark_messages_read(connection_id, g.current_user)

    return create_response({
        'marked_read': changed
    })

@connections_bp.route('/<int:connection_id>/payment', methods=['POST'])
@client_required
@json_required
@validate_json_fields(['payment_method'])
def pay_commission(connection_id):
    """Pay the commission of a connection"""
    data = request.get_json()

    connection = connection_service.record_payment(
        connection_id,
        g.current_user,
        data['payment_method'],
        data.get('payment_details')
    )

    return create_response({
        'connection': connection.to_dict(viewer_id=g.current_user.id)
    }, 'Payment processed successfully')
