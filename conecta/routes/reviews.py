from flask import Blueprint, request, g
from conecta.models.review import Review
from conecta.services import review_service
from conecta.utils.decorators import (
    json_required, validate_json_fields, user_required, client_required, professional_required
)
from conecta.utils.helpers import create_response, paginate_query, pagination_meta, truncate_text

reviews_bp = Blueprint('reviews', __name__)

@reviews_bp.route('', methods=['POST'])
@client_required
@json_required
@validate_json_fields(['connection_id', 'score', 'comment'])
def create_review():
    """Rate a completed connection"""
    data = request.get_json()

    review = review_service.create_review(g.current_user, data['connection_id'], data)

    return create_response({
        'review': review.to_dict(include_professional=True)
    }, 'Review created successfully', 201)

@reviews_bp.route('/my-reviews', methods=['GET'])
@client_required
def get_my_reviews():
    """Get reviews written by the current client"""
    page = request.args.get('page', 1, type=int)
    per_page = request.args.get('per_page', 10, type=int)

    query = Review.query.filter_by(client_id=g.current_user.id).order_by(
        Review.created_at.desc(), Review.id.desc()
    )
    pagination = paginate_query(query, page, per_page)

    return create_response({
        'reviews': [
            review.to_dict(include_professional=True, include_connection=True)
            for review in pagination['items']
        ],
        'pagination': pagination_meta(pagination)
    })

@reviews_bp.route('/received', methods=['GET'])
@professional_required
def get_received_reviews():
    """Get reviews received by the current professional"""
    professional = g.current_user
    page = request.args.get('page', 1, type=int)
    per_page = request.args.get('per_page', 10, type=int)

    query = Review.query.filter_by(professional_id=professional.id, is_verified=True).order_by(
        Review.created_at.desc(), Review.id.desc()
    )
    pagination = paginate_query(query, page, per_page)

    return create_response({
        'reviews': [
            review.to_dict(include_client=True, include_connection=True)
            for review in pagination['items']
        ],
        'rating_summary': professional.rating_summary(),
        'pagination': pagination_meta(pagination)
    })

@reviews_bp.route('/pending', methods=['GET'])
@client_required
def get_pending_reviews():
    """Completed connections the client has not rated yet"""
    connections = review_service.pending_reviews(g.current_user)

    pending = []
    for connection in connections:
        pending.append({
            'connection_id': connection.id,
            'description': connection.description,
            'job_finished_at': connection.job_finished_at.isoformat() if connection.job_finished_at else None,
            'professional': connection.professional.summary()
        })

    return create_response({
        'pending': pending,
        'total': len(pending)
    })

@reviews_bp.route('/recent', methods=['GET'])
def get_recent_reviews():
    """Latest positive reviews on the platform"""
    limit = min(max(request.args.get('limit', 5, type=int), 1), 50)

    reviews = []
    for review in review_service.recent_reviews(limit):
        professional = review.professional
        reviews.append({
            'id': review.id,
            'score': review.score,
            'comment': truncate_text(review.comment, 150),
            'created_at': review.created_at.isoformat(),
            'professional': {
                'id': professional.id,
                'name': professional.name,
                'zone': professional.zone,
                'trades': (professional.trades or [])[:2]
            },
            'client': review.client.name if review.client and review.client.name else 'Verified client'
        })

    return create_response({
        'reviews': reviews
    })

@reviews_bp.route('/stats', methods=['GET'])
def get_review_stats():
    """Platform wide review statistics"""
    return create_response(review_service.platform_stats())

@reviews_bp.route('/<int:review_id>', methods=['PUT'])
@user_required
@json_required
def update_review(review_id):
    """Edit a review within the edit window"""
    review = review_service.update_review(review_id, g.current_user, request.get_json())

    return create_response({
        'review': review.to_dict()
    }, 'Review updated successfully')

@reviews_bp.route('/<int:review_id>', methods=['DELETE'])
@user_required
def delete_review(review_id):
    """Delete a review within the delete window"""
    review_service.delete_review(review_id, g.current_user)

    return create_response(message='Review deleted successfully')
