from datetime import datetime
from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from conecta import db
from conecta.models.connection import Connection
from conecta.models.review import Review
from conecta.models.user import summarize_scores
from conecta.services.errors import (
    ValidationError, AuthorizationError, NotFoundError, ConflictError
)
from conecta.services.rating_service import recompute_professional_rating
from conecta.utils.helpers import sanitize_input
from conecta.utils.validators import validate_id, validate_rating, validate_string_list

def _validate_review_fields(data, partial=False):
    """Validate review input and return the cleaned values"""
    cleaned = {}

    if 'score' in data or not partial:
        score = data.get('score')
        if not validate_rating(score):
            raise ValidationError('Score must be an integer between 1 and 5')
        cleaned['score'] = int(score)

    if 'comment' in data or not partial:
        comment = sanitize_input(data.get('comment'))
        if len(comment) < 10 or len(comment) > 500:
            raise ValidationError('Comment must be between 10 and 500 characters')
        cleaned['comment'] = comment

    if data.get('would_recommend') is not None:
        if not isinstance(data['would_recommend'], bool):
            raise ValidationError('would_recommend must be true or false')
        cleaned['would_recommend'] = data['would_recommend']

    if data.get('work_completed') is not None:
        if not isinstance(data['work_completed'], bool):
            raise ValidationError('work_completed must be true or false')
        cleaned['work_completed'] = data['work_completed']

    for field in ('positive_aspects', 'improvement_aspects'):
        if data.get(field) is not None:
            if not validate_string_list(data[field]):
                raise ValidationError(f'{field} must be a list of short texts')
            cleaned[field] = [value.strip() for value in data[field]]

    return cleaned

def get_own_review(review_id, client):
    review = Review.query.filter_by(id=review_id, client_id=client.id).first()
    if not review:
        raise NotFoundError('Review not found')
    return review

def create_review(client, connection_id, data):
    """Rate a completed connection and refresh the professional's rating"""
    if not client.is_client:
        raise AuthorizationError('Only clients can write reviews')

    if not validate_id(connection_id):
        raise ValidationError('connection_id must be a positive integer')

    connection = Connection.query.filter_by(id=connection_id, client_id=client.id).first()
    if not connection:
        raise NotFoundError('Connection not found')

    if Review.query.filter_by(connection_id=connection.id).first():
        raise ConflictError('This connection has already been reviewed')

    if connection.status != 'completed' or not connection.rating_pending:
        raise ConflictError('Only completed connections awaiting a rating can be reviewed')

    fields = _validate_review_fields(data)
    professional_id = connection.professional_id

    review = Review(
        connection_id=connection.id,
        client_id=client.id,
        professional_id=professional_id,
        is_verified=True,
        **fields
    )
    connection.rating_pending = False
    db.session.add(review)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ConflictError('This connection has already been reviewed')

    current_app.logger.info(f"Review {review.id} created for connection {connection.id} ({review.score} stars)")
    recompute_professional_rating(professional_id)
    return review

def update_review(review_id, client, data):
    review = get_own_review(review_id, client)

    window = current_app.config.get('REVIEW_EDIT_WINDOW_DAYS', 30)
    if review.age_in_days() > window:
        raise ConflictError(f'Reviews can only be edited within {window} days')

    fields = _validate_review_fields(data, partial=True)
    if not fields:
        raise ValidationError('No fields to update')

    score_changed = 'score' in fields and fields['score'] != review.score
    for field, value in fields.items():
        setattr(review, field, value)

    professional_id = review.professional_id
    db.session.commit()

    if score_changed:
        recompute_professional_rating(professional_id)
    return review

def delete_review(review_id, client):
    review = get_own_review(review_id, client)

    window = current_app.config.get('REVIEW_DELETE_WINDOW_DAYS', 7)
    if review.age_in_days() > window:
        raise ConflictError(f'Reviews can only be deleted within {window} days')

    professional_id = review.professional_id
    db.session.delete(review)
    db.session.commit()

    current_app.logger.info(f"Review {review_id} deleted by client {client.id}")
    recompute_professional_rating(professional_id)

def pending_reviews(client):
    """Completed connections of the client still waiting for a rating"""
    return Connection.query.filter_by(
        client_id=client.id,
        status='completed',
        rating_pending=True
    ).order_by(Connection.job_finished_at.desc()).all()

def recent_reviews(limit=5):
    return Review.query.filter(
        Review.is_verified.is_(True),
        Review.score >= 4
    ).order_by(Review.created_at.desc(), Review.id.desc()).limit(limit).all()

def platform_stats():
    reviews = db.session.query(Review.score, Review.would_recommend, Review.created_at).filter(
        Review.is_verified.is_(True)
    ).all()

    average, total, distribution = summarize_scores([score for score, _, _ in reviews])

    recommended = sum(1 for _, recommend, _ in reviews if recommend)
    recommend_percentage = round(recommended * 100 / total) if total else 0

    month_start = datetime.utcnow().replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    this_month = sum(1 for _, _, created_at in reviews if created_at >= month_start)

    return {
        'total_reviews': total,
        'average_rating': average,
        'distribution': distribution,
        'recommendation_percentage': recommend_percentage,
        'reviews_this_month': this_month
    }

def reviewed_professional_ids(client_id):
    return [
        professional_id for (professional_id,) in db.session.query(
            func.distinct(Review.professional_id)
        ).filter(Review.client_id == client_id)
    ]
