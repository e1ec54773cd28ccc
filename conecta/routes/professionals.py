from collections import Counter
from flask import Blueprint, request
from sqlalchemy import or_, cast
from conecta import db
from conecta.models.user import Professional
from conecta.models.review import Review
from conecta.utils.validators import validate_search_params
from conecta.utils.helpers import (
    create_response, create_error_response, paginate_query, pagination_meta,
    parse_bool_arg, truncate_text
)

professionals_bp = Blueprint('professionals', __name__)

SORT_ORDERS = {
    'rating': (Professional.rating_average.desc(), Professional.rating_count.desc()),
    'reviews': (Professional.rating_count.desc(), Professional.rating_average.desc()),
    'recent': (Professional.created_at.desc(),),
    'alphabetical': (Professional.name.asc(),)
}

def _trades_contain(trade):
    # Trades are stored as a JSON array of strings
    return cast(Professional.trades, db.String).ilike(f'%"{trade}"%')

def _listed_professionals():
    return Professional.query.filter_by(is_active=True, profile_complete=True)

@professionals_bp.route('', methods=['GET'])
def search_professionals():
    """Search professionals with filters and sorting"""
    is_valid, message = validate_search_params(request.args)
    if not is_valid:
        return create_error_response(message, 400)

    page = request.args.get('page', 1, type=int)
    per_page = request.args.get('per_page', 20, type=int)

    query = _listed_professionals()

    search = request.args.get('search', '').strip()
    if search:
        query = query.filter(
            or_(
                Professional.name.ilike(f'%{search}%'),
                Professional.bio.ilike(f'%{search}%'),
                cast(Professional.trades, db.String).ilike(f'%{search}%')
            )
        )

    zone = request.args.get('zone', '').strip()
    if zone:
        query = query.filter(Professional.zone.ilike(f'%{zone}%'))

    trade = request.args.get('trade', '').strip()
    if trade:
        query = query.filter(_trades_contain(trade))

    min_rating = request.args.get('min_rating', type=float)
    if min_rating is not None:
        query = query.filter(Professional.rating_average >= min_rating)

    available = parse_bool_arg(request.args.get('available'))
    if available is not None:
        query = query.filter(Professional.is_available.is_(available))

    verified = parse_bool_arg(request.args.get('verified'))
    if verified is not None:
        query = query.filter(Professional.is_verified.is_(verified))

    sort = request.args.get('sort', 'rating')
    query = query.order_by(*SORT_ORDERS[sort], Professional.id.asc())

    pagination = paginate_query(query, page, per_page)

    return create_response({
        'professionals': [p.to_dict() for p in pagination['items']],
        'pagination': pagination_meta(pagination),
        'filters': {
            'search': search or None,
            'zone': zone or None,
            'trade': trade or None,
            'min_rating': min_rating,
            'available': available,
            'verified': verified,
            'sort': sort
        }
    })

@professionals_bp.route('/featured', methods=['GET'])
def get_featured_professionals():
    """Top rated verified professionals"""
    professionals = _listed_professionals().filter(
        Professional.is_verified.is_(True),
        Professional.is_available.is_(True),
        Professional.rating_average >= 4.0,
        Professional.rating_count >= 5
    ).order_by(
        Professional.rating_average.desc(),
        Professional.rating_count.desc()
    ).limit(8).all()

    featured = []
    for professional in professionals:
        data = professional.summary()
        data['rating'] = {
            'average': professional.rating_average,
            'total': professional.rating_count
        }
        data['short_bio'] = truncate_text(professional.bio or '', 100)
        featured.append(data)

    return create_response({
        'professionals': featured
    })

@professionals_bp.route('/stats', methods=['GET'])
def get_professional_stats():
    """Directory wide professional statistics"""
    professionals = Professional.query.filter_by(is_active=True).all()

    zones = Counter(p.zone for p in professionals if p.zone)
    trades = Counter(trade for p in professionals for trade in (p.trades or []))
    rated = [p.rating_average for p in professionals if p.rating_average]

    return create_response({
        'total': len(professionals),
        'verified': sum(1 for p in professionals if p.is_verified),
        'available': sum(1 for p in professionals if p.is_available),
        'with_ratings': len(rated),
        'zones': dict(zones.most_common()),
        'trades': dict(trades.most_common()),
        'average_rating': round(sum(rated) / len(rated), 1) if rated else 0.0
    })

@professionals_bp.route('/<int:professional_id>', methods=['GET'])
def get_professional(professional_id):
    """Get professional profile with recent reviews"""
    professional = _listed_professionals().filter_by(id=professional_id).first()

    if not professional:
        return create_error_response('Professional not found', 404)

    reviews = Review.query.filter_by(
        professional_id=professional.id,
        is_verified=True
    ).order_by(Review.created_at.desc(), Review.id.desc()).limit(10).all()

    data = professional.to_dict()
    data['reviews'] = [review.to_dict(include_client=True) for review in reviews]

    return create_response({
        'professional': data
    })

@professionals_bp.route('/<int:professional_id>/reviews', methods=['GET'])
def get_professional_reviews(professional_id):
    """Get paginated reviews of a professional"""
    professional = Professional.query.filter_by(id=professional_id, is_active=True).first()

    if not professional:
        return create_error_response('Professional not found', 404)

    page = request.args.get('page', 1, type=int)
    per_page = request.args.get('per_page', 10, type=int)

    query = Review.query.filter_by(
        professional_id=professional.id,
        is_verified=True
    ).order_by(Review.created_at.desc(), Review.id.desc())

    pagination = paginate_query(query, page, per_page)

    return create_response({
        'reviews': [review.to_dict(include_client=True) for review in pagination['items']],
        'pagination': pagination_meta(pagination),
        'rating_summary': professional.rating_summary()
    })
