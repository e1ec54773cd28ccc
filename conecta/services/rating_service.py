from flask import current_app
from conecta import db
from conecta.models.user import Professional
from conecta.models.review import Review

def recompute_professional_rating(professional_id):
    """Rebuild a professional's average, review count and star histogram.

    The professional row is locked for the duration of the rescan so two
    concurrent review writes cannot publish aggregates from overlapping
    snapshots. Must be called after the triggering review write has been
    committed. Returns the professional, or None if it no longer exists.
    """
    professional = Professional.query.filter_by(id=professional_id).with_for_update().first()
    if not professional:
        db.session.rollback()
        return None

    scores = [
        score for (score,) in db.session.query(Review.score).filter_by(
            professional_id=professional_id,
            is_verified=True
        )
    ]
    professional.apply_rating_summary(scores)
    db.session.commit()

    current_app.logger.debug(
        f"Recomputed rating for professional {professional_id}: "
        f"{professional.rating_average} over {professional.rating_count} reviews"
    )
    return professional
