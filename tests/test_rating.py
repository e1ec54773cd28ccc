import pytest
from conecta import db
from conecta.models.connection import Connection
from conecta.models.review import Review
from conecta.models.user import summarize_scores
from conecta.services.rating_service import recompute_professional_rating

def test_summarize_scores():
    average, total, distribution = summarize_scores([5, 5, 4, 3])

    assert average == 4.3
    assert total == 4
    assert distribution == {'5': 2, '4': 1, '3': 1, '2': 0, '1': 0}

def test_summarize_scores_rounds_half_up():
    # 17 / 4 = 4.25
    assert summarize_scores([5, 4, 4, 4])[0] == 4.3
    # 7 / 4 = 1.75
    assert summarize_scores([1, 2, 2, 2])[0] == 1.8

def test_summarize_no_scores():
    assert summarize_scores([]) == (0.0, 0, {'5': 0, '4': 0, '3': 0, '2': 0, '1': 0})

@pytest.fixture
def reviewed_professional(app, client_user, professional):
    """Professional with four verified reviews and one unverified"""
    for number, (score, verified) in enumerate([(5, True), (5, True), (4, True), (3, True), (1, False)], start=1):
        connection = Connection(
            client_id=client_user.id,
            professional_id=professional.id,
            connection_number=number,
            commission_amount=1500,
            status='completed',
            description='Trabajo de prueba terminado'
        )
        db.session.add(connection)
        db.session.flush()
        db.session.add(Review(
            connection_id=connection.id,
            client_id=client_user.id,
            professional_id=professional.id,
            score=score,
            comment='Comentario de prueba',
            is_verified=verified
        ))
    db.session.commit()
    return professional

def test_recompute_uses_verified_reviews(reviewed_professional):
    professional = recompute_professional_rating(reviewed_professional.id)

    assert professional.rating_average == 4.3
    assert professional.rating_count == 4
    assert professional.rating_distribution == {'5': 2, '4': 1, '3': 1, '2': 0, '1': 0}

def test_recompute_is_idempotent(reviewed_professional):
    first = recompute_professional_rating(reviewed_professional.id)
    snapshot = (first.rating_average, first.rating_count, dict(first.rating_distribution))

    second = recompute_professional_rating(reviewed_professional.id)

    assert (second.rating_average, second.rating_count, second.rating_distribution) == snapshot

def test_recompute_missing_professional(app):
    assert recompute_professional_rating(999) is None

def test_featured_professionals(client, reviewed_professional, make_professional):
    make_professional(email='unrated@example.com', is_verified=True)
    reviewed_professional.is_verified = True
    db.session.commit()

    # Needs at least five reviews
    recompute_professional_rating(reviewed_professional.id)
    response = client.get('/api/professionals/featured')
    assert response.get_json()['data']['professionals'] == []

    extra = Review.query.filter_by(is_verified=False).first()
    extra.is_verified = True
    extra.score = 5
    connection = Connection(
        client_id=extra.client_id,
        professional_id=reviewed_professional.id,
        connection_number=6,
        commission_amount=1500,
        status='completed',
        description='Otro trabajo terminado'
    )
    db.session.add(connection)
    db.session.flush()
    db.session.add(Review(
        connection_id=connection.id,
        client_id=extra.client_id,
        professional_id=reviewed_professional.id,
        score=4,
        comment='Comentario de prueba'
    ))
    db.session.commit()
    recompute_professional_rating(reviewed_professional.id)

    response = client.get('/api/professionals/featured')

    featured = response.get_json()['data']['professionals']
    assert [p['id'] for p in featured] == [reviewed_professional.id]
    assert featured[0]['rating'] == {'average': 4.3, 'total': 6}
