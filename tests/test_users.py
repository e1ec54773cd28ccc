import pytest
from conecta import db
from conecta.models.user import User, Professional
from conecta.models.connection import Connection
from conecta.models.review import Review

def test_get_profile(client, client_headers):
    response = client.get('/api/users/profile', headers=client_headers)

    assert response.status_code == 200
    data = response.get_json()
    assert data['data']['user']['profile_complete'] is True
    assert data['data']['user']['settings'] == {}

def test_update_profile_completes_professional(client, make_professional, headers_for):
    """Profile becomes complete once name, phone, zone and trades are set"""
    professional = make_professional(email='new@example.com', name=None, trades=[])
    assert professional.profile_complete is False
    headers = headers_for(professional)

    response = client.put('/api/users/profile', json={
        'name': 'Pedro Electricista',
        'zone': 'Alta Gracia'
    }, headers=headers)
    assert response.status_code == 200
    assert response.get_json()['data']['user']['profile_complete'] is False

    response = client.put('/api/users/profile', json={
        'trades': ['Electricista', 'Instalador de alarmas', 'Electricista']
    }, headers=headers)

    assert response.status_code == 200
    user = response.get_json()['data']['user']
    assert user['profile_complete'] is True
    assert user['trades'] == ['Electricista', 'Instalador de alarmas']

def test_update_profile_invalid_trade(client, professional_headers):
    response = client.put('/api/users/profile', json={
        'trades': ['Astronauta']
    }, headers=professional_headers)

    assert response.status_code == 400
    assert 'Astronauta' in response.get_json()['message']

def test_client_cannot_list_trades(client, client_headers):
    response = client.put('/api/users/profile', json={
        'trades': ['Plomero']
    }, headers=client_headers)

    assert response.status_code == 400

def test_update_profile_invalid_phone(client, client_headers):
    response = client.put('/api/users/profile', json={
        'phone': '123'
    }, headers=client_headers)

    assert response.status_code == 400

def test_update_profile_short_name(client, client_headers):
    response = client.put('/api/users/profile', json={
        'name': 'A'
    }, headers=client_headers)

    assert response.status_code == 400

def test_update_availability(client, professional, professional_headers):
    response = client.put('/api/users/availability', json={
        'is_available': False
    }, headers=professional_headers)

    assert response.status_code == 200
    assert response.get_json()['data']['is_available'] is False
    db.session.refresh(professional)
    assert professional.is_available is False

def test_client_cannot_update_availability(client, client_headers):
    response = client.put('/api/users/availability', json={
        'is_available': False
    }, headers=client_headers)

    assert response.status_code == 403

def test_settings_are_merged(client, client_headers):
    client.put('/api/users/settings', json={
        'settings': {'notifications': True, 'language': 'es'}
    }, headers=client_headers)

    response = client.put('/api/users/settings', json={
        'settings': {'notifications': False}
    }, headers=client_headers)

    assert response.status_code == 200
    assert response.get_json()['data']['settings'] == {'notifications': False, 'language': 'es'}

def test_settings_must_be_object(client, client_headers):
    response = client.put('/api/users/settings', json={'settings': ['x']}, headers=client_headers)

    assert response.status_code == 400

def test_close_client_account_recomputes_ratings(client, client_user, client_headers,
                                                 professional, completed_connection):
    response = client.post('/api/reviews', json={
        'connection_id': completed_connection.id,
        'score': 4,
        'comment': 'Buen trabajo, llegó a horario'
    }, headers=client_headers)
    assert response.status_code == 201
    db.session.refresh(professional)
    assert professional.rating_count == 1

    client_id = client_user.id
    professional_id = professional.id
    response = client.delete('/api/users/account', headers=client_headers)

    assert response.status_code == 200
    assert db.session.get(User, client_id) is None
    assert Connection.query.filter_by(client_id=client_id).count() == 0
    assert Review.query.filter_by(client_id=client_id).count() == 0

    professional = db.session.get(Professional, professional_id)
    assert professional.rating_count == 0
    assert professional.rating_average == 0.0
    assert professional.rating_distribution == {'5': 0, '4': 0, '3': 0, '2': 0, '1': 0}

def test_close_professional_account(client, professional, professional_headers, open_connection):
    open_connection()
    professional_id = professional.id

    response = client.delete('/api/users/account', headers=professional_headers)

    assert response.status_code == 200
    assert Connection.query.filter_by(professional_id=professional_id).count() == 0

@pytest.mark.parametrize('body', ['null', '[]', '42'])
def test_update_profile_body_must_be_object(client, client_headers, body):
    response = client.put('/api/users/profile', data=body,
                          content_type='application/json', headers=client_headers)

    assert response.status_code == 400

@pytest.mark.parametrize('photo_url', [123, ['https://example.com/foto.jpg'], 'not-a-url'])
def test_update_profile_invalid_photo_url(client, client_headers, photo_url):
    response = client.put('/api/users/profile', json={
        'photo_url': photo_url
    }, headers=client_headers)

    assert response.status_code == 400
