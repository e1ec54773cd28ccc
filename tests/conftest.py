import pytest
from conecta import create_app, db
from conecta.models.user import Client, Professional
from conecta.models.connection import Connection

VALID_PHONE = '+54 351 421 5678'

@pytest.fixture
def app():
    """Create application for testing"""
    app = create_app('testing')

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()

@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()

@pytest.fixture
def make_client_user(app):
    """Factory for clients with a complete profile"""
    def _make(email='cliente@example.com', name='Juan Cliente', **fields):
        values = {
            'phone': VALID_PHONE,
            'zone': 'Córdoba Capital',
            'email_verified': True,
            'is_active': True,
            'settings': {}
        }
        values.update(fields)
        user = Client(email=email, name=name, **values)
        user.set_password('testpass123')
        user.refresh_profile_complete()
        db.session.add(user)
        db.session.commit()
        return user
    return _make

@pytest.fixture
def make_professional(app):
    """Factory for listed professionals"""
    def _make(email='pro@example.com', name='María Plomera', trades=None, **fields):
        values = {
            'phone': VALID_PHONE,
            'zone': 'Villa Carlos Paz',
            'bio': 'Plomería y gas con diez años de experiencia',
            'email_verified': True,
            'is_active': True,
            'is_available': True,
            'settings': {}
        }
        values.update(fields)
        user = Professional(
            email=email,
            name=name,
            trades=trades if trades is not None else ['Plomero', 'Gasista'],
            **values
        )
        user.set_password('testpass123')
        user.refresh_profile_complete()
        db.session.add(user)
        db.session.commit()
        return user
    return _make

@pytest.fixture
def client_user(make_client_user):
    return make_client_user()

@pytest.fixture
def professional(make_professional):
    return make_professional()

@pytest.fixture
def headers_for(app):
    """Build bearer headers for any user"""
    def _headers(user):
        access_token, _ = user.generate_tokens()
        return {'Authorization': f'Bearer {access_token}'}
    return _headers

@pytest.fixture
def client_headers(client, client_user):
    """Get authentication headers for the client"""
    response = client.post('/api/auth/login', json={
        'email': client_user.email,
        'password': 'testpass123'
    })

    data = response.get_json()
    token = data['data']['access_token']

    return {'Authorization': f'Bearer {token}'}

@pytest.fixture
def professional_headers(client, professional):
    """Get authentication headers for the professional"""
    response = client.post('/api/auth/login', json={
        'email': professional.email,
        'password': 'testpass123'
    })

    data = response.get_json()
    token = data['data']['access_token']

    return {'Authorization': f'Bearer {token}'}

@pytest.fixture
def open_connection(client, client_headers, professional):
    """Create a pending connection through the API"""
    def _open(description='Necesito arreglar una pérdida en el baño'):
        response = client.post('/api/connections', json={
            'professional_id': professional.id,
            'description': description
        }, headers=client_headers)
        assert response.status_code == 201
        return db.session.get(Connection, response.get_json()['data']['connection']['id'])
    return _open

@pytest.fixture
def completed_connection(client, open_connection, client_headers, professional_headers):
    """A connection walked through to completion"""
    connection = open_connection()
    for status, headers in (('accepted', professional_headers),
                            ('in_progress', professional_headers),
                            ('completed', client_headers)):
        response = client.put(f'/api/connections/{connection.id}/status',
                              json={'status': status}, headers=headers)
        assert response.status_code == 200
    db.session.refresh(connection)
    return connection
