from conecta.models.user import User, Client, Professional

def test_register_client(client):
    """Test client registration"""
    response = client.post('/api/auth/register', json={
        'email': 'NewUser@Example.com',
        'password': 'secret123',
        'role': 'client',
        'name': 'New User'
    })

    assert response.status_code == 201
    data = response.get_json()
    assert data['status'] == 'success'
    assert data['data']['user']['role'] == 'client'
    assert 'access_token' in data['data']

    # Emails are stored lower-cased
    user = User.query.filter_by(email='newuser@example.com').first()
    assert isinstance(user, Client)
    assert user.profile_complete is False

def test_register_professional(client):
    """Test professional registration"""
    response = client.post('/api/auth/register', json={
        'email': 'pro@example.com',
        'password': 'secret123',
        'role': 'professional'
    })

    assert response.status_code == 201
    user = User.query.filter_by(email='pro@example.com').first()
    assert isinstance(user, Professional)
    assert user.is_available is True
    assert user.rating_count == 0
    assert user.rating_distribution == {'5': 0, '4': 0, '3': 0, '2': 0, '1': 0}

def test_register_invalid_role(client):
    response = client.post('/api/auth/register', json={
        'email': 'admin@example.com',
        'password': 'secret123',
        'role': 'admin'
    })

    assert response.status_code == 400
    assert response.get_json()['status'] == 'error'

def test_register_short_password(client):
    """Test registering with weak password"""
    response = client.post('/api/auth/register', json={
        'email': 'weak@example.com',
        'password': '12345',
        'role': 'client'
    })

    assert response.status_code == 400
    assert 'at least 6 characters' in response.get_json()['message']

def test_register_duplicate_email(client, client_user):
    """Test registering with duplicate email"""
    response = client.post('/api/auth/register', json={
        'email': client_user.email,
        'password': 'secret123',
        'role': 'client'
    })

    assert response.status_code == 409
    data = response.get_json()
    assert data['status'] == 'error'
    assert 'already exists' in data['message']

def test_register_missing_fields(client):
    response = client.post('/api/auth/register', json={'email': 'x@example.com'})

    assert response.status_code == 400
    assert 'password' in response.get_json()['message']

def test_login_user(client, client_user):
    """Test user login"""
    response = client.post('/api/auth/login', json={
        'email': client_user.email,
        'password': 'testpass123'
    })

    assert response.status_code == 200
    data = response.get_json()
    assert data['status'] == 'success'
    assert 'access_token' in data['data']
    assert 'refresh_token' in data['data']
    assert data['data']['user']['last_login_at'] is not None

def test_login_invalid_credentials(client, client_user):
    """Test login with invalid credentials"""
    response = client.post('/api/auth/login', json={
        'email': client_user.email,
        'password': 'wrongpassword'
    })

    assert response.status_code == 401
    assert response.get_json()['status'] == 'error'

def test_login_inactive_user(client, make_client_user):
    make_client_user(email='inactive@example.com', is_active=False)

    response = client.post('/api/auth/login', json={
        'email': 'inactive@example.com',
        'password': 'testpass123'
    })

    assert response.status_code == 401

def test_get_current_user(client, client_headers):
    """Test getting current user"""
    response = client.get('/api/auth/me', headers=client_headers)

    assert response.status_code == 200
    data = response.get_json()
    assert data['data']['user']['email'] == 'cliente@example.com'

def test_me_requires_token(client):
    response = client.get('/api/auth/me')

    assert response.status_code == 401
    assert response.get_json()['status'] == 'error'

def test_refresh_token(client, client_user):
    response = client.post('/api/auth/login', json={
        'email': client_user.email,
        'password': 'testpass123'
    })
    refresh_token = response.get_json()['data']['refresh_token']

    response = client.post('/api/auth/refresh', headers={'Authorization': f'Bearer {refresh_token}'})

    assert response.status_code == 200
    assert 'access_token' in response.get_json()['data']

def test_verify_email(client, make_client_user, headers_for):
    user = make_client_user(email='unverified@example.com', email_verified=False)

    response = client.post('/api/auth/verify-email', headers=headers_for(user))

    assert response.status_code == 200
    assert response.get_json()['data']['user']['email_verified'] is True
