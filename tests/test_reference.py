from conecta.services import catalog_service

def test_trade_catalog_size():
    assert len(catalog_service.ALL_TRADES) == 55
    assert len(catalog_service.trade_categories()) == 14

def test_zones_are_deduplicated_and_sorted():
    zones = catalog_service.ALL_ZONES

    assert zones == sorted(set(zones))
    assert 'Achiras' in catalog_service.CITIES and 'Achiras' in catalog_service.MUNICIPALITIES
    assert zones.count('Achiras') == 1

def test_list_trades(client):
    response = client.get('/api/trades')

    assert response.status_code == 200
    data = response.get_json()['data']
    assert data['total'] == 55

def test_search_trades_case_insensitive(client):
    response = client.get('/api/trades', query_string={'search': 'MECÁNICO'})

    trades = response.get_json()['data']['trades']
    assert trades == ['Mecánico de autos', 'Mecánico de motos', 'Mecánico (general)']

def test_trades_by_category(client):
    response = client.get('/api/trades', query_string={'category': 'Transporte'})

    assert response.get_json()['data']['trades'] == ['Chofer', 'Camionero', 'Cadete']

def test_trade_categories(client):
    response = client.get('/api/trades/categories')

    data = response.get_json()['data']
    assert data['total_categories'] == 14
    assert data['total_trades'] == 55
    assert data['categories'][0]['name'] == 'Construcción y Mantenimiento'

def test_popular_trades(client):
    response = client.get('/api/trades/popular')

    assert response.get_json()['data']['trades'][0] == 'Plomero'

def test_trade_details(client):
    response = client.get('/api/trades/Estilista/Peluquero')

    data = response.get_json()['data']
    assert data['category'] == 'Servicios Personales'
    assert 'Fotógrafo' in data['related']
    assert 'Estilista/Peluquero' not in data['related']

    response = client.get('/api/trades/Astronauta')
    assert response.status_code == 404

def test_list_zones(client):
    response = client.get('/api/zones')

    data = response.get_json()['data']
    assert data['total'] == len(catalog_service.ALL_ZONES)

def test_search_zones(client):
    response = client.get('/api/zones', query_string={'search': 'río'})

    zones = response.get_json()['data']['zones']
    assert 'Río Cuarto' in zones
    assert all('río' in zone.lower() for zone in zones)

def test_zones_by_type(client):
    response = client.get('/api/zones?type=cities')

    assert response.get_json()['data']['total'] == len(catalog_service.CITIES)

def test_validate_zone(client):
    response = client.get('/api/zones/validate/Villa%20Carlos%20Paz')
    assert response.get_json()['data']['valid'] is True

    response = client.get('/api/zones/validate/Atlantis')
    assert response.get_json()['data']['valid'] is False

def test_zone_stats(client):
    response = client.get('/api/zones/stats')

    data = response.get_json()['data']
    assert data['cities'] == len(catalog_service.CITIES)
    assert data['municipalities'] == len(catalog_service.MUNICIPALITIES)

def test_health_check(client):
    response = client.get('/api/health')

    assert response.status_code == 200
    assert response.get_json()['database'] == 'connected'

def test_unknown_route(client):
    response = client.get('/api/nothing-here')

    assert response.status_code == 404
    assert response.get_json()['status'] == 'error'
