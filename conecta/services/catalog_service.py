"""Static reference data: trades ("oficios") and zones of Córdoba."""

TRADE_CATEGORIES = {
    'Construcción y Mantenimiento': [
        'Albañil', 'Carpintero', 'Plomero', 'Electricista', 'Gasista',
        'Cerrajero', 'Pintor', 'Soldador', 'Herrero', 'Vidriero'
    ],
    'Automotriz': [
        'Mecánico de autos', 'Mecánico de motos', 'Mecánico (general)',
        'Gomero (especialista en neumáticos)'
    ],
    'Alimentación': [
        'Panadero', 'Carnicero', 'Pescador', 'Cocinero', 'Repostero', 'Quesero'
    ],
    'Servicios Personales': [
        'Estilista/Peluquero', 'Depiladora', 'Fotógrafo', 'Guías de cabalgata',
        'Guia Turistico', 'Guia de Montaña'
    ],
    'Textil y Confección': [
        'Sastre', 'Modista', 'Zapatero', 'Tapicero'
    ],
    'Jardinería y Exterior': [
        'Jardinero', 'Auxiliar de jardinería'
    ],
    'Transporte': [
        'Chofer', 'Camionero', 'Cadete'
    ],
    'Técnico': [
        'Técnico electrónico', 'Técnico en refrigeración', 'Instalador de alarmas',
        'Montador de paneles solares', 'Montador de cristales y vidrios'
    ],
    'Industrial': [
        'Maquinista', 'Tornero', 'Operador de fábrica', 'Operario logístico'
    ],
    'Servicios Generales': [
        'Auxiliar de limpieza', 'Sereno/Personal de seguridad', 'limpieza de Piletas',
        'Lavadero de Autos/Motos'
    ],
    'Administrativo': [
        'Cajero', 'Auxiliar administrativo', 'Auxiliar contable'
    ],
    'Salud': [
        'Auxiliar de enfermería', 'Auxiliar de cocina'
    ],
    'Profesional': [
        'Abogado'
    ],
    'Agropecuario': [
        'Ganadero'
    ]
}

ALL_TRADES = [trade for trades in TRADE_CATEGORIES.values() for trade in trades]

POPULAR_TRADES = [
    'Plomero', 'Electricista', 'Albañil', 'Mecánico de autos',
    'Jardinero', 'Pintor', 'Carpintero', 'Auxiliar de limpieza'
]

CITIES = [
    'Achiras', 'Adelia María', 'Agua de Oro', 'Alta Gracia',
    'Altos de Chipión', 'Anisacate', 'Arroyito', 'Bell Ville',
    'Colonia Caroya', 'Cosquín', 'Cruz del Eje', 'Deán Funes',
    'Estación Juárez Celman', 'General Cabrera', 'General Deheza',
    'Jesús María', 'Laboulaye', 'Las Varillas', 'Leones',
    'Malagueño', 'Malvinas Argentinas', 'Marcos Juárez',
    'Mendiolaza', 'Mina Clavero', 'Montecristo', 'Morteros',
    'Oliva', 'Oncativo', 'Pilar', 'Río Ceballos', 'Río Cuarto',
    'Río Primero', 'Río Segundo', 'Río Tercero', 'Saldán',
    'San Francisco', 'Santa María de Punilla', 'Santa Rosa de Calamuchita',
    'Tanti', 'Unquillo', 'Vicuña Mackenna', 'Villa Allende',
    'Villa Carlos Paz', 'Villa Dolores', 'Villa General Belgrano',
    'Villa María', 'Villa Nueva', 'Villa de Soto',
    'Villa del Rosario', 'Villa del Totoral'
]

MUNICIPALITIES = [
    'Achiras', 'Adelia María', 'Agua de Oro', 'Altos de Chipión',
    'Anisacate', 'Arias', 'Arroyo Cabral', 'Bialet Massé',
    'Calchín', 'Camilo Aldao', 'Carnerillo', 'Cruz Alta',
    'Del Campillo', 'Despeñaderos', 'Devoto', 'El Brete',
    'El Tío', 'Etruria', 'Falda del Carmen', 'General Baldissera',
    'General Roca', 'Guatimozín', 'Huinca Renancó', 'Laguna Larga',
    'Las Acequias', 'Las Peñas', 'Las Tapias', 'Los Cerrillos',
    'Los Cóndores', 'Los Surgentes', 'Luyaba', 'Mayu Sumaj',
    'Mi Granja', 'Morteros', 'Nicolás Bruzzone', 'Noetinger',
    'Nono', 'Obispo Trejo', 'Ordóñez', 'Pascanas',
    'Porteña', 'Potrero de Garay', 'Pozo del Molle', 'Quilino',
    'Río Primero', 'Sacanta', 'Salsacate', 'Salsipuedes',
    'San Carlos Minas', 'San José', 'San José de la Dormida',
    'San Lorenzo', 'San Marcos Sierra', 'San Marcos Sud',
    'San Pedro', 'San Roque', 'Santa Catalina Holmberg',
    'Santa Eufemia', 'Saturnino María Laspiur', 'Sebastián Elcano',
    'Serrezuela', 'Sinsacate', 'Tancacha', 'Ticino',
    'Toledo', 'Tránsito', 'Ucacha', 'Valle de Anisacate',
    'Valle Hermoso', 'Viamonte', 'Villa Allende', 'Villa Ascasubi',
    'Villa Candelaria Norte', 'Villa Cura Brochero', 'Villa Giardino',
    'Villa Huidobro', 'Villa Parque Santa Ana', 'Villa Parque Síquiman',
    'Villa Rumipal', 'Villa Río Icho Cruz', 'Villa Santa Cruz del Lago',
    'Villa Sarmiento', 'Villa Valeria', 'Villa Yacanto',
    'Villa de las Rosas', 'Villa del Dique', 'Villa del Prado'
]

ALL_ZONES = sorted(set(CITIES) | set(MUNICIPALITIES))

POPULAR_ZONES = [
    'Villa Carlos Paz', 'Alta Gracia', 'Cosquín', 'Río Cuarto',
    'Villa María', 'Cruz del Eje', 'Bell Ville', 'Jesús María'
]

ZONE_TYPES = {
    'cities': CITIES,
    'municipalities': MUNICIPALITIES
}

# Trades

def is_valid_trade(trade):
    return trade in ALL_TRADES

def search_trades(term=None):
    if not term:
        return list(ALL_TRADES)
    term = term.lower()
    return [trade for trade in ALL_TRADES if term in trade.lower()]

def trades_by_category(category):
    return list(TRADE_CATEGORIES.get(category, []))

def trade_categories():
    return list(TRADE_CATEGORIES.keys())

def category_of_trade(trade):
    for category, trades in TRADE_CATEGORIES.items():
        if trade in trades:
            return category
    return None

def related_trades(trade):
    category = category_of_trade(trade)
    if not category:
        return []
    return [other for other in TRADE_CATEGORIES[category] if other != trade]

# Zones

def is_valid_zone(zone):
    return zone in ALL_ZONES

def search_zones(term=None):
    if not term:
        return list(ALL_ZONES)
    term = term.lower()
    return [zone for zone in ALL_ZONES if term in zone.lower()]

def zones_by_type(zone_type):
    if zone_type in ZONE_TYPES:
        return sorted(ZONE_TYPES[zone_type])
    return list(ALL_ZONES)

def zone_stats():
    return {
        'total_zones': len(ALL_ZONES),
        'cities': len(CITIES),
        'municipalities': len(MUNICIPALITIES),
        'coverage': 'Province of Córdoba'
    }
