from conecta import db
from conecta.models.user import User, Client, Professional
from conecta.services import connection_service, review_service

def create_sample_users():
    """Create sample users"""
    users = []

    client_data = [
        {'email': 'cliente1@ejemplo.com', 'name': 'Juan Cliente', 'phone': '+54 351 421 5678',
         'zone': 'Córdoba Capital'},
        {'email': 'cliente2@ejemplo.com', 'name': 'Lucía Fernández', 'phone': '+54 351 422 1144',
         'zone': 'Villa Allende'},
    ]

    for client_info in client_data:
        client = Client(
            email_verified=True,
            is_active=True,
            settings={},
            **client_info
        )
        client.set_password('password123')
        client.refresh_profile_complete()
        users.append(client)

    professional_data = [
        {
            'email': 'profesional1@ejemplo.com',
            'name': 'María Profesional',
            'phone': '+54 351 498 7654',
            'zone': 'Villa Carlos Paz',
            'trades': ['Plomero', 'Gasista'],
            'bio': 'Profesional con 10 años de experiencia en plomería y gas'
        },
        {
            'email': 'profesional2@ejemplo.com',
            'name': 'Carlos Electricista',
            'phone': '+54 351 455 1234',
            'zone': 'Alta Gracia',
            'trades': ['Electricista', 'Instalador de alarmas'],
            'bio': 'Especialista en instalaciones eléctricas residenciales y comerciales'
        },
    ]

    for professional_info in professional_data:
        professional = Professional(
            email_verified=True,
            is_active=True,
            is_verified=True,
            is_available=True,
            settings={},
            **professional_info
        )
        professional.set_password('password123')
        professional.refresh_profile_complete()
        users.append(professional)

    return users

def create_sample_history(client, professional):
    """Run one job through the whole workflow so aggregates are populated"""
    connection = connection_service.create_connection(client, professional.id, {
        'description': 'Pérdida de agua debajo de la pileta de la cocina',
        'location': {'zone': client.zone}
    })
    connection_service.append_message(connection.id, client, 'Hola, ¿podrías venir esta semana?')
    connection_service.append_message(connection.id, professional, 'Sí, paso el jueves por la mañana.')
    connection_service.update_status(connection.id, professional, 'accepted')
    connection_service.update_status(connection.id, professional, 'in_progress')
    connection_service.update_status(connection.id, client, 'completed')

    review_service.create_review(client, connection.id, {
        'score': 5,
        'comment': 'Muy prolija y puntual, resolvió la pérdida en una hora.',
        'would_recommend': True,
        'positive_aspects': ['Puntualidad', 'Limpieza']
    })
    return connection

def seed_database():
    """Seed the database with sample data"""
    existing = User.query.count()
    if existing:
        print(f"Database already has {existing} users, skipping seed")
        return

    print("Creating sample data...")

    # Create users
    users = create_sample_users()
    for user in users:
        db.session.add(user)
    db.session.commit()
    print(f"Created {len(users)} users")

    clients = [user for user in users if user.is_client]
    professionals = [user for user in users if user.is_professional]

    create_sample_history(clients[0], professionals[0])
    print("Created 1 completed connection with its review")

    print("Sample data created successfully!")
