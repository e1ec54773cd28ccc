#!/usr/bin/env python3
"""Initialize the database with sample data"""

import os
from conecta import create_app, db
from conecta.seed_data import seed_database

def init_database():
    """Initialize database with tables and sample data"""
    app = create_app(os.getenv('FLASK_ENV', 'development'))

    with app.app_context():
        # Create all tables
        db.create_all()
        print("Database tables created successfully!")

        # Seed with sample data
        seed_database()

if __name__ == '__main__':
    init_database()
