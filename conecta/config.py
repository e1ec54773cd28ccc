import json
from datetime import timedelta
from decouple import config, Csv

def _json_serializer(obj):
    # Keep accented trade and zone names readable in JSON columns
    return json.dumps(obj, ensure_ascii=False)

class Config:
    SECRET_KEY = config('SECRET_KEY', default='your-secret-key-here')
    JWT_SECRET_KEY = config('JWT_SECRET_KEY', default='jwt-secret-key-here')
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=7)
    JWT_REFRESH_TOKEN_EXPIRES = timedelta(days=30)

    # Database
    SQLALCHEMY_DATABASE_URI = config('DATABASE_URL', default='sqlite:///conecta.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {'json_serializer': _json_serializer}

    # Marketplace rules
    COMMISSION_AMOUNT = config('COMMISSION_AMOUNT', default='1500.00')
    COMMISSION_CURRENCY = config('COMMISSION_CURRENCY', default='ARS')
    REVIEW_EDIT_WINDOW_DAYS = config('REVIEW_EDIT_WINDOW_DAYS', default=30, cast=int)
    REVIEW_DELETE_WINDOW_DAYS = config('REVIEW_DELETE_WINDOW_DAYS', default=7, cast=int)
    CONNECTION_NUMBER_ATTEMPTS = config('CONNECTION_NUMBER_ATTEMPTS', default=3, cast=int)

    # Rate limiting
    RATELIMIT_STORAGE_URI = config('RATELIMIT_STORAGE_URI', default='memory://')
    RATELIMIT_ENABLED = True

    # CORS
    CORS_ORIGINS = config('CORS_ORIGINS', default='http://localhost:3000,http://localhost:5000', cast=Csv())

    LOG_LEVEL = config('LOG_LEVEL', default='INFO')

class DevelopmentConfig(Config):
    DEBUG = True
    TESTING = False
    LOG_LEVEL = config('LOG_LEVEL', default='DEBUG')

class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    RATELIMIT_ENABLED = False
    JWT_SECRET_KEY = 'testing-jwt-secret-key-with-enough-length'

class ProductionConfig(Config):
    DEBUG = False
    TESTING = False

config_by_name = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig
}
