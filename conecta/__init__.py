from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_jwt_extended import JWTManager
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

# Initialize extensions
db = SQLAlchemy()
migrate = Migrate()
jwt = JWTManager()
cors = CORS()
limiter = Limiter(key_func=get_remote_address)

def create_app(config_name='development'):
    app = Flask(__name__)

    # Load configuration
    from .config import config_by_name
    app.config.from_object(config_by_name[config_name])
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    cors.init_app(app, origins=app.config['CORS_ORIGINS'])
    limiter.init_app(app)

    # Register blueprints
    from .routes.auth import auth_bp
    from .routes.users import users_bp
    from .routes.professionals import professionals_bp
    from .routes.connections import connections_bp
    from .routes.reviews import reviews_bp
    from .routes.trades import trades_bp
    from .routes.zones import zones_bp

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(users_bp, url_prefix='/api/users')
    app.register_blueprint(professionals_bp, url_prefix='/api/professionals')
    app.register_blueprint(connections_bp, url_prefix='/api/connections')
    app.register_blueprint(reviews_bp, url_prefix='/api/reviews')
    app.register_blueprint(trades_bp, url_prefix='/api/trades')
    app.register_blueprint(zones_bp, url_prefix='/api/zones')

    # Import models to ensure they're registered
    from .models import user, connection, review

    # JWT error handlers
    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return {'message': 'Token has expired', 'status': 'error'}, 401

    @jwt.invalid_token_loader
    def invalid_token_callback(error):
        return {'message': 'Invalid token', 'status': 'error'}, 401

    @jwt.unauthorized_loader
    def missing_token_callback(error):
        return {'message': 'Authentication required', 'status': 'error'}, 401

    # Error handlers
    from .services.errors import ServiceError
    from .utils.helpers import create_error_response

    @app.errorhandler(ServiceError)
    def service_error(error):
        return create_error_response(error.message, error.status_code)

    @app.errorhandler(SQLAlchemyError)
    def database_error(error):
        db.session.rollback()
        app.logger.exception(f"Database error: {error}")
        return create_error_response('Internal server error', 500)

    @app.errorhandler(404)
    def not_found(error):
        return create_error_response('Resource not found', 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        return create_error_response('Method not allowed', 405)

    @app.errorhandler(500)
    def internal_error(error):
        app.logger.error(f"Unhandled error: {error}")
        return create_error_response('Internal server error', 500)

    @app.errorhandler(429)
    def rate_limit_exceeded(error):
        return create_error_response('Rate limit exceeded', 429)

    # Health check endpoint
    @app.route('/api/health')
    def health_check():
        try:
            db.session.execute(text('SELECT 1'))
        except SQLAlchemyError as e:
            app.logger.error(f"Health check failed: {e}")
            return {'status': 'error', 'database': 'disconnected'}, 500
        return {'status': 'healthy', 'database': 'connected', 'message': 'Conecta Córdoba API is running'}

    return app
