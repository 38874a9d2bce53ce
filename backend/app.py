import logging

from flask import Flask, jsonify
from flask_jwt_extended import JWTManager
from flask_cors import CORS
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from config import Config
from database import Database
from db.init_db import init_database
from errors import NotFoundError, RemoteServerError, SettingsConflictError, ValidationError
from services.storage import DatabaseStorage

logger = logging.getLogger(__name__)


def configure_logging(level):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )


def register_error_handlers(app, jwt):
    # JWT error handlers
    @jwt.invalid_token_loader
    def invalid_token_callback(error):
        logger.warning('Invalid token: %s', error)
        return jsonify({'error': 'Invalid token', 'details': str(error)}), 422

    @jwt.unauthorized_loader
    def unauthorized_callback(error):
        return jsonify({'error': 'Missing Authorization header', 'details': str(error)}), 401

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({'error': 'Token has expired'}), 401

    @jwt.revoked_token_loader
    def revoked_token_callback(jwt_header, jwt_payload):
        return jsonify({'error': 'Token has been revoked'}), 401

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        return jsonify({'error': 'Validation failed', 'fields': error.errors}), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(error):
        return jsonify({'error': str(error)}), 404

    @app.errorhandler(SettingsConflictError)
    def handle_settings_conflict(error):
        return jsonify({'error': str(error)}), 409

    @app.errorhandler(RemoteServerError)
    def handle_remote_error(error):
        return jsonify({'error': str(error), 'remote_status': error.status_code}), 502

    @app.errorhandler(Exception)
    def handle_error(error):
        if isinstance(error, HTTPException):
            return jsonify({'error': error.description}), error.code
        if isinstance(error, SQLAlchemyError):
            # Statement parameters may hold credentials; log only the driver message
            logger.error('Database error (%s): %s', type(error).__name__,
                         getattr(error, 'orig', None) or 'no driver detail')
            return jsonify({
                'error': 'Internal server error',
                'error_type': type(error).__name__,
            }), 500
        logger.exception('Unhandled error: %s', error)
        return jsonify({
            'error': str(error),
            'error_type': type(error).__name__,
        }), 500


def create_app(config_object=Config, storage=None, database=None):
    """Build the Flask app.

    The storage façade is created once here and shared by every request
    through ``app.extensions['storage']``. Tests pass their own storage or
    database to swap backends.
    """
    app = Flask(__name__)
    app.config.from_object(config_object)
    configure_logging(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    jwt = JWTManager(app)
    CORS(app)
    register_error_handlers(app, jwt)

    if storage is None:
        if database is None:
            database = Database(app.config['SQLALCHEMY_DATABASE_URI'])
        init_database(database)
        storage = DatabaseStorage.from_config(app.config, database)
    app.extensions['storage'] = storage

    # Register routes
    from routes import init_routes
    init_routes(app)

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
