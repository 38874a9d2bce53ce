import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()


def _optional_float(value):
    if value in (None, ''):
        return None
    return float(value)


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///opsdesk.db'
    JWT_SECRET_KEY = os.environ.get('JWT_SECRET_KEY') or SECRET_KEY
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=1)
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Remote content server (workspaces, categories, settings files)
    REMOTE_SERVER_URL = os.environ.get('REMOTE_SERVER_URL', 'http://localhost:8888')
    REMOTE_SERVER_USER = os.environ.get('REMOTE_SERVER_USER', 'aviuser')
    REMOTE_SERVER_PASSWORD = os.environ.get('REMOTE_SERVER_PASSWORD', 'aviserver')
    # None leaves requests without a timeout
    REMOTE_REQUEST_TIMEOUT = _optional_float(os.environ.get('REMOTE_REQUEST_TIMEOUT'))
    SETTINGS_REMOTE_DIR = os.environ.get('SETTINGS_REMOTE_DIR', 'project_data')

    # Local fallback for workspaces when the remote server is unreachable
    FALLBACK_DATA_DIR = os.environ.get('FALLBACK_DATA_DIR') or os.path.join('.', 'server_data')


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    JWT_SECRET_KEY = 'test-jwt-secret-key-with-enough-length'
    LOG_LEVEL = 'DEBUG'
