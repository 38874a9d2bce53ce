import logging

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


def init_database(database):
    """Create every table that does not exist yet (SQLite and PostgreSQL)"""
    try:
        database.create_all()
    except SQLAlchemyError as e:
        logger.error('Failed to initialize database at %s: %s', database.engine.url, e)
        raise
    logger.info('Database initialized at %s', database.engine.url)
    return True


if __name__ == '__main__':
    from config import Config
    from database import Database

    logging.basicConfig(level=logging.INFO)
    init_database(Database(Config.SQLALCHEMY_DATABASE_URI))
