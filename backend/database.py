import os
import re
from contextlib import contextmanager
from datetime import date, datetime, timezone

from sqlalchemy import Boolean, Date, DateTime, Float, Integer, JSON, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from errors import ValidationError

Base = declarative_base()


def utcnow():
    return datetime.now(timezone.utc)


def to_camel(name):
    """project_id -> projectId"""
    head, *rest = name.split('_')
    return head + ''.join(part.title() for part in rest)


def to_snake(name):
    """projectId -> project_id"""
    return re.sub(r'(?<!^)(?=[A-Z])', '_', name).lower()


def parse_datetime(value):
    """Parse an ISO-8601 string (a trailing Z is accepted)"""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(str(value).replace('Z', '+00:00'))


def _serialize(value):
    if hasattr(value, 'isoformat'):
        return value.isoformat()
    return value


def _coerce(column, value):
    if value is None:
        return None
    column_type = column.type
    if isinstance(column_type, DateTime):
        return parse_datetime(value)
    if isinstance(column_type, Date):
        return parse_datetime(value).date()
    if isinstance(column_type, Boolean):
        if not isinstance(value, bool):
            raise TypeError('expected a boolean')
        return value
    if isinstance(column_type, Integer):
        if isinstance(value, bool):
            raise TypeError('expected an integer')
        return int(value)
    if isinstance(column_type, Float):
        return float(value)
    if isinstance(column_type, JSON):
        return value
    return str(value)


class SerializerMixin:
    """camelCase (de)serialization and payload validation for ORM models.

    Models declare which columns a payload must provide (REQUIRED_FIELDS),
    which columns take a value from a closed set (ENUM_FIELDS) and which
    column records the owner (OWNER_FIELD). The owner is never taken from a
    payload; the caller sets it from the authenticated identity.
    """

    PROTECTED_FIELDS = ('id', 'created_at', 'updated_at')
    REQUIRED_FIELDS = ()
    ENUM_FIELDS = {}
    OWNER_FIELD = None

    def to_dict(self):
        return {
            to_camel(column.name): _serialize(getattr(self, column.key))
            for column in self.__table__.columns
        }

    @classmethod
    def from_payload(cls, data, partial=False):
        """Validate a client payload and return column values keyed by snake_case name.

        With partial=True only the supplied fields are checked, which is what
        PATCH/PUT handlers need.
        """
        if not isinstance(data, dict):
            raise ValidationError({'body': 'expected a JSON object'})

        columns = {column.name: column for column in cls.__table__.columns}
        skipped = set(cls.PROTECTED_FIELDS)
        if cls.OWNER_FIELD:
            skipped.add(cls.OWNER_FIELD)

        values = {}
        errors = {}
        for key, value in data.items():
            name = key if key in columns else to_snake(key)
            if name not in columns or name in skipped:
                continue
            try:
                values[name] = _coerce(columns[name], value)
            except (TypeError, ValueError):
                errors[to_camel(name)] = f'invalid value {value!r}'

        for name in cls.REQUIRED_FIELDS:
            if (partial and name not in values) or to_camel(name) in errors:
                continue
            if values.get(name) in (None, ''):
                errors[to_camel(name)] = 'is required'

        for name, allowed in cls.ENUM_FIELDS.items():
            if values.get(name) is not None and values[name] not in allowed:
                errors[to_camel(name)] = 'must be one of: ' + ', '.join(allowed)

        if errors:
            raise ValidationError(errors)
        return values


def _normalize_url(db_url):
    if db_url.startswith('postgres://'):
        return 'postgresql://' + db_url[len('postgres://'):]

    if db_url.startswith('sqlite:///') and db_url != 'sqlite:///:memory:':
        db_path = db_url.replace('sqlite:///', '')
        # Relative paths live next to the backend package
        if not os.path.isabs(db_path):
            db_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), db_path)
        return 'sqlite:///' + db_path

    return db_url


class Database:
    """Engine plus session factory for one relational store."""

    def __init__(self, db_url):
        db_url = _normalize_url(db_url)
        if not (db_url.startswith('sqlite:') or db_url.startswith('postgresql')):
            raise ValueError(f"Unsupported database URL format: {db_url}")

        kwargs = {}
        if db_url.startswith('sqlite:'):
            kwargs['connect_args'] = {'check_same_thread': False}
            # In-memory databases exist per connection, so every session must share one
            if db_url in ('sqlite://', 'sqlite:///:memory:'):
                kwargs['poolclass'] = StaticPool
        else:
            kwargs['pool_pre_ping'] = True

        self.url = db_url
        self.engine = create_engine(db_url, **kwargs)
        self.SessionLocal = sessionmaker(
            bind=self.engine, autocommit=False, autoflush=False, expire_on_commit=False
        )

    @contextmanager
    def session(self):
        """Get a session as context manager; commits on success, rolls back on error"""
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_all(self):
        # Import models so every table is registered on Base.metadata
        import models  # noqa: F401
        Base.metadata.create_all(self.engine)

    def dispose(self):
        self.engine.dispose()
