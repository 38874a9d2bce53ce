"""User accounts and permissions."""

import uuid

from sqlalchemy import Column, String, DateTime, JSON
from werkzeug.security import generate_password_hash, check_password_hash

from database import Base, SerializerMixin, utcnow


class User(SerializerMixin, Base):
    """Application user; the id doubles as the JWT identity."""

    __tablename__ = "users"

    REQUIRED_FIELDS = ('username', 'email')
    ENUM_FIELDS = {'role': ('user', 'admin', 'moderator')}
    PROTECTED_FIELDS = ('id', 'password_hash', 'created_at', 'updated_at')

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String(80), unique=True, nullable=False, index=True)
    email = Column(String(120), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100))
    last_name = Column(String(100))
    role = Column(String(20), default='user', nullable=False)
    permissions = Column(JSON, default=list)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    @staticmethod
    def hash_password(password):
        """Hash a password for storing"""
        return generate_password_hash(password)

    def check_password(self, password):
        """Check hashed password"""
        return check_password_hash(self.password_hash, password)

    def to_dict(self):
        data = super().to_dict()
        data.pop('passwordHash', None)
        return data

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
