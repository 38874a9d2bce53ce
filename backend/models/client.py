"""CRM clients with their locations and contacts."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON, Boolean

from database import Base, SerializerMixin, utcnow
from models.project import PRIORITIES


class Client(SerializerMixin, Base):
    """Client record owned by the user who created it."""

    __tablename__ = "clients"

    REQUIRED_FIELDS = ('full_name',)
    ENUM_FIELDS = {'priority': PRIORITIES, 'source': ('manual', 'import', 'vcf', 'csv')}
    OWNER_FIELD = 'created_by'

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100))
    last_name = Column(String(100))
    full_name = Column(String(200), nullable=False)
    company = Column(String(200))
    title = Column(String(100))
    email = Column(String(200))
    phone_cell = Column(String(50))
    phone_home = Column(String(50))
    phone_work = Column(String(50))
    phone_fax = Column(String(50))
    address = Column(JSON, default=dict)  # street, city, state, zip, country
    website = Column(String(300))
    notes = Column(Text)
    tags = Column(JSON, default=list)
    custom_fields = Column(JSON, default=dict)
    source = Column(String(20))
    is_active = Column(Boolean, default=True, nullable=False)
    last_contact_date = Column(DateTime(timezone=True))
    priority = Column(String(20), default='medium')
    created_by = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self):
        return f"<Client(id={self.id}, full_name='{self.full_name}')>"


class ClientLocation(SerializerMixin, Base):
    """Site belonging to a client; at most one is primary."""

    __tablename__ = "client_locations"

    REQUIRED_FIELDS = ('client_id', 'location_name')

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    location_name = Column(String(200), nullable=False)  # "Main Office", "Warehouse", ...
    address = Column(JSON, default=dict)
    phone = Column(String(50))
    email = Column(String(200))
    is_primary = Column(Boolean, default=False)
    is_active = Column(Boolean, default=True)
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self):
        return f"<ClientLocation(id={self.id}, client_id={self.client_id}, primary={self.is_primary})>"


class ClientContact(SerializerMixin, Base):
    """Person at a client; at most one is primary."""

    __tablename__ = "client_contacts"

    REQUIRED_FIELDS = ('client_id', 'first_name', 'last_name')
    ENUM_FIELDS = {'preferred_contact': ('email', 'phone', 'text')}

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    location_id = Column(Integer, ForeignKey("client_locations.id", ondelete="SET NULL"))
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    title = Column(String(100))
    department = Column(String(100))
    email = Column(String(200))
    phone_cell = Column(String(50))
    phone_work = Column(String(50))
    phone_home = Column(String(50))
    is_primary = Column(Boolean, default=False)
    is_active = Column(Boolean, default=True)
    notes = Column(Text)
    preferred_contact = Column(String(20), default='email')
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self):
        return f"<ClientContact(id={self.id}, client_id={self.client_id}, primary={self.is_primary})>"
