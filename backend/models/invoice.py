"""Invoices and quotes with their line items."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from database import Base, SerializerMixin, utcnow

DOCUMENT_TYPES = ('invoice', 'quote')
INVOICE_STATUSES = ('draft', 'pending', 'approved', 'sent', 'paid', 'overdue', 'cancelled')


class Invoice(SerializerMixin, Base):
    """Invoice or quote; amounts are stored in cents."""

    __tablename__ = "invoices"

    REQUIRED_FIELDS = ('title', 'customer_name', 'amount')
    ENUM_FIELDS = {'document_type': DOCUMENT_TYPES, 'status': INVOICE_STATUSES}
    OWNER_FIELD = 'created_by'

    id = Column(Integer, primary_key=True, index=True)
    invoice_number = Column(String(50), unique=True)
    document_type = Column(String(20), default='invoice', nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="SET NULL"))
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="SET NULL"))
    customer_name = Column(String(200), nullable=False)
    customer_email = Column(String(200))
    amount = Column(Integer, nullable=False)
    tax = Column(Integer, default=0)
    total = Column(Integer, nullable=False)
    status = Column(String(20), default='draft', nullable=False)
    due_date = Column(DateTime(timezone=True))
    paid_date = Column(DateTime(timezone=True))
    notes = Column(Text)
    terms = Column(Text)
    quickbooks_id = Column(String(100))  # set once the document is synced to QuickBooks
    created_by = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    items = relationship("InvoiceItem", back_populates="invoice", cascade="all, delete-orphan")

    @classmethod
    def from_payload(cls, data, partial=False):
        values = super().from_payload(data, partial=partial)
        # total defaults to amount + tax when the client leaves it out
        if not partial and values.get('total') is None:
            values['total'] = values['amount'] + (values.get('tax') or 0)
        return values

    def __repr__(self):
        return f"<Invoice(id={self.id}, number='{self.invoice_number}', status='{self.status}')>"


class InvoiceItem(SerializerMixin, Base):
    __tablename__ = "invoice_items"

    REQUIRED_FIELDS = ('invoice_id', 'description', 'quantity', 'rate')
    PROTECTED_FIELDS = ('id',)

    id = Column(Integer, primary_key=True, index=True)
    invoice_id = Column(Integer, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False, index=True)
    description = Column(Text, nullable=False)
    quantity = Column(Integer, nullable=False)
    rate = Column(Integer, nullable=False)  # cents
    amount = Column(Integer, nullable=False)  # cents

    invoice = relationship("Invoice", back_populates="items")

    @classmethod
    def from_payload(cls, data, partial=False):
        values = super().from_payload(data, partial=partial)
        if not partial and values.get('amount') is None:
            values['amount'] = values['quantity'] * values['rate']
        return values

    def __repr__(self):
        return f"<InvoiceItem(id={self.id}, invoice_id={self.invoice_id}, amount={self.amount})>"
