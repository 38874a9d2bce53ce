"""Time tracking: entries and the breaks taken during them."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Boolean

from database import Base, SerializerMixin, utcnow


class TimeEntry(SerializerMixin, Base):
    __tablename__ = "time_entries"

    REQUIRED_FIELDS = ('start_time', 'date')
    ENUM_FIELDS = {'status': ('active', 'paused', 'completed')}
    OWNER_FIELD = 'user_id'

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    description = Column(Text)
    start_time = Column(DateTime(timezone=True), nullable=False)
    end_time = Column(DateTime(timezone=True))
    break_time = Column(Integer, default=0)  # minutes
    hours = Column(Integer)  # minutes worked, breaks excluded
    billable = Column(Boolean, default=True)
    date = Column(DateTime(timezone=True), nullable=False)
    status = Column(String(20), default='active', nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self):
        return f"<TimeEntry(id={self.id}, user_id={self.user_id}, status='{self.status}')>"


class BreakEntry(SerializerMixin, Base):
    __tablename__ = "break_entries"

    REQUIRED_FIELDS = ('time_entry_id', 'start_time')
    ENUM_FIELDS = {'break_type': ('break', 'lunch', 'meeting')}
    OWNER_FIELD = 'user_id'

    id = Column(Integer, primary_key=True, index=True)
    time_entry_id = Column(Integer, ForeignKey("time_entries.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    start_time = Column(DateTime(timezone=True), nullable=False)
    end_time = Column(DateTime(timezone=True))
    break_type = Column(String(20), default='break', nullable=False)
    description = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self):
        return f"<BreakEntry(id={self.id}, time_entry_id={self.time_entry_id}, type='{self.break_type}')>"
