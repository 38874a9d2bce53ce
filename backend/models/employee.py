"""Employee records for department administration."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON

from database import Base, SerializerMixin, utcnow

DEPARTMENTS = ('Accounting', 'Sales', 'Programming', 'Technicians', 'Upper Management')
EMPLOYEE_STATUSES = ('active', 'inactive', 'terminated', 'on_leave')


class Employee(SerializerMixin, Base):
    __tablename__ = "employees"

    REQUIRED_FIELDS = ('employee_id', 'first_name', 'last_name', 'email',
                       'department', 'position', 'hire_date')
    ENUM_FIELDS = {
        'department': DEPARTMENTS,
        'title': ('manager', 'employee'),
        'status': EMPLOYEE_STATUSES,
    }
    OWNER_FIELD = 'created_by'

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(String(20), unique=True, nullable=False)  # EMP001, ...
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(200), unique=True, nullable=False)
    phone = Column(String(50))
    department = Column(String(50), nullable=False)
    position = Column(String(100), nullable=False)
    title = Column(String(20), default='employee', nullable=False)
    salary = Column(Integer)  # annual, cents
    hourly_rate = Column(Integer)  # cents
    hire_date = Column(DateTime(timezone=True), nullable=False)
    birth_date = Column(DateTime(timezone=True))
    address = Column(JSON)
    emergency_contact = Column(JSON)  # {name, phone, relationship}
    permissions = Column(JSON, default=dict)
    status = Column(String(20), default='active', nullable=False)
    termination_date = Column(DateTime(timezone=True))
    termination_reason = Column(Text)
    notes = Column(Text)
    created_by = Column(String(36), ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self):
        return f"<Employee(id={self.id}, employee_id='{self.employee_id}', department='{self.department}')>"
