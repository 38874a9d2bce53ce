"""Relational persistence for users, CRM, accounting and administration data.

Every public method opens one session, runs its statement(s) and commits.
Database errors are not caught here; they propagate to the caller.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update

from database import utcnow
from models import (
    User, Project, ProjectPart, Client, ClientLocation, ClientContact,
    TimeEntry, BreakEntry, Invoice, InvoiceItem, Employee, Task, Equipment,
)

logger = logging.getLogger(__name__)


class RelationalStore:
    def __init__(self, database):
        self.database = database

    # ------------------------------------------------------------------
    # Generic statements
    # ------------------------------------------------------------------

    def _get(self, model, record_id):
        with self.database.session() as session:
            return session.get(model, record_id)

    def _list(self, model, *criteria, order_by=None) -> List:
        stmt = select(model).where(*criteria)
        if order_by is not None:
            stmt = stmt.order_by(*order_by) if isinstance(order_by, tuple) else stmt.order_by(order_by)
        with self.database.session() as session:
            return list(session.scalars(stmt))

    def _create(self, model, values: Dict[str, Any]):
        with self.database.session() as session:
            record = model(**values)
            session.add(record)
            session.flush()
            return record

    def _update(self, model, record_id, values: Dict[str, Any]):
        values = dict(values)
        if hasattr(model, 'updated_at'):
            values['updated_at'] = utcnow()
        with self.database.session() as session:
            record = session.get(model, record_id)
            if record is None:
                return None
            for name, value in values.items():
                setattr(record, name, value)
            session.flush()
            return record

    def _delete(self, model, *criteria) -> int:
        with self.database.session() as session:
            result = session.execute(delete(model).where(*criteria))
            return result.rowcount

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def get_user(self, user_id) -> Optional[User]:
        return self._get(User, user_id)

    def get_user_by_username(self, username) -> Optional[User]:
        users = self._list(User, User.username == username)
        return users[0] if users else None

    def upsert_user(self, values: Dict[str, Any]) -> User:
        """Insert the user, or update every supplied field when the id already exists"""
        with self.database.session() as session:
            user = session.get(User, values['id']) if values.get('id') else None
            if user is None:
                user = User(**values)
                session.add(user)
            else:
                for name, value in values.items():
                    setattr(user, name, value)
                user.updated_at = utcnow()
            session.flush()
            return user

    def update_user_permissions(self, user_id, permissions: List[str]):
        with self.database.session() as session:
            session.execute(
                update(User).where(User.id == user_id)
                .values(permissions=permissions, updated_at=utcnow())
            )

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    def get_projects(self, user_id) -> List[Project]:
        return self._list(Project, Project.created_by == user_id, order_by=Project.created_at.desc())

    def get_project(self, project_id) -> Optional[Project]:
        return self._get(Project, project_id)

    def create_project(self, values) -> Project:
        return self._create(Project, values)

    def update_project(self, project_id, values) -> Optional[Project]:
        return self._update(Project, project_id, values)

    def delete_project(self, project_id, user_id) -> int:
        with self.database.session() as session:
            project = session.scalars(
                select(Project).where(Project.id == project_id, Project.created_by == user_id)
            ).first()
            if project is None:
                return 0
            # ORM cascade removes the project's parts
            session.delete(project)
            return 1

    # ------------------------------------------------------------------
    # Clients, locations, contacts
    # ------------------------------------------------------------------

    def get_clients(self, user_id) -> List[Client]:
        return self._list(Client, Client.created_by == user_id, order_by=Client.created_at.desc())

    def get_client(self, client_id) -> Optional[Client]:
        return self._get(Client, client_id)

    def create_client(self, values) -> Client:
        return self._create(Client, values)

    def update_client(self, client_id, values) -> Optional[Client]:
        return self._update(Client, client_id, values)

    def delete_client(self, client_id, user_id) -> int:
        return self._delete(Client, Client.id == client_id, Client.created_by == user_id)

    def get_client_locations(self, client_id) -> List[ClientLocation]:
        return self._list(
            ClientLocation, ClientLocation.client_id == client_id,
            order_by=(ClientLocation.is_primary.desc(), ClientLocation.created_at.desc()),
        )

    def create_client_location(self, values) -> ClientLocation:
        return self._create_primary_aware(ClientLocation, values)

    def update_client_location(self, location_id, values) -> Optional[ClientLocation]:
        return self._update_primary_aware(ClientLocation, location_id, values)

    def delete_client_location(self, location_id) -> int:
        return self._delete(ClientLocation, ClientLocation.id == location_id)

    def get_client_contacts(self, client_id) -> List[ClientContact]:
        return self._list(
            ClientContact, ClientContact.client_id == client_id,
            order_by=(ClientContact.is_primary.desc(), ClientContact.created_at.desc()),
        )

    def create_client_contact(self, values) -> ClientContact:
        return self._create_primary_aware(ClientContact, values)

    def update_client_contact(self, contact_id, values) -> Optional[ClientContact]:
        return self._update_primary_aware(ClientContact, contact_id, values)

    def delete_client_contact(self, contact_id) -> int:
        return self._delete(ClientContact, ClientContact.id == contact_id)

    def _create_primary_aware(self, model, values):
        # Unset the other primaries of this client, then insert
        with self.database.session() as session:
            if values.get('is_primary'):
                session.execute(
                    update(model).where(model.client_id == values['client_id'])
                    .values(is_primary=False)
                )
            record = model(**values)
            session.add(record)
            session.flush()
            return record

    def _update_primary_aware(self, model, record_id, values):
        with self.database.session() as session:
            record = session.get(model, record_id)
            if record is None:
                return None
            if values.get('is_primary'):
                session.execute(
                    update(model).where(model.client_id == record.client_id, model.id != record_id)
                    .values(is_primary=False)
                )
            for name, value in values.items():
                setattr(record, name, value)
            record.updated_at = utcnow()
            session.flush()
            return record

    # ------------------------------------------------------------------
    # Time tracking
    # ------------------------------------------------------------------

    def get_time_entries(self, project_id) -> List[TimeEntry]:
        return self._list(TimeEntry, TimeEntry.project_id == project_id, order_by=TimeEntry.date.desc())

    def get_time_entry(self, entry_id) -> Optional[TimeEntry]:
        return self._get(TimeEntry, entry_id)

    def get_user_time_entries(self, user_id) -> List[TimeEntry]:
        return self._list(TimeEntry, TimeEntry.user_id == user_id, order_by=TimeEntry.date.desc())

    def create_time_entry(self, values) -> TimeEntry:
        return self._create(TimeEntry, values)

    def update_time_entry(self, entry_id, values) -> Optional[TimeEntry]:
        return self._update(TimeEntry, entry_id, values)

    def delete_time_entry(self, entry_id, user_id) -> int:
        return self._delete(TimeEntry, TimeEntry.id == entry_id, TimeEntry.user_id == user_id)

    def get_break_entries(self, time_entry_id) -> List[BreakEntry]:
        return self._list(BreakEntry, BreakEntry.time_entry_id == time_entry_id,
                          order_by=BreakEntry.start_time.desc())

    def get_break_entry(self, break_id) -> Optional[BreakEntry]:
        return self._get(BreakEntry, break_id)

    def create_break_entry(self, values) -> BreakEntry:
        return self._create(BreakEntry, values)

    def update_break_entry(self, break_id, values) -> Optional[BreakEntry]:
        return self._update(BreakEntry, break_id, values)

    def delete_break_entry(self, break_id) -> int:
        return self._delete(BreakEntry, BreakEntry.id == break_id)

    # ------------------------------------------------------------------
    # Invoices and quotes
    # ------------------------------------------------------------------

    def get_invoices(self, user_id, document_type=None) -> List[Invoice]:
        criteria = [Invoice.created_by == user_id]
        if document_type:
            criteria.append(Invoice.document_type == document_type)
        return self._list(Invoice, *criteria, order_by=Invoice.created_at.desc())

    def get_invoice(self, invoice_id) -> Optional[Invoice]:
        return self._get(Invoice, invoice_id)

    def create_invoice(self, values) -> Invoice:
        return self._create(Invoice, values)

    def update_invoice(self, invoice_id, values) -> Optional[Invoice]:
        return self._update(Invoice, invoice_id, values)

    def delete_invoice(self, invoice_id, user_id) -> int:
        return self._delete(Invoice, Invoice.id == invoice_id, Invoice.created_by == user_id)

    def get_invoice_items(self, invoice_id) -> List[InvoiceItem]:
        return self._list(InvoiceItem, InvoiceItem.invoice_id == invoice_id, order_by=InvoiceItem.id)

    def create_invoice_item(self, values) -> InvoiceItem:
        return self._create(InvoiceItem, values)

    def delete_invoice_item(self, item_id) -> int:
        return self._delete(InvoiceItem, InvoiceItem.id == item_id)

    # ------------------------------------------------------------------
    # Employees
    # ------------------------------------------------------------------

    def get_employees(self) -> List[Employee]:
        return self._list(Employee, order_by=Employee.created_at.desc())

    def get_employee(self, employee_id) -> Optional[Employee]:
        return self._get(Employee, employee_id)

    def create_employee(self, values) -> Employee:
        return self._create(Employee, values)

    def update_employee(self, employee_id, values) -> Optional[Employee]:
        return self._update(Employee, employee_id, values)

    def delete_employee(self, employee_id) -> int:
        return self._delete(Employee, Employee.id == employee_id)

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    def get_tasks(self, project_id=None) -> List[Task]:
        criteria = [Task.project_id == project_id] if project_id else []
        return self._list(Task, *criteria, order_by=Task.created_at.desc())

    def get_user_tasks(self, user_id) -> List[Task]:
        return self._list(Task, Task.assigned_to == user_id, order_by=Task.created_at.desc())

    def get_task(self, task_id) -> Optional[Task]:
        return self._get(Task, task_id)

    def create_task(self, values) -> Task:
        return self._create(Task, values)

    def update_task(self, task_id, values) -> Optional[Task]:
        values = dict(values)
        # Stamp completion the first time a task reaches done
        if values.get('status') == 'done' and 'completed_at' not in values:
            current = self._get(Task, task_id)
            if current is not None and current.completed_at is None:
                values['completed_at'] = utcnow()
        return self._update(Task, task_id, values)

    def delete_task(self, task_id, user_id) -> int:
        return self._delete(Task, Task.id == task_id, Task.created_by == user_id)

    # ------------------------------------------------------------------
    # Equipment
    # ------------------------------------------------------------------

    def get_equipment(self) -> List[Equipment]:
        return self._list(Equipment, order_by=Equipment.created_at.desc())

    def get_user_equipment(self, user_id) -> List[Equipment]:
        return self._list(Equipment, Equipment.assigned_to == user_id,
                          order_by=Equipment.created_at.desc())

    def get_equipment_item(self, item_id) -> Optional[Equipment]:
        return self._get(Equipment, item_id)

    def create_equipment(self, values) -> Equipment:
        return self._create(Equipment, values)

    def update_equipment(self, item_id, values) -> Optional[Equipment]:
        return self._update(Equipment, item_id, values)

    def delete_equipment(self, item_id) -> int:
        return self._delete(Equipment, Equipment.id == item_id)

    # ------------------------------------------------------------------
    # Project parts
    # ------------------------------------------------------------------

    def get_project_parts(self, project_id) -> List[ProjectPart]:
        return self._list(ProjectPart, ProjectPart.project_id == project_id, order_by=ProjectPart.id)

    def create_project_part(self, values) -> ProjectPart:
        return self._create(ProjectPart, values)

    def update_project_part(self, part_id, values) -> Optional[ProjectPart]:
        return self._update(ProjectPart, part_id, values)

    def delete_project_part(self, part_id) -> int:
        return self._delete(ProjectPart, ProjectPart.id == part_id)

    def get_needed_parts(self) -> List[ProjectPart]:
        return self._list(ProjectPart, ProjectPart.status == 'needed', order_by=ProjectPart.id)
