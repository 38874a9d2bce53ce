"""Storage façade.

IStorage names every persistence operation the API layer may call.
DatabaseStorage implements it over three backends: the relational store,
the remote workspace server (with its local fallback) and the remote
settings documents. Callers never learn which backend served them.

One DatabaseStorage is built at start-up by the app factory and handed to
request handlers through ``current_app.extensions['storage']``.
"""

from abc import ABC, abstractmethod

from services.relational_store import RelationalStore
from services.remote_server import RemoteServerClient
from services.settings_store import SettingsStore
from services.workspace_store import WorkspaceStore


class IStorage(ABC):
    # Users

    @abstractmethod
    def get_user(self, user_id):
        ...

    @abstractmethod
    def get_user_by_username(self, username):
        ...

    @abstractmethod
    def upsert_user(self, values):
        ...

    @abstractmethod
    def update_user_permissions(self, user_id, permissions):
        ...

    # Projects

    @abstractmethod
    def get_projects(self, user_id):
        ...

    @abstractmethod
    def get_project(self, project_id):
        ...

    @abstractmethod
    def create_project(self, values):
        ...

    @abstractmethod
    def update_project(self, project_id, values):
        ...

    @abstractmethod
    def delete_project(self, project_id, user_id):
        ...

    # Clients, locations, contacts

    @abstractmethod
    def get_clients(self, user_id):
        ...

    @abstractmethod
    def get_client(self, client_id):
        ...

    @abstractmethod
    def create_client(self, values):
        ...

    @abstractmethod
    def update_client(self, client_id, values):
        ...

    @abstractmethod
    def delete_client(self, client_id, user_id):
        ...

    @abstractmethod
    def get_client_locations(self, client_id):
        ...

    @abstractmethod
    def create_client_location(self, values):
        ...

    @abstractmethod
    def update_client_location(self, location_id, values):
        ...

    @abstractmethod
    def delete_client_location(self, location_id):
        ...

    @abstractmethod
    def get_client_contacts(self, client_id):
        ...

    @abstractmethod
    def create_client_contact(self, values):
        ...

    @abstractmethod
    def update_client_contact(self, contact_id, values):
        ...

    @abstractmethod
    def delete_client_contact(self, contact_id):
        ...

    # Time tracking

    @abstractmethod
    def get_time_entries(self, project_id):
        ...

    @abstractmethod
    def get_time_entry(self, entry_id):
        ...

    @abstractmethod
    def get_user_time_entries(self, user_id):
        ...

    @abstractmethod
    def create_time_entry(self, values):
        ...

    @abstractmethod
    def update_time_entry(self, entry_id, values):
        ...

    @abstractmethod
    def delete_time_entry(self, entry_id, user_id):
        ...

    @abstractmethod
    def get_break_entries(self, time_entry_id):
        ...

    @abstractmethod
    def get_break_entry(self, break_id):
        ...

    @abstractmethod
    def create_break_entry(self, values):
        ...

    @abstractmethod
    def update_break_entry(self, break_id, values):
        ...

    @abstractmethod
    def delete_break_entry(self, break_id):
        ...

    # Invoices and quotes

    @abstractmethod
    def get_invoices(self, user_id, document_type=None):
        ...

    @abstractmethod
    def get_invoice(self, invoice_id):
        ...

    @abstractmethod
    def create_invoice(self, values):
        ...

    @abstractmethod
    def update_invoice(self, invoice_id, values):
        ...

    @abstractmethod
    def delete_invoice(self, invoice_id, user_id):
        ...

    @abstractmethod
    def get_invoice_items(self, invoice_id):
        ...

    @abstractmethod
    def create_invoice_item(self, values):
        ...

    @abstractmethod
    def delete_invoice_item(self, item_id):
        ...

    # Employees

    @abstractmethod
    def get_employees(self):
        ...

    @abstractmethod
    def get_employee(self, employee_id):
        ...

    @abstractmethod
    def create_employee(self, values):
        ...

    @abstractmethod
    def update_employee(self, employee_id, values):
        ...

    @abstractmethod
    def delete_employee(self, employee_id):
        ...

    # Tasks

    @abstractmethod
    def get_tasks(self, project_id=None):
        ...

    @abstractmethod
    def get_user_tasks(self, user_id):
        ...

    @abstractmethod
    def get_task(self, task_id):
        ...

    @abstractmethod
    def create_task(self, values):
        ...

    @abstractmethod
    def update_task(self, task_id, values):
        ...

    @abstractmethod
    def delete_task(self, task_id, user_id):
        ...

    # Equipment

    @abstractmethod
    def get_equipment(self):
        ...

    @abstractmethod
    def get_user_equipment(self, user_id):
        ...

    @abstractmethod
    def get_equipment_item(self, item_id):
        ...

    @abstractmethod
    def create_equipment(self, values):
        ...

    @abstractmethod
    def update_equipment(self, item_id, values):
        ...

    @abstractmethod
    def delete_equipment(self, item_id):
        ...

    # Project parts

    @abstractmethod
    def get_project_parts(self, project_id):
        ...

    @abstractmethod
    def create_project_part(self, values):
        ...

    @abstractmethod
    def update_project_part(self, part_id, values):
        ...

    @abstractmethod
    def delete_project_part(self, part_id):
        ...

    @abstractmethod
    def get_needed_parts(self):
        ...

    # Workspaces (remote, local fallback)

    @abstractmethod
    def get_workspaces(self):
        ...

    @abstractmethod
    def get_workspace(self, workspace_id):
        ...

    @abstractmethod
    def create_workspace(self, values):
        ...

    @abstractmethod
    def update_workspace(self, workspace_id, values):
        ...

    @abstractmethod
    def delete_workspace(self, workspace_id):
        ...

    # Workspace categories, projects, tasks (remote only)

    @abstractmethod
    def get_workspace_categories(self, workspace_id):
        ...

    @abstractmethod
    def create_workspace_category(self, values):
        ...

    @abstractmethod
    def update_workspace_category(self, workspace_id, category_id, values):
        ...

    @abstractmethod
    def delete_workspace_category(self, workspace_id, category_id):
        ...

    @abstractmethod
    def get_workspace_projects(self, workspace_id, category_id=None):
        ...

    @abstractmethod
    def create_workspace_project(self, values):
        ...

    @abstractmethod
    def update_workspace_project(self, workspace_id, project_id, values):
        ...

    @abstractmethod
    def delete_workspace_project(self, workspace_id, project_id):
        ...

    @abstractmethod
    def get_workspace_tasks(self, workspace_id, project_id=None):
        ...

    @abstractmethod
    def create_workspace_task(self, values):
        ...

    @abstractmethod
    def update_workspace_task(self, workspace_id, task_id, values):
        ...

    @abstractmethod
    def delete_workspace_task(self, workspace_id, task_id):
        ...

    # Settings documents

    @abstractmethod
    def get_category_colors(self):
        ...

    @abstractmethod
    def set_category_color(self, category_name, color):
        ...

    @abstractmethod
    def delete_category_color(self, category_name):
        ...

    @abstractmethod
    def get_status_colors(self):
        ...

    @abstractmethod
    def set_status_color(self, status, color):
        ...

    @abstractmethod
    def get_priority_colors(self):
        ...

    @abstractmethod
    def set_priority_color(self, priority, color):
        ...

    @abstractmethod
    def get_category_positions(self):
        ...

    @abstractmethod
    def set_category_positions(self, positions):
        ...

    @abstractmethod
    def update_category_position(self, category_name, position):
        ...


class DatabaseStorage(IStorage):
    def __init__(self, relational, workspaces, settings):
        self.relational = relational
        self.workspaces = workspaces
        self.settings = settings

    @classmethod
    def from_config(cls, config, database):
        """Wire the three backends from a Config-like mapping"""
        remote = RemoteServerClient(
            config['REMOTE_SERVER_URL'],
            config['REMOTE_SERVER_USER'],
            config['REMOTE_SERVER_PASSWORD'],
            timeout=config.get('REMOTE_REQUEST_TIMEOUT'),
        )
        return cls(
            RelationalStore(database),
            WorkspaceStore(remote, config['FALLBACK_DATA_DIR']),
            SettingsStore(remote, config.get('SETTINGS_REMOTE_DIR', 'project_data')),
        )

    def get_user(self, user_id):
        return self.relational.get_user(user_id)

    def get_user_by_username(self, username):
        return self.relational.get_user_by_username(username)

    def upsert_user(self, values):
        return self.relational.upsert_user(values)

    def update_user_permissions(self, user_id, permissions):
        return self.relational.update_user_permissions(user_id, permissions)

    def get_projects(self, user_id):
        return self.relational.get_projects(user_id)

    def get_project(self, project_id):
        return self.relational.get_project(project_id)

    def create_project(self, values):
        return self.relational.create_project(values)

    def update_project(self, project_id, values):
        return self.relational.update_project(project_id, values)

    def delete_project(self, project_id, user_id):
        return self.relational.delete_project(project_id, user_id)

    def get_clients(self, user_id):
        return self.relational.get_clients(user_id)

    def get_client(self, client_id):
        return self.relational.get_client(client_id)

    def create_client(self, values):
        return self.relational.create_client(values)

    def update_client(self, client_id, values):
        return self.relational.update_client(client_id, values)

    def delete_client(self, client_id, user_id):
        return self.relational.delete_client(client_id, user_id)

    def get_client_locations(self, client_id):
        return self.relational.get_client_locations(client_id)

    def create_client_location(self, values):
        return self.relational.create_client_location(values)

    def update_client_location(self, location_id, values):
        return self.relational.update_client_location(location_id, values)

    def delete_client_location(self, location_id):
        return self.relational.delete_client_location(location_id)

    def get_client_contacts(self, client_id):
        return self.relational.get_client_contacts(client_id)

    def create_client_contact(self, values):
        return self.relational.create_client_contact(values)

    def update_client_contact(self, contact_id, values):
        return self.relational.update_client_contact(contact_id, values)

    def delete_client_contact(self, contact_id):
        return self.relational.delete_client_contact(contact_id)

    def get_time_entries(self, project_id):
        return self.relational.get_time_entries(project_id)

    def get_time_entry(self, entry_id):
        return self.relational.get_time_entry(entry_id)

    def get_user_time_entries(self, user_id):
        return self.relational.get_user_time_entries(user_id)

    def create_time_entry(self, values):
        return self.relational.create_time_entry(values)

    def update_time_entry(self, entry_id, values):
        return self.relational.update_time_entry(entry_id, values)

    def delete_time_entry(self, entry_id, user_id):
        return self.relational.delete_time_entry(entry_id, user_id)

    def get_break_entries(self, time_entry_id):
        return self.relational.get_break_entries(time_entry_id)

    def get_break_entry(self, break_id):
        return self.relational.get_break_entry(break_id)

    def create_break_entry(self, values):
        return self.relational.create_break_entry(values)

    def update_break_entry(self, break_id, values):
        return self.relational.update_break_entry(break_id, values)

    def delete_break_entry(self, break_id):
        return self.relational.delete_break_entry(break_id)

    def get_invoices(self, user_id, document_type=None):
        return self.relational.get_invoices(user_id, document_type=document_type)

    def get_invoice(self, invoice_id):
        return self.relational.get_invoice(invoice_id)

    def create_invoice(self, values):
        return self.relational.create_invoice(values)

    def update_invoice(self, invoice_id, values):
        return self.relational.update_invoice(invoice_id, values)

    def delete_invoice(self, invoice_id, user_id):
        return self.relational.delete_invoice(invoice_id, user_id)

    def get_invoice_items(self, invoice_id):
        return self.relational.get_invoice_items(invoice_id)

    def create_invoice_item(self, values):
        return self.relational.create_invoice_item(values)

    def delete_invoice_item(self, item_id):
        return self.relational.delete_invoice_item(item_id)

    def get_employees(self):
        return self.relational.get_employees()

    def get_employee(self, employee_id):
        return self.relational.get_employee(employee_id)

    def create_employee(self, values):
        return self.relational.create_employee(values)

    def update_employee(self, employee_id, values):
        return self.relational.update_employee(employee_id, values)

    def delete_employee(self, employee_id):
        return self.relational.delete_employee(employee_id)

    def get_tasks(self, project_id=None):
        return self.relational.get_tasks(project_id=project_id)

    def get_user_tasks(self, user_id):
        return self.relational.get_user_tasks(user_id)

    def get_task(self, task_id):
        return self.relational.get_task(task_id)

    def create_task(self, values):
        return self.relational.create_task(values)

    def update_task(self, task_id, values):
        return self.relational.update_task(task_id, values)

    def delete_task(self, task_id, user_id):
        return self.relational.delete_task(task_id, user_id)

    def get_equipment(self):
        return self.relational.get_equipment()

    def get_user_equipment(self, user_id):
        return self.relational.get_user_equipment(user_id)

    def get_equipment_item(self, item_id):
        return self.relational.get_equipment_item(item_id)

    def create_equipment(self, values):
        return self.relational.create_equipment(values)

    def update_equipment(self, item_id, values):
        return self.relational.update_equipment(item_id, values)

    def delete_equipment(self, item_id):
        return self.relational.delete_equipment(item_id)

    def get_project_parts(self, project_id):
        return self.relational.get_project_parts(project_id)

    def create_project_part(self, values):
        return self.relational.create_project_part(values)

    def update_project_part(self, part_id, values):
        return self.relational.update_project_part(part_id, values)

    def delete_project_part(self, part_id):
        return self.relational.delete_project_part(part_id)

    def get_needed_parts(self):
        return self.relational.get_needed_parts()

    def get_workspaces(self):
        return self.workspaces.get_workspaces()

    def get_workspace(self, workspace_id):
        return self.workspaces.get_workspace(workspace_id)

    def create_workspace(self, values):
        return self.workspaces.create_workspace(values)

    def update_workspace(self, workspace_id, values):
        return self.workspaces.update_workspace(workspace_id, values)

    def delete_workspace(self, workspace_id):
        return self.workspaces.delete_workspace(workspace_id)

    def get_workspace_categories(self, workspace_id):
        return self.workspaces.get_workspace_categories(workspace_id)

    def create_workspace_category(self, values):
        return self.workspaces.create_workspace_category(values)

    def update_workspace_category(self, workspace_id, category_id, values):
        return self.workspaces.update_workspace_category(workspace_id, category_id, values)

    def delete_workspace_category(self, workspace_id, category_id):
        return self.workspaces.delete_workspace_category(workspace_id, category_id)

    def get_workspace_projects(self, workspace_id, category_id=None):
        return self.workspaces.get_workspace_projects(workspace_id, category_id=category_id)

    def create_workspace_project(self, values):
        return self.workspaces.create_workspace_project(values)

    def update_workspace_project(self, workspace_id, project_id, values):
        return self.workspaces.update_workspace_project(workspace_id, project_id, values)

    def delete_workspace_project(self, workspace_id, project_id):
        return self.workspaces.delete_workspace_project(workspace_id, project_id)

    def get_workspace_tasks(self, workspace_id, project_id=None):
        return self.workspaces.get_workspace_tasks(workspace_id, project_id=project_id)

    def create_workspace_task(self, values):
        return self.workspaces.create_workspace_task(values)

    def update_workspace_task(self, workspace_id, task_id, values):
        return self.workspaces.update_workspace_task(workspace_id, task_id, values)

    def delete_workspace_task(self, workspace_id, task_id):
        return self.workspaces.delete_workspace_task(workspace_id, task_id)

    def get_category_colors(self):
        return self.settings.get_category_colors()

    def set_category_color(self, category_name, color):
        return self.settings.set_category_color(category_name, color)

    def delete_category_color(self, category_name):
        return self.settings.delete_category_color(category_name)

    def get_status_colors(self):
        return self.settings.get_status_colors()

    def set_status_color(self, status, color):
        return self.settings.set_status_color(status, color)

    def get_priority_colors(self):
        return self.settings.get_priority_colors()

    def set_priority_color(self, priority, color):
        return self.settings.set_priority_color(priority, color)

    def get_category_positions(self):
        return self.settings.get_category_positions()

    def set_category_positions(self, positions):
        return self.settings.set_category_positions(positions)

    def update_category_position(self, category_name, position):
        return self.settings.update_category_position(category_name, position)
