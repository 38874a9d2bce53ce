"""Database models package."""

from models.user import User
from models.project import Project
from models.project_part import ProjectPart
from models.client import Client, ClientLocation, ClientContact
from models.time_entry import TimeEntry, BreakEntry
from models.invoice import Invoice, InvoiceItem
from models.employee import Employee
from models.task import Task
from models.equipment import Equipment
from models.workspace import Workspace, WorkspaceCategory, WorkspaceProject, WorkspaceTask
from models.settings import CategoryColor, CategoryPosition

__all__ = [
    'User',
    'Project',
    'ProjectPart',
    'Client',
    'ClientLocation',
    'ClientContact',
    'TimeEntry',
    'BreakEntry',
    'Invoice',
    'InvoiceItem',
    'Employee',
    'Task',
    'Equipment',
    'Workspace',
    'WorkspaceCategory',
    'WorkspaceProject',
    'WorkspaceTask',
    'CategoryColor',
    'CategoryPosition',
]
