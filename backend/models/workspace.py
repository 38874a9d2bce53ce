"""Workspace-family records stored on the remote content server.

These are not ORM models: the remote server keeps them as JSON documents and
the local fallback file keeps workspaces as a JSON array. Each record knows
how to validate a client payload, how to read a stored document (keeping
fields it does not know about) and how to write its camelCase wire form.
"""

import copy
import re

from database import parse_datetime, to_camel, to_snake
from errors import ValidationError

HEX_COLOR = re.compile(r'^#[0-9a-fA-F]{6}$')

PROJECT_STATUSES = ('planning', 'active', 'on_hold', 'completed')
TASK_STATUSES = ('todo', 'in_progress', 'review', 'done')
PRIORITIES = ('low', 'medium', 'high', 'urgent')


def _check(kind, value):
    """Coerce one field value; raises TypeError/ValueError when it does not fit"""
    if value is None:
        return None
    if kind in ('str', 'text'):
        if not isinstance(value, str):
            raise TypeError('expected a string')
        return value.strip() if kind == 'str' else value
    if kind == 'int':
        if isinstance(value, bool):
            raise TypeError('expected an integer')
        if isinstance(value, float) and not value.is_integer():
            raise ValueError('expected a whole number')
        return int(value)
    if kind == 'bool':
        if not isinstance(value, bool):
            raise TypeError('expected a boolean')
        return value
    if kind == 'color':
        if not isinstance(value, str) or not HEX_COLOR.match(value):
            raise ValueError('expected a hex color like #1a2b3c')
        return value.lower()
    if kind == 'datetime':
        parse_datetime(value)
        return value
    if kind == 'ref':
        # Ids are uuid hex strings, older documents carry numeric ids
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise TypeError('expected an id')
        return value
    if kind == 'list':
        if not isinstance(value, list):
            raise TypeError('expected a list')
        return value
    raise ValueError(f'unknown field kind {kind}')


class RemoteRecord:
    # (attribute, kind, default)
    FIELDS = ()
    REQUIRED = ()
    ENUMS = {}
    # Fields set by the storage layer, never by a client payload
    SYSTEM_FIELDS = ('id', 'created_at', 'updated_at')

    def __init__(self, id=None, created_at=None, updated_at=None, extra=None, **values):
        self.id = id
        self.created_at = created_at
        self.updated_at = updated_at
        self.extra = extra or {}
        for name, _kind, default in self.FIELDS:
            value = values.get(name, default)
            setattr(self, name, copy.deepcopy(value))

    @classmethod
    def field_names(cls):
        return [name for name, _kind, _default in cls.FIELDS]

    @classmethod
    def validate(cls, data, partial=False):
        """Validate a client payload; returns snake_case values for known fields.

        Every problem is collected before raising so the caller can report
        them all at once.
        """
        if not isinstance(data, dict):
            raise ValidationError({'body': 'expected a JSON object'})

        kinds = {name: kind for name, kind, _default in cls.FIELDS}
        values = {}
        errors = {}
        for key, value in data.items():
            name = to_snake(key)
            if name in cls.SYSTEM_FIELDS or name not in kinds:
                continue
            try:
                values[name] = _check(kinds[name], value)
            except (TypeError, ValueError) as e:
                errors[to_camel(name)] = str(e)

        for name in cls.REQUIRED:
            if (partial and name not in values) or to_camel(name) in errors:
                continue
            if values.get(name) in (None, ''):
                errors[to_camel(name)] = 'is required'

        for name, allowed in cls.ENUMS.items():
            if values.get(name) is not None and values[name] not in allowed:
                errors[to_camel(name)] = 'must be one of: ' + ', '.join(allowed)

        if errors:
            raise ValidationError(errors)
        return values

    @classmethod
    def from_dict(cls, data):
        """Materialize a stored document without validating it"""
        known = set(cls.field_names()) | set(cls.SYSTEM_FIELDS)
        values = {}
        extra = {}
        for key, value in (data or {}).items():
            name = to_snake(key)
            if name in known:
                values[name] = value
            else:
                extra[key] = value
        return cls(extra=extra, **values)

    def apply(self, values):
        for name, value in values.items():
            setattr(self, name, value)

    def to_dict(self):
        data = dict(self.extra)
        data['id'] = self.id
        for name in self.field_names():
            data[to_camel(name)] = getattr(self, name)
        data['createdAt'] = self.created_at
        data['updatedAt'] = self.updated_at
        return data

    def __repr__(self):
        return f"<{type(self).__name__}(id={self.id})>"


class Workspace(RemoteRecord):
    """Top-level container for categories, projects and tasks."""

    FIELDS = (
        ('name', 'str', None),
        ('description', 'text', None),
        ('color', 'color', '#3b82f6'),
        ('created_by', 'ref', None),
    )
    REQUIRED = ('name',)


class WorkspaceCategory(RemoteRecord):
    """Labeled group of projects inside a workspace."""

    FIELDS = (
        ('workspace_id', 'ref', None),
        ('name', 'str', None),
        ('description', 'text', None),
        ('color', 'color', '#6b7280'),
        ('position', 'int', 0),
    )
    REQUIRED = ('workspace_id', 'name')


class WorkspaceProject(RemoteRecord):
    """Project inside a workspace; category_id None means uncategorized."""

    FIELDS = (
        ('workspace_id', 'ref', None),
        ('category_id', 'ref', None),
        ('name', 'str', None),
        ('description', 'text', None),
        ('status', 'str', 'active'),
        ('priority', 'str', 'medium'),
        ('budget', 'int', 0),
        ('spent', 'int', 0),
        ('estimated_hours', 'int', None),
        ('actual_hours', 'int', 0),
        ('start_date', 'datetime', None),
        ('end_date', 'datetime', None),
        ('customer_id', 'ref', None),
        ('customer_name', 'str', None),
        ('customer_email', 'str', None),
        ('assigned_users', 'list', []),
        ('tags', 'list', []),
        ('color', 'color', '#10b981'),
        ('position', 'int', 0),
        ('created_by', 'ref', None),
    )
    REQUIRED = ('workspace_id', 'name')
    ENUMS = {'status': PROJECT_STATUSES, 'priority': PRIORITIES}


class WorkspaceTask(RemoteRecord):
    FIELDS = (
        ('workspace_id', 'ref', None),
        ('category_id', 'ref', None),
        ('project_id', 'ref', None),
        ('title', 'str', None),
        ('description', 'text', None),
        ('status', 'str', 'todo'),
        ('priority', 'str', 'medium'),
        ('assigned_to', 'ref', None),
        ('estimated_hours', 'int', None),
        ('actual_hours', 'int', 0),
        ('due_date', 'datetime', None),
        ('completed_at', 'datetime', None),
        ('archived', 'bool', False),
        ('position', 'int', 0),
        ('created_by', 'ref', None),
    )
    REQUIRED = ('workspace_id', 'title')
    ENUMS = {'status': TASK_STATUSES, 'priority': PRIORITIES}
