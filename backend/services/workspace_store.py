"""Workspaces and their categories, projects and tasks.

All documents live on the remote content server. Failure handling differs by
entity on purpose and must stay that way until the owners of the remote
server decide otherwise:

* workspace reads and creates fall back to a local JSON file;
* category/project/task reads degrade to an empty list;
* category/project/task writes, and workspace updates/deletes, raise
  RemoteServerError.

No call is retried.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from database import to_camel, utcnow
from errors import RemoteServerError
from models import Workspace, WorkspaceCategory, WorkspaceProject, WorkspaceTask
from services.local_store import LocalJsonStore

logger = logging.getLogger(__name__)

UNCATEGORIZED = 'uncategorized'


def new_id() -> str:
    return uuid.uuid4().hex


def _now_iso() -> str:
    return utcnow().isoformat()


def _as_list(data) -> List:
    return data if isinstance(data, list) else []


def _same_id(left, right) -> bool:
    return left is not None and right is not None and str(left) == str(right)


class WorkspaceStore:
    def __init__(self, remote, fallback_dir: str):
        self.remote = remote
        self.fallback = LocalJsonStore(fallback_dir, 'workspaces.json')

    # ------------------------------------------------------------------
    # Workspaces
    # ------------------------------------------------------------------

    def get_workspaces(self) -> List[Workspace]:
        try:
            documents = _as_list(self.remote.request_json('GET', '/api/workspaces',
                                                          action='fetch workspaces'))
        except RemoteServerError as e:
            logger.warning('Workspaces unavailable on remote server, using local storage: %s', e)
            documents = self.fallback.load()
        return [Workspace.from_dict(doc) for doc in documents if isinstance(doc, dict)]

    def get_workspace(self, workspace_id) -> Optional[Workspace]:
        try:
            document = self.remote.request_json('GET', f'/api/workspaces/{workspace_id}',
                                                action='fetch workspace')
        except RemoteServerError as e:
            if e.status_code == 404:
                return None
            logger.warning('Workspace %s unavailable on remote server, using local storage: %s',
                           workspace_id, e)
            document = self.fallback.find(workspace_id)
        return Workspace.from_dict(document) if isinstance(document, dict) else None

    def create_workspace(self, values: Dict[str, Any]) -> Workspace:
        now = _now_iso()
        workspace = Workspace(id=new_id(), created_at=now, updated_at=now, **values)
        document = workspace.to_dict()
        try:
            created = self.remote.request_json('POST', '/api/workspaces', document,
                                               action='create workspace')
        except RemoteServerError as e:
            logger.warning('Creating workspace on remote server failed, using local storage: %s', e)
            self.fallback.append(document)
            logger.info('Workspace created locally: %s', workspace.name)
            return workspace
        return Workspace.from_dict(created) if isinstance(created, dict) else workspace

    def update_workspace(self, workspace_id, values: Dict[str, Any]) -> Workspace:
        patch = self._patch_document(values)
        updated = self.remote.request_json('PUT', f'/api/workspaces/{workspace_id}', patch,
                                           action='update workspace')
        if isinstance(updated, dict):
            return Workspace.from_dict(updated)
        # Empty answer: read the stored document back instead of guessing
        try:
            document = self.remote.request_json('GET', f'/api/workspaces/{workspace_id}',
                                                action='fetch workspace')
        except RemoteServerError as e:
            logger.warning('Could not re-read workspace %s after update: %s', workspace_id, e)
            document = None
        return self._materialize(Workspace, document, workspace_id, patch)

    def delete_workspace(self, workspace_id):
        self.remote.request_json('DELETE', f'/api/workspaces/{workspace_id}',
                                 action='delete workspace')

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def get_workspace_categories(self, workspace_id) -> List[WorkspaceCategory]:
        documents = self._list_children(workspace_id, 'categories')
        categories = [WorkspaceCategory.from_dict(doc) for doc in documents]
        return sorted(categories, key=lambda category: category.position or 0)

    def create_workspace_category(self, values: Dict[str, Any]) -> WorkspaceCategory:
        return self._create_child(WorkspaceCategory, 'categories', values)

    def update_workspace_category(self, workspace_id, category_id, values) -> WorkspaceCategory:
        return self._update_child(WorkspaceCategory, 'categories', workspace_id, category_id, values)

    def delete_workspace_category(self, workspace_id, category_id):
        self._delete_child('categories', workspace_id, category_id)

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    def get_workspace_projects(self, workspace_id, category_id=None) -> List[WorkspaceProject]:
        projects = [WorkspaceProject.from_dict(doc)
                    for doc in self._list_children(workspace_id, 'projects')]
        if category_id is None:
            return projects
        if category_id == UNCATEGORIZED:
            return [project for project in projects if project.category_id in (None, '')]
        return [project for project in projects if _same_id(project.category_id, category_id)]

    def create_workspace_project(self, values: Dict[str, Any]) -> WorkspaceProject:
        return self._create_child(WorkspaceProject, 'projects', values)

    def update_workspace_project(self, workspace_id, project_id, values) -> WorkspaceProject:
        return self._update_child(WorkspaceProject, 'projects', workspace_id, project_id, values)

    def delete_workspace_project(self, workspace_id, project_id):
        self._delete_child('projects', workspace_id, project_id)

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    def get_workspace_tasks(self, workspace_id, project_id=None) -> List[WorkspaceTask]:
        tasks = [WorkspaceTask.from_dict(doc) for doc in self._list_children(workspace_id, 'tasks')]
        if project_id is None:
            return tasks
        return [task for task in tasks if _same_id(task.project_id, project_id)]

    def create_workspace_task(self, values: Dict[str, Any]) -> WorkspaceTask:
        return self._create_child(WorkspaceTask, 'tasks', values)

    def update_workspace_task(self, workspace_id, task_id, values) -> WorkspaceTask:
        return self._update_child(WorkspaceTask, 'tasks', workspace_id, task_id, values)

    def delete_workspace_task(self, workspace_id, task_id):
        self._delete_child('tasks', workspace_id, task_id)

    # ------------------------------------------------------------------
    # Helpers shared by the child collections
    # ------------------------------------------------------------------

    def _list_children(self, workspace_id, collection) -> List[Dict]:
        try:
            documents = self.remote.request_json(
                'GET', f'/api/workspaces/{workspace_id}/{collection}',
                action=f'fetch {collection}')
        except RemoteServerError as e:
            logger.warning('Workspace %s %s unavailable, returning empty list: %s',
                           workspace_id, collection, e)
            return []
        return [doc for doc in _as_list(documents) if isinstance(doc, dict)]

    def _create_child(self, record_cls, collection, values):
        now = _now_iso()
        record = record_cls(id=new_id(), created_at=now, updated_at=now, **values)
        singular = record_cls.__name__.replace('Workspace', '').lower()
        created = self.remote.request_json(
            'POST', f'/api/workspaces/{record.workspace_id}/{collection}', record.to_dict(),
            action=f'create {singular}')
        return record_cls.from_dict(created) if isinstance(created, dict) else record

    def _update_child(self, record_cls, collection, workspace_id, record_id, values):
        patch = self._patch_document(values)
        singular = record_cls.__name__.replace('Workspace', '').lower()
        updated = self.remote.request_json(
            'PUT', f'/api/workspaces/{workspace_id}/{collection}/{record_id}', patch,
            action=f'update {singular}')
        if isinstance(updated, dict):
            return record_cls.from_dict(updated)
        stored = next((doc for doc in self._list_children(workspace_id, collection)
                       if _same_id(doc.get('id'), record_id)), None)
        return self._materialize(record_cls, stored, record_id, patch)

    def _delete_child(self, collection, workspace_id, record_id):
        self.remote.request_json(
            'DELETE', f'/api/workspaces/{workspace_id}/{collection}/{record_id}',
            action=f'delete {collection}')

    @staticmethod
    def _patch_document(values) -> Dict[str, Any]:
        """camelCase partial document with a fresh updatedAt"""
        document = {to_camel(name): value for name, value in values.items()}
        document['updatedAt'] = _now_iso()
        return document

    @staticmethod
    def _materialize(record_cls, document, record_id, patch):
        if isinstance(document, dict):
            return record_cls.from_dict(document)
        # Nothing to read back; report only the fields that were sent
        record = record_cls.from_dict(dict(patch, id=record_id))
        for name in record.field_names():
            if to_camel(name) not in patch:
                setattr(record, name, None)
        return record
