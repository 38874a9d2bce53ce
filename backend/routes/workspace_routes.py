import logging

from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from models import Workspace, WorkspaceCategory, WorkspaceProject, WorkspaceTask
from routes.utils import current_user_id, get_storage, json_payload, require, serialize

logger = logging.getLogger(__name__)

workspaces_bp = Blueprint('workspaces', __name__)


# ---------------------------------------------------------------------------
# Workspace CRUD
# ---------------------------------------------------------------------------

@workspaces_bp.route('', methods=['GET'])
@jwt_required()
def list_workspaces():
    """List workspaces; served from the local file while the remote server is down"""
    return jsonify({'workspaces': serialize(get_storage().get_workspaces())}), 200


@workspaces_bp.route('', methods=['POST'])
@jwt_required()
def create_workspace():
    values = Workspace.validate(json_payload())
    values['created_by'] = current_user_id()
    workspace = get_storage().create_workspace(values)
    return jsonify({'workspace': workspace.to_dict()}), 201


@workspaces_bp.route('/<ws_id>', methods=['GET'])
@jwt_required()
def get_workspace(ws_id):
    workspace = require(get_storage().get_workspace(ws_id), 'Workspace')
    return jsonify({'workspace': workspace.to_dict()}), 200


@workspaces_bp.route('/<ws_id>', methods=['PUT'])
@jwt_required()
def update_workspace(ws_id):
    values = Workspace.validate(json_payload(), partial=True)
    values.pop('created_by', None)
    workspace = get_storage().update_workspace(ws_id, values)
    return jsonify({'workspace': workspace.to_dict()}), 200


@workspaces_bp.route('/<ws_id>', methods=['DELETE'])
@jwt_required()
def delete_workspace(ws_id):
    get_storage().delete_workspace(ws_id)
    return jsonify({'message': 'Workspace deleted successfully'}), 200


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------

@workspaces_bp.route('/<ws_id>/categories', methods=['GET'])
@jwt_required()
def list_categories(ws_id):
    categories = get_storage().get_workspace_categories(ws_id)
    return jsonify({'categories': serialize(categories)}), 200


@workspaces_bp.route('/<ws_id>/categories', methods=['POST'])
@jwt_required()
def create_category(ws_id):
    values = WorkspaceCategory.validate(dict(json_payload(), workspaceId=ws_id))
    category = get_storage().create_workspace_category(values)
    return jsonify({'category': category.to_dict()}), 201


@workspaces_bp.route('/<ws_id>/categories/<category_id>', methods=['PUT'])
@jwt_required()
def update_category(ws_id, category_id):
    values = WorkspaceCategory.validate(json_payload(), partial=True)
    values.pop('workspace_id', None)
    category = get_storage().update_workspace_category(ws_id, category_id, values)
    return jsonify({'category': category.to_dict()}), 200


@workspaces_bp.route('/<ws_id>/categories/<category_id>', methods=['DELETE'])
@jwt_required()
def delete_category(ws_id, category_id):
    get_storage().delete_workspace_category(ws_id, category_id)
    return jsonify({'message': 'Category deleted successfully'}), 200


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

@workspaces_bp.route('/<ws_id>/projects', methods=['GET'])
@jwt_required()
def list_projects(ws_id):
    """?categoryId=<id> filters; categoryId=uncategorized selects projects without one"""
    projects = get_storage().get_workspace_projects(ws_id, request.args.get('categoryId'))
    return jsonify({'projects': serialize(projects)}), 200


@workspaces_bp.route('/<ws_id>/projects', methods=['POST'])
@jwt_required()
def create_project(ws_id):
    values = WorkspaceProject.validate(dict(json_payload(), workspaceId=ws_id))
    values['created_by'] = current_user_id()
    project = get_storage().create_workspace_project(values)
    return jsonify({'project': project.to_dict()}), 201


@workspaces_bp.route('/<ws_id>/projects/<project_id>', methods=['PUT'])
@jwt_required()
def update_project(ws_id, project_id):
    values = WorkspaceProject.validate(json_payload(), partial=True)
    values.pop('workspace_id', None)
    project = get_storage().update_workspace_project(ws_id, project_id, values)
    return jsonify({'project': project.to_dict()}), 200


@workspaces_bp.route('/<ws_id>/projects/<project_id>', methods=['DELETE'])
@jwt_required()
def delete_project(ws_id, project_id):
    get_storage().delete_workspace_project(ws_id, project_id)
    return jsonify({'message': 'Project deleted successfully'}), 200


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------

@workspaces_bp.route('/<ws_id>/tasks', methods=['GET'])
@jwt_required()
def list_tasks(ws_id):
    tasks = get_storage().get_workspace_tasks(ws_id, request.args.get('projectId'))
    return jsonify({'tasks': serialize(tasks)}), 200


@workspaces_bp.route('/<ws_id>/tasks', methods=['POST'])
@jwt_required()
def create_task(ws_id):
    values = WorkspaceTask.validate(dict(json_payload(), workspaceId=ws_id))
    values['created_by'] = current_user_id()
    task = get_storage().create_workspace_task(values)
    return jsonify({'task': task.to_dict()}), 201


@workspaces_bp.route('/<ws_id>/tasks/<task_id>', methods=['PUT'])
@jwt_required()
def update_task(ws_id, task_id):
    values = WorkspaceTask.validate(json_payload(), partial=True)
    values.pop('workspace_id', None)
    task = get_storage().update_workspace_task(ws_id, task_id, values)
    return jsonify({'task': task.to_dict()}), 200


@workspaces_bp.route('/<ws_id>/tasks/<task_id>', methods=['DELETE'])
@jwt_required()
def delete_task(ws_id, task_id):
    get_storage().delete_workspace_task(ws_id, task_id)
    return jsonify({'message': 'Task deleted successfully'}), 200
