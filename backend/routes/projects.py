import logging

from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from models import Project, ProjectPart
from routes.utils import current_user_id, deleted, get_storage, json_payload, require, serialize

logger = logging.getLogger(__name__)

projects_bp = Blueprint('projects', __name__)
parts_bp = Blueprint('parts', __name__)


def _owned_project(project_id):
    """Fetch a project the caller owns, else 404"""
    project = get_storage().get_project(project_id)
    if project is None or project.created_by != current_user_id():
        return require(None, 'Project')
    return project


@projects_bp.route('', methods=['GET'])
@jwt_required()
def list_projects():
    """List all projects for current user"""
    projects = get_storage().get_projects(current_user_id())
    return jsonify({'projects': serialize(projects)}), 200


@projects_bp.route('', methods=['POST'])
@jwt_required()
def create_project():
    values = Project.from_payload(json_payload())
    values['created_by'] = current_user_id()
    project = get_storage().create_project(values)
    logger.info('Project %s created by %s', project.id, project.created_by)
    return jsonify({'project': project.to_dict()}), 201


@projects_bp.route('/<int:project_id>', methods=['GET'])
@jwt_required()
def get_project(project_id):
    project = _owned_project(project_id)
    return jsonify({'project': project.to_dict()}), 200


@projects_bp.route('/<int:project_id>', methods=['PUT'])
@jwt_required()
def update_project(project_id):
    _owned_project(project_id)
    values = Project.from_payload(json_payload(), partial=True)
    project = get_storage().update_project(project_id, values)
    return jsonify({'project': project.to_dict()}), 200


@projects_bp.route('/<int:project_id>', methods=['DELETE'])
@jwt_required()
def delete_project(project_id):
    """Delete a project and its parts"""
    count = get_storage().delete_project(project_id, current_user_id())
    return deleted(count, 'Project')


@projects_bp.route('/<int:project_id>/time-entries', methods=['GET'])
@jwt_required()
def list_project_time_entries(project_id):
    _owned_project(project_id)
    entries = get_storage().get_time_entries(project_id)
    return jsonify({'timeEntries': serialize(entries)}), 200


@projects_bp.route('/<int:project_id>/tasks', methods=['GET'])
@jwt_required()
def list_project_tasks(project_id):
    _owned_project(project_id)
    tasks = get_storage().get_tasks(project_id)
    return jsonify({'tasks': serialize(tasks)}), 200


# ----------------------------------------------------------------------
# Parts
# ----------------------------------------------------------------------

@projects_bp.route('/<int:project_id>/parts', methods=['GET'])
@jwt_required()
def list_project_parts(project_id):
    _owned_project(project_id)
    parts = get_storage().get_project_parts(project_id)
    return jsonify({'parts': serialize(parts)}), 200


@projects_bp.route('/<int:project_id>/parts', methods=['POST'])
@jwt_required()
def create_project_part(project_id):
    _owned_project(project_id)
    data = dict(json_payload(), projectId=project_id)
    values = ProjectPart.from_payload(data)
    values['added_by'] = current_user_id()
    part = get_storage().create_project_part(values)
    return jsonify({'part': part.to_dict()}), 201


@parts_bp.route('/needed', methods=['GET'])
@jwt_required()
def list_needed_parts():
    """Parts still to be ordered, across every project"""
    parts = get_storage().get_needed_parts()
    return jsonify({'parts': serialize(parts)}), 200


@parts_bp.route('/<int:part_id>', methods=['PUT'])
@jwt_required()
def update_part(part_id):
    values = ProjectPart.from_payload(json_payload(), partial=True)
    values.pop('project_id', None)
    part = require(get_storage().update_project_part(part_id, values), 'Part')
    return jsonify({'part': part.to_dict()}), 200


@parts_bp.route('/<int:part_id>', methods=['DELETE'])
@jwt_required()
def delete_part(part_id):
    return deleted(get_storage().delete_project_part(part_id), 'Part')
