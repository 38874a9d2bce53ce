from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from models import Task
from routes.utils import current_user_id, deleted, get_storage, json_payload, require, serialize

tasks_bp = Blueprint('tasks', __name__)


@tasks_bp.route('', methods=['GET'])
@jwt_required()
def list_tasks():
    """All tasks, or ?projectId=<id> / ?assignedTo=me"""
    storage = get_storage()
    if request.args.get('assignedTo') == 'me':
        tasks = storage.get_user_tasks(current_user_id())
    else:
        tasks = storage.get_tasks(request.args.get('projectId', type=int))
    return jsonify({'tasks': serialize(tasks)}), 200


@tasks_bp.route('', methods=['POST'])
@jwt_required()
def create_task():
    values = Task.from_payload(json_payload())
    values['created_by'] = current_user_id()
    task = get_storage().create_task(values)
    return jsonify({'task': task.to_dict()}), 201


@tasks_bp.route('/<int:task_id>', methods=['GET'])
@jwt_required()
def get_task(task_id):
    task = require(get_storage().get_task(task_id), 'Task')
    return jsonify({'task': task.to_dict()}), 200


@tasks_bp.route('/<int:task_id>', methods=['PUT'])
@jwt_required()
def update_task(task_id):
    values = Task.from_payload(json_payload(), partial=True)
    task = require(get_storage().update_task(task_id, values), 'Task')
    return jsonify({'task': task.to_dict()}), 200


@tasks_bp.route('/<int:task_id>', methods=['DELETE'])
@jwt_required()
def delete_task(task_id):
    return deleted(get_storage().delete_task(task_id, current_user_id()), 'Task')
