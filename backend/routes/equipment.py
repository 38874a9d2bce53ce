from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from models import Equipment
from routes.utils import current_user_id, deleted, get_storage, json_payload, require, serialize

equipment_bp = Blueprint('equipment', __name__)


@equipment_bp.route('', methods=['GET'])
@jwt_required()
def list_equipment():
    storage = get_storage()
    if request.args.get('assignedTo') == 'me':
        items = storage.get_user_equipment(current_user_id())
    else:
        items = storage.get_equipment()
    return jsonify({'equipment': serialize(items)}), 200


@equipment_bp.route('', methods=['POST'])
@jwt_required()
def create_equipment():
    item = get_storage().create_equipment(Equipment.from_payload(json_payload()))
    return jsonify({'equipment': item.to_dict()}), 201


@equipment_bp.route('/<int:item_id>', methods=['GET'])
@jwt_required()
def get_equipment_item(item_id):
    item = require(get_storage().get_equipment_item(item_id), 'Equipment')
    return jsonify({'equipment': item.to_dict()}), 200


@equipment_bp.route('/<int:item_id>', methods=['PUT'])
@jwt_required()
def update_equipment(item_id):
    values = Equipment.from_payload(json_payload(), partial=True)
    item = require(get_storage().update_equipment(item_id, values), 'Equipment')
    return jsonify({'equipment': item.to_dict()}), 200


@equipment_bp.route('/<int:item_id>', methods=['DELETE'])
@jwt_required()
def delete_equipment(item_id):
    return deleted(get_storage().delete_equipment(item_id), 'Equipment')
