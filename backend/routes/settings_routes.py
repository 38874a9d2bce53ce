from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from errors import ValidationError
from models.workspace import HEX_COLOR
from routes.utils import get_storage, json_payload, serialize

settings_bp = Blueprint('settings', __name__)


def _name(data, key):
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError({key: 'is required'})
    return value.strip()


def _color(data):
    value = data.get('color')
    if not isinstance(value, str) or not HEX_COLOR.match(value):
        raise ValidationError({'color': 'expected a hex color like #1a2b3c'})
    return value.lower()


def _position(value, key='position'):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError({key: 'expected an integer'})
    return value


# ---------------------------------------------------------------------------
# Category colors
# ---------------------------------------------------------------------------

@settings_bp.route('/category-colors', methods=['GET'])
@jwt_required()
def list_category_colors():
    return jsonify({'categoryColors': serialize(get_storage().get_category_colors())}), 200


@settings_bp.route('/category-colors', methods=['PUT'])
@jwt_required()
def set_category_color():
    data = json_payload()
    record = get_storage().set_category_color(_name(data, 'categoryName'), _color(data))
    return jsonify({'categoryColor': record.to_dict()}), 200


@settings_bp.route('/category-colors/<category_name>', methods=['DELETE'])
@jwt_required()
def delete_category_color(category_name):
    get_storage().delete_category_color(category_name)
    return jsonify({'message': 'Category color deleted successfully'}), 200


# ---------------------------------------------------------------------------
# Status and priority colors
# ---------------------------------------------------------------------------

@settings_bp.route('/status-colors', methods=['GET'])
@jwt_required()
def get_status_colors():
    return jsonify({'statusColors': get_storage().get_status_colors()}), 200


@settings_bp.route('/status-colors', methods=['PUT'])
@jwt_required()
def set_status_color():
    data = json_payload()
    storage = get_storage()
    storage.set_status_color(_name(data, 'status'), _color(data))
    return jsonify({'statusColors': storage.get_status_colors()}), 200


@settings_bp.route('/priority-colors', methods=['GET'])
@jwt_required()
def get_priority_colors():
    return jsonify({'priorityColors': get_storage().get_priority_colors()}), 200


@settings_bp.route('/priority-colors', methods=['PUT'])
@jwt_required()
def set_priority_color():
    data = json_payload()
    storage = get_storage()
    storage.set_priority_color(_name(data, 'priority'), _color(data))
    return jsonify({'priorityColors': storage.get_priority_colors()}), 200


# ---------------------------------------------------------------------------
# Category positions
# ---------------------------------------------------------------------------

@settings_bp.route('/category-positions', methods=['GET'])
@jwt_required()
def list_category_positions():
    positions = get_storage().get_category_positions()
    return jsonify({'categoryPositions': serialize(positions)}), 200


@settings_bp.route('/category-positions', methods=['PUT'])
@jwt_required()
def replace_category_positions():
    """Replace every position with the posted [{categoryName, position}] list"""
    data = json_payload()
    items = data.get('positions')
    if not isinstance(items, list):
        raise ValidationError({'positions': 'expected a list'})

    positions = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValidationError({f'positions[{index}]': 'expected an object'})
        positions.append({
            'categoryName': _name(item, 'categoryName'),
            'position': _position(item.get('position'), f'positions[{index}].position'),
        })

    storage = get_storage()
    storage.set_category_positions(positions)
    return jsonify({'categoryPositions': serialize(storage.get_category_positions())}), 200


@settings_bp.route('/category-positions/<category_name>', methods=['PUT'])
@jwt_required()
def update_category_position(category_name):
    position = _position(json_payload().get('position'))
    record = get_storage().update_category_position(category_name, position)
    return jsonify({'categoryPosition': record.to_dict()}), 200
