from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from models import BreakEntry, TimeEntry
from routes.utils import current_user_id, deleted, get_storage, json_payload, require, serialize

time_entries_bp = Blueprint('time_entries', __name__)


def _owned_entry(entry_id):
    entry = get_storage().get_time_entry(entry_id)
    if entry is None or entry.user_id != current_user_id():
        return require(None, 'Time entry')
    return entry


@time_entries_bp.route('', methods=['GET'])
@jwt_required()
def list_time_entries():
    """Time entries logged by the current user"""
    entries = get_storage().get_user_time_entries(current_user_id())
    return jsonify({'timeEntries': serialize(entries)}), 200


@time_entries_bp.route('', methods=['POST'])
@jwt_required()
def create_time_entry():
    values = TimeEntry.from_payload(json_payload())
    values['user_id'] = current_user_id()
    entry = get_storage().create_time_entry(values)
    return jsonify({'timeEntry': entry.to_dict()}), 201


@time_entries_bp.route('/<int:entry_id>', methods=['GET'])
@jwt_required()
def get_time_entry(entry_id):
    return jsonify({'timeEntry': _owned_entry(entry_id).to_dict()}), 200


@time_entries_bp.route('/<int:entry_id>', methods=['PUT'])
@jwt_required()
def update_time_entry(entry_id):
    _owned_entry(entry_id)
    values = TimeEntry.from_payload(json_payload(), partial=True)
    entry = get_storage().update_time_entry(entry_id, values)
    return jsonify({'timeEntry': entry.to_dict()}), 200


@time_entries_bp.route('/<int:entry_id>', methods=['DELETE'])
@jwt_required()
def delete_time_entry(entry_id):
    return deleted(get_storage().delete_time_entry(entry_id, current_user_id()), 'Time entry')


# ----------------------------------------------------------------------
# Breaks
# ----------------------------------------------------------------------

@time_entries_bp.route('/<int:entry_id>/breaks', methods=['GET'])
@jwt_required()
def list_breaks(entry_id):
    _owned_entry(entry_id)
    return jsonify({'breaks': serialize(get_storage().get_break_entries(entry_id))}), 200


@time_entries_bp.route('/<int:entry_id>/breaks', methods=['POST'])
@jwt_required()
def create_break(entry_id):
    _owned_entry(entry_id)
    values = BreakEntry.from_payload(dict(json_payload(), timeEntryId=entry_id))
    values['user_id'] = current_user_id()
    entry = get_storage().create_break_entry(values)
    return jsonify({'break': entry.to_dict()}), 201


@time_entries_bp.route('/breaks/<int:break_id>', methods=['PUT'])
@jwt_required()
def update_break(break_id):
    storage = get_storage()
    current = storage.get_break_entry(break_id)
    if current is None or current.user_id != current_user_id():
        require(None, 'Break')
    values = BreakEntry.from_payload(json_payload(), partial=True)
    values.pop('time_entry_id', None)
    entry = storage.update_break_entry(break_id, values)
    return jsonify({'break': entry.to_dict()}), 200


@time_entries_bp.route('/breaks/<int:break_id>', methods=['DELETE'])
@jwt_required()
def delete_break(break_id):
    storage = get_storage()
    current = storage.get_break_entry(break_id)
    if current is None or current.user_id != current_user_id():
        require(None, 'Break')
    return deleted(storage.delete_break_entry(break_id), 'Break')
