"""Helpers shared by the blueprints."""

from flask import current_app, jsonify, request
from flask_jwt_extended import get_jwt_identity

from errors import NotFoundError, ValidationError


def get_storage():
    """The storage façade created by create_app()"""
    return current_app.extensions['storage']


def current_user_id():
    # JWT identity is the user id as a string
    return str(get_jwt_identity())


def json_payload():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError({'body': 'expected a JSON object'})
    return data


def require(entity, label):
    """Return entity or raise NotFoundError('<label> not found')"""
    if entity is None:
        raise NotFoundError(f'{label} not found')
    return entity


def deleted(count, label):
    if not count:
        raise NotFoundError(f'{label} not found')
    return jsonify({'message': f'{label} deleted successfully'}), 200


def serialize(records):
    return [record.to_dict() for record in records]
