import logging

from flask import Blueprint, jsonify
from flask_jwt_extended import create_access_token, jwt_required
from sqlalchemy.exc import IntegrityError

from models import User
from routes.utils import current_user_id, get_storage, json_payload, require

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/register', methods=['POST'])
def register():
    """Register a new user"""
    data = json_payload()

    username = data.get('username')
    email = data.get('email')
    password = data.get('password')

    if not all([username, email, password]):
        return jsonify({'error': 'Missing required fields'}), 400

    storage = get_storage()

    # Check if user exists
    if storage.get_user_by_username(username):
        return jsonify({'error': 'User already exists'}), 409

    values = User.from_payload(data)
    values.pop('role', None)
    values.pop('permissions', None)
    values['password_hash'] = User.hash_password(password)
    try:
        user = storage.upsert_user(values)
    except IntegrityError:
        # Username or email taken by a concurrent or earlier registration
        logger.warning('Registration rejected for %s: duplicate account', username)
        return jsonify({'error': 'User already exists'}), 409
    logger.info('Registered user %s', user.username)

    # JWT identity must be a string
    access_token = create_access_token(identity=str(user.id))

    return jsonify({
        'access_token': access_token,
        'user': user.to_dict()
    }), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    """Login existing user"""
    data = json_payload()

    username = data.get('username')
    password = data.get('password')

    if not all([username, password]):
        return jsonify({'error': 'Missing required fields'}), 400

    user = get_storage().get_user_by_username(username)

    if not user or not user.check_password(password):
        return jsonify({'error': 'Invalid credentials'}), 401

    access_token = create_access_token(identity=str(user.id))

    return jsonify({
        'access_token': access_token,
        'user': user.to_dict()
    }), 200


@auth_bp.route('/me', methods=['GET'])
@jwt_required()
def me():
    user = require(get_storage().get_user(current_user_id()), 'User')
    return jsonify({'user': user.to_dict()}), 200


@auth_bp.route('/users/<user_id>/permissions', methods=['PUT'])
@jwt_required()
def update_permissions(user_id):
    """Replace a user's permission list (admins only)"""
    storage = get_storage()
    caller = require(storage.get_user(current_user_id()), 'User')
    if caller.role != 'admin':
        return jsonify({'error': 'Admin role required'}), 403

    require(storage.get_user(user_id), 'User')
    permissions = json_payload().get('permissions')
    if not isinstance(permissions, list) or not all(isinstance(p, str) for p in permissions):
        return jsonify({'error': 'permissions must be a list of strings'}), 400

    storage.update_user_permissions(user_id, permissions)
    return jsonify({'user': storage.get_user(user_id).to_dict()}), 200
