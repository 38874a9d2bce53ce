from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from models import Client, ClientContact, ClientLocation
from routes.utils import current_user_id, deleted, get_storage, json_payload, require, serialize

clients_bp = Blueprint('clients', __name__)
locations_bp = Blueprint('client_locations', __name__)
contacts_bp = Blueprint('client_contacts', __name__)


def _owned_client(client_id):
    client = get_storage().get_client(client_id)
    if client is None or client.created_by != current_user_id():
        return require(None, 'Client')
    return client


@clients_bp.route('', methods=['GET'])
@jwt_required()
def list_clients():
    clients = get_storage().get_clients(current_user_id())
    return jsonify({'clients': serialize(clients)}), 200


@clients_bp.route('', methods=['POST'])
@jwt_required()
def create_client():
    data = json_payload()
    # full name defaults to "first last" when only the parts are sent
    if not data.get('fullName') and (data.get('firstName') or data.get('lastName')):
        data = dict(data, fullName=' '.join(
            part for part in (data.get('firstName'), data.get('lastName')) if part))
    values = Client.from_payload(data)
    values['created_by'] = current_user_id()
    client = get_storage().create_client(values)
    return jsonify({'client': client.to_dict()}), 201


@clients_bp.route('/<int:client_id>', methods=['GET'])
@jwt_required()
def get_client(client_id):
    storage = get_storage()
    client = _owned_client(client_id)
    data = client.to_dict()
    data['locations'] = serialize(storage.get_client_locations(client_id))
    data['contacts'] = serialize(storage.get_client_contacts(client_id))
    return jsonify({'client': data}), 200


@clients_bp.route('/<int:client_id>', methods=['PUT'])
@jwt_required()
def update_client(client_id):
    _owned_client(client_id)
    values = Client.from_payload(json_payload(), partial=True)
    client = get_storage().update_client(client_id, values)
    return jsonify({'client': client.to_dict()}), 200


@clients_bp.route('/<int:client_id>', methods=['DELETE'])
@jwt_required()
def delete_client(client_id):
    return deleted(get_storage().delete_client(client_id, current_user_id()), 'Client')


# ----------------------------------------------------------------------
# Locations
# ----------------------------------------------------------------------

@clients_bp.route('/<int:client_id>/locations', methods=['GET'])
@jwt_required()
def list_locations(client_id):
    _owned_client(client_id)
    return jsonify({'locations': serialize(get_storage().get_client_locations(client_id))}), 200


@clients_bp.route('/<int:client_id>/locations', methods=['POST'])
@jwt_required()
def create_location(client_id):
    _owned_client(client_id)
    values = ClientLocation.from_payload(dict(json_payload(), clientId=client_id))
    location = get_storage().create_client_location(values)
    return jsonify({'location': location.to_dict()}), 201


@locations_bp.route('/<int:location_id>', methods=['PUT'])
@jwt_required()
def update_location(location_id):
    values = ClientLocation.from_payload(json_payload(), partial=True)
    values.pop('client_id', None)
    location = require(get_storage().update_client_location(location_id, values), 'Location')
    return jsonify({'location': location.to_dict()}), 200


@locations_bp.route('/<int:location_id>', methods=['DELETE'])
@jwt_required()
def delete_location(location_id):
    return deleted(get_storage().delete_client_location(location_id), 'Location')


# ----------------------------------------------------------------------
# Contacts
# ----------------------------------------------------------------------

@clients_bp.route('/<int:client_id>/contacts', methods=['GET'])
@jwt_required()
def list_contacts(client_id):
    _owned_client(client_id)
    return jsonify({'contacts': serialize(get_storage().get_client_contacts(client_id))}), 200


@clients_bp.route('/<int:client_id>/contacts', methods=['POST'])
@jwt_required()
def create_contact(client_id):
    _owned_client(client_id)
    values = ClientContact.from_payload(dict(json_payload(), clientId=client_id))
    contact = get_storage().create_client_contact(values)
    return jsonify({'contact': contact.to_dict()}), 201


@contacts_bp.route('/<int:contact_id>', methods=['PUT'])
@jwt_required()
def update_contact(contact_id):
    values = ClientContact.from_payload(json_payload(), partial=True)
    values.pop('client_id', None)
    contact = require(get_storage().update_client_contact(contact_id, values), 'Contact')
    return jsonify({'contact': contact.to_dict()}), 200


@contacts_bp.route('/<int:contact_id>', methods=['DELETE'])
@jwt_required()
def delete_contact(contact_id):
    return deleted(get_storage().delete_client_contact(contact_id), 'Contact')
