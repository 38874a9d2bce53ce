from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from models import Employee
from routes.utils import current_user_id, deleted, get_storage, json_payload, require, serialize

employees_bp = Blueprint('employees', __name__)


@employees_bp.route('', methods=['GET'])
@jwt_required()
def list_employees():
    return jsonify({'employees': serialize(get_storage().get_employees())}), 200


@employees_bp.route('', methods=['POST'])
@jwt_required()
def create_employee():
    values = Employee.from_payload(json_payload())
    values['created_by'] = current_user_id()
    employee = get_storage().create_employee(values)
    return jsonify({'employee': employee.to_dict()}), 201


@employees_bp.route('/<int:employee_id>', methods=['GET'])
@jwt_required()
def get_employee(employee_id):
    employee = require(get_storage().get_employee(employee_id), 'Employee')
    return jsonify({'employee': employee.to_dict()}), 200


@employees_bp.route('/<int:employee_id>', methods=['PUT'])
@jwt_required()
def update_employee(employee_id):
    values = Employee.from_payload(json_payload(), partial=True)
    employee = require(get_storage().update_employee(employee_id, values), 'Employee')
    return jsonify({'employee': employee.to_dict()}), 200


@employees_bp.route('/<int:employee_id>', methods=['DELETE'])
@jwt_required()
def delete_employee(employee_id):
    return deleted(get_storage().delete_employee(employee_id), 'Employee')
