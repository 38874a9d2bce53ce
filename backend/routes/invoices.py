import logging
import uuid

from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from models import Invoice, InvoiceItem
from models.invoice import DOCUMENT_TYPES
from routes.utils import current_user_id, deleted, get_storage, json_payload, require, serialize

logger = logging.getLogger(__name__)

invoices_bp = Blueprint('invoices', __name__)

NUMBER_PREFIXES = {'invoice': 'INV', 'quote': 'QTE'}


def _owned_invoice(invoice_id):
    invoice = get_storage().get_invoice(invoice_id)
    if invoice is None or invoice.created_by != current_user_id():
        return require(None, 'Invoice')
    return invoice


@invoices_bp.route('', methods=['GET'])
@jwt_required()
def list_invoices():
    """Invoices and quotes; ?documentType=quote narrows the list"""
    document_type = request.args.get('documentType')
    if document_type and document_type not in DOCUMENT_TYPES:
        return jsonify({'error': f'Unknown document type: {document_type}'}), 400
    invoices = get_storage().get_invoices(current_user_id(), document_type)
    return jsonify({'invoices': serialize(invoices)}), 200


@invoices_bp.route('', methods=['POST'])
@jwt_required()
def create_invoice():
    values = Invoice.from_payload(json_payload())
    values['created_by'] = current_user_id()
    if not values.get('invoice_number'):
        prefix = NUMBER_PREFIXES[values.get('document_type') or 'invoice']
        values['invoice_number'] = f'{prefix}-{uuid.uuid4().hex[:8].upper()}'
    invoice = get_storage().create_invoice(values)
    logger.info('Created %s %s', invoice.document_type, invoice.invoice_number)
    return jsonify({'invoice': invoice.to_dict()}), 201


@invoices_bp.route('/<int:invoice_id>', methods=['GET'])
@jwt_required()
def get_invoice(invoice_id):
    data = _owned_invoice(invoice_id).to_dict()
    data['items'] = serialize(get_storage().get_invoice_items(invoice_id))
    return jsonify({'invoice': data}), 200


@invoices_bp.route('/<int:invoice_id>', methods=['PUT'])
@jwt_required()
def update_invoice(invoice_id):
    _owned_invoice(invoice_id)
    values = Invoice.from_payload(json_payload(), partial=True)
    invoice = get_storage().update_invoice(invoice_id, values)
    return jsonify({'invoice': invoice.to_dict()}), 200


@invoices_bp.route('/<int:invoice_id>', methods=['DELETE'])
@jwt_required()
def delete_invoice(invoice_id):
    return deleted(get_storage().delete_invoice(invoice_id, current_user_id()), 'Invoice')


@invoices_bp.route('/<int:invoice_id>/items', methods=['GET'])
@jwt_required()
def list_items(invoice_id):
    _owned_invoice(invoice_id)
    return jsonify({'items': serialize(get_storage().get_invoice_items(invoice_id))}), 200


@invoices_bp.route('/<int:invoice_id>/items', methods=['POST'])
@jwt_required()
def create_item(invoice_id):
    _owned_invoice(invoice_id)
    values = InvoiceItem.from_payload(dict(json_payload(), invoiceId=invoice_id))
    item = get_storage().create_invoice_item(values)
    return jsonify({'item': item.to_dict()}), 201


@invoices_bp.route('/items/<int:item_id>', methods=['DELETE'])
@jwt_required()
def delete_item(item_id):
    return deleted(get_storage().delete_invoice_item(item_id), 'Invoice item')
