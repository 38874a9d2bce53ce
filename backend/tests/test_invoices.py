import pytest


def _create_invoice(client, headers, **fields):
    payload = {'title': 'Panel upgrade', 'customerName': 'Ada Lovelace', 'amount': 120000, 'tax': 9600}
    payload.update(fields)
    response = client.post('/api/invoices', headers=headers, json=payload)
    assert response.status_code == 201
    return response.get_json()['invoice']


def test_create_invoice_computes_total_and_number(client, auth_headers, user):
    invoice = _create_invoice(client, auth_headers)
    assert invoice['total'] == 129600
    assert invoice['documentType'] == 'invoice'
    assert invoice['invoiceNumber'].startswith('INV-')
    assert invoice['status'] == 'draft'
    assert invoice['createdBy'] == user.id


def test_create_quote(client, auth_headers):
    quote = _create_invoice(client, auth_headers, documentType='quote')
    assert quote['invoiceNumber'].startswith('QTE-')


def test_explicit_total_and_number_are_kept(client, auth_headers):
    invoice = _create_invoice(client, auth_headers, total=1, invoiceNumber='2026-001')
    assert invoice['total'] == 1
    assert invoice['invoiceNumber'] == '2026-001'


@pytest.mark.parametrize('payload, field', [
    ({'customerName': 'Ada', 'amount': 1}, 'title'),
    ({'title': 'T', 'customerName': 'Ada'}, 'amount'),
    ({'title': 'T', 'customerName': 'Ada', 'amount': 1, 'documentType': 'receipt'}, 'documentType'),
    ({'title': 'T', 'customerName': 'Ada', 'amount': 1, 'status': 'lost'}, 'status'),
    ({'title': 'T', 'customerName': 'Ada', 'amount': True}, 'amount'),
])
def test_create_invoice_validation(client, auth_headers, payload, field):
    response = client.post('/api/invoices', headers=auth_headers, json=payload)
    assert response.status_code == 400
    assert field in response.get_json()['fields']


def test_list_filters_by_document_type(client, auth_headers):
    _create_invoice(client, auth_headers)
    _create_invoice(client, auth_headers, documentType='quote')

    quotes = client.get('/api/invoices?documentType=quote', headers=auth_headers).get_json()['invoices']
    everything = client.get('/api/invoices', headers=auth_headers).get_json()['invoices']

    assert [q['documentType'] for q in quotes] == ['quote']
    assert len(everything) == 2


def test_list_rejects_unknown_document_type(client, auth_headers):
    response = client.get('/api/invoices?documentType=receipt', headers=auth_headers)
    assert response.status_code == 400


def test_invoice_items(client, auth_headers):
    invoice = _create_invoice(client, auth_headers)
    response = client.post(f"/api/invoices/{invoice['id']}/items", headers=auth_headers,
                           json={'description': 'Breaker', 'quantity': 4, 'rate': 2500})
    assert response.status_code == 201
    item = response.get_json()['item']
    assert item['amount'] == 10000

    detail = client.get(f"/api/invoices/{invoice['id']}", headers=auth_headers).get_json()['invoice']
    assert [i['description'] for i in detail['items']] == ['Breaker']

    assert client.delete(f"/api/invoices/items/{item['id']}", headers=auth_headers).status_code == 200
    assert client.get(f"/api/invoices/{invoice['id']}/items", headers=auth_headers).get_json()['items'] == []


def test_update_records_quickbooks_id(client, auth_headers):
    invoice = _create_invoice(client, auth_headers)
    response = client.put(f"/api/invoices/{invoice['id']}", headers=auth_headers,
                          json={'status': 'sent', 'quickbooksId': 'QB-42'})
    assert response.status_code == 200
    updated = response.get_json()['invoice']
    assert updated['status'] == 'sent'
    assert updated['quickbooksId'] == 'QB-42'
    assert updated['total'] == 129600


def test_other_user_cannot_touch_invoice(client, auth_headers, other_headers):
    invoice = _create_invoice(client, auth_headers)
    assert client.get(f"/api/invoices/{invoice['id']}", headers=other_headers).status_code == 404
    assert client.delete(f"/api/invoices/{invoice['id']}", headers=other_headers).status_code == 404
    assert client.delete(f"/api/invoices/{invoice['id']}", headers=auth_headers).status_code == 200
