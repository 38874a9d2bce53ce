"""
Tests for RelationalStore

Tests cover:
  1. Owner-scoped deletes
  2. Partial updates and updated_at refresh
  3. Primary location/contact bookkeeping
  4. Invoice totals and document types
  5. Task completion stamping
  6. Payload validation on the models
"""
from datetime import datetime, timedelta

import pytest

from errors import ValidationError
from models import ClientContact, Invoice, InvoiceItem, Project, TimeEntry, User
from services.relational_store import RelationalStore


@pytest.fixture
def store(database):
    return RelationalStore(database)


@pytest.fixture
def owner(store):
    return store.upsert_user({
        'username': 'owner',
        'email': 'owner@example.com',
        'password_hash': User.hash_password('secret'),
    })


@pytest.fixture
def stranger(store):
    return store.upsert_user({
        'username': 'stranger',
        'email': 'stranger@example.com',
        'password_hash': User.hash_password('secret'),
    })


@pytest.fixture
def client_record(store, owner):
    return store.create_client({'full_name': 'Ada Lovelace', 'created_by': owner.id})


# ---------------------------------------------------------------------------
# 1. OWNER-SCOPED DELETES
# ---------------------------------------------------------------------------

class TestOwnerScopedDeletes:
    def test_delete_project_with_wrong_owner_removes_nothing(self, store, owner, stranger):
        project = store.create_project({'name': 'Roof', 'created_by': owner.id})
        assert store.delete_project(project.id, stranger.id) == 0
        assert store.get_project(project.id) is not None

    def test_delete_project_by_owner(self, store, owner):
        project = store.create_project({'name': 'Roof', 'created_by': owner.id})
        assert store.delete_project(project.id, owner.id) == 1
        assert store.get_project(project.id) is None

    def test_delete_client_with_wrong_owner(self, store, client_record, stranger):
        assert store.delete_client(client_record.id, stranger.id) == 0
        assert store.get_client(client_record.id) is not None

    def test_delete_time_entry_scoped_to_user(self, store, owner, stranger):
        entry = store.create_time_entry({
            'user_id': owner.id,
            'start_time': datetime(2026, 3, 2, 8, 0),
            'date': datetime(2026, 3, 2),
        })
        assert store.delete_time_entry(entry.id, stranger.id) == 0
        assert store.delete_time_entry(entry.id, owner.id) == 1

    def test_delete_missing_row_returns_zero(self, store, owner):
        assert store.delete_invoice(12345, owner.id) == 0
        assert store.delete_equipment(12345) == 0


# ---------------------------------------------------------------------------
# 2. UPDATES
# ---------------------------------------------------------------------------

class TestUpdates:
    def test_update_missing_returns_none(self, store):
        assert store.update_project(999, {'name': 'x'}) is None
        assert store.update_employee(999, {'notes': 'x'}) is None

    def test_update_is_partial_and_refreshes_updated_at(self, store, owner):
        project = store.create_project({'name': 'Roof', 'notes': 'slate', 'created_by': owner.id})
        before = project.updated_at

        updated = store.update_project(project.id, {'status': 'on_hold'})

        assert updated.status == 'on_hold'
        assert updated.notes == 'slate'
        assert updated.updated_at.replace(tzinfo=None) >= before.replace(tzinfo=None)

    def test_projects_listed_per_owner_newest_first(self, store, owner, stranger):
        first = store.create_project({'name': 'First', 'created_by': owner.id})
        second = store.create_project({'name': 'Second', 'created_by': owner.id})
        store.create_project({'name': 'Theirs', 'created_by': stranger.id})
        store.update_project(first.id, {'created_at': second.created_at - timedelta(days=1)})

        assert [p.name for p in store.get_projects(owner.id)] == ['Second', 'First']

    def test_upsert_user_updates_existing(self, store, owner):
        store.upsert_user({'id': owner.id, 'first_name': 'Grace'})
        user = store.get_user(owner.id)
        assert user.first_name == 'Grace'
        assert user.username == 'owner'

    def test_update_user_permissions(self, store, owner):
        store.update_user_permissions(owner.id, ['invoices', 'employees'])
        assert store.get_user(owner.id).permissions == ['invoices', 'employees']


# ---------------------------------------------------------------------------
# 3. PRIMARY LOCATIONS AND CONTACTS
# ---------------------------------------------------------------------------

class TestPrimaryFlags:
    def test_new_primary_contact_unsets_previous(self, store, client_record):
        first = store.create_client_contact({
            'client_id': client_record.id, 'first_name': 'A', 'last_name': 'One', 'is_primary': True,
        })
        second = store.create_client_contact({
            'client_id': client_record.id, 'first_name': 'B', 'last_name': 'Two', 'is_primary': True,
        })

        contacts = store.get_client_contacts(client_record.id)
        primaries = [c.id for c in contacts if c.is_primary]
        assert primaries == [second.id]
        assert contacts[0].id == second.id
        assert first.id in [c.id for c in contacts]

    def test_promoting_location_unsets_others(self, store, client_record):
        home = store.create_client_location({
            'client_id': client_record.id, 'location_name': 'Home', 'is_primary': True,
        })
        office = store.create_client_location({
            'client_id': client_record.id, 'location_name': 'Office',
        })

        store.update_client_location(office.id, {'is_primary': True})

        flags = {loc.location_name: loc.is_primary for loc in store.get_client_locations(client_record.id)}
        assert flags == {'Home': False, 'Office': True}
        assert home.id != office.id

    def test_primary_only_affects_same_client(self, store, owner, client_record):
        other = store.create_client({'full_name': 'Charles Babbage', 'created_by': owner.id})
        store.create_client_location({'client_id': other.id, 'location_name': 'Lab', 'is_primary': True})
        store.create_client_location({'client_id': client_record.id, 'location_name': 'Home', 'is_primary': True})

        assert store.get_client_locations(other.id)[0].is_primary is True


# ---------------------------------------------------------------------------
# 4. INVOICES
# ---------------------------------------------------------------------------

class TestInvoices:
    def test_total_defaults_to_amount_plus_tax(self):
        values = Invoice.from_payload({'title': 'Wiring', 'customerName': 'Ada', 'amount': 10000, 'tax': 800})
        assert values['total'] == 10800

    def test_item_amount_defaults_to_quantity_times_rate(self):
        values = InvoiceItem.from_payload({'invoiceId': 1, 'description': 'Cable', 'quantity': 3, 'rate': 250})
        assert values['amount'] == 750

    def test_filter_by_document_type(self, store, owner):
        for number, document_type in (('INV-1', 'invoice'), ('QTE-1', 'quote')):
            store.create_invoice({
                'invoice_number': number, 'document_type': document_type, 'title': 'Job',
                'customer_name': 'Ada', 'amount': 100, 'total': 100, 'created_by': owner.id,
            })

        assert [i.invoice_number for i in store.get_invoices(owner.id, 'quote')] == ['QTE-1']
        assert len(store.get_invoices(owner.id)) == 2

    def test_items_listed_per_invoice(self, store, owner):
        invoice = store.create_invoice({
            'title': 'Job', 'customer_name': 'Ada', 'amount': 100, 'total': 100, 'created_by': owner.id,
        })
        store.create_invoice_item({'invoice_id': invoice.id, 'description': 'Cable', 'quantity': 1,
                                   'rate': 100, 'amount': 100})
        assert [item.description for item in store.get_invoice_items(invoice.id)] == ['Cable']


# ---------------------------------------------------------------------------
# 5. TASKS
# ---------------------------------------------------------------------------

class TestTasks:
    def test_done_stamps_completed_at_once(self, store, owner):
        task = store.create_task({'title': 'Order relays', 'created_by': owner.id})
        done = store.update_task(task.id, {'status': 'done'})
        assert done.completed_at is not None

        again = store.update_task(task.id, {'status': 'done'})
        assert again.completed_at.replace(tzinfo=None) == done.completed_at.replace(tzinfo=None)

    def test_filter_by_project(self, store, owner):
        project = store.create_project({'name': 'Roof', 'created_by': owner.id})
        store.create_task({'title': 'In project', 'project_id': project.id, 'created_by': owner.id})
        store.create_task({'title': 'Loose', 'created_by': owner.id})

        assert [t.title for t in store.get_tasks(project.id)] == ['In project']
        assert len(store.get_tasks()) == 2

    def test_user_tasks(self, store, owner, stranger):
        store.create_task({'title': 'Mine', 'assigned_to': owner.id, 'created_by': stranger.id})
        store.create_task({'title': 'Theirs', 'assigned_to': stranger.id, 'created_by': owner.id})
        assert [t.title for t in store.get_user_tasks(owner.id)] == ['Mine']


# ---------------------------------------------------------------------------
# 6. PAYLOAD VALIDATION
# ---------------------------------------------------------------------------

class TestFromPayload:
    def test_collects_every_error(self):
        with pytest.raises(ValidationError) as excinfo:
            Project.from_payload({'status': 'later', 'budget': 'lots'})
        assert set(excinfo.value.errors) == {'name', 'status', 'budget'}

    def test_partial_skips_required(self):
        assert Project.from_payload({'notes': 'n'}, partial=True) == {'notes': 'n'}

    def test_protected_fields_are_dropped(self):
        values = Project.from_payload({'name': 'P', 'id': 7, 'createdAt': '2020-01-01T00:00:00Z'})
        assert values == {'name': 'P'}

    def test_datetimes_are_parsed(self):
        values = TimeEntry.from_payload({'startTime': '2026-03-02T08:00:00Z', 'date': '2026-03-02'})
        assert values['start_time'].hour == 8

    def test_boolean_must_be_boolean(self):
        with pytest.raises(ValidationError) as excinfo:
            ClientContact.from_payload({'clientId': 1, 'firstName': 'A', 'lastName': 'B', 'isPrimary': 'yes'})
        assert 'isPrimary' in excinfo.value.errors

    def test_non_object_body(self):
        with pytest.raises(ValidationError):
            Project.from_payload(['not', 'a', 'dict'])
