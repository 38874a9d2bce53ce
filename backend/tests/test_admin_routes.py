import pytest

EMPLOYEE = {
    'employeeId': 'EMP001',
    'firstName': 'Grace',
    'lastName': 'Hopper',
    'email': 'grace@example.com',
    'department': 'Programming',
    'position': 'Lead developer',
    'hireDate': '2024-01-15',
}


# ---------------------------------------------------------------------------
# Employees
# ---------------------------------------------------------------------------

class TestEmployees:
    def test_create_and_get(self, client, auth_headers, user):
        response = client.post('/api/employees', headers=auth_headers, json=EMPLOYEE)
        assert response.status_code == 201
        employee = response.get_json()['employee']
        assert employee['createdBy'] == user.id
        assert employee['status'] == 'active'
        assert employee['hireDate'].startswith('2024-01-15')

        response = client.get(f"/api/employees/{employee['id']}", headers=auth_headers)
        assert response.get_json()['employee']['lastName'] == 'Hopper'

    def test_department_is_validated(self, client, auth_headers):
        response = client.post('/api/employees', headers=auth_headers,
                               json=dict(EMPLOYEE, department='Catering'))
        assert response.status_code == 400
        assert 'department' in response.get_json()['fields']

    def test_update_and_delete(self, client, auth_headers):
        employee = client.post('/api/employees', headers=auth_headers, json=EMPLOYEE).get_json()['employee']

        response = client.put(f"/api/employees/{employee['id']}", headers=auth_headers,
                              json={'status': 'on_leave', 'hourlyRate': 5200})
        assert response.get_json()['employee']['status'] == 'on_leave'

        assert client.delete(f"/api/employees/{employee['id']}", headers=auth_headers).status_code == 200
        assert client.get(f"/api/employees/{employee['id']}", headers=auth_headers).status_code == 404


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------

class TestTasks:
    def test_create_and_complete(self, client, auth_headers):
        task = client.post('/api/tasks', headers=auth_headers,
                           json={'title': 'Order relays', 'priority': 'high'}).get_json()['task']
        assert task['status'] == 'todo'
        assert task['completedAt'] is None

        response = client.put(f"/api/tasks/{task['id']}", headers=auth_headers, json={'status': 'done'})
        assert response.status_code == 200
        assert response.get_json()['task']['completedAt'] is not None

    def test_assigned_to_me(self, client, auth_headers, user):
        client.post('/api/tasks', headers=auth_headers, json={'title': 'Mine', 'assignedTo': user.id})
        client.post('/api/tasks', headers=auth_headers, json={'title': 'Unassigned'})

        mine = client.get('/api/tasks?assignedTo=me', headers=auth_headers).get_json()['tasks']
        everything = client.get('/api/tasks', headers=auth_headers).get_json()['tasks']

        assert [t['title'] for t in mine] == ['Mine']
        assert len(everything) == 2

    def test_filter_by_project(self, client, auth_headers):
        project = client.post('/api/projects', headers=auth_headers, json={'name': 'Roof'}).get_json()['project']
        client.post('/api/tasks', headers=auth_headers, json={'title': 'Flash chimney', 'projectId': project['id']})
        client.post('/api/tasks', headers=auth_headers, json={'title': 'Elsewhere'})

        by_query = client.get(f"/api/tasks?projectId={project['id']}", headers=auth_headers)
        by_project = client.get(f"/api/projects/{project['id']}/tasks", headers=auth_headers)

        assert [t['title'] for t in by_query.get_json()['tasks']] == ['Flash chimney']
        assert [t['title'] for t in by_project.get_json()['tasks']] == ['Flash chimney']

    @pytest.mark.parametrize('payload', [
        {},
        {'title': 'T', 'status': 'blocked'},
        {'title': 'T', 'archived': 'no'},
    ])
    def test_validation(self, client, auth_headers, payload):
        assert client.post('/api/tasks', headers=auth_headers, json=payload).status_code == 400

    def test_delete_is_owner_scoped(self, client, auth_headers, other_headers):
        task = client.post('/api/tasks', headers=auth_headers, json={'title': 'T'}).get_json()['task']
        assert client.delete(f"/api/tasks/{task['id']}", headers=other_headers).status_code == 404
        assert client.delete(f"/api/tasks/{task['id']}", headers=auth_headers).status_code == 200


# ---------------------------------------------------------------------------
# Equipment
# ---------------------------------------------------------------------------

class TestEquipment:
    def test_create_assign_and_list(self, client, auth_headers, user):
        item = client.post('/api/equipment', headers=auth_headers,
                           json={'name': 'Fluke 87V', 'category': 'tools'}).get_json()['equipment']
        assert item['status'] == 'available'

        response = client.put(f"/api/equipment/{item['id']}", headers=auth_headers,
                              json={'status': 'in_use', 'assignedTo': user.id})
        assert response.get_json()['equipment']['status'] == 'in_use'

        mine = client.get('/api/equipment?assignedTo=me', headers=auth_headers).get_json()['equipment']
        assert [e['name'] for e in mine] == ['Fluke 87V']

    def test_status_is_validated(self, client, auth_headers):
        response = client.post('/api/equipment', headers=auth_headers,
                               json={'name': 'Ladder', 'status': 'lost'})
        assert response.status_code == 400

    def test_missing_item(self, client, auth_headers):
        assert client.get('/api/equipment/77', headers=auth_headers).status_code == 404
        assert client.delete('/api/equipment/77', headers=auth_headers).status_code == 404
