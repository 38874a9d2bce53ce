def _start_entry(client, headers, **fields):
    payload = {'startTime': '2026-03-02T08:00:00Z', 'date': '2026-03-02T00:00:00Z',
               'description': 'Rough-in'}
    payload.update(fields)
    response = client.post('/api/time-entries', headers=headers, json=payload)
    assert response.status_code == 201
    return response.get_json()['timeEntry']


def test_create_and_list_time_entries(client, auth_headers, user):
    entry = _start_entry(client, auth_headers)
    assert entry['userId'] == user.id
    assert entry['status'] == 'active'
    assert entry['billable'] is True

    entries = client.get('/api/time-entries', headers=auth_headers).get_json()['timeEntries']
    assert [e['id'] for e in entries] == [entry['id']]


def test_create_requires_start_time(client, auth_headers):
    response = client.post('/api/time-entries', headers=auth_headers, json={'date': '2026-03-02'})
    assert response.status_code == 400
    assert response.get_json()['fields'] == {'startTime': 'is required'}


def test_bad_timestamp_is_rejected(client, auth_headers):
    response = client.post('/api/time-entries', headers=auth_headers,
                           json={'startTime': 'eight-ish', 'date': '2026-03-02'})
    assert response.status_code == 400
    assert 'startTime' in response.get_json()['fields']


def test_finish_entry(client, auth_headers):
    entry = _start_entry(client, auth_headers)
    response = client.put(f"/api/time-entries/{entry['id']}", headers=auth_headers,
                          json={'endTime': '2026-03-02T16:30:00Z', 'hours': 480, 'status': 'completed'})
    assert response.status_code == 200
    updated = response.get_json()['timeEntry']
    assert updated['status'] == 'completed'
    assert updated['hours'] == 480


def test_project_time_entries(client, auth_headers):
    project = client.post('/api/projects', headers=auth_headers, json={'name': 'Roof'}).get_json()['project']
    _start_entry(client, auth_headers, projectId=project['id'])
    _start_entry(client, auth_headers)

    response = client.get(f"/api/projects/{project['id']}/time-entries", headers=auth_headers)
    assert len(response.get_json()['timeEntries']) == 1


def test_other_user_cannot_delete_entry(client, auth_headers, other_headers):
    entry = _start_entry(client, auth_headers)
    assert client.delete(f"/api/time-entries/{entry['id']}", headers=other_headers).status_code == 404
    assert client.delete(f"/api/time-entries/{entry['id']}", headers=auth_headers).status_code == 200


class TestBreaks:
    def test_break_lifecycle(self, client, auth_headers):
        entry = _start_entry(client, auth_headers)
        url = f"/api/time-entries/{entry['id']}/breaks"

        response = client.post(url, headers=auth_headers,
                               json={'startTime': '2026-03-02T12:00:00Z', 'breakType': 'lunch'})
        assert response.status_code == 201
        pause = response.get_json()['break']
        assert pause['timeEntryId'] == entry['id']

        response = client.put(f"/api/time-entries/breaks/{pause['id']}", headers=auth_headers,
                              json={'endTime': '2026-03-02T12:30:00Z'})
        assert response.status_code == 200
        assert response.get_json()['break']['endTime'].startswith('2026-03-02T12:30')

        assert len(client.get(url, headers=auth_headers).get_json()['breaks']) == 1
        assert client.delete(f"/api/time-entries/breaks/{pause['id']}", headers=auth_headers).status_code == 200
        assert client.get(url, headers=auth_headers).get_json()['breaks'] == []

    def test_break_type_is_validated(self, client, auth_headers):
        entry = _start_entry(client, auth_headers)
        response = client.post(f"/api/time-entries/{entry['id']}/breaks", headers=auth_headers,
                               json={'startTime': '2026-03-02T12:00:00Z', 'breakType': 'nap'})
        assert response.status_code == 400

    def test_other_user_cannot_edit_break(self, client, auth_headers, other_headers):
        entry = _start_entry(client, auth_headers)
        pause = client.post(f"/api/time-entries/{entry['id']}/breaks", headers=auth_headers,
                            json={'startTime': '2026-03-02T12:00:00Z'}).get_json()['break']
        response = client.put(f"/api/time-entries/breaks/{pause['id']}", headers=other_headers,
                              json={'endTime': '2026-03-02T12:30:00Z'})
        assert response.status_code == 404
