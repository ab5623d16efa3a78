def _events(sio_client, name):
    return [pkt for pkt in sio_client.get_received('/ws') if pkt['name'] == name]


def test_socket_connect(sio_client):
    assert sio_client.is_connected('/ws')
    assert _events(sio_client, 'connected')


def test_ping_pong(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('ping', {'n': 1}, namespace='/ws')
    pongs = _events(sio_client, 'pong')
    assert pongs and pongs[0]['args'][0] == {'n': 1}


def test_get_scoreboard(sio_client, app_registry, clock):
    first = app_registry.start_new_match('Uruguay', 'Italy')
    clock.advance(60)
    app_registry.start_new_match('Brazil', 'Argentina')
    app_registry.update_score(first.id, 'Uruguay', 2)
    sio_client.get_received('/ws')

    sio_client.emit('get_scoreboard', {'limit': 1}, namespace='/ws')
    boards = _events(sio_client, 'scoreboard')
    assert len(boards) == 1
    matches = boards[0]['args'][0]['matches']
    assert [m['home_team'] for m in matches] == ['Uruguay']


def test_get_scoreboard_bad_limit(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('get_scoreboard', {'limit': 0}, namespace='/ws')
    assert _events(sio_client, 'error')


def test_join_unknown_match(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('join_match', {'match_id': 42}, namespace='/ws')
    errors = _events(sio_client, 'error')
    assert errors and 'not found' in errors[0]['args'][0]['message']

    sio_client.emit('join_match', {}, namespace='/ws')
    assert _events(sio_client, 'error')


def test_http_updates_are_broadcast(client, sio_client):
    match = client.post('/api/matches', json={'home_team': 'Uruguay', 'away_team': 'Italy'}).get_json()
    sio_client.emit('join_match', {'match_id': match['id']}, namespace='/ws')
    sio_client.get_received('/ws')  # flush

    client.post(f"/api/matches/{match['id']}/score", json={'team': 'Italy', 'score': 1})
    received = sio_client.get_received('/ws')
    names = [pkt['name'] for pkt in received]
    assert 'match_update' in names
    assert 'scoreboard_update' in names
    update = next(pkt for pkt in received if pkt['name'] == 'match_update')
    assert update['args'][0]['match']['away_score'] == 1

    client.delete(f"/api/matches/{match['id']}")
    received = sio_client.get_received('/ws')
    deleted = [pkt for pkt in received if pkt['name'] == 'match_deleted']
    assert deleted and deleted[0]['args'][0] == {'match_id': match['id']}
    board = next(pkt for pkt in received if pkt['name'] == 'scoreboard_update')
    assert board['args'][0]['matches'] == []


def test_leave_match_stops_match_updates(client, sio_client):
    match = client.post('/api/matches', json={'home_team': 'Uruguay', 'away_team': 'Italy'}).get_json()
    sio_client.emit('join_match', {'match_id': match['id']}, namespace='/ws')
    sio_client.emit('leave_match', {'match_id': match['id']}, namespace='/ws')
    assert _events(sio_client, 'left')

    client.post(f"/api/matches/{match['id']}/score", json={'team': 'Uruguay', 'score': 1})
    names = [pkt['name'] for pkt in sio_client.get_received('/ws')]
    assert 'match_update' not in names
    assert 'scoreboard_update' in names


def test_non_object_payloads_get_error_events(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('join_match', 5, namespace='/ws')
    assert _events(sio_client, 'error')

    sio_client.emit('leave_match', 'match:1', namespace='/ws')
    assert _events(sio_client, 'error')

    sio_client.emit('get_scoreboard', [1], namespace='/ws')
    errors = _events(sio_client, 'error')
    assert errors and errors[0]['args'][0] == {'message': 'payload must be an object'}


def test_repeat_delete_broadcasts_nothing(client, sio_client):
    match = client.post('/api/matches', json={'home_team': 'Uruguay', 'away_team': 'Italy'}).get_json()
    sio_client.emit('join_match', {'match_id': match['id']}, namespace='/ws')
    sio_client.get_received('/ws')

    assert client.delete(f"/api/matches/{match['id']}").status_code == 204
    assert _events(sio_client, 'match_deleted')

    assert client.delete(f"/api/matches/{match['id']}").status_code == 204
    assert client.delete('/api/matches/999').status_code == 204
    names = [pkt['name'] for pkt in sio_client.get_received('/ws')]
    assert 'match_deleted' not in names
    assert 'scoreboard_update' not in names
