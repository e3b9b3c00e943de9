from datetime import date

import pytest

DAY = "2024-05-01"


@pytest.fixture
def answer(bundled_source):
    return bundled_source.answer_for(date.fromisoformat(DAY))


@pytest.fixture
def misses(bundled_source, answer):
    return [word for word in bundled_source.answers[:7] if word != answer][:6]


@pytest.fixture
def game_id(client):
    response = client.post('/api/new_game', json={'date': DAY})
    assert response.status_code == 200
    return response.get_json()['game_id']


def guess(client, game_id, word):
    return client.post(f'/api/game/{game_id}/guess', json={'guess': word})


def test_new_game(client):
    response = client.post('/api/new_game', json={'date': DAY})
    data = response.get_json()

    assert data['success'] is True
    assert data['game_id']
    state = data['state']
    assert state['status'] == 'in_progress'
    assert state['date'] == DAY
    assert state['answer'] is None
    assert len(state['rows']) == 6
    assert [len(row) for row in state['keyboard']] == [10, 9, 9]


def test_new_game_without_body_uses_today(client):
    response = client.post('/api/new_game')
    assert response.status_code == 200
    assert response.get_json()['state']['date'] == date.today().isoformat()


def test_new_game_rejects_bad_date(client):
    response = client.post('/api/new_game', json={'date': '2024-13-45'})
    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_unknown_game_is_404(client):
    assert client.get('/api/game/nope/state').status_code == 404
    assert client.post('/api/game/nope/key', json={'key': 'a'}).status_code == 404
    assert client.delete('/api/game/nope').status_code == 404


def test_get_state(client, game_id):
    response = client.get(f'/api/game/{game_id}/state')
    assert response.status_code == 200
    assert response.get_json()['state']['game_id'] == game_id


def test_key_presses_fill_the_row(client, game_id):
    for key in ['c', 'r', 'x', 'Backspace']:
        response = client.post(f'/api/game/{game_id}/key', json={'key': key})
        assert response.status_code == 200
        assert response.get_json()['result'] is None

    row = response.get_json()['state']['rows'][0]
    assert [tile['char'] for tile in row] == ['c', 'r', ' ', ' ', ' ']
    assert row[0]['classes'] == 'tile filled'


@pytest.mark.parametrize("key", ['A', '1', 'Shift', '', None])
def test_invalid_key_is_400(client, game_id, key):
    response = client.post(f'/api/game/{game_id}/key', json={'key': key})
    assert response.status_code == 400


def test_enter_on_short_row_is_rejected(client, game_id):
    for key in ['a', 'b', 'Enter']:
        response = client.post(f'/api/game/{game_id}/key', json={'key': key})

    data = response.get_json()
    assert data['result'] == {
        'accepted': False,
        'reason': 'incomplete_guess',
        'message': 'Not enough letters'
    }
    assert data['state']['message'] == 'Not enough letters'
    assert data['state']['shake'] is True
    assert data['state']['current_round'] == 0


def test_unknown_word_is_rejected(client, game_id):
    data = guess(client, game_id, 'zzzzz').get_json()
    assert data['success'] is True
    assert data['result']['reason'] == 'unknown_word'
    assert data['state']['message'] == 'Not in word list'
    assert data['state']['guesses'] == []


@pytest.mark.parametrize("word", ['', 'crane!', 'toolong', 'cr4ne', 12345])
def test_malformed_guess_is_400(client, game_id, word):
    assert guess(client, game_id, word).status_code == 400


def test_missing_guess_is_400(client, game_id):
    response = client.post(f'/api/game/{game_id}/guess', json={})
    assert response.status_code == 400


def test_guess_is_normalized(client, game_id, answer):
    data = guess(client, game_id, f'  {answer.upper()} ').get_json()
    assert data['result']['accepted'] is True
    assert data['state']['status'] == 'won'


def test_winning_guess(client, game_id, answer):
    data = guess(client, game_id, answer).get_json()

    assert data['result'] == {'accepted': True, 'word': answer, 'hints': ['correct'] * 5}
    state = data['state']
    assert state['won'] and state['game_over']
    assert state['answer'] is None
    assert state['message'] == 'You win!'

    after = guess(client, game_id, answer).get_json()
    assert after['result'] is None
    assert after['state']['current_round'] == 1


def test_losing_game_reveals_answer(client, game_id, answer, misses):
    for word in misses:
        data = guess(client, game_id, word).get_json()
        assert data['result']['accepted'] is True

    state = data['state']
    assert state['status'] == 'lost'
    assert state['answer'] == answer
    assert state['message'] == answer.upper()
    assert state['guesses'] == misses


def test_delete_game(client, game_id):
    response = client.delete(f'/api/game/{game_id}')
    assert response.get_json() == {'success': True}
    assert client.get(f'/api/game/{game_id}/state').status_code == 404


def test_health(client, game_id):
    data = client.get('/api/health').get_json()
    assert data['status'] == 'healthy'
    assert data['active_games'] == 1
    assert data['answers'] == 2309
