import json
from unittest.mock import MagicMock

import pytest
import requests

from austin_weird.trigger import main as trigger_main
from austin_weird.trigger.client import (
    CREDENTIAL_HINT, FAILURE_MESSAGE, IMAGE_HINT, NETWORK_ERROR_MESSAGE,
    GenerateTrigger, TriggerState,
)

CONTENT = {
    'bandName': 'The Austin Weirdos',
    'startupPitch': 'Tacos as a service.',
    'tacoRecipe': 'Migas taco.',
    'protestSign': 'Keep Austin Weird!',
}


def make_response(status_code: int, body: bytes = b'') -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = body
    resp.encoding = 'utf-8'
    return resp


def make_session(response=None, error=None):
    session = MagicMock()
    if error is not None:
        session.post.side_effect = error
    else:
        session.post.return_value = response
    return session


def test_starts_idle():
    trigger = GenerateTrigger('http://svc', session=make_session())
    assert trigger.state == TriggerState.IDLE
    assert not trigger.disabled
    assert trigger.content is None


def test_success_renders_result():
    session = make_session(make_response(200, json.dumps(CONTENT).encode()))
    trigger = GenerateTrigger('http://svc/', session=session)

    assert trigger.generate() == TriggerState.RESULT
    assert trigger.content == CONTENT
    assert trigger.error is None

    session.post.assert_called_once()
    assert session.post.call_args.args[0] == 'http://svc/api/generate'
    assert 'json' not in session.post.call_args.kwargs

    text = trigger.render()
    assert 'The Austin Weirdos' in text
    assert 'Keep Austin Weird!' in text
    assert IMAGE_HINT in text


def test_result_with_image_url():
    body = {**CONTENT, 'protestSignImage': 'https://x.test/sign.png'}
    trigger = GenerateTrigger('http://svc', session=make_session(
        make_response(200, json.dumps(body).encode())))
    trigger.generate()

    text = trigger.render()
    assert 'https://x.test/sign.png' in text
    assert IMAGE_HINT not in text


@pytest.mark.parametrize('body', [b'', b'<html>oops</html>', b'[]'])
def test_http_error_with_unusable_body(body):
    trigger = GenerateTrigger('http://svc', session=make_session(make_response(500, body)))

    assert trigger.generate() == TriggerState.ERROR
    assert trigger.error == FAILURE_MESSAGE
    assert trigger.content is None
    assert not trigger.disabled


def test_http_error_uses_payload_message():
    body = json.dumps({'message': 'Upstream is sad'}).encode()
    trigger = GenerateTrigger('http://svc', session=make_session(make_response(502, body)))
    trigger.generate()

    assert trigger.error == 'Upstream is sad'
    assert CREDENTIAL_HINT in trigger.render()


def test_network_failure():
    session = make_session(error=requests.ConnectionError('refused'))
    trigger = GenerateTrigger('http://svc', session=session)

    assert trigger.generate() == TriggerState.ERROR
    assert trigger.error == NETWORK_ERROR_MESSAGE
    assert trigger.render().startswith(NETWORK_ERROR_MESSAGE)


def test_new_cycle_clears_previous_result():
    session = make_session(make_response(200, json.dumps(CONTENT).encode()))
    trigger = GenerateTrigger('http://svc', session=session)
    trigger.generate()

    session.post.return_value = None
    session.post.side_effect = requests.Timeout('slow')
    trigger.generate()

    assert trigger.content is None
    assert trigger.state == TriggerState.ERROR


@pytest.mark.parametrize('body', [b'[1,2]', b'null', b'"x"', b'not json'])
def test_success_status_with_non_object_body(body):
    trigger = GenerateTrigger('http://svc', session=make_session(make_response(200, body)))

    assert trigger.generate() == TriggerState.ERROR
    assert trigger.error == FAILURE_MESSAGE
    assert trigger.content is None
    assert trigger.render().startswith(FAILURE_MESSAGE)


def test_empty_result_still_renders_fields():
    trigger = GenerateTrigger('http://svc', session=make_session(make_response(200, b'{}')))

    assert trigger.generate() == TriggerState.RESULT
    text = trigger.render()
    assert text.startswith('Band Name:')
    assert IMAGE_HINT in text


def test_disabled_while_generating():
    session = make_session(make_response(200, json.dumps(CONTENT).encode()))
    trigger = GenerateTrigger('http://svc', session=session)
    trigger.state = TriggerState.GENERATING

    assert trigger.disabled
    assert trigger.generate() == TriggerState.GENERATING
    session.post.assert_not_called()
    assert trigger.render() == 'Generating Austin Weirdness...'


def test_cli_exit_codes(monkeypatch, capsys):
    def fake_generate(self):
        self.content = CONTENT
        self.state = TriggerState.RESULT
        return self.state

    monkeypatch.setattr(GenerateTrigger, 'generate', fake_generate)
    assert trigger_main.main(['--url', 'http://svc', '--json']) == 0
    out = capsys.readouterr().out
    assert '"bandName": "The Austin Weirdos"' in out

    def failing_generate(self):
        self.error = NETWORK_ERROR_MESSAGE
        self.state = TriggerState.ERROR
        return self.state

    monkeypatch.setattr(GenerateTrigger, 'generate', failing_generate)
    assert trigger_main.main(['--url', 'http://svc']) == 1
    assert NETWORK_ERROR_MESSAGE in capsys.readouterr().out
