import logging

from crossclues.config import Config, log_level
from crossclues.realtime.subscriptions import RoomSubscriptions
from crossclues.server import create_app


def test_log_level_names():
    assert log_level('debug') == logging.DEBUG
    assert log_level(' Warning ') == logging.WARNING
    assert log_level('verbose') == logging.INFO
    assert log_level('') == logging.INFO
    assert log_level(None) == logging.INFO


def test_unknown_log_level_falls_back_to_info(service):
    class VerboseConfig(Config):
        TESTING = True
        SOCKETIO_ASYNC_MODE = 'threading'
        LOG_LEVEL = 'verbose'

    logging.getLogger('crossclues').setLevel(logging.DEBUG)
    application, _ = create_app(VerboseConfig, service=service)
    assert application.extensions['crossclues'] is service
    assert logging.getLogger('crossclues').level == logging.INFO


def test_subscriptions_drop_only_that_player():
    subscriptions = RoomSubscriptions()
    subscriptions.add('sid-1', 'ROOM', 'Bob')
    subscriptions.add('sid-2', 'ROOM', 'Bob')
    subscriptions.add('sid-3', 'ROOM', 'Alice')
    # resubscribing moves the socket to the new room
    assert subscriptions.add('sid-3', 'OTHER', 'Alice') == ('ROOM', 'Alice')

    assert sorted(subscriptions.drop_player('ROOM', 'Bob')) == ['sid-1', 'sid-2']
    assert subscriptions.drop_player('ROOM', 'Alice') == []
    assert subscriptions.get('sid-3') == ('OTHER', 'Alice')
    assert len(subscriptions) == 1
