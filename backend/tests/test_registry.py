import threading

import pytest

from yahtzee.services.games import GameSession, SessionBusy, SessionNotFound, SessionRegistry


def test_get_or_create_returns_same_session():
    registry = SessionRegistry()
    game = registry.get_or_create('a')
    assert isinstance(game, GameSession)
    assert registry.get_or_create('a') is game
    assert registry.get('a') is game
    assert 'a' in registry
    assert len(registry) == 1


def test_get_unknown_and_remove():
    registry = SessionRegistry()
    assert registry.get('missing') is None
    registry.get_or_create('a')
    registry.remove('a')
    registry.remove('a')
    assert registry.get('a') is None
    assert 'a' not in registry


def test_locked_unknown_session():
    registry = SessionRegistry()
    with pytest.raises(SessionNotFound):
        with registry.locked('missing'):
            pass


def test_lock_timeout_raises_busy_and_leaves_state():
    registry = SessionRegistry(lock_timeout=0.05)
    game = registry.get_or_create('a')
    with registry.locked('a'):
        with pytest.raises(SessionBusy):
            with registry.locked('a') as g:
                g.roll()
    assert game.rolls_used == 0


def test_lock_released_after_exception():
    registry = SessionRegistry(lock_timeout=0.05)
    registry.get_or_create('a')
    with pytest.raises(RuntimeError):
        with registry.locked('a'):
            raise RuntimeError('boom')
    with registry.locked('a') as game:
        assert game.rolls_used == 0


def test_other_sessions_do_not_block():
    registry = SessionRegistry(lock_timeout=0.05)
    registry.get_or_create('a')
    registry.get_or_create('b')
    with registry.locked('a'):
        with registry.locked('b') as game:
            assert game.roll()


def test_session_removed_while_waiting():
    registry = SessionRegistry(lock_timeout=2)
    registry.get_or_create('a')
    holding = threading.Event()
    release = threading.Event()

    def _hold_then_remove():
        with registry.locked('a'):
            holding.set()
            release.wait(1)
            registry.remove('a')

    worker = threading.Thread(target=_hold_then_remove)
    worker.start()
    holding.wait(1)
    release.set()
    with pytest.raises(SessionNotFound):
        with registry.locked('a'):
            pass
    worker.join()


def test_concurrent_rolls_are_serialised():
    registry = SessionRegistry(lock_timeout=5)
    game = registry.get_or_create('a')
    barrier = threading.Barrier(10)
    results = []
    results_lock = threading.Lock()

    def _roll():
        barrier.wait()
        with registry.locked('a') as g:
            rolled = g.roll([True] * 5)
        with results_lock:
            results.append(rolled)

    threads = [threading.Thread(target=_roll) for _ in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert results.count(True) == 3
    assert game.rolls_used == 3
