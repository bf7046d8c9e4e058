import uuid

import pytest

from yahtzee import db
from yahtzee.models import ScorecardRecord
from yahtzee.services.games import (
    ArchiveError, Category, Die, Scorecard, ScorecardEntry, mark_category, roll_dice,
)


def _card():
    values = [3, 8, 9, 12, 15, 18, 22, 0, 25, 30, 40, 50, 21]
    entries = tuple(ScorecardEntry(kind=c.display_name, value=v) for c, v in zip(Category, values))
    return Scorecard(scores=entries, total=sum(values))


def _fill_twelve(registry, archive, session_id):
    game = registry.get_or_create(session_id)
    for index in range(12):
        roll_dice(registry, session_id, [])
        if index == Category.YAHTZEE:
            game.dice = [Die(6) for _ in range(5)]
        result = mark_category(registry, archive, session_id, index)
        assert result.category is Category(index)
    return game


def test_save_and_load_round_trip(archive):
    session_id = str(uuid.uuid4())
    card = _card()
    archive.save(session_id, card)
    loaded = archive.load(session_id)
    assert loaded == card
    assert loaded.total == 253
    assert archive.exists(session_id)


def test_scorecard_dict_round_trip():
    card = _card()
    assert Scorecard.from_dict(card.to_dict()) == card


def test_load_missing_returns_none(archive):
    assert archive.load(str(uuid.uuid4())) is None
    assert not archive.exists(str(uuid.uuid4()))


def test_second_save_for_same_id_fails(archive):
    session_id = str(uuid.uuid4())
    archive.save(session_id, _card())
    with pytest.raises(ArchiveError):
        archive.save(session_id, _card())
    assert archive.load(session_id) == _card()


def test_corrupt_payload_raises(archive):
    session_id = str(uuid.uuid4())
    db.session.add(ScorecardRecord(id=session_id, scores='not json', total=0))
    db.session.commit()
    with pytest.raises(ArchiveError):
        archive.load(session_id)


def test_completion_archives_and_removes_session(registry, archive):
    session_id = str(uuid.uuid4())
    game = _fill_twelve(registry, archive, session_id)
    assert game.filled[Category.YAHTZEE] == 50

    roll_dice(registry, session_id, [])
    result = mark_category(registry, archive, session_id, Category.CHANCE)
    assert result.completed
    assert session_id not in registry

    stored = archive.load(session_id)
    assert stored == result.scorecard
    assert len(stored.scores) == 13
    assert stored.total == sum(e.value for e in stored.scores)


def test_failed_archive_keeps_session_for_retry(registry, archive, monkeypatch):
    session_id = str(uuid.uuid4())
    game = _fill_twelve(registry, archive, session_id)
    roll_dice(registry, session_id, [])

    real_save = archive.save

    def _broken_save(_sid, _card):
        raise ArchiveError('storage unavailable')

    monkeypatch.setattr(archive, 'save', _broken_save)
    with pytest.raises(ArchiveError):
        mark_category(registry, archive, session_id, Category.CHANCE)
    assert session_id in registry
    assert Category.CHANCE not in game.filled
    assert archive.load(session_id) is None

    monkeypatch.setattr(archive, 'save', real_save)
    result = mark_category(registry, archive, session_id, Category.CHANCE)
    assert result.completed
    assert session_id not in registry
    assert archive.load(session_id) == result.scorecard
