"""Data-access tests against an in-memory SQLite database."""
from datetime import datetime
from unittest.mock import patch

import pytest
from sqlalchemy.exc import IntegrityError

from learnhub.models import ChatMessage, ContentStatus, Module, UserProgress, UserStats
from learnhub.services import curriculum
from learnhub.storage import Storage, chronological
from learnhub.utils.auth import get_password_hash, pwd_context


@pytest.fixture
def storage(db_session):
    return Storage(db_session)


@pytest.fixture
def python_path(storage):
    template = curriculum.generate_learning_path("python", [], "beginner", "5h")
    return storage.create_learning_path_with_modules(template)


def test_create_user_initializes_stats(storage, db_session):
    user = storage.create_user("ada", "ada@example.com", get_password_hash("secret"))

    stats = db_session.query(UserStats).filter_by(user_id=user.id).one()
    assert stats.weekly_goal == 15
    assert stats.streak == 0
    assert pwd_context.verify("secret", user.password)
    assert storage.get_user_by_username("ada").id == user.id


def test_generated_path_persists_every_module(storage, python_path):
    modules = storage.get_modules_by_path(python_path.id)

    assert python_path.total_modules == len(modules) == 4
    assert [m.order for m in modules] == [1, 2, 3, 4]
    assert [m.is_locked for m in modules] == [False, True, True, True]
    assert modules[0].content["title"] == "Python Fundamentals"


def test_failed_module_insert_leaves_no_partial_path(storage, db_session):
    template = curriculum.generate_learning_path("java", [], "beginner", "")

    with patch.object(curriculum.CurriculumModule, "as_content", side_effect=RuntimeError("boom")):
        with pytest.raises(RuntimeError):
            storage.create_learning_path_with_modules(template)

    assert storage.get_all_learning_paths() == []
    assert db_session.query(Module).count() == 0


def test_learning_paths_listed_by_title(storage):
    storage.create_learning_path(title="Zig", language="zig", difficulty="beginner")
    storage.create_learning_path(title="Ada", language="ada", difficulty="advanced")

    assert [p.title for p in storage.get_all_learning_paths()] == ["Ada", "Zig"]


def test_create_module_bumps_total(storage):
    path = storage.create_learning_path(title="Go", language="go", difficulty="beginner")

    storage.create_module(path, title="Basics", order=1, is_locked=False)
    storage.create_module(path, title="Concurrency", order=2, is_locked=True)

    assert storage.get_learning_path(path.id).total_modules == 2


def test_update_progress_twice_keeps_single_row(storage, db_session, python_path):
    module = storage.get_modules_by_path(python_path.id)[0]

    storage.update_progress("u1", module.id, 100)
    record = storage.update_progress("u1", module.id, 100)

    rows = db_session.query(UserProgress).filter_by(user_id="u1", module_id=module.id).all()
    assert len(rows) == 1
    assert record.completed is True
    assert record.learning_path_id == python_path.id


def test_update_progress_below_100_is_not_completed(storage, python_path):
    module = storage.get_modules_by_path(python_path.id)[1]

    record = storage.update_progress("u1", module.id, 99)

    assert record.progress == 99
    assert record.completed is False
    assert storage.get_user_progress("u1", python_path.id) == [record]


def test_concurrent_insert_is_replayed_as_update(storage, db_session, python_path):
    module = storage.get_modules_by_path(python_path.id)[0]
    storage.update_progress("u1", module.id, 10)

    # Simulate the other request winning the race between our read and write.
    with patch.object(Storage, "_find_progress", side_effect=[None, storage._find_progress("u1", module.id)]):
        record = storage.update_progress("u1", module.id, 60)

    assert record.progress == 60
    assert db_session.query(UserProgress).count() == 1


def test_integrity_error_without_existing_row_propagates(storage, python_path):
    module = storage.get_modules_by_path(python_path.id)[0]
    storage.update_progress("u1", module.id, 10)

    with patch.object(Storage, "_find_progress", return_value=None):
        with pytest.raises(IntegrityError):
            storage.update_progress("u1", module.id, 20)


def test_custom_content_status_transition(storage):
    record = storage.create_custom_content(user_id="u1", type="website", url="https://a.dev",
                                           status=ContentStatus.PROCESSING.value)

    updated = storage.update_custom_content_status(record.id, ContentStatus.COMPLETED, "text")

    assert updated.status == "completed"
    assert updated.content == "text"
    assert storage.update_custom_content_status("missing", ContentStatus.ERROR) is None


def test_chat_messages_newest_first_then_chronological(storage):
    storage.create_chat_message("u1", "user", "first")
    storage.create_chat_message("u1", "assistant", "second")
    storage.create_chat_message("u2", "user", "other")

    newest_first = storage.get_user_chat_messages("u1")
    assert [m.content for m in newest_first] == ["second", "first"]
    assert [m.content for m in chronological(newest_first)] == ["first", "second"]
    assert len(storage.get_user_chat_messages("u1", limit=1)) == 1


def test_chat_messages_with_equal_timestamps_keep_insert_order(storage, db_session):
    asked_at = datetime(2024, 1, 1, 12)
    db_session.add(ChatMessage(user_id="u1", role="user", content="q", timestamp=asked_at))
    db_session.commit()
    db_session.add(ChatMessage(user_id="u1", role="assistant", content="a", timestamp=asked_at))
    db_session.commit()

    history = chronological(storage.get_user_chat_messages("u1"))
    assert [m.role for m in history] == ["user", "assistant"]


def test_update_user_stats(storage):
    user = storage.create_user("bob", "bob@example.com", "hash")

    stats = storage.update_user_stats(user.id, {"hours_completed": 6, "streak": 3})

    assert stats.hours_completed == 6
    assert stats.streak == 3
    assert storage.update_user_stats("nobody", {"streak": 1}) is None


def test_update_user_stats_skips_null_counters(storage):
    user = storage.create_user("cy", "cy@example.com", "hash")

    stats = storage.update_user_stats(user.id, {"weekly_goal": None, "last_active_date": None})

    assert stats.weekly_goal == 15
    assert stats.last_active_date is None
