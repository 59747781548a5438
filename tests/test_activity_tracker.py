import pytest

from chatcore.domain.entities import ConversationHeader, User
from chatcore.domain.exceptions import EntityNotFoundError
from chatcore.domain.services import ActivityTracker
from chatcore.domain.value_objects import Uuid
from chatcore.infrastructure.store import Store


@pytest.fixture()
def world(when):
    reader = User.create(Uuid(1), "Reader", when(0))
    writer = User.create(Uuid(2), "Writer", when(0))
    header = ConversationHeader.create(Uuid(10), writer.id, "News", when(1))
    header.size = 5

    conversations = Store(name="conversation_by_id")
    conversations.insert(header.id, header)
    users = Store(name="user_by_id")
    users.insert(reader.id, reader)
    users.insert(writer.id, writer)

    tracker = ActivityTracker()
    tracker.register(reader.id)
    tracker.register(writer.id)
    return tracker, reader, writer, header, conversations, users


def test_unread_count_since_follow(world):
    tracker, reader, _, header, conversations, users = world
    tracker.follow_conversation(reader.id, header)
    header.size = 8

    report = tracker.status_update(reader, conversations, users)
    assert report == "CONVERSATION News: You have 3 new messages!\n"


def test_status_read_resets_baseline(world):
    tracker, reader, _, header, conversations, users = world
    tracker.follow_conversation(reader.id, header)
    header.size = 8
    tracker.status_update(reader, conversations, users)

    report = tracker.status_update(reader, conversations, users)
    assert report == "CONVERSATION News: You have 0 new messages!\n"
    assert tracker.tracked_conversations(reader.id) == {header.id: 8}


def test_unfollow_conversation_removes_tracking(world):
    tracker, reader, _, header, conversations, users = world
    tracker.follow_conversation(reader.id, header)

    assert tracker.unfollow_conversation(reader.id, header.id) is True
    assert tracker.unfollow_conversation(reader.id, header.id) is False
    assert "News" not in tracker.status_update(reader, conversations, users)


def test_follow_user_reports_new_conversations(world):
    tracker, reader, writer, _, conversations, users = world
    tracker.follow_user(reader, writer)
    assert writer.id in reader.follows

    writer.add_created_conversation(Uuid(11))
    writer.add_created_conversation(Uuid(12))

    report = tracker.status_update(reader, conversations, users)
    assert report == "USER Writer: You have 2 new conversations!\n"
    assert tracker.followed_users(reader.id) == {writer.id: 2}


def test_follow_is_directional(world):
    tracker, reader, writer, *_ = world
    tracker.follow_user(reader, writer)
    assert writer.id in reader.follows
    assert reader.id not in writer.follows


def test_unfollow_user(world):
    tracker, reader, writer, _, conversations, users = world
    tracker.follow_user(reader, writer)

    assert tracker.unfollow_user(reader, writer) is True
    assert writer.id not in reader.follows
    assert tracker.unfollow_user(reader, writer) is False
    assert tracker.status_update(reader, conversations, users) == ""


def test_missing_conversation_is_dropped(world):
    tracker, reader, _, _, _, users = world
    ghost = ConversationHeader.create(Uuid(99), Uuid(2), "Ghost")
    tracker.follow_conversation(reader.id, ghost)

    report = tracker.status_update(reader, Store(name="empty"), users)
    assert report == ""
    assert tracker.tracked_conversations(reader.id) == {}


def test_unregistered_user_raises(world):
    tracker, _, _, header, _, _ = world
    with pytest.raises(EntityNotFoundError):
        tracker.follow_conversation(Uuid(404), header)
    with pytest.raises(EntityNotFoundError):
        tracker.tracked_conversations(Uuid(404))
