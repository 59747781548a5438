from datetime import datetime, timedelta, timezone

import pytest

from chatcore.application.model import Model
from chatcore.domain.entities import ConversationHeader, Message, User
from chatcore.domain.value_objects import Uuid, UuidGenerator

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    return T0 + timedelta(minutes=minutes)


@pytest.fixture()
def when():
    """Timestamp T0 + n minutes."""
    return at


@pytest.fixture()
def ids():
    """Fresh identifier generator under a fixed server root."""
    return UuidGenerator(root=Uuid(1))


@pytest.fixture()
def model():
    return Model(version="test-1.0")


@pytest.fixture()
def alice(model, ids):
    return model.add_user(User.create(ids.make(), "Alice", at(0)))


@pytest.fixture()
def bob(model, ids):
    return model.add_user(User.create(ids.make(), "Bob", at(1)))


@pytest.fixture()
def carol(model, ids):
    return model.add_user(User.create(ids.make(), "Carol", at(2)))


@pytest.fixture()
def conversation(model, ids, alice):
    """A conversation owned by alice (bits 0b100)."""
    header = ConversationHeader.create(ids.make(), alice.id, "General", at(5))
    return model.add_conversation(alice, header)


@pytest.fixture()
def post(model, ids):
    """Append a message to a conversation through the full model path."""

    def _post(header, author, content="hello", minutes=10):
        message = Message.create(ids.make(), author.id, content, at(minutes))
        return model.append_message(header.id, message)

    return _post
