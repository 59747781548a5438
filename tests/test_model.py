import threading
from datetime import datetime, timedelta

import pytest

from chatcore.application.model import Model
from chatcore.domain.entities import BotUser, ConversationHeader, Message, User
from chatcore.domain.exceptions import AccessDeniedError, EntityNotFoundError
from chatcore.domain.services import PermissionEngine
from chatcore.domain.value_objects import PERMISSION_DENIED, Permission, Uuid


def test_add_user_visible_in_every_index(model, ids, when):
    names = ["Dora", "eli", "Fay", "dora"]
    users = [
        model.add_user(User.create(ids.make(), name, when(i)))
        for i, name in enumerate(names)
    ]

    for user in users:
        assert model.user_by_id().first(user.id) is user
        assert user in model.user_by_time().at(user.creation)
        assert user in model.user_by_text().at(user.name.swapcase())
        assert model.tracked_conversations(user.id) == {}


def test_add_conversation_links_creator_and_payload(model, alice, conversation, when):
    assert conversation.id in alice.created_conversations
    assert model.conversation_by_id().first(conversation.id) is conversation
    assert model.conversation_by_time().first(when(5)) is conversation
    assert model.conversation_by_text().first("GENERAL") is conversation

    payload = model.conversation_payload_by_id().first(conversation.id)
    assert payload.message_ids == []
    assert payload.first_message is None


def test_add_message_only_indexes(model, ids, alice, conversation, when):
    message = model.add_message(Message.create(ids.make(), alice.id, "loose", when(6)))

    assert model.message_by_id().first(message.id) is message
    assert model.message_by_text().first("LOOSE") is message
    assert conversation.size == 0, "add_message leaves linkage to the caller"
    assert model.conversation_messages(conversation.id) == []


def test_message_chain_round_trip(model, alice, conversation, post):
    m1 = post(conversation, alice, "first", minutes=10)
    assert model.conversation_messages(conversation.id) == [m1]

    m2 = post(conversation, alice, "second", minutes=11)
    assert model.conversation_messages(conversation.id) == [m1, m2]

    payload = model.conversation_payload_by_id().first(conversation.id)
    assert payload.first_message == m1.id
    assert payload.last_message == m2.id


def test_size_matches_chain_length(model, alice, conversation, post):
    for minute in range(4):
        post(conversation, alice, f"m{minute}", minutes=10 + minute)

    payload = model.conversation_payload_by_id().first(conversation.id)
    assert conversation.size == len(payload) == 4


def test_append_to_missing_conversation(model, ids, alice):
    message = Message.create(ids.make(), alice.id, "lost")
    with pytest.raises(EntityNotFoundError):
        model.append_message(Uuid(999), message)
    assert model.message_by_id().first(message.id) is None


def test_toggle_permission_property(model, alice, bob, carol, conversation):
    # actor without OWNER cannot set OWNER
    result = model.toggle_permission(
        bob.id, carol.id, Permission.OWNER, conversation.id
    )
    assert result == PERMISSION_DENIED
    assert conversation.get_permission(carol.id) == 0

    # owner can
    result = model.toggle_permission(
        alice.id, carol.id, Permission.OWNER, conversation.id
    )
    assert result & Permission.OWNER


def test_toggle_permission_scenario(model, alice, bob, carol, conversation):
    assert model.toggle_permission(alice.id, bob.id, 0b011, conversation.id) == 0b011

    # carol holds only the admin bit
    model.toggle_permission(alice.id, carol.id, Permission.ADMIN, conversation.id)
    assert conversation.get_permission(carol.id) == 0b010

    denied = model.toggle_permission(carol.id, bob.id, 0b100, conversation.id)
    assert denied == PERMISSION_DENIED
    assert conversation.get_permission(bob.id) == 0b011


def test_toggle_permission_twice_is_identity(model, alice, bob, conversation):
    original = conversation.get_permission(bob.id)
    model.toggle_permission(alice.id, bob.id, 0b111, conversation.id)
    model.toggle_permission(alice.id, bob.id, 0b111, conversation.id)
    assert conversation.get_permission(bob.id) == original


def test_toggle_permission_missing_conversation(model, alice, bob):
    with pytest.raises(EntityNotFoundError):
        model.toggle_permission(alice.id, bob.id, Permission.MEMBER, Uuid(404))


def test_status_update_scenario(model, alice, bob, conversation, post):
    for minute in range(5):
        post(conversation, alice, f"old {minute}", minutes=10 + minute)
    assert conversation.size == 5

    model.follow_conversation(bob.id, conversation.id)
    for minute in range(3):
        post(conversation, alice, f"new {minute}", minutes=20 + minute)
    assert conversation.size == 8

    first = model.status_update(bob.id)
    second = model.status_update(bob.id)
    assert first == "CONVERSATION General: You have 3 new messages!\n"
    assert second == "CONVERSATION General: You have 0 new messages!\n"


def test_unfollow_conversation_drops_it_from_status(model, bob, conversation):
    model.follow_conversation(bob.id, conversation.id)
    assert model.unfollow_conversation(bob.id, conversation.id) is True
    assert "General" not in model.status_update(bob.id)


def test_follow_user_adds_user_lines(model, ids, alice, bob, conversation):
    model.follow_user(bob.id, alice.id)
    second = ConversationHeader.create(ids.make(), alice.id, "Second")
    model.add_conversation(alice, second)

    assert model.status_update(bob.id) == "USER Alice: You have 1 new conversations!\n"
    assert model.followed_users(bob.id) == {alice.id: 2}

    assert model.unfollow_user(bob.id, alice.id) is True
    assert model.status_update(bob.id) == ""


def test_status_combines_conversations_then_users(
    model, alice, bob, conversation, post
):
    model.follow_conversation(bob.id, conversation.id)
    model.follow_user(bob.id, alice.id)
    post(conversation, alice)

    lines = model.status_update(bob.id).splitlines()
    assert lines == [
        "CONVERSATION General: You have 1 new messages!",
        "USER Alice: You have 0 new conversations!",
    ]


def test_follow_graph_requires_known_entities(model, alice, conversation):
    with pytest.raises(EntityNotFoundError):
        model.follow_user(alice.id, Uuid(404))
    with pytest.raises(EntityNotFoundError):
        model.follow_conversation(alice.id, Uuid(404))
    with pytest.raises(EntityNotFoundError):
        model.follow_conversation(Uuid(404), conversation.id)
    with pytest.raises(EntityNotFoundError):
        model.status_update(Uuid(404))


def test_add_bot(model, ids, conversation):
    bot = BotUser.create(ids.make(), "Helper")
    assert model.add_bot(bot, conversation.id) is bot
    model.add_bot(bot, conversation.id)

    payload = model.conversation_payload_by_id().first(conversation.id)
    assert payload.bots == [bot], "A bot is attached once"


def test_add_bot_missing_conversation(model, ids):
    with pytest.raises(EntityNotFoundError):
        model.add_bot(BotUser.create(ids.make(), "Helper"), Uuid(404))


def test_version_and_uptime(when):
    ticks = iter([when(0), when(3)])
    model = Model(version="9.9", clock=lambda: next(ticks))

    assert model.version() == "9.9"
    assert model.start_time() == when(0)
    assert model.uptime() == timedelta(minutes=3)


def test_failed_add_user_leaves_no_trace(model, ids, alice):
    naive = User.create(ids.make(), "Naive", datetime(2024, 1, 1, 12, 30))

    with pytest.raises(TypeError):
        model.add_user(naive)

    assert model.user_by_id().first(naive.id) is None
    assert model.user_by_text().first("naive") is None
    assert len(model.user_by_id()) == len(model.user_by_time()) == 1
    with pytest.raises(EntityNotFoundError):
        model.tracked_conversations(naive.id)


def test_failed_add_conversation_leaves_no_trace(model, ids, alice, conversation):
    header = ConversationHeader.create(
        ids.make(), alice.id, "Naive", datetime(2024, 1, 1, 12, 30)
    )

    with pytest.raises(TypeError):
        model.add_conversation(alice, header)

    assert header.id not in alice.created_conversations
    assert model.conversation_by_id().first(header.id) is None
    assert model.conversation_payload_by_id().first(header.id) is None
    assert len(model.conversation_by_text()) == 1


def test_re_adding_user_resets_watch_lists(model, alice, bob, conversation):
    model.follow_conversation(alice.id, conversation.id)
    model.follow_user(alice.id, bob.id)

    model.add_user(alice)

    assert model.tracked_conversations(alice.id) == {}
    assert model.followed_users(alice.id) == {}


def test_post_message_requires_participant(model, ids, bob, conversation, when):
    message = Message.create(ids.make(), bob.id, "let me in", when(10))

    with pytest.raises(AccessDeniedError):
        model.post_message(conversation.id, message)

    assert conversation.size == 0
    assert model.message_by_id().first(message.id) is None


class _RevokeDuringCheck(PermissionEngine):
    """Runs `revoke` on another thread while the participant check is in progress."""

    def __init__(self):
        super().__init__()
        self.revoke = None
        self.revoker = None
        self.revoke_waited = None

    def is_participant(self, header, user):
        allowed = super().is_participant(header, user)
        if self.revoke is not None and self.revoker is None:
            self.revoker = threading.Thread(target=self.revoke)
            self.revoker.start()
            self.revoker.join(timeout=0.2)
            self.revoke_waited = self.revoker.is_alive()
        return allowed


def test_post_message_check_and_append_are_atomic(ids, when):
    engine = _RevokeDuringCheck()
    model = Model(permissions=engine)
    alice = model.add_user(User.create(ids.make(), "Alice", when(0)))
    bob = model.add_user(User.create(ids.make(), "Bob", when(1)))
    header = model.add_conversation(
        alice, ConversationHeader.create(ids.make(), alice.id, "General", when(5))
    )
    model.toggle_permission(alice.id, bob.id, Permission.MEMBER, header.id)
    engine.revoke = lambda: model.toggle_permission(
        alice.id, bob.id, Permission.MEMBER, header.id
    )

    message = model.post_message(
        header.id, Message.create(ids.make(), bob.id, "hi", when(10))
    )
    engine.revoker.join()

    assert engine.revoke_waited, "A revoke cannot land between check and append"
    assert model.conversation_messages(header.id) == [message]
    assert header.get_permission(bob.id) == 0


def test_concurrent_add_user_never_diverges(model, when):
    stop = threading.Event()
    diverged = []

    def writer(base):
        for i in range(200):
            model.add_user(User.create(Uuid(base + i), f"user-{base + i}", when(i)))

    def reader():
        while not stop.is_set():
            for user in model.user_by_id().all():
                if user not in model.user_by_time().at(user.creation):
                    diverged.append(("time", user.id))
                if user not in model.user_by_text().at(user.name):
                    diverged.append(("text", user.id))

    readers = [threading.Thread(target=reader) for _ in range(2)]
    writers = [threading.Thread(target=writer, args=(n * 1000,)) for n in range(4)]
    for thread in readers + writers:
        thread.start()
    for thread in writers:
        thread.join()
    stop.set()
    for thread in readers:
        thread.join()

    assert diverged == []
    assert len(model.user_by_id()) == len(model.user_by_time()) == 800
    assert len(model.user_by_text()) == 800


def test_concurrent_toggles_are_not_lost(model, alice, bob, carol, conversation):
    granted = []

    def toggler(actor, requests):
        for request in requests:
            result = model.toggle_permission(actor.id, bob.id, request, conversation.id)
            if result != PERMISSION_DENIED:
                granted.append(request)

    requests = [Permission.MEMBER, Permission.ADMIN, 0b011, Permission.OWNER] * 50
    threads = [
        threading.Thread(target=toggler, args=(actor, requests))
        for actor in (alice, alice, carol, carol)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    expected = 0
    for request in granted:
        expected ^= int(request)
    assert conversation.get_permission(bob.id) == expected
