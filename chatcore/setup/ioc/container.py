"""
Dishka DI Container Setup.

- Scope.APP: one registry, tracker, permission engine and Model per container
- Scope.REQUEST: a fresh handler per request, all sharing the APP-scoped Model

Flow:
  Container → provides → Model(EntityRegistry, ActivityTracker, PermissionEngine)
                                    ↓
                  TogglePermissionHandler, StatusUpdateHandler, ...

Usage:
    container = create_container()
    with container() as request_container:
        handler = request_container.get(TogglePermissionHandler)
        handler.execute(TogglePermissionCommand(...))
    container.close()
"""

from dishka import Container, Provider, Scope, make_container, provide

from chatcore.application.commands.following import (
    FollowConversationHandler,
    FollowUserHandler,
    UnfollowConversationHandler,
    UnfollowUserHandler,
)
from chatcore.application.commands.permissions import TogglePermissionHandler
from chatcore.application.commands.registration import (
    AddBotHandler,
    PostMessageHandler,
    RegisterUserHandler,
    StartConversationHandler,
)
from chatcore.application.model import Model
from chatcore.application.queries.conversations import (
    GetConversationMessagesHandler,
    ListConversationsHandler,
)
from chatcore.application.queries.server import GetServerInfoHandler
from chatcore.application.queries.status import StatusUpdateHandler
from chatcore.config.settings import Config
from chatcore.domain.services import ActivityTracker, PermissionEngine
from chatcore.infrastructure.store import EntityRegistry


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers the model and all command/query handlers.
    """

    # ==================== STATE ====================

    @provide(scope=Scope.APP)
    def get_registry(self) -> EntityRegistry:
        return EntityRegistry()

    @provide(scope=Scope.APP)
    def get_tracker(self, registry: EntityRegistry) -> ActivityTracker:
        """Tracker shares the registry lock so status reads and appends serialize."""
        return ActivityTracker(registry.lock)

    @provide(scope=Scope.APP)
    def get_permission_engine(self) -> PermissionEngine:
        return PermissionEngine()

    @provide(scope=Scope.APP)
    def get_model(
        self,
        registry: EntityRegistry,
        tracker: ActivityTracker,
        permissions: PermissionEngine,
    ) -> Model:
        return Model(
            registry=registry,
            tracker=tracker,
            permissions=permissions,
            version=Config.SERVER_VERSION,
        )

    # ==================== COMMAND HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_register_user_handler(self, model: Model) -> RegisterUserHandler:
        return RegisterUserHandler(model)

    @provide(scope=Scope.REQUEST)
    def get_start_conversation_handler(self, model: Model) -> StartConversationHandler:
        return StartConversationHandler(model)

    @provide(scope=Scope.REQUEST)
    def get_post_message_handler(self, model: Model) -> PostMessageHandler:
        return PostMessageHandler(model)

    @provide(scope=Scope.REQUEST)
    def get_add_bot_handler(self, model: Model) -> AddBotHandler:
        return AddBotHandler(model)

    @provide(scope=Scope.REQUEST)
    def get_toggle_permission_handler(self, model: Model) -> TogglePermissionHandler:
        return TogglePermissionHandler(model)

    @provide(scope=Scope.REQUEST)
    def get_follow_user_handler(self, model: Model) -> FollowUserHandler:
        return FollowUserHandler(model)

    @provide(scope=Scope.REQUEST)
    def get_unfollow_user_handler(self, model: Model) -> UnfollowUserHandler:
        return UnfollowUserHandler(model)

    @provide(scope=Scope.REQUEST)
    def get_follow_conversation_handler(
        self, model: Model
    ) -> FollowConversationHandler:
        return FollowConversationHandler(model)

    @provide(scope=Scope.REQUEST)
    def get_unfollow_conversation_handler(
        self, model: Model
    ) -> UnfollowConversationHandler:
        return UnfollowConversationHandler(model)

    # ==================== QUERY HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_status_update_handler(self, model: Model) -> StatusUpdateHandler:
        return StatusUpdateHandler(model)

    @provide(scope=Scope.REQUEST)
    def get_server_info_handler(self, model: Model) -> GetServerInfoHandler:
        return GetServerInfoHandler(model)

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_handler(self, model: Model) -> ListConversationsHandler:
        return ListConversationsHandler(model)

    @provide(scope=Scope.REQUEST)
    def get_conversation_messages_handler(
        self, model: Model
    ) -> GetConversationMessagesHandler:
        return GetConversationMessagesHandler(model)


def create_container() -> Container:
    """
    Create and configure the DI container.

    Call this ONCE at startup; every container holds its own Model.
    """
    return make_container(AppProvider())
