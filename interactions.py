class InteractionType:
    PONG: int = 1
    CHANNEL_MESSAGE_WITH_SOURCE: int = 4
    DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE: int = 5
    DEFERRED_UPDATE_MESSAGE: int = 6
    UPDATE_MESSAGE: int = 7
    APPLICATION_COMMAND_AUTOCOMPLETE_RESULT: int = 8
    MODAL: int = 9
    PREMIUM_REQUIRED: int = 10


class InteractionFlag:
    SUPPRESS_EMBEDS: int = 1 << 2
    EPHEMERAL: int = 1 << 6
    SUPPRESS_NOTIFICATIONS: int = 1 << 12


def ephemeral_flags(ephemeral: bool | None) -> int:
    # Replaces whatever flags the caller sent
    return InteractionFlag.EPHEMERAL if ephemeral else 0
