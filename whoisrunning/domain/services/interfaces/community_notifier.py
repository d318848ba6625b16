"""Community notification port."""

from typing import Protocol


class ICommunityNotifier(Protocol):
    """Posts a plain-text message to the moderators' channel."""

    async def notify(self, content: str) -> None: ...
