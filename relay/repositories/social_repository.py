"""Repository for the chat application's conversation and follow data."""

from dataclasses import dataclass

from relay.models import Chat, Follower, Post


@dataclass(frozen=True)
class ChatMembers:
    """Member and mute lists of one conversation."""

    member_ids: frozenset[str]
    muted_ids: frozenset[str]


class SocialRepository:
    """Repository for encapsulating conversation, follower and post queries.

    Each lookup returns ``None`` (or an empty list) when the row is missing;
    turning that into a not-found error is the caller's decision.
    """

    def get_chat_members(self, chat_id: str) -> ChatMembers | None:
        """Return the members and muted members of a chat.

        Args:
            chat_id: Conversation id

        Returns:
            ChatMembers, or None if the chat does not exist
        """
        row = (
            Chat.objects.filter(chat_id=chat_id)
            .values("member_ids", "muted_ids")
            .first()
        )
        if row is None:
            return None
        return ChatMembers(
            member_ids=frozenset(str(uid) for uid in row["member_ids"] or []),
            muted_ids=frozenset(str(uid) for uid in row["muted_ids"] or []),
        )

    def get_follower_ids(self, user_id: str) -> list[str]:
        """Return the ids of every user following ``user_id``."""
        return list(
            Follower.objects.filter(following_id=user_id).values_list(
                "follower_id", flat=True
            )
        )

    def get_post_owner(self, post_id: str) -> str | None:
        """Return the author of a post, or None if the post does not exist."""
        return (
            Post.objects.filter(post_id=post_id)
            .values_list("owner_id", flat=True)
            .first()
        )
