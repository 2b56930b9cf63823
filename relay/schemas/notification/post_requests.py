"""Request schemas for interactions on posts and comments.

Each notifies the owner of the post or comment. A self-interaction (actor
is the owner) is accepted and answered with ``sent: 0``.
"""

from pydantic import Field

from relay.events import CommentLike, CommentReply, PostComment, PostReaction, PostShare
from relay.schemas.base_schema_model import BaseSchemaModel


class PostInteractionRequest(BaseSchemaModel):
    """Fields shared by post-scoped interaction requests.

    ``owner_id`` may be omitted; it is then read from the posts table.
    """

    post_id: str = Field(..., min_length=1, description="Post ID")
    owner_id: str | None = Field(None, description="Post author")
    actor_id: str = Field(..., min_length=1, description="User who interacted")
    actor_name: str | None = Field(None, description="Display name of the actor")


class PostCommentRequest(PostInteractionRequest):
    comment_text: str | None = Field(None, description="Text of the new comment")
    comment_id: str | None = Field(None, description="ID of the new comment")

    def to_event(self) -> PostComment:
        return PostComment(
            post_id=self.post_id,
            actor_id=self.actor_id,
            owner_id=self.owner_id,
            actor_name=self.actor_name,
            comment_text=self.comment_text,
            comment_id=self.comment_id,
        )


class PostReactionRequest(PostInteractionRequest):
    reaction_type: str | None = Field(
        None, description="Reaction code (like, love, haha, wow, sad, angry)"
    )

    def to_event(self) -> PostReaction:
        return PostReaction(
            post_id=self.post_id,
            actor_id=self.actor_id,
            owner_id=self.owner_id,
            actor_name=self.actor_name,
            reaction_type=self.reaction_type,
        )


class PostShareRequest(PostInteractionRequest):
    def to_event(self) -> PostShare:
        return PostShare(
            post_id=self.post_id,
            actor_id=self.actor_id,
            owner_id=self.owner_id,
            actor_name=self.actor_name,
        )


class CommentInteractionRequest(BaseSchemaModel):
    """Fields shared by comment-scoped requests; ``owner_id`` is the comment author."""

    post_id: str = Field(..., min_length=1, description="Post ID")
    comment_id: str = Field(..., min_length=1, description="Comment ID")
    owner_id: str = Field(..., min_length=1, description="Comment author")
    actor_id: str = Field(..., min_length=1, description="User who interacted")
    actor_name: str | None = Field(None, description="Display name of the actor")


class CommentReplyRequest(CommentInteractionRequest):
    reply_text: str | None = Field(None, description="Text of the reply")

    def to_event(self) -> CommentReply:
        return CommentReply(
            post_id=self.post_id,
            comment_id=self.comment_id,
            owner_id=self.owner_id,
            actor_id=self.actor_id,
            actor_name=self.actor_name,
            reply_text=self.reply_text,
        )


class CommentLikeRequest(CommentInteractionRequest):
    def to_event(self) -> CommentLike:
        return CommentLike(
            post_id=self.post_id,
            comment_id=self.comment_id,
            owner_id=self.owner_id,
            actor_id=self.actor_id,
            actor_name=self.actor_name,
        )
