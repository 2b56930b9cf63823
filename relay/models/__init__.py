"""Database models for the relay application."""

from relay.models.chat import Chat
from relay.models.follower import Follower
from relay.models.notification import Notification
from relay.models.post import Post
from relay.models.user import User

__all__ = ["Chat", "Follower", "Notification", "Post", "User"]
