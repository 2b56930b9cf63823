"""Builders for test data.

Events and ORM rows get realistic ids and names from Faker so tests only
spell out the fields they are about.
"""

from faker import Faker

from relay.models import Chat, Follower, Post, User

fake = Faker()


def new_user_id() -> str:
    """Return a random user id in the chat application's format."""
    return fake.unique.bothify(text="user_????????")


def push_token() -> str:
    return fake.sha256()


def create_user(user_id: str | None = None, fcm_token: str | None = "", **kwargs) -> User:
    """Create a ``users`` row; ``fcm_token=""`` generates a token."""
    if fcm_token == "":
        fcm_token = push_token()
    return User.objects.create(
        user_id=user_id or new_user_id(),
        display_name=kwargs.pop("display_name", fake.name()),
        email=kwargs.pop("email", fake.email()),
        fcm_token=fcm_token,
        **kwargs,
    )


def create_chat(chat_id: str, member_ids, muted_ids=(), **kwargs) -> Chat:
    return Chat.objects.create(
        chat_id=chat_id,
        name=kwargs.pop("name", fake.catch_phrase()),
        is_group=kwargs.pop("is_group", len(member_ids) > 2),
        member_ids=list(member_ids),
        muted_ids=list(muted_ids),
        **kwargs,
    )


def create_follow(follower_id: str, following_id: str) -> Follower:
    return Follower.objects.create(follower_id=follower_id, following_id=following_id)


def create_post(post_id: str, owner_id: str) -> Post:
    return Post.objects.create(post_id=post_id, owner_id=owner_id)
