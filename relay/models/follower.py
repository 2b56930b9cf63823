"""Follower relationship model."""

from typing import ClassVar

from django.db import models


class Follower(models.Model):
    """Follow edge from the chat application's ``followers`` table.

    Read as a reverse index: all rows with a given ``following_id`` are the
    audience of that user's new posts. Ids are kept as plain strings so a
    dangling edge never breaks the lookup.
    """

    follower_id = models.CharField(max_length=128)
    following_id = models.CharField(max_length=128, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "followers"
        managed = False
        unique_together: ClassVar[list[list[str]]] = [["follower_id", "following_id"]]

    def __str__(self) -> str:
        """Return string representation of follow relationship."""
        return f"{self.follower_id} follows {self.following_id}"
