"""Post model."""

from django.db import models


class Post(models.Model):
    """Post row from the chat application's ``posts`` table (owner lookup only)."""

    post_id = models.CharField(primary_key=True, max_length=128)
    owner_id = models.CharField(max_length=128)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "posts"
        managed = False

    def __str__(self) -> str:
        """Return string representation of post."""
        return f"Post {self.post_id} by {self.owner_id}"
