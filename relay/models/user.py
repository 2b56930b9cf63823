"""User directory model."""

from django.db import models


class User(models.Model):
    """User row from the chat application's ``users`` table.

    The relay only reads it: the directory resolves a user id to its most
    recently registered push token (``fcm_token``, latest registration wins).
    This model is unmanaged as the schema is owned by the chat application.
    """

    user_id = models.CharField(primary_key=True, max_length=128)
    display_name = models.CharField(max_length=255, default="", blank=True)
    email = models.EmailField(max_length=255, default="", blank=True)
    fcm_token = models.TextField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "users"
        managed = False

    def __str__(self) -> str:
        """Return string representation of user."""
        return self.display_name or self.user_id

    def __repr__(self) -> str:
        """Return detailed representation of user."""
        return f"<User(user_id='{self.user_id}', has_token={bool(self.fcm_token)})>"
