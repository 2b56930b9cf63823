"""User directory: recipient id to push delivery address."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from relay.models import User


@dataclass(frozen=True)
class DirectoryEntry:
    """Directory answer for one recipient.

    ``exists=False`` means the id is unknown (a data-consistency problem);
    ``exists=True`` with ``address=None`` means the user simply has not
    registered a device for push.
    """

    exists: bool
    address: str | None = None

    @property
    def has_address(self) -> bool:
        return self.exists and bool(self.address)


class Directory(ABC):
    """Resolves recipient ids to delivery addresses."""

    @abstractmethod
    def resolve(self, recipient_id: str) -> DirectoryEntry:
        """Look up one recipient."""


class OrmDirectory(Directory):
    """Directory backed by the ``users`` table."""

    def resolve(self, recipient_id: str) -> DirectoryEntry:
        """Look up the recipient's latest push token.

        Args:
            recipient_id: User id to resolve

        Returns:
            DirectoryEntry with the existence flag and token (if any)
        """
        row = User.objects.filter(user_id=recipient_id).values("fcm_token").first()
        if row is None:
            return DirectoryEntry(exists=False)
        return DirectoryEntry(exists=True, address=row["fcm_token"] or None)
