"""Abstract interface for directory account sources."""

from abc import ABC, abstractmethod
from typing import List

from pwnotify.models.account_record import AccountRecord


class DirectorySourceError(Exception):
    """Raised when the directory cannot be reached or queried."""

    pass


class DirectorySource(ABC):
    """
    Supplies the user accounts to evaluate.

    Implementations hide how the directory is reached; the notifier only
    needs a reachability check and a one-shot fetch.
    """

    @abstractmethod
    def check(self) -> None:
        """
        Verify the directory is reachable.

        Raises:
            DirectorySourceError: If the directory cannot be reached
        """
        pass

    @abstractmethod
    def fetch_accounts(self) -> List[AccountRecord]:
        """
        Fetch all candidate accounts.

        Returns:
            Accounts in directory order; an empty list means no work

        Raises:
            DirectorySourceError: If the query cannot be executed
        """
        pass

