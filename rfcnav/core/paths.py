"""Tilde expansion for configured filesystem paths."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from rfcnav.core.accounts import (
    ACCOUNT_DATABASE,
    default_directory_service,
    read_account_database,
)
from rfcnav.core.interfaces import DirectoryServiceInterface
from rfcnav.core.models import UserRecord

LOGGER = logging.getLogger("rfcnav.core.paths")


class UserList:
    """Lazily built mapping of login name to account record.

    The listing merges the system account database with any records from
    the platform directory service whose ids are not already present.
    """

    def __init__(
        self,
        account_database: Path = ACCOUNT_DATABASE,
        directory_service: DirectoryServiceInterface | None = None,
    ):
        self.account_database = account_database
        self.directory_service = directory_service or default_directory_service()
        self._users: dict[str, UserRecord] | None = None
        self._loaded = False

    def get(self) -> dict[str, UserRecord] | None:
        """Return the cached user list, building it on first use.

        Returns:
            Mapping of login name to record, or None if no records could be
            obtained from any source
        """
        if not self._loaded:
            self._users = self._build()
            self._loaded = True
        return self._users

    def invalidate(self) -> None:
        """Drop the cached listing so the next lookup rebuilds it."""
        self._users = None
        self._loaded = False

    def lookup(self, name: str) -> UserRecord | None:
        users = self.get()
        if users is None:
            return None
        return users.get(name)

    def _build(self) -> dict[str, UserRecord] | None:
        users = read_account_database(self.account_database)
        known_ids = {record.uid for record in users.values() if record.uid is not None}

        for record in self.directory_service.list_users():
            if record.uid is not None and record.uid in known_ids:
                continue
            if record.name in users:
                continue
            users[record.name] = record
            if record.uid is not None:
                known_ids.add(record.uid)

        if not users:
            LOGGER.debug("No user records available for tilde expansion")
            return None
        LOGGER.debug(f"Loaded {len(users)} user records")
        return users


class PathResolver:
    """Expand ``~`` and ``~user`` prefixes in configured paths."""

    def __init__(self, user_list: UserList | None = None, home: Path | None = None):
        """Initialize the resolver.

        Args:
            user_list: Cache used for ``~user`` lookups (built lazily)
            home: Home directory used for ``~``; defaults to the current user's
        """
        self._user_list = user_list
        self._home = home

    @property
    def user_list(self) -> UserList:
        if self._user_list is None:
            self._user_list = UserList()
        return self._user_list

    @property
    def home(self) -> str:
        return str(self._home if self._home is not None else Path.home())

    def expand_path(self, path: str) -> str:
        """Expand a leading tilde in ``path``.

        Args:
            path: Path as entered in configuration

        Returns:
            The normalized path with ``~`` or ``~user`` replaced by a home
            directory; other inputs are returned normalized but unexpanded
        """
        if not path:
            return ""

        path = os.path.normpath(path)
        if len(path) > 1:
            path = path.rstrip("/") or "/"

        if path == "~":
            return self.home
        if path.startswith("~/"):
            return os.path.join(self.home, path[2:])
        if not path.startswith("~"):
            return path

        name, sep, rest = path[1:].partition("/")
        if name in ("-", "+"):
            return path

        record = self.user_list.lookup(name)
        if record is None or not record.home or not os.path.isdir(record.home):
            return path
        return os.path.join(record.home, rest) if sep else record.home
