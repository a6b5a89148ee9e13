"""Account database parsing and platform directory services."""

from __future__ import annotations

import logging
import plistlib
import subprocess
import sys
from pathlib import Path

from rfcnav.core.interfaces import DirectoryServiceInterface
from rfcnav.core.models import UserRecord

LOGGER = logging.getLogger("rfcnav.core.accounts")

ACCOUNT_DATABASE = Path("/etc/passwd")

# name:password:uid:gid:gecos:home:shell
_PASSWD_FIELDS = 7
# name:password:uid:gid:class:change:expire:gecos:home:shell (BSD master.passwd)
_MASTER_PASSWD_FIELDS = 10

_DS_PREFIX = "dsAttrTypeStandard:"
_DS_ATTRIBUTES = {
    "RecordName": "name",
    "UniqueID": "uid",
    "PrimaryGroupID": "gid",
    "NFSHomeDirectory": "home",
    "UserShell": "shell",
    "RealName": "gecos",
}


def _as_int(value: str) -> int | None:
    value = value.strip()
    if not value:
        return None
    return int(value)


def parse_account_line(line: str) -> UserRecord | None:
    """Parse one colon-delimited account record.

    Returns None for blank lines, comments, and lines with an unexpected
    field count.

    Raises:
        ValueError: If the uid or gid field is not an integer
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return None

    fields = line.split(":")
    if len(fields) == _PASSWD_FIELDS:
        name, password, uid, gid, gecos, home, shell = fields
        return UserRecord(
            name=name,
            password=password,
            uid=_as_int(uid),
            gid=_as_int(gid),
            gecos=gecos,
            home=home,
            shell=shell,
        )
    if len(fields) == _MASTER_PASSWD_FIELDS:
        name, password, uid, gid, user_class, change, expire, gecos, home, shell = fields
        return UserRecord(
            name=name,
            password=password,
            uid=_as_int(uid),
            gid=_as_int(gid),
            gecos=gecos,
            home=home,
            shell=shell,
            user_class=user_class,
            change=change,
            expire=expire,
        )
    return None


def parse_account_database(text: str) -> dict[str, UserRecord]:
    """Parse account database contents into records keyed by login name."""
    users: dict[str, UserRecord] = {}
    for line_number, line in enumerate(text.splitlines(), 1):
        try:
            record = parse_account_line(line)
        except ValueError as error:
            LOGGER.warning(f"Skipping malformed account record on line {line_number}: {error}")
            continue
        if record is not None and record.name:
            users.setdefault(record.name, record)
    return users


def read_account_database(path: Path = ACCOUNT_DATABASE) -> dict[str, UserRecord]:
    """Read and parse the system account database. Missing files yield no users."""
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as error:
        LOGGER.debug(f"Account database unavailable at {path}: {error}")
        return {}
    return parse_account_database(text)


def _first_value(value: str | list[str]) -> str:
    if isinstance(value, list):
        return str(value[0]) if value else ""
    return str(value)


def parse_directory_record(record: dict) -> UserRecord:
    """Normalize one directory-service record into a UserRecord.

    Each attribute maps to either a single string or a list of strings.

    Raises:
        ValueError: If the record has no login name or a non-numeric id
    """
    if not isinstance(record, dict):
        raise ValueError(f"Expected a mapping, got {type(record).__name__}")

    values: dict[str, str] = {}
    for key, value in record.items():
        attribute = key.removeprefix(_DS_PREFIX)
        field_name = _DS_ATTRIBUTES.get(attribute)
        if field_name is not None:
            values[field_name] = _first_value(value)

    name = values.get("name", "")
    if not name:
        raise ValueError("Directory record has no RecordName")

    return UserRecord(
        name=name,
        uid=_as_int(values.get("uid", "")),
        gid=_as_int(values.get("gid", "")),
        gecos=values.get("gecos", ""),
        home=values.get("home", ""),
        shell=values.get("shell", ""),
    )


class NullDirectoryService(DirectoryServiceInterface):
    """Directory service for platforms without one."""

    @property
    def name(self) -> str:
        return "none"

    def list_users(self) -> list[UserRecord]:
        return []


class DsclDirectoryService(DirectoryServiceInterface):
    """Enumerate users from the macOS Directory Service via ``dscl``."""

    def __init__(self, node: str = ".", timeout: int = 10):
        """Initialize the dscl reader.

        Args:
            node: Directory node to query
            timeout: Seconds to wait for dscl
        """
        self.node = node
        self.timeout = timeout

    @property
    def name(self) -> str:
        return "dscl"

    def _command(self) -> list[str]:
        return ["dscl", "-plist", self.node, "-readall", "/Users", *_DS_ATTRIBUTES]

    def list_users(self) -> list[UserRecord]:
        try:
            result = subprocess.run(
                self._command(),
                capture_output=True,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as error:
            LOGGER.warning(f"Directory service lookup failed: {error}")
            return []

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            LOGGER.warning(f"dscl exited with status {result.returncode}: {stderr}")
            return []

        return self.parse_payload(result.stdout)

    @staticmethod
    def parse_payload(payload: bytes) -> list[UserRecord]:
        """Decode a plist list-of-records payload, skipping bad records."""
        try:
            records = plistlib.loads(payload)
        except (plistlib.InvalidFileException, ValueError) as error:
            LOGGER.warning(f"Could not decode directory service payload: {error}")
            return []

        if not isinstance(records, list):
            LOGGER.warning("Directory service payload is not a list of records")
            return []

        users = []
        for index, record in enumerate(records):
            try:
                users.append(parse_directory_record(record))
            except ValueError as error:
                LOGGER.warning(f"Skipping directory record {index}: {error}")
        return users


# Registry of available directory services
_DIRECTORY_SERVICE_REGISTRY: dict[str, type[DirectoryServiceInterface]] = {}


def register_directory_service(
    name: str,
    service_class: type[DirectoryServiceInterface],
) -> None:
    """Register a directory service class.

    Args:
        name: Name to register the service under
        service_class: Class implementing DirectoryServiceInterface
    """
    _DIRECTORY_SERVICE_REGISTRY[name] = service_class


def get_directory_service(name: str, **kwargs) -> DirectoryServiceInterface:
    """Get a directory service instance by name.

    Raises:
        ValueError: If the name is not registered
    """
    if name not in _DIRECTORY_SERVICE_REGISTRY:
        available = list(_DIRECTORY_SERVICE_REGISTRY.keys())
        raise ValueError(f"Unknown directory service '{name}'. Available: {available}")
    return _DIRECTORY_SERVICE_REGISTRY[name](**kwargs)


def default_directory_service(platform: str | None = None) -> DirectoryServiceInterface:
    """Select the directory service for the running platform."""
    platform = platform or sys.platform
    if platform == "darwin":
        return get_directory_service("dscl")
    return get_directory_service("none")


register_directory_service("none", NullDirectoryService)
register_directory_service("dscl", DsclDirectoryService)
