# ABOUTME: Data model for app client credentials and synchronization results
# ABOUTME: Defines the credential record persisted under auth.cognito

"""Data model shared by the lister, fetcher, merger and writer."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

# Field names of the record as persisted inside the parameter document
PERSISTED_FIELDS = ("url", "clientId", "clientSecret")


@dataclass(frozen=True)
class AppClientIdentity:
    """An app client as returned by ListUserPoolClients."""

    user_pool_id: str
    client_id: str
    client_name: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "AppClientIdentity":
        """Create an identity from a UserPoolClients entry."""
        return cls(
            user_pool_id=data["UserPoolId"],
            client_id=data["ClientId"],
            client_name=data.get("ClientName", ""),
        )


@dataclass(frozen=True)
class CredentialRecord:
    """Token endpoint and client credentials of one app client."""

    url: str
    client_id: str
    client_secret: str

    def to_dict(self) -> dict[str, str]:
        """Convert to the persisted camelCase shape."""
        return {"url": self.url, "clientId": self.client_id, "clientSecret": self.client_secret}

    @classmethod
    def from_dict(cls, data: Any) -> "CredentialRecord | None":
        """Create a record from its persisted shape, or None if it is not one."""
        if not isinstance(data, dict):
            return None
        if any(not isinstance(data.get(key), str) for key in PERSISTED_FIELDS):
            return None
        return cls(url=data["url"], client_id=data["clientId"], client_secret=data["clientSecret"])

    def masked(self) -> dict[str, str]:
        """Persisted shape with the secret hidden, for logs and display."""
        return {**self.to_dict(), "clientSecret": mask_secret(self.client_secret)}


def mask_secret(secret: str) -> str:
    """Hide all but the last four characters of a secret."""
    if not secret:
        return ""
    if len(secret) <= 4:
        return "*" * len(secret)
    return "*" * 8 + secret[-4:]


class SyncOutcome(str, Enum):
    """Terminal state of a synchronization run."""

    WRITTEN = "written"
    UNCHANGED = "unchanged"
    NOT_FOUND = "not_found"
    FAILED = "failed"
    CONFIGURATION_ERROR = "configuration_error"


class SyncResult:
    """Result of a synchronization run."""

    def __init__(
        self,
        outcome: SyncOutcome,
        parameter_name: str = None,
        message: str = None,
        record: CredentialRecord = None,
        version: int = None,
        dry_run: bool = False,
    ):
        self.outcome = outcome
        self.parameter_name = parameter_name
        self.message = message
        self.record = record
        self.version = version
        self.dry_run = dry_run

    @property
    def success(self) -> bool:
        return self.outcome in (SyncOutcome.WRITTEN, SyncOutcome.UNCHANGED)

    def to_dict(self) -> dict[str, Any]:
        """Convert result to a JSON-friendly dictionary."""
        return {
            "outcome": self.outcome.value,
            "success": self.success,
            "parameter_name": self.parameter_name,
            "message": self.message,
            "credentials": self.record.masked() if self.record else None,
            "version": self.version,
            "dry_run": self.dry_run,
        }

    def __repr__(self) -> str:
        return f"SyncResult(outcome={self.outcome.value!r}, parameter_name={self.parameter_name!r})"
