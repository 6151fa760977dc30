"""Reading GCP service accounts out of secrets."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Mapping

from .constants import SERVICE_ACCOUNT_JSON_FIELD


class ServiceAccountError(ValueError):
    """Raised when a service account cannot be read or is incomplete."""


@dataclass
class Secret:
    """A named secret holding binary data fields."""

    name: str
    namespace: str
    data: Mapping[str, bytes] = field(default_factory=dict)


@dataclass(frozen=True)
class ServiceAccount:
    """A GCP service account: its raw JSON and the project it belongs to."""

    raw: bytes
    project_id: str


def read_service_account_secret(secret: Secret) -> bytes:
    """Return the service account JSON stored in the secret."""
    try:
        return secret.data[SERVICE_ACCOUNT_JSON_FIELD]
    except KeyError:
        raise ServiceAccountError(
            f"secret {secret.namespace}/{secret.name} doesn't have a service account json"
        ) from None


def _lookup_project_id(document: dict) -> object:
    if "project_id" in document:
        return document["project_id"]
    for key, value in document.items():
        if key.lower() == "project_id":
            return value
    return None


def extract_service_account_project_id(service_account_json: bytes | str) -> str:
    """Return the project id from a service account JSON document."""
    try:
        document = json.loads(service_account_json)
    except (ValueError, TypeError) as err:
        raise ServiceAccountError(f"invalid service account json: {err}") from err

    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise ServiceAccountError("service account json is not an object")

    project_id = _lookup_project_id(document)
    if project_id is None:
        project_id = ""
    if not isinstance(project_id, str):
        raise ServiceAccountError("project_id in service account json is not a string")
    if not project_id:
        raise ServiceAccountError("no service account specified")
    return project_id


def service_account_from_secret(secret: Secret) -> ServiceAccount:
    """Build a ServiceAccount from the JSON held in the secret."""
    data = read_service_account_secret(secret)
    return ServiceAccount(raw=data, project_id=extract_service_account_project_id(data))