"""Validation of the cloud provider secret holding a GCP service account."""

from __future__ import annotations

import json
import re
from typing import Mapping

SERVICE_ACCOUNT_JSON_FIELD = "serviceaccount.json"

PROJECT_ID_PATTERN = re.compile(r"^(?P<project>[a-z][a-z0-9-]{4,28}[a-z0-9])$")


class SecretValidationError(ValueError):
    """Raised when a cloud provider secret is not valid."""


def _extract_project_id(service_account_json: bytes | str) -> str:
    try:
        document = json.loads(service_account_json)
    except (ValueError, UnicodeDecodeError) as exc:
        raise SecretValidationError(f"could not parse service account JSON: {exc}") from exc
    project_id = document.get("project_id") if isinstance(document, dict) else None
    if not project_id or not isinstance(project_id, str):
        raise SecretValidationError("no project id specified")
    return project_id


def validate_cloud_provider_secret(data: Mapping[str, bytes | str]) -> str:
    """Check that the secret data holds a valid GCP service account; return its project ID."""
    try:
        service_account_json = data[SERVICE_ACCOUNT_JSON_FIELD]
    except KeyError:
        raise SecretValidationError(
            f'missing "{SERVICE_ACCOUNT_JSON_FIELD}" field in secret'
        ) from None

    project_id = _extract_project_id(service_account_json)
    if not PROJECT_ID_PATTERN.fullmatch(project_id):
        raise SecretValidationError(
            "service account project ID does not match the expected format "
            f"'{PROJECT_ID_PATTERN.pattern}'"
        )
    return project_id