# ABOUTME: Merging of credential records into stored application config documents
# ABOUTME: Only auth.cognito is touched; every other key survives a sync unchanged

"""Application configuration document handling."""

import copy
import json
from typing import Any

from .errors import StoreReadError
from .models import CredentialRecord

AUTH_KEY = "auth"
COGNITO_KEY = "cognito"


def parse_document(text: str | None, parameter_name: str = None) -> dict[str, Any]:
    """Parse a stored parameter value into a document.

    A missing or blank value is the empty document. Anything that is not a
    JSON object cannot hold ``auth.cognito`` and is rejected.
    """
    if text is None or not text.strip():
        return {}

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise StoreReadError(f"Parameter value is not valid JSON: {e}", parameter_name)

    if not isinstance(document, dict):
        raise StoreReadError(
            f"Parameter value must be a JSON object, got {type(document).__name__}", parameter_name
        )
    return document


def serialize_document(document: dict[str, Any]) -> str:
    """Serialize a document as tab-indented JSON."""
    return json.dumps(document, indent="\t", ensure_ascii=False)


def extract_credentials(document: dict[str, Any]) -> CredentialRecord | None:
    """Return the record stored at auth.cognito, if there is a complete one."""
    auth = document.get(AUTH_KEY)
    if not isinstance(auth, dict):
        return None
    return CredentialRecord.from_dict(auth.get(COGNITO_KEY))


def merge_credentials(document: dict[str, Any], record: CredentialRecord) -> dict[str, Any]:
    """Return a copy of ``document`` with ``record`` embedded at auth.cognito."""
    merged = copy.deepcopy(document)

    auth = merged.get(AUTH_KEY)
    if isinstance(auth, dict):
        auth[COGNITO_KEY] = record.to_dict()
    else:
        merged[AUTH_KEY] = {COGNITO_KEY: record.to_dict()}

    return merged
