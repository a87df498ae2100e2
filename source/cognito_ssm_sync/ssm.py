# ABOUTME: SSM Parameter Store access for the application configuration document
# ABOUTME: Reads the stored JSON document and overwrites it with a merged one

"""Parameter store manager for boto3-based SSM operations."""

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .document import parse_document, serialize_document
from .errors import StoreReadError, StoreWriteError

logger = logging.getLogger(__name__)

# Maximum value size in bytes per parameter tier
TIER_VALUE_LIMITS = {"Standard": 4096, "Advanced": 8192, "Intelligent-Tiering": 8192}


class ParameterStore:
    """SSM parameter operations on one JSON configuration document per parameter."""

    def __init__(self, region: str, profile: str = None, client=None):
        """
        Initialize parameter store manager.

        Args:
            region: AWS region of the parameter
            profile: Optional AWS profile name
            client: Optional pre-built ssm client
        """
        self.region = region
        self.profile = profile
        self._client = client
        self._session = None

    @property
    def session(self):
        if not self._session:
            self._session = (
                boto3.Session(region_name=self.region, profile_name=self.profile)
                if self.profile
                else boto3.Session(region_name=self.region)
            )
        return self._session

    @property
    def client(self):
        """Lazy-loaded SSM client."""
        if not self._client:
            self._client = self.session.client("ssm")
        return self._client

    def read_document(self, name: str) -> tuple[dict[str, Any], int | None]:
        """
        Read and parse the document stored in a parameter.

        Args:
            name: Parameter name

        Returns:
            The document and its parameter version. A parameter that does not
            exist yet is the empty document with no version.

        Raises:
            StoreReadError: The parameter could not be read or is not a JSON object
        """
        try:
            response = self.client.get_parameter(Name=name, WithDecryption=True)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ParameterNotFound":
                logger.info("Parameter %s does not exist yet", name)
                return {}, None
            raise StoreReadError(f"Failed to read parameter {name}: {e.response['Error']['Message']}", name)
        except BotoCoreError as e:
            raise StoreReadError(f"Failed to read parameter {name}: {e}", name)

        parameter = response["Parameter"]
        return parse_document(parameter.get("Value"), name), parameter.get("Version")

    def write_document(
        self,
        name: str,
        document: dict[str, Any],
        secure: bool = True,
        kms_key_id: str = None,
        tier: str = "Standard",
    ) -> int | None:
        """
        Overwrite a parameter with a serialized document.

        Args:
            name: Parameter name
            document: Document to store
            secure: Store as SecureString instead of String
            kms_key_id: KMS key for SecureString values, account default when None
            tier: Parameter tier

        Returns:
            The new parameter version

        Raises:
            StoreWriteError: The value is too large or PutParameter failed
        """
        value = serialize_document(document)

        limit = TIER_VALUE_LIMITS.get(tier)
        if limit and len(value.encode("utf-8")) > limit:
            raise StoreWriteError(f"Document for {name} exceeds the {limit} byte limit of the {tier} tier", name)

        params = {
            "Name": name,
            "Value": value,
            "Type": "SecureString" if secure else "String",
            "Overwrite": True,
            "Tier": tier,
            "DataType": "text",
        }
        if secure and kms_key_id:
            params["KeyId"] = kms_key_id

        try:
            response = self.client.put_parameter(**params)
        except ClientError as e:
            error = e.response["Error"]
            raise StoreWriteError(
                f"Failed to put parameter {name}: {error.get('Message')}", name, error_code=error.get("Code")
            )
        except BotoCoreError as e:
            raise StoreWriteError(f"Failed to put parameter {name}: {e}", name)

        return response.get("Version")
