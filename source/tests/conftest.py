# ABOUTME: Shared fixtures for credential sync tests
# ABOUTME: Provides in-memory SSM and mocked Cognito clients in place of boto3 clients

"""Pytest configuration and fixtures."""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from cognito_ssm_sync.cognito import CognitoManager
from cognito_ssm_sync.config import Config, SyncConfig
from cognito_ssm_sync.ssm import ParameterStore

REGION = "eu-west-1"
USER_POOL_ID = "eu-west-1_AbC123xyZ"
PARAMETER_NAME = "/my-service/config"


def make_client_error(code: str, operation: str, message: str = "boom") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


class FakeSSMClient:
    """In-memory stand-in for a boto3 ssm client."""

    def __init__(self, parameters: dict[str, str] = None):
        self.parameters = {name: {"Value": value, "Version": 1} for name, value in (parameters or {}).items()}
        self.put_calls: list[dict] = []
        self.get_error: ClientError | None = None
        self.put_error: ClientError | None = None

    def get_parameter(self, Name, WithDecryption=False):
        if self.get_error:
            raise self.get_error
        if Name not in self.parameters:
            raise make_client_error("ParameterNotFound", "GetParameter", f"Parameter {Name} not found")
        stored = self.parameters[Name]
        return {"Parameter": {"Name": Name, "Value": stored["Value"], "Version": stored["Version"]}}

    def put_parameter(self, **params):
        self.put_calls.append(params)
        if self.put_error:
            raise self.put_error
        version = self.parameters.get(params["Name"], {}).get("Version", 0) + 1
        self.parameters[params["Name"]] = {"Value": params["Value"], "Version": version}
        return {"Version": version, "Tier": params.get("Tier", "Standard")}


def app_client(client_id: str, name: str) -> dict:
    return {"ClientId": client_id, "UserPoolId": USER_POOL_ID, "ClientName": name}


@pytest.fixture
def client_error():
    """Factory for botocore ClientError instances."""
    return make_client_error


@pytest.fixture
def cognito_client() -> MagicMock:
    """Mocked cognito-idp client with one page of clients and a hosted domain."""
    client = MagicMock()
    client.list_user_pool_clients.return_value = {
        "UserPoolClients": [app_client("id-web", "web-frontend"), app_client("id-api", "MyService")]
    }
    client.describe_user_pool.return_value = {"UserPool": {"Id": USER_POOL_ID, "Domain": "my-domain"}}
    client.describe_user_pool_client.return_value = {
        "UserPoolClient": {"ClientId": "id-api", "ClientName": "MyService", "ClientSecret": "s3cr3t-value"}
    }
    return client


@pytest.fixture
def ssm_client() -> FakeSSMClient:
    return FakeSSMClient()


@pytest.fixture
def cognito(cognito_client) -> CognitoManager:
    return CognitoManager(region=REGION, client=cognito_client)


@pytest.fixture
def store(ssm_client) -> ParameterStore:
    return ParameterStore(region=REGION, client=ssm_client)


@pytest.fixture
def sync_config() -> SyncConfig:
    return SyncConfig(
        user_pool_id=USER_POOL_ID,
        app_client_name="myservice",
        parameter_name=PARAMETER_NAME,
        region=REGION,
    )


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the user's config file and environment."""
    monkeypatch.setattr(Config, "CONFIG_FILE", tmp_path / "missing-config.json")
    for name in ("USER_POOL_ID", "APP_CLIENT_NAME", "PARAMETER_NAME", "REGION", "AWS_PROFILE", "KMS_KEY_ID", "DEBUG"):
        monkeypatch.delenv(f"COGNITO_SSM_SYNC_{name}", raising=False)
