# ABOUTME: Cognito user pool access for app client discovery and credential retrieval
# ABOUTME: Lists app clients across pages, resolves one by name and fetches its secret

"""Cognito manager for boto3-based user pool operations."""

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .errors import ProviderCallError
from .models import AppClientIdentity, CredentialRecord

logger = logging.getLogger(__name__)

# Host suffix of Cognito hosted UI domains (prefix domains only)
COGNITO_DOMAIN_SUFFIX = "amazoncognito.com"
TOKEN_PATH = "/oauth2/token"

# Largest page ListUserPoolClients accepts
LIST_PAGE_SIZE = 60


def build_token_url(domain: str, region: str) -> str:
    """Build the OAuth2 token endpoint of a Cognito prefix domain."""
    return f"https://{domain}.auth.{region}.{COGNITO_DOMAIN_SUFFIX}{TOKEN_PATH}"


def find_app_client(clients: list[AppClientIdentity], name: str) -> AppClientIdentity | None:
    """Return the first client whose name matches ``name`` ignoring case."""
    wanted = name.casefold()
    for client in clients:
        if client.client_name.casefold() == wanted:
            return client
    return None


def _error_code(error: Exception) -> str | None:
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Code")
    return None


class CognitoManager:
    """
    Cognito user pool operations needed to mirror app client credentials.
    The region is passed explicitly and also used to build token URLs.
    """

    def __init__(self, region: str, profile: str = None, client=None):
        """
        Initialize Cognito manager.

        Args:
            region: AWS region of the user pool
            profile: Optional AWS profile name
            client: Optional pre-built cognito-idp client
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
        """Lazy-loaded cognito-idp client."""
        if not self._client:
            self._client = self.session.client("cognito-idp")
        return self._client

    def list_app_clients(self, user_pool_id: str) -> list[AppClientIdentity]:
        """
        List every app client of a user pool, following NextToken to the end.

        A failed page request aborts the listing and yields an empty list,
        even when earlier pages succeeded.

        Args:
            user_pool_id: Cognito user pool id

        Returns:
            App clients in listing order, or an empty list
        """
        clients: list[AppClientIdentity] = []
        params = {"UserPoolId": user_pool_id, "MaxResults": LIST_PAGE_SIZE}
        page = 0

        while True:
            page += 1
            try:
                response = self.client.list_user_pool_clients(**params)
            except (ClientError, BotoCoreError) as e:
                logger.error("Failed to list user pool clients of %s (page %d): %s", user_pool_id, page, e)
                return []

            entries = response.get("UserPoolClients", [])
            clients.extend(AppClientIdentity.from_api(entry) for entry in entries)
            logger.debug("Listed page %d of %s: %d app clients", page, user_pool_id, len(entries))

            next_token = response.get("NextToken")
            if not next_token:
                break
            params["NextToken"] = next_token

        logger.info("Found %d app clients in user pool %s", len(clients), user_pool_id)
        return clients

    def get_token_url(self, user_pool_id: str) -> str:
        """Get the OAuth2 token endpoint of a user pool's hosted domain."""
        try:
            response = self.client.describe_user_pool(UserPoolId=user_pool_id)
        except (ClientError, BotoCoreError) as e:
            raise ProviderCallError(
                f"Failed to describe user pool {user_pool_id}: {e}",
                operation="DescribeUserPool",
                error_code=_error_code(e),
            )

        user_pool = response.get("UserPool", {})
        custom_domain = user_pool.get("CustomDomain")
        if custom_domain:
            return f"https://{custom_domain}{TOKEN_PATH}"

        domain = user_pool.get("Domain")
        if not domain:
            raise ProviderCallError(
                f"User pool {user_pool_id} has no hosted domain configured", operation="DescribeUserPool"
            )
        return build_token_url(domain, self.region)

    def get_client_secret(self, user_pool_id: str, client_id: str) -> str:
        """Get the secret of an app client, which ListUserPoolClients does not expose."""
        try:
            response = self.client.describe_user_pool_client(UserPoolId=user_pool_id, ClientId=client_id)
        except (ClientError, BotoCoreError) as e:
            raise ProviderCallError(
                f"Failed to describe user pool client {client_id}: {e}",
                operation="DescribeUserPoolClient",
                error_code=_error_code(e),
            )

        secret = response.get("UserPoolClient", {}).get("ClientSecret")
        if not secret:
            raise ProviderCallError(
                f"App client {client_id} has no client secret", operation="DescribeUserPoolClient"
            )
        return secret

    def fetch_credentials(self, identity: AppClientIdentity) -> CredentialRecord:
        """Fetch the token URL and secret of a resolved app client."""
        url = self.get_token_url(identity.user_pool_id)
        logger.info("Pulling app client credentials for %s", identity.client_name)
        secret = self.get_client_secret(identity.user_pool_id, identity.client_id)
        return CredentialRecord(url=url, client_id=identity.client_id, client_secret=secret)
