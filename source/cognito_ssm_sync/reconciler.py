# ABOUTME: Reconciliation of Cognito app client credentials into an SSM parameter
# ABOUTME: Runs list, resolve, fetch, compare and the conditional write as one pipeline

"""Credential reconciliation pipeline.

A run reads the configured user pool, finds the app client by name, fetches
its token URL and secret, and merges them into the JSON document stored in
the configured parameter at ``auth.cognito``. The parameter is only written
when no record is stored yet or one of its fields differs.

Every failure ends the run with a ``SyncResult``; nothing is raised to the
caller of ``run``. SSM has no conditional put, so two concurrent runs against
the same parameter race and the last writer wins.
"""

import logging

from .cognito import CognitoManager, find_app_client
from .config import SyncConfig
from .document import extract_credentials, merge_credentials
from .errors import (
    AppClientNotFoundError,
    ConfigurationError,
    ProviderCallError,
    StoreReadError,
    StoreWriteError,
)
from .models import CredentialRecord, SyncOutcome, SyncResult
from .ssm import ParameterStore

logger = logging.getLogger(__name__)


class CredentialReconciler:
    """Mirrors one app client's credentials into one parameter."""

    def __init__(self, config: SyncConfig, cognito: CognitoManager, store: ParameterStore):
        self.config = config
        self.cognito = cognito
        self.store = store

    def run(self) -> SyncResult:
        """Execute one reconciliation run."""
        config = self.config
        try:
            config.validate()
            record = self.fetch_record()
        except ConfigurationError as e:
            logger.error("%s", e.message)
            return SyncResult(SyncOutcome.CONFIGURATION_ERROR, config.parameter_name, e.message)
        except AppClientNotFoundError as e:
            logger.error("%s", e.message)
            return SyncResult(SyncOutcome.NOT_FOUND, config.parameter_name, e.message)
        except ProviderCallError as e:
            logger.error("%s", e.message)
            return SyncResult(SyncOutcome.FAILED, config.parameter_name, e.message)

        return self.reconcile(config.parameter_name, record)

    def fetch_record(self) -> CredentialRecord:
        """List, resolve and fetch the configured app client's credentials.

        Raises:
            AppClientNotFoundError: The pool lists no clients or none matches by name
            ProviderCallError: Describing the pool or the client failed
        """
        user_pool_id = self.config.user_pool_id
        name = self.config.app_client_name

        logger.info("Getting app client %s in user pool %s", name, user_pool_id)
        clients = self.cognito.list_app_clients(user_pool_id)
        if not clients:
            raise AppClientNotFoundError(
                f"No app clients found in user pool {user_pool_id}", app_client_name=name, user_pool_id=user_pool_id
            )

        app_client = find_app_client(clients, name)
        if not app_client:
            raise AppClientNotFoundError(
                f"No app client found with name {name} in user pool {user_pool_id}",
                app_client_name=name,
                user_pool_id=user_pool_id,
            )

        return self.cognito.fetch_credentials(app_client)

    def reconcile(self, parameter_name: str, record: CredentialRecord) -> SyncResult:
        """Write ``record`` into the parameter's document if it changed.

        Returns:
            WRITTEN, UNCHANGED or FAILED result
        """
        try:
            document, version = self.store.read_document(parameter_name)
        except StoreReadError as e:
            if self.config.strict_read:
                logger.error("%s; not overwriting", e.message)
                return SyncResult(SyncOutcome.FAILED, parameter_name, e.message, record=record)
            logger.warning("%s; continuing with an empty document", e.message)
            document, version = {}, None

        current = extract_credentials(document)
        if current == record:
            message = f"Credentials in parameter {parameter_name} are up to date"
            logger.info(message)
            return SyncResult(SyncOutcome.UNCHANGED, parameter_name, message, record=record, version=version)

        if current is None:
            logger.info("No credentials stored in parameter %s yet", parameter_name)
        else:
            changed = [key for key, value in record.to_dict().items() if current.to_dict()[key] != value]
            logger.info("Credential fields changed in parameter %s: %s", parameter_name, ", ".join(changed))

        merged = merge_credentials(document, record)

        if self.config.dry_run:
            message = f"Dry run: parameter {parameter_name} would be updated"
            logger.info(message)
            return SyncResult(
                SyncOutcome.WRITTEN, parameter_name, message, record=record, version=version, dry_run=True
            )

        logger.info("Updating parameter %s with app client credentials", parameter_name)
        try:
            new_version = self.store.write_document(
                parameter_name,
                merged,
                secure=self.config.secure,
                kms_key_id=self.config.kms_key_id,
                tier=self.config.tier,
            )
        except StoreWriteError as e:
            logger.error("%s", e.message)
            return SyncResult(SyncOutcome.FAILED, parameter_name, e.message, record=record, version=version)

        message = f"App client credentials have been exported to parameter {parameter_name}"
        logger.info(message)
        return SyncResult(SyncOutcome.WRITTEN, parameter_name, message, record=record, version=new_version)

