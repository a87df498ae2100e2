# ABOUTME: Post-deploy hook that exports app client credentials to SSM
# ABOUTME: Validates configuration up front and wires explicitly configured AWS clients

"""Deployment lifecycle hook for credential export."""

import logging
from collections.abc import Callable
from typing import Any

from .cognito import CognitoManager
from .config import SyncConfig
from .errors import ConfigurationError
from .models import SyncOutcome, SyncResult
from .reconciler import CredentialReconciler
from .ssm import ParameterStore
from .utils.aws import get_current_region, region_from_user_pool_id

logger = logging.getLogger(__name__)

AFTER_DEPLOY = "after:deploy:deploy"


class PostDeployHook:
    """Exports credentials once after a deployment completes.

    Configuration is checked when the hook is built so that a missing field
    is reported before any AWS call. A hook built from invalid configuration
    still exposes ``export_credentials``, which then only reports the error.
    """

    def __init__(
        self,
        settings: SyncConfig | dict[str, Any],
        cognito: CognitoManager = None,
        store: ParameterStore = None,
    ):
        self.config = settings if isinstance(settings, SyncConfig) else SyncConfig.from_dict(settings)
        self.error: ConfigurationError | None = None
        self.reconciler: CredentialReconciler | None = None

        try:
            self.config.validate()
        except ConfigurationError as e:
            logger.error("%s, please check the documentation", e.message)
            self.error = e
        else:
            region = (
                self.config.region
                or region_from_user_pool_id(self.config.user_pool_id)
                or get_current_region(self.config.aws_profile)
            )
            self.config = self.config.with_overrides(region=region)
            self.reconciler = CredentialReconciler(
                self.config,
                cognito or CognitoManager(region=region, profile=self.config.aws_profile),
                store or ParameterStore(region=region, profile=self.config.aws_profile),
            )

        self.hooks: dict[str, Callable[[], SyncResult]] = {AFTER_DEPLOY: self.export_credentials}

    def export_credentials(self) -> SyncResult:
        """Run one credential export."""
        if self.error:
            return SyncResult(SyncOutcome.CONFIGURATION_ERROR, self.config.parameter_name, self.error.message)

        logger.debug("Sync configuration: %s", {**self.config.to_dict(), "kms_key_id": bool(self.config.kms_key_id)})
        return self.reconciler.run()

    def __call__(self) -> SyncResult:
        return self.export_credentials()
