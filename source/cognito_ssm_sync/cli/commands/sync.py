# ABOUTME: Sync command that exports app client credentials to SSM
# ABOUTME: Entry point of the post-deploy hook; exits non-zero unless credentials are current

"""Sync command - Mirror app client credentials into a parameter."""

from cleo.commands.command import Command
from cleo.helpers import option
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from cognito_ssm_sync.cli.utils.display import display_sync_result
from cognito_ssm_sync.cli.utils.logs import configure_logging, verbosity_from_io
from cognito_ssm_sync.config import load_sync_config
from cognito_ssm_sync.errors import ConfigurationError
from cognito_ssm_sync.hooks import PostDeployHook


class SyncCommand(Command):
    name = "sync"
    description = "Export Cognito app client credentials to an SSM parameter"

    options = [
        option("config", description="Path to the configuration file", flag=False),
        option("profile", description="Configuration profile to use", flag=False),
        option("user-pool-id", description="Cognito user pool id", flag=False),
        option("app-client-name", description="Name of the app client (case-insensitive)", flag=False),
        option("parameter-name", description="SSM parameter holding the configuration document", flag=False),
        option("region", description="AWS region (defaults to the session region)", flag=False),
        option("aws-profile", description="AWS credentials profile", flag=False),
        option("kms-key-id", description="KMS key for the SecureString parameter", flag=False),
        option("tier", description="Parameter tier (Standard/Advanced/Intelligent-Tiering)", flag=False),
        option("plain-text", description="Store the parameter as String instead of SecureString", flag=True),
        option("strict-read", description="Fail instead of overwriting when the parameter cannot be read", flag=True),
        option("dry-run", description="Show what would be written without writing", flag=True),
        option("json", description="Output in JSON format", flag=True),
    ]

    def handle(self) -> int:
        """Execute the sync command."""
        console = Console()
        configure_logging(verbosity_from_io(self.io))

        try:
            settings = load_sync_config(
                self.option("config"),
                self.option("profile"),
                user_pool_id=self.option("user-pool-id"),
                app_client_name=self.option("app-client-name"),
                parameter_name=self.option("parameter-name"),
                region=self.option("region"),
                aws_profile=self.option("aws-profile"),
                kms_key_id=self.option("kms-key-id"),
                tier=self.option("tier"),
                secure=False if self.option("plain-text") else None,
                strict_read=True if self.option("strict-read") else None,
                dry_run=True if self.option("dry-run") else None,
            )
        except ConfigurationError as e:
            console.print(f"[red]{e.message}[/red]")
            return 1

        hook = PostDeployHook(settings)

        if self.option("json"):
            result = hook.export_credentials()
            console.print_json(data=result.to_dict())
            return 0 if result.success else 1

        with Progress(
            SpinnerColumn(), TextColumn("[progress.description]{task.description}"), console=console, transient=True
        ) as progress:
            progress.add_task(f"Syncing {settings.app_client_name or 'app client'} credentials...", total=None)
            result = hook.export_credentials()

        display_sync_result(console, result)
        return 0 if result.success else 1
