# ABOUTME: Show command to display the credentials stored in a parameter
# ABOUTME: Reads the configuration document and prints auth.cognito with the secret masked

"""Show command - Display stored credentials."""

from cleo.commands.command import Command
from cleo.helpers import option
from rich.console import Console

from cognito_ssm_sync.cli.utils.display import display_stored_credentials
from cognito_ssm_sync.cli.utils.logs import configure_logging, verbosity_from_io
from cognito_ssm_sync.config import load_sync_config
from cognito_ssm_sync.document import extract_credentials
from cognito_ssm_sync.errors import ConfigurationError, StoreReadError
from cognito_ssm_sync.ssm import ParameterStore
from cognito_ssm_sync.utils.aws import get_current_region


class ShowCommand(Command):
    name = "show"
    description = "Show the app client credentials stored in an SSM parameter"

    options = [
        option("config", description="Path to the configuration file", flag=False),
        option("profile", description="Configuration profile to use", flag=False),
        option("parameter-name", description="SSM parameter holding the configuration document", flag=False),
        option("region", description="AWS region (defaults to the session region)", flag=False),
        option("aws-profile", description="AWS credentials profile", flag=False),
        option("json", description="Output in JSON format", flag=True),
    ]

    def handle(self) -> int:
        """Execute the show command."""
        console = Console()
        configure_logging(verbosity_from_io(self.io))

        try:
            settings = load_sync_config(
                self.option("config"),
                self.option("profile"),
                parameter_name=self.option("parameter-name"),
                region=self.option("region"),
                aws_profile=self.option("aws-profile"),
            )
        except ConfigurationError as e:
            console.print(f"[red]{e.message}[/red]")
            return 1

        if not settings.parameter_name:
            console.print("[red]Missing required configuration: parameter_name[/red]")
            return 1

        region = settings.region or get_current_region(settings.aws_profile)
        store = self._create_store(region, settings.aws_profile)

        try:
            document, version = store.read_document(settings.parameter_name)
        except StoreReadError as e:
            console.print(f"[red]{e.message}[/red]")
            return 1

        record = extract_credentials(document)

        if self.option("json"):
            status = {
                "parameter_name": settings.parameter_name,
                "version": version,
                "credentials": record.masked() if record else None,
            }
            console.print_json(data=status)
        else:
            display_stored_credentials(console, settings.parameter_name, record, version)

        return 0

    def _create_store(self, region: str, profile: str | None) -> ParameterStore:
        return ParameterStore(region=region, profile=profile)
