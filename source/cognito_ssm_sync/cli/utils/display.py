# ABOUTME: Shared display utilities for consistent output formatting
# ABOUTME: Renders sync results and stored credentials with rich

"""Shared display utilities for CLI commands."""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from cognito_ssm_sync.models import CredentialRecord, SyncOutcome, SyncResult

OUTCOME_STYLES = {
    SyncOutcome.WRITTEN: ("green", "✓ Credentials exported"),
    SyncOutcome.UNCHANGED: ("green", "✓ Credentials already up to date"),
    SyncOutcome.NOT_FOUND: ("red", "✗ App client not found"),
    SyncOutcome.FAILED: ("red", "✗ Credential export failed"),
    SyncOutcome.CONFIGURATION_ERROR: ("red", "✗ Invalid configuration"),
}


def credentials_table(record: CredentialRecord) -> Table:
    """Build a table of a credential record with the secret masked."""
    table = Table(box=box.SIMPLE)
    table.add_column("Field", style="dim")
    table.add_column("Value")

    for key, value in record.masked().items():
        table.add_row(key, value)

    return table


def display_sync_result(console: Console, result: SyncResult) -> None:
    """Display the outcome of a sync run."""
    color, title = OUTCOME_STYLES[result.outcome]
    if result.dry_run:
        title = f"{title} (dry run)"

    body = f"[bold {color}]{title}[/bold {color}]"
    if result.parameter_name:
        body += f"\n\nParameter: [cyan]{result.parameter_name}[/cyan]"
    if result.version is not None:
        body += f"\nVersion: {result.version}"
    if result.message:
        body += f"\n\n{result.message}"

    console.print(Panel.fit(body, border_style=color, padding=(1, 2)))

    if result.record and result.success:
        console.print(credentials_table(result.record))


def display_stored_credentials(
    console: Console, parameter_name: str, record: CredentialRecord | None, version: int | None
) -> None:
    """Display the credentials currently stored in a parameter."""
    console.print(f"\n[bold]Parameter[/bold] [cyan]{parameter_name}[/cyan]")
    if version is not None:
        console.print(f"Version: {version}")

    if record is None:
        console.print("[yellow]No credentials stored at auth.cognito[/yellow]")
        return

    console.print(credentials_table(record))
