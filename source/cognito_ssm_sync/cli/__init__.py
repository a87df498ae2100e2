# ABOUTME: CLI module for Cognito SSM Sync
# ABOUTME: Provides the command-line interface used by deployment hooks

"""Command-line interface for Cognito SSM Sync."""

from cleo.application import Application

from cognito_ssm_sync import __version__

from .commands.show import ShowCommand
from .commands.sync import SyncCommand


def create_application() -> Application:
    """Create the CLI application."""
    application = Application("cognito-ssm-sync", __version__)

    application.add(SyncCommand())
    application.add(ShowCommand())

    return application


def main():
    """Main entry point for the CLI."""
    application = create_application()
    application.run()


if __name__ == "__main__":
    main()
