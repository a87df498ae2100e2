# ABOUTME: Commands module for the Cognito SSM Sync CLI
# ABOUTME: Contains all CLI command implementations

"""CLI commands for Cognito SSM Sync."""

from .show import ShowCommand
from .sync import SyncCommand

__all__ = [
    "SyncCommand",
    "ShowCommand",
]
