# ABOUTME: Cognito SSM Sync - Mirror Cognito app client credentials into SSM
# ABOUTME: Main package for the post-deploy credential export hook

"""Cognito SSM Sync - Post-deploy credential export."""

__version__ = "1.0.0"
__all__ = ["cli", "hooks", "reconciler"]
