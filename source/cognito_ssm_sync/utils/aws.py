# ABOUTME: AWS utility functions for credential sync
# ABOUTME: Resolves the region from a user pool id or the boto3 session configuration

"""AWS utilities."""

import boto3
from botocore.exceptions import BotoCoreError

from .validators import validate_aws_region

DEFAULT_REGION = "us-east-1"


def get_current_region(profile: str = None) -> str:
    """Get the current AWS region from configuration."""
    try:
        session = boto3.Session(profile_name=profile) if profile else boto3.Session()
        return session.region_name or DEFAULT_REGION
    except BotoCoreError:
        return DEFAULT_REGION


def region_from_user_pool_id(user_pool_id: str) -> str | None:
    """Get the region a user pool id is prefixed with, e.g. eu-west-1 for eu-west-1_AbC123."""
    region, sep, _ = (user_pool_id or "").partition("_")
    return region if sep and validate_aws_region(region) else None
