# ABOUTME: Input validation for sync configuration values
# ABOUTME: Validates user pool ids, regions, parameter names and tiers

"""Input validators for sync configuration."""

import re

PARAMETER_TIERS = ("Standard", "Advanced", "Intelligent-Tiering")


def validate_aws_region(region: str) -> bool:
    """Validate AWS region format."""
    if not region:
        return False

    # AWS region format: us-east-1, eu-west-2, us-gov-west-1, etc.
    pattern = r"^[a-z]{2}(-[a-z]+)+-\d{1,2}$"
    return bool(re.match(pattern, region))


def validate_user_pool_id(user_pool_id: str) -> bool:
    """Validate Cognito user pool id format.

    Valid format: {region}_{id}, e.g. eu-west-1_AbC123xyZ
    """
    if not user_pool_id or "_" not in user_pool_id:
        return False

    region, _, pool = user_pool_id.partition("_")
    return validate_aws_region(region) and bool(re.match(r"^[0-9a-zA-Z]+$", pool))


def validate_parameter_name(name: str) -> bool:
    """Validate SSM parameter name.

    Hierarchical names must start with a slash. Names may contain letters,
    digits and . - _ / and cannot start with aws or ssm.
    """
    if not name or len(name) > 2048:
        return False

    bare = name.lstrip("/").lower()
    if bare.startswith(("aws", "ssm")):
        return False

    if "/" in name.strip("/") and not name.startswith("/"):
        return False

    pattern = r"^[a-zA-Z0-9_.\-/]+$"
    return bool(re.match(pattern, name))


def validate_tier(tier: str) -> bool:
    """Validate SSM parameter tier."""
    return tier in PARAMETER_TIERS
