"""
Tag factory for AWS resources.

Every resource carries the project defaults plus Environment and Name so the
bastion stack can be told apart from other stacks in the same account.
"""

from IAC.configs.constants import DEFAULT_TAGS


def create_tags(
    environment: str,
    resource_name: str,
    **extra_tags: str,
) -> dict[str, str]:
    """
    Create a standard tag set for an AWS resource.

    Args:
        environment: Deployment environment
        resource_name: Name of the resource
        **extra_tags: Additional tags to include (e.g. Tier="database")

    Returns:
        Dictionary of tags
    """
    tags = {
        **DEFAULT_TAGS,
        "Environment": environment,
        "Name": resource_name,
    }
    tags.update(extra_tags)
    return tags


def merge_tags(
    base_tags: dict[str, str],
    *additional_tags: dict[str, str],
) -> dict[str, str]:
    """Merge tag dictionaries left to right; later values win."""
    result = dict(base_tags)
    for tags in additional_tags:
        result.update(tags)
    return result
