from __future__ import annotations

DOCKER_MAIN_BRANCH = "microsoft/main"

_RELEASE_PREFIX = "release-branch."
_DEV_OFFICIAL_PREFIX = "dev/official/"


def target_branch(source_branch: str) -> str:
    """Map a built Go branch to the Go Docker branch to update.

    Returns an empty string when the build does not feed any Docker branch.
    """
    if source_branch == "main" or source_branch.startswith(_RELEASE_PREFIX):
        return DOCKER_MAIN_BRANCH
    if source_branch.startswith(_DEV_OFFICIAL_PREFIX):
        return source_branch
    return ""
