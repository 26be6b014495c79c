import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version

from readme_elements.clients.github_client import fetch_commit_tags
from readme_elements.settings import Settings


logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "readme-elements"


class GitHubAPIError(Exception):
    """Raised when GitHub tag lookups fail."""


def package_version() -> str:
    """Installed distribution version, or `0.0.0` when running from a checkout."""

    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0"


def lookup_commit_tags(app_settings: Settings, revision: str) -> list[str]:
    if not app_settings.github_repository:
        return []

    try:
        return fetch_commit_tags(
            repository=app_settings.github_repository,
            commit_sha=revision,
            api_base_url=app_settings.github_api_base_url,
            token=app_settings.github_token,
        )
    except Exception as exc:
        raise GitHubAPIError("GitHub tag lookup failed") from exc


def get_version_info(app_settings: Settings) -> dict[str, object]:
    """Describe the running build: package version, revision and release tags."""

    revision = app_settings.release or ""
    tags: list[str] = []

    if revision:
        logger.info("vcs.revision=%s", revision)
        try:
            tags = lookup_commit_tags(app_settings, revision)
        except GitHubAPIError:
            logger.exception("Error retrieving version tags")
    else:
        logger.error("No commit hash configured")

    return {"version": package_version(), "revision": revision, "tags": tags}
