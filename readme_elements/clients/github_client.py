from collections.abc import Mapping
from typing import Any

import httpx


def fetch_commit_tags(
    repository: str,
    commit_sha: str,
    api_base_url: str,
    token: str | None = None,
) -> list[str]:
    """Return the names of repository tags that point at commit_sha."""

    owner, _, name = repository.partition("/")
    if not owner or not name or "/" in name:
        raise ValueError(f"Repository must look like owner/name: {repository}")

    headers = {
        "Accept": "application/vnd.github+json",
        "User-Agent": "readme-elements",
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"

    url: str | None = f"{api_base_url.rstrip('/')}/repos/{owner}/{name}/tags"
    params: dict[str, int] | None = {"per_page": 100}
    tags: list[str] = []

    while url:
        response = httpx.get(url, params=params, headers=headers, timeout=10.0)
        response.raise_for_status()

        payload: Any = response.json()
        if not isinstance(payload, list):
            raise ValueError("GitHub tags response is invalid")

        for item in payload:
            if not isinstance(item, Mapping):
                continue
            commit = item.get("commit")
            tag_name = item.get("name")
            if not isinstance(commit, Mapping) or not isinstance(tag_name, str):
                continue
            if commit.get("sha") == commit_sha:
                tags.append(tag_name)

        # The `next` link already carries the query string.
        url = response.links.get("next", {}).get("url")
        params = None

    return tags
