"""Repository URL canonicalization.

Git repository URLs that point at the same repository can be spelled many
ways (scheme case, trailing slash, ``.git`` suffix, SCP-style ``git@host:``).
``normalize_git_url`` maps them onto one spelling so they can be compared.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit, urlunsplit

_SCP_URL = re.compile(r"^(?P<user>[\w.-]+)@(?P<host>[\w.-]+):(?P<path>(?!//).*)$")


def _trim_path(path: str) -> str:
    path = path.rstrip("/")
    path = path.removesuffix(".git")
    return path.rstrip("/")


def normalize_git_url(url: str) -> str:
    """Return the canonical form of a git repository URL.

    Unparseable input is returned trimmed and lowercased rather than rejected.
    """
    url = url.strip().lower()

    scp = _SCP_URL.match(url)
    if scp:
        url = f"ssh://{scp['user']}@{scp['host']}/{scp['path'].lstrip('/')}"

    if url.startswith(("http://", "https://", "ssh://")):
        try:
            parts = urlsplit(url)
        except ValueError:
            return url
        return urlunsplit(
            (parts.scheme, parts.netloc, _trim_path(parts.path), parts.query, "")
        )
    return url


def normalize_chart_repository_url(url: str) -> str:
    """Return the canonical form of a Helm chart repository URL."""
    return url.strip().lower().removeprefix("oci://")
