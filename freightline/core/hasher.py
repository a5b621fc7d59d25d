"""Deterministic Freight IDs.

A Freight's ID depends only on its origin and the set of artifacts it
carries; the order artifacts are listed in does not matter.
"""

from __future__ import annotations

import hashlib
import posixpath
from collections.abc import Iterable

from freightline.core.urls import normalize_chart_repository_url, normalize_git_url
from freightline.models.freight import Chart, GitCommit, Image
from freightline.models.origins import FreightOrigin


def sha1_hex(data: bytes) -> str:
    """Return the SHA-1 hex digest of raw bytes."""
    return hashlib.sha1(data).hexdigest()


def artifact_keys(
    commits: Iterable[GitCommit],
    images: Iterable[Image],
    charts: Iterable[Chart],
) -> list[str]:
    """Return the sorted identity strings of a set of artifacts."""
    keys: list[str] = []
    for commit in commits:
        repo = normalize_git_url(commit.repo_url)
        if commit.tag:
            keys.append(f"{repo}:{commit.tag}:{commit.id}")
        else:
            keys.append(f"{repo}:{commit.id}")
    for image in images:
        keys.append(f"{image.repo_url}:{image.tag}@{image.digest}")
    for chart in charts:
        # cleaned like a slash-separated path: "//" collapses, no trailing "/"
        repo = posixpath.join(normalize_chart_repository_url(chart.repo_url), chart.name)
        repo = posixpath.normpath(repo) if repo else ""
        keys.append(f"{repo}:{chart.version}")
    return sorted(keys)


def generate_freight_id(
    origin: FreightOrigin,
    commits: Iterable[GitCommit] = (),
    images: Iterable[Image] = (),
    charts: Iterable[Chart] = (),
) -> str:
    """SHA-1 of ``"<origin>:<sorted artifact keys joined by |>"``."""
    keys = artifact_keys(commits, images, charts)
    return sha1_hex(f"{origin}:{'|'.join(keys)}".encode("utf-8"))
