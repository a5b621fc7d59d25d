"""Tests for deterministic Freight IDs."""

from __future__ import annotations

import hashlib

from freightline.core.hasher import artifact_keys, generate_freight_id, sha1_hex
from freightline.models.freight import Chart, FreightReference, GitCommit, Image
from freightline.models.origins import FreightOrigin

ORIGIN = FreightOrigin(name="test-warehouse")
COMMIT = GitCommit(repo_url="https://github.com/example/repo.git", id="abc123")
IMAGE = Image(repo_url="ghcr.io/example/app", tag="v1.0.0", digest="sha256:feed")
CHART = Chart(repo_url="oci://ghcr.io/example/charts", name="app", version="1.2.3")


class TestSha1Hex:
    def test_matches_hashlib(self):
        assert sha1_hex(b"freight") == hashlib.sha1(b"freight").hexdigest()


class TestArtifactKeys:
    def test_key_formats(self):
        keys = artifact_keys([COMMIT], [IMAGE], [CHART])
        assert keys == sorted([
            "https://github.com/example/repo:abc123",
            "ghcr.io/example/app:v1.0.0@sha256:feed",
            "ghcr.io/example/charts/app:1.2.3",
        ])

    def test_tagged_commit(self):
        tagged = GitCommit(repo_url="https://github.com/example/repo", id="abc123", tag="v1")
        assert artifact_keys([tagged], [], []) == ["https://github.com/example/repo:v1:abc123"]

    def test_oci_chart_without_name(self):
        chart = Chart(repo_url="oci://ghcr.io/example/charts/app", version="1.0.0")
        assert artifact_keys([], [], [chart]) == ["ghcr.io/example/charts/app:1.0.0"]

    def test_http_chart_repo_path_is_cleaned(self):
        chart = Chart(repo_url="https://charts.example.com", name="app", version="1.0.0")
        assert artifact_keys([], [], [chart]) == ["https:/charts.example.com/app:1.0.0"]

    def test_trailing_slash_oci_repo_without_name(self):
        chart = Chart(repo_url="oci://ghcr.io/example/app/", version="1.0.0")
        assert artifact_keys([], [], [chart]) == ["ghcr.io/example/app:1.0.0"]


class TestGenerateFreightId:
    def test_known_value(self):
        expected = hashlib.sha1(
            b"Warehouse/test-warehouse:https://github.com/example/repo:abc123"
        ).hexdigest()
        assert generate_freight_id(ORIGIN, commits=[COMMIT]) == expected

    def test_order_independent(self):
        other = Image(repo_url="ghcr.io/example/other", tag="v2")
        assert generate_freight_id(ORIGIN, images=[IMAGE, other]) == generate_freight_id(
            ORIGIN, images=[other, IMAGE]
        )

    def test_origin_changes_id(self):
        other = FreightOrigin(name="some-other-warehouse")
        assert generate_freight_id(ORIGIN, commits=[COMMIT]) != generate_freight_id(
            other, commits=[COMMIT]
        )

    def test_equivalent_git_urls_same_id(self):
        respelled = GitCommit(repo_url="HTTPS://github.com/example/repo/", id="abc123")
        assert generate_freight_id(ORIGIN, commits=[COMMIT]) == generate_freight_id(
            ORIGIN, commits=[respelled]
        )

    def test_reference_contents(self):
        ref = FreightReference(origin=ORIGIN, commits=[COMMIT], images=[IMAGE], charts=[CHART])
        freight_id = generate_freight_id(ref.origin, ref.commits, ref.images, ref.charts)
        assert len(freight_id) == 40
        assert freight_id == generate_freight_id(ORIGIN, [COMMIT], [IMAGE], [CHART])
