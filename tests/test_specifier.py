"""Tests for specifier parsing and request building (core/specifier.py)."""

from __future__ import annotations

import pytest

from bowerpy.core.models import BulkInstall, PackageIdentity, SingleInstall
from bowerpy.core.specifier import build_request, parse_specifier


class TestParseSpecifier:
    def test_name_and_version(self) -> None:
        assert parse_specifier("foo#1.2.3") == PackageIdentity("foo", "1.2.3")

    def test_name_only_defaults_to_wildcard(self) -> None:
        assert parse_specifier("foo") == PackageIdentity("foo", "*")

    def test_none_means_bulk(self) -> None:
        assert parse_specifier(None) is None

    def test_splits_on_first_hash_only(self) -> None:
        assert parse_specifier("foo#1.0#beta") == PackageIdentity("foo", "1.0#beta")

    def test_trailing_hash_defaults_to_wildcard(self) -> None:
        assert parse_specifier("foo#") == PackageIdentity("foo", "*")

    @pytest.mark.parametrize("raw", ["Foo.Bar", "some/path", "-weird-", "x y"])
    def test_name_is_not_validated(self, raw: str) -> None:
        assert parse_specifier(raw) == PackageIdentity(raw, "*")

    def test_empty_string_is_forwarded_unvalidated(self) -> None:
        """Current behaviour: an empty token yields an empty name.

        The installer is left to reject it.
        """
        assert parse_specifier("") == PackageIdentity("", "*")

    def test_leading_hash_gives_empty_name(self) -> None:
        assert parse_specifier("#1.0") == PackageIdentity("", "1.0")


class TestBuildRequest:
    def test_no_package_selects_bulk(self) -> None:
        assert build_request(None) == BulkInstall()

    def test_save_flag_dropped_in_bulk_mode(self) -> None:
        request = build_request(None, save=True)
        assert isinstance(request, BulkInstall)
        assert request.save_to_manifest is False

    def test_package_selects_single(self) -> None:
        request = build_request("jquery#2.1.4", save=True)
        assert request == SingleInstall(
            target=PackageIdentity("jquery", "2.1.4"),
            save_to_manifest=True,
        )

    def test_single_without_save(self) -> None:
        request = build_request("jquery")
        assert isinstance(request, SingleInstall)
        assert request.save_to_manifest is False
