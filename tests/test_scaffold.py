"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined and agree with the exceptions.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from bowerpy import __version__
from bowerpy.cli import exit_codes
from bowerpy.cli.app import cli, main
from bowerpy.exceptions import (
    ArchiveError,
    BowerpyError,
    EnvironmentError,
    FailureKind,
    InstallError,
    ManifestMissingError,
    NetworkError,
    PackageNotFoundError,
    VersionNotFoundError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            VersionNotFoundError,
            PackageNotFoundError,
            ManifestMissingError,
            NetworkError,
            ArchiveError,
        ],
    )
    def test_install_errors_inherit_from_install_error(
        self, exc_class: type[BowerpyError]
    ) -> None:
        assert issubclass(exc_class, InstallError)
        assert issubclass(exc_class, BowerpyError)

    def test_environment_error_is_not_an_install_error(self) -> None:
        assert issubclass(EnvironmentError, BowerpyError)
        assert not issubclass(EnvironmentError, InstallError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(BowerpyError, Exception)

    def test_hint_is_stored(self) -> None:
        err = BowerpyError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.message == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert BowerpyError("boom").hint is None

    @pytest.mark.parametrize(
        ("exc_class", "kind"),
        [
            (VersionNotFoundError, FailureKind.VERSION_NOT_FOUND),
            (PackageNotFoundError, FailureKind.PACKAGE_NOT_FOUND),
            (ManifestMissingError, FailureKind.MANIFEST_MISSING),
            (NetworkError, FailureKind.NETWORK_ERROR),
            (ArchiveError, FailureKind.OTHER),
            (InstallError, FailureKind.OTHER),
        ],
    )
    def test_kind_per_class(self, exc_class: type[BowerpyError], kind: FailureKind) -> None:
        assert exc_class("x").kind is kind


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2

    def test_version_not_found_is_three(self) -> None:
        assert exit_codes.VERSION_NOT_FOUND == 3
        assert VersionNotFoundError.exit_code == 3

    def test_install_failure_codes_are_distinct_and_nonzero(self) -> None:
        codes = {
            exit_codes.VERSION_NOT_FOUND,
            exit_codes.PACKAGE_NOT_FOUND,
            exit_codes.MANIFEST_MISSING,
            exit_codes.NETWORK_ERROR,
        }
        assert len(codes) == 4
        assert exit_codes.SUCCESS not in codes

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No sub-command should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "install" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    @patch("bowerpy.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_returns_success(self, _mock_doc: object) -> None:
        assert main(["doctor"]) == exit_codes.SUCCESS

    def test_install_routes_package_and_save(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        from bowerpy.cli import app as app_module

        calls: list[tuple[str | None, bool]] = []
        monkeypatch.setattr(
            app_module,
            "_handle_install",
            lambda package, save: calls.append((package, save)) or exit_codes.SUCCESS,
        )
        assert main(["install", "-S", "jquery#2.1.4"]) == exit_codes.SUCCESS
        assert main(["install"]) == exit_codes.SUCCESS
        assert calls == [("jquery#2.1.4", True), (None, False)]

    def test_unknown_command_exits_with_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["frobnicate"])
        assert exc_info.value.code == 2


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_success_exit(self) -> None:
        with patch("bowerpy.cli.app.main", return_value=0):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == 0

    def test_bowerpy_error_uses_its_exit_code(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        err = NetworkError("registry down", hint="retry later")
        with patch("bowerpy.cli.app.main", side_effect=err):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.NETWORK_ERROR
        stderr = capsys.readouterr().err
        assert "registry down" in stderr
        assert "retry later" in stderr

    def test_keyboard_interrupt(self) -> None:
        with patch("bowerpy.cli.app.main", side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_exception(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("bowerpy.cli.app.main", side_effect=RuntimeError("kaboom")):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: kaboom" in capsys.readouterr().err

    def test_error_text_with_markup_is_printed_literally(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        err = NetworkError("https://host/[/x] answered HTTP 500", hint="see [bold]docs[/]")
        with patch("bowerpy.cli.app.main", side_effect=err):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.NETWORK_ERROR
        stderr = capsys.readouterr().err
        assert "Error: https://host/[/x] answered HTTP 500" in stderr
        assert "Hint: see [bold]docs[/]" in stderr

    def test_unexpected_text_with_markup_is_printed_literally(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch("bowerpy.cli.app.main", side_effect=ValueError("bad [/x] value")):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR
        assert "ValueError: bad [/x] value" in capsys.readouterr().err
