"""Tests for single-file install and uninstall edits.

These are integration tests (Layer 2) that use tmp_path for filesystem operations.
"""

from pathlib import Path
from unittest import mock

import pytest

from pathsync.core.errors import ShellConfigUpdateError
from pathsync.core.install_root import InstallRoot
from pathsync.core.rc_patcher import apply_install, apply_uninstall, read_rc
from pathsync.core.shell_candidates import DirectiveKind, ShellCandidate

# Looks vaguely like a real startup file
FAKE_RC = """
# Sources fruity punch.
source ~/fruit/punch

# Adds apples to PATH.
export PATH="$HOME/apple/bin"
"""

DEFAULT_SOURCE = 'source "$HOME/.toolchain/env.sh"'
DEFAULT_EXPORT = 'export PATH="$HOME/.toolchain/bin:$PATH"'


def _candidate(
    path: Path, *, directive: DirectiveKind = "indirection", required: bool = True
) -> ShellCandidate:
    return ShellCandidate(path=path, exists=path.exists(), directive=directive, required=required)


def test_install_appends_source_line(home: Path, literal_root: InstallRoot) -> None:
    profile = home / ".profile"
    profile.write_text("foo\nbar\nbaz", encoding="utf-8")

    assert apply_install(_candidate(profile), literal_root) is True

    expected = f'foo\nbar\nbaz\nsource "{literal_root.path}/env.sh"\n'
    assert profile.read_text(encoding="utf-8") == expected


def test_install_is_idempotent(home: Path, literal_root: InstallRoot) -> None:
    profile = home / ".profile"
    profile.write_text(FAKE_RC, encoding="utf-8")

    apply_install(_candidate(profile), literal_root)
    once = profile.read_text(encoding="utf-8")
    assert apply_install(_candidate(profile), literal_root) is False

    assert profile.read_text(encoding="utf-8") == once


def test_install_then_uninstall_restores_content(home: Path, literal_root: InstallRoot) -> None:
    profile = home / ".profile"
    profile.write_text("foo\nbar\nbaz", encoding="utf-8")

    apply_install(_candidate(profile), literal_root)
    apply_install(_candidate(profile), literal_root)
    assert apply_uninstall(_candidate(profile), literal_root) is True

    assert profile.read_text(encoding="utf-8") == "foo\nbar\nbaz"


def test_install_creates_required_candidate(home: Path, default_root: InstallRoot) -> None:
    profile = home / ".profile"

    assert apply_install(_candidate(profile), default_root) is True

    assert profile.read_text(encoding="utf-8") == f"\n{DEFAULT_SOURCE}\n"


def test_install_skips_missing_optional_candidate(home: Path, default_root: InstallRoot) -> None:
    bashrc = home / ".bashrc"

    assert apply_install(_candidate(bashrc, required=False), default_root) is False

    assert not bashrc.exists()


def test_install_migrates_legacy_export(home: Path, default_root: InstallRoot) -> None:
    profile = home / ".profile"
    profile.write_text(f"{FAKE_RC}\n{DEFAULT_EXPORT}\n", encoding="utf-8")

    apply_install(_candidate(profile), default_root)

    assert profile.read_text(encoding="utf-8") == f"{FAKE_RC}\n{DEFAULT_SOURCE}\n"


def test_install_on_legacy_candidate_only_removes_export(
    home: Path, default_root: InstallRoot
) -> None:
    zprofile = home / ".zprofile"
    zprofile.write_text(f"{FAKE_RC}\n{DEFAULT_EXPORT}\n", encoding="utf-8")

    candidate = _candidate(zprofile, directive="legacy", required=False)
    assert apply_install(candidate, default_root) is True

    assert zprofile.read_text(encoding="utf-8") == FAKE_RC


def test_install_on_missing_legacy_candidate_is_noop(home: Path, default_root: InstallRoot) -> None:
    zprofile = home / ".zprofile"

    candidate = _candidate(zprofile, directive="legacy", required=False)
    assert apply_install(candidate, default_root) is False

    assert not zprofile.exists()


def test_migrated_legacy_line_does_not_come_back_on_uninstall(
    home: Path, default_root: InstallRoot
) -> None:
    profile = home / ".profile"
    profile.write_text(f"{FAKE_RC}\n{DEFAULT_EXPORT}\n", encoding="utf-8")

    apply_install(_candidate(profile), default_root)
    apply_uninstall(_candidate(profile), default_root)

    assert profile.read_text(encoding="utf-8") == FAKE_RC


def test_uninstall_removes_legacy_export_without_prior_install(
    home: Path, default_root: InstallRoot
) -> None:
    bash_profile = home / ".bash_profile"
    bash_profile.write_text(f"{FAKE_RC}\n{DEFAULT_EXPORT}\n", encoding="utf-8")

    assert apply_uninstall(_candidate(bash_profile, required=False), default_root) is True

    assert bash_profile.read_text(encoding="utf-8") == FAKE_RC


def test_uninstall_missing_file_is_noop(home: Path, default_root: InstallRoot) -> None:
    profile = home / ".profile"

    assert apply_uninstall(_candidate(profile), default_root) is False

    assert not profile.exists()


def test_uninstall_without_directive_does_not_write(home: Path, default_root: InstallRoot) -> None:
    profile = home / ".profile"
    profile.write_text(FAKE_RC, encoding="utf-8")

    with mock.patch.object(Path, "write_bytes") as write_bytes:
        assert apply_uninstall(_candidate(profile), default_root) is False

    write_bytes.assert_not_called()


def test_uninstall_only_matches_this_install_root(home: Path, literal_root: InstallRoot) -> None:
    profile = home / ".profile"
    content = f"{FAKE_RC}\n{DEFAULT_SOURCE}\n"
    profile.write_text(content, encoding="utf-8")

    assert apply_uninstall(_candidate(profile), literal_root) is False

    assert profile.read_text(encoding="utf-8") == content


def test_write_failure_names_the_file(home: Path, default_root: InstallRoot) -> None:
    profile = home / ".profile"
    profile.write_text(FAKE_RC, encoding="utf-8")

    with mock.patch.object(Path, "write_bytes", side_effect=PermissionError(13, "denied")):
        with pytest.raises(ShellConfigUpdateError) as exc_info:
            apply_install(_candidate(profile), default_root)

    assert exc_info.value.path == profile
    assert "could not amend shell profile" in str(exc_info.value)
    assert profile.read_text(encoding="utf-8") == FAKE_RC


def test_unreadable_file_raises_shell_config_update_error(
    home: Path, default_root: InstallRoot
) -> None:
    # A directory where a file is expected cannot be read
    profile = home / ".profile"
    profile.mkdir()

    with pytest.raises(ShellConfigUpdateError) as exc_info:
        apply_uninstall(_candidate(profile), default_root)

    assert exc_info.value.path == profile


def test_crlf_content_survives_install_and_uninstall(
    home: Path, literal_root: InstallRoot
) -> None:
    profile = home / ".profile"
    profile.write_bytes(b"foo\r\nbar\r\n")

    apply_install(_candidate(profile), literal_root)
    installed = profile.read_bytes()
    apply_uninstall(_candidate(profile), literal_root)

    source = f'source "{literal_root.path}/env.sh"'.encode()
    assert installed == b"foo\r\nbar\r\n\n" + source + b"\n"
    assert profile.read_bytes() == b"foo\r\nbar\r\n"


def test_install_migrates_legacy_export_without_trailing_newline(
    home: Path, default_root: InstallRoot
) -> None:
    profile = home / ".profile"
    profile.write_text(f"foo\n{DEFAULT_EXPORT}", encoding="utf-8")

    apply_install(_candidate(profile), default_root)

    assert profile.read_text(encoding="utf-8") == f"foo\n{DEFAULT_SOURCE}\n"


def test_uninstall_removes_legacy_export_without_trailing_newline(
    home: Path, default_root: InstallRoot
) -> None:
    bash_profile = home / ".bash_profile"
    bash_profile.write_text(f"foo\n{DEFAULT_EXPORT}", encoding="utf-8")

    assert apply_uninstall(_candidate(bash_profile, required=False), default_root) is True

    assert bash_profile.read_text(encoding="utf-8") == "foo"


def test_non_utf8_bytes_are_preserved(home: Path, default_root: InstallRoot) -> None:
    # Latin-1 comment
    profile = home / ".profile"
    profile.write_bytes(b"# caf\xe9\nfoo\n")

    assert apply_install(_candidate(profile), default_root) is True
    assert profile.read_bytes() == b"# caf\xe9\nfoo\n\n" + DEFAULT_SOURCE.encode() + b"\n"

    assert apply_uninstall(_candidate(profile), default_root) is True
    assert profile.read_bytes() == b"# caf\xe9\nfoo\n"


def test_read_rc_keeps_line_endings_and_undecodable_bytes(home: Path) -> None:
    profile = home / ".profile"
    profile.write_bytes(b"a\r\nb\xff\rc")

    content = read_rc(profile)

    assert content is not None
    assert content.startswith("a\r\nb")
    assert content.endswith("\rc")
    assert content.encode("utf-8", errors="surrogateescape") == b"a\r\nb\xff\rc"


def test_read_rc_returns_none_for_missing_file(home: Path) -> None:
    assert read_rc(home / ".profile") is None
