"""Unit tests for binary-related domain value objects."""

from pathlib import Path

import pytest

from pagefindex.domain.binary import (
    LATEST_VERSION,
    RELEASE_URL,
    InstallerDescriptor,
    Platform,
    target_triple,
)
from pagefindex.domain.exceptions import PagefindConfigError, UnsupportedPlatformError


@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Invariant.TargetTriple")
class TestTargetTriple:
    """Test mapping of platform facts to release target triples."""

    @pytest.mark.parametrize(
        "os_type,machine,expected",
        [
            ("linux", "x86_64", "x86_64-unknown-linux-musl"),
            ("linux", "aarch64", "aarch64-unknown-linux-musl"),
            ("darwin", "arm64", "aarch64-apple-darwin"),
            ("darwin", "x86_64", "x86_64-apple-darwin"),
            ("windows", "amd64", "x86_64-pc-windows-msvc"),
        ],
    )
    def test_supported_platforms(self, os_type, machine, expected):
        assert target_triple(os_type, machine, 64) == expected

    def test_machine_is_case_insensitive(self):
        assert target_triple("windows", "AMD64", 64) == "x86_64-pc-windows-msvc"

    def test_unsupported_architecture(self):
        with pytest.raises(UnsupportedPlatformError, match="Unsupported architecture: riscv64"):
            target_triple("linux", "riscv64", 64)

    def test_32_bit_word_size_is_unsupported(self):
        with pytest.raises(UnsupportedPlatformError, match="Unsupported architecture"):
            target_triple("linux", "x86_64", 32)

    def test_unsupported_os(self):
        with pytest.raises(UnsupportedPlatformError, match="Unsupported OS: 'freebsd'"):
            target_triple("freebsd", "x86_64", 64)

    def test_unsupported_platform_is_config_error(self):
        with pytest.raises(PagefindConfigError):
            target_triple("sunos", "sparc", 64)


@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Invariant.InstallerDescriptor")
class TestInstallerDescriptor:
    def test_all_fields_start_empty(self):
        descriptor = InstallerDescriptor()
        assert descriptor.version is None
        assert descriptor.binary is None
        assert descriptor.data is None

    def test_is_windows(self):
        assert InstallerDescriptor(os_type="windows").is_windows
        assert not InstallerDescriptor(os_type="linux").is_windows

    def test_frozen_dataclass(self):
        descriptor = InstallerDescriptor(binary=Path("/tmp/pagefind"))
        with pytest.raises(AttributeError):
            descriptor.binary = None  # type: ignore

    def test_release_url_template(self):
        url = RELEASE_URL.format(version=LATEST_VERSION, target="x86_64-unknown-linux-musl")
        assert url == (
            "https://github.com/Pagefind/pagefind/releases/download/"
            "v1.4.0/pagefind-v1.4.0-x86_64-unknown-linux-musl.tar.gz"
        )

    def test_platform_defaults_to_64_bit(self):
        assert Platform(os="linux", machine="x86_64").word_size == 64
