from __future__ import annotations

import pytest

from devassets.assets.frameworks import (
    describe,
    framework_version,
    is_net_framework,
    normalize_short_name,
    same_framework,
)


@pytest.mark.parametrize(
    ("short_name", "expected"),
    [
        ("net50", "net5.0"),
        ("net90", "net9.0"),
        ("net100", "net10.0"),
        ("net60-windows", "net6.0-windows"),
        ("net8.0", "net8.0"),
        ("net8.0-android", "net8.0-android"),
        ("netcoreapp3.1", "netcoreapp3.1"),
        ("netstandard2.1", "netstandard2.1"),
        ("net45", "net45"),
        ("net472", "net472"),
        ("net48", "net48"),
        ("  net70 ", "net7.0"),
        ("weird", "weird"),
    ],
)
def test_normalize_short_name(short_name: str, expected: str) -> None:
    assert normalize_short_name(short_name) == expected


def test_framework_version_orders_modern_names() -> None:
    assert framework_version("net60") == (6, 0)
    assert framework_version("net10.0") == (10, 0)
    assert framework_version("net6.0") < framework_version("net10.0")
    assert framework_version("netcoreapp3.1") is None


def test_is_net_framework() -> None:
    assert is_net_framework("net472")
    assert is_net_framework("net48")
    assert not is_net_framework("net8.0")
    assert not is_net_framework("net80")
    assert not is_net_framework("netcoreapp2.1")


def test_describe_marks_modern_frameworks() -> None:
    modern = describe("net80")
    legacy = describe("netcoreapp3.1")

    assert modern.display == "net8.0"
    assert modern.short_name == "net80"
    assert modern.is_modern
    assert not legacy.is_modern


def test_same_framework_ignores_dotting_and_case() -> None:
    assert same_framework("net80", "NET8.0")
    assert not same_framework("net8.0", "net7.0")
