"""Tests for the naming helpers."""

from __future__ import annotations

import pulumi
import pytest
from aijay.helpers import domain_prefix, format_resource_name


def test_domain_prefix_uses_last_six_account_digits() -> None:
    assert domain_prefix("123456789012") == "aijay-789012"


@pytest.mark.parametrize(
    "account",
    ["123456789012", "000000000000", "987654", "abcdefghijklmnop"],
)
def test_domain_prefix_is_literal_plus_account_suffix(account: str) -> None:
    prefix = domain_prefix(account)

    assert prefix.startswith("aijay-")
    assert prefix == "aijay-" + account[-6:]
    assert len(prefix) == len("aijay-") + 6


@pytest.mark.parametrize("account", [None, ""])
@pulumi.runtime.test
def test_domain_prefix_requires_an_account(account: str | None) -> None:
    with pytest.raises(ValueError, match="target account is required"):
        domain_prefix(account)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("AIJay-Foundations", "aijay-foundations"),
        ("users_table", "users-table"),
        ("api.v1", "api.v1"),
    ],
)
def test_format_resource_name(name: str, expected: str) -> None:
    assert format_resource_name(name) == expected


@pytest.mark.parametrize("name", ["with space", "slash/name", "emoji🙂", ""])
@pulumi.runtime.test
def test_format_resource_name_rejects_invalid_names(name: str) -> None:
    with pytest.raises(ValueError, match="Invalid resource name"):
        format_resource_name(name)
