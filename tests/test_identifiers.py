"""Tests for product id parsing shared by the endpoint and the client."""

import pytest

from app.core.errors import InvalidIdentifier
from app.utils.identifiers import parse_product_id


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("4", 4),
        (" 42 ", 42),
        ("+7", 7),
        ("007", 7),
        (15, 15),
        ("2147483647", 2147483647),
    ],
)
def test_accepts_positive_decimal_ids(raw, expected):
    assert parse_product_id(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["abc", "4abc", "4.0", "", "   ", "-1", "0", "1e3", "0x10", "١٢", None, 0, -3, 2.0, True, "2147483648", "99999999999999999999", 2**63],
)
def test_rejects_malformed_or_non_positive_ids(raw):
    with pytest.raises(InvalidIdentifier) as exc_info:
        parse_product_id(raw)

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "ID deve ser um número válido"
