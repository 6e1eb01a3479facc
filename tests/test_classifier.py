"""
Unit tests for the address-like heuristic.
"""

import pytest

from app.services.classifier import ADDRESS_MIN_LENGTH, is_address_like


class TestIsAddressLike:
    """Tests for is_address_like()."""

    def test_base58_address(self) -> None:
        assert is_address_like("4Nd1mBQtrMJVYVfKf2PJy9NZUZdTAsp7")

    def test_exact_threshold(self) -> None:
        assert is_address_like("a" * ADDRESS_MIN_LENGTH)
        assert not is_address_like("a" * (ADDRESS_MIN_LENGTH - 1))

    @pytest.mark.parametrize(
        "query",
        [
            "What is the balance of 4Nd1mBQtrMJVYVfKf2PJy9NZUZdTAsp7",
            "4Nd1mBQtrMJVYVfKf2PJy9NZUZdTAsp7?",
            " 4Nd1mBQtrMJVYVfKf2PJy9NZUZdTAsp7",
            "what is bssc",
            "",
        ],
    )
    def test_not_address_like(self, query: str) -> None:
        assert not is_address_like(query)

    def test_long_unbroken_phrase_is_misclassified(self) -> None:
        # Heuristic only: no charset or checksum validation
        assert is_address_like("tell-me-everything-about-the-bssc-network")
