"""
Unit tests for WalletAddress value object.
"""

import pytest

from comptoir.domain.value_objects.wallet_address import WalletAddress

VALID_EVM = "0x" + "Ab" * 20


class TestWalletAddress:
    """Tests for WalletAddress value object."""

    def test_normalizes_case_and_whitespace(self):
        wallet = WalletAddress(f"  {VALID_EVM} ")
        assert str(wallet) == VALID_EVM.lower()

    def test_equal_regardless_of_case(self):
        assert WalletAddress(VALID_EVM) == WalletAddress(VALID_EVM.upper().replace("0X", "0x"))

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_empty_rejected(self, raw):
        with pytest.raises(ValueError):
            WalletAddress(raw)

    def test_non_evm_accepted(self):
        """Registration takes any non-empty address."""
        assert str(WalletAddress.parse("My-Wallet")) == "my-wallet"
