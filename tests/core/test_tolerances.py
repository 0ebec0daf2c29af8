"""
Tests for tolerance tiers and numeric configuration.
"""

from dataclasses import FrozenInstanceError

import pytest

from pymatrix.core.tolerances import (
    APPROXIMATE,
    EXACT,
    ToleranceTier,
)


class TestToleranceTiers:

    def test_exact_is_zero(self):
        assert EXACT.atol == 0.0

    def test_approximate_default(self):
        assert APPROXIMATE.atol == 1e-3

    def test_tiers_are_frozen(self):
        with pytest.raises(FrozenInstanceError):
            EXACT.atol = 1.0  # type: ignore[misc]

    def test_custom_tier(self):
        tier = ToleranceTier(atol=1e-6, name='tight', description='tight')
        assert tier.atol == 1e-6
