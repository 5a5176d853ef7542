"""
Test suite for MediationConfig.
"""

import numpy as np
import pytest
from pydantic import ValidationError

from bayes_mediation import MediationConfig, TypicalValue


class TestMediationConfig:
    """Tests for MediationConfig validation."""

    def test_defaults(self):
        config = MediationConfig()

        assert config.interval_mass == 0.9
        assert config.typical is TypicalValue.MEDIAN
        assert config.treatment is None
        assert config.mediator is None

    def test_sequence_uses_first_mass(self):
        config = MediationConfig(interval_mass=[0.5, 0.95])

        assert config.interval_mass == 0.5

    def test_array_uses_first_mass(self):
        config = MediationConfig(interval_mass=np.array([0.8, 0.9]))

        assert config.interval_mass == pytest.approx(0.8)

    def test_empty_sequence(self):
        with pytest.raises(ValidationError):
            MediationConfig(interval_mass=[])

    @pytest.mark.parametrize("mass", [0.0, -0.5, 1.01])
    def test_mass_out_of_range(self, mass):
        with pytest.raises(ValidationError):
            MediationConfig(interval_mass=mass)

    def test_typical_case_insensitive(self):
        assert MediationConfig(typical="Mean").typical is TypicalValue.MEAN

    def test_unknown_typical(self):
        with pytest.raises(ValidationError):
            MediationConfig(typical="mode")

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            MediationConfig(prob=0.9)
