"""
Test suite for effect combination and interval estimation.

Tests cover:
- Product-of-coefficients identities per draw
- Point estimates and HDIs of the four effects
- The proportion mediated and its symmetric interval
"""

import numpy as np
import pytest

from bayes_mediation import (
    InsufficientSamplesError,
    UndefinedRatioWarning,
    combine_effects,
    compute_hdi,
    proportion_mediated_interval,
    summarize_effects,
)


@pytest.fixture
def paths(rng):
    n = 1000
    return {
        "direct": rng.normal(0.3, 0.1, n),
        "mediator": rng.normal(0.8, 0.2, n),
        "treatment_on_mediator": rng.normal(0.5, 0.1, n),
    }


class TestCombineEffects:
    """Tests for combine_effects."""

    def test_indirect_is_product(self, paths):
        effects = combine_effects(**paths)

        np.testing.assert_allclose(
            effects.indirect, paths["treatment_on_mediator"] * paths["mediator"]
        )

    def test_total_is_direct_plus_indirect(self, paths):
        effects = combine_effects(**paths)

        np.testing.assert_allclose(effects.total, effects.direct + effects.indirect)

    def test_ratio_per_draw(self, paths):
        effects = combine_effects(**paths)

        np.testing.assert_allclose(
            effects.proportion_mediated, effects.indirect / effects.total
        )

    def test_zero_total_gives_nan_ratio(self):
        effects = combine_effects(
            direct=np.array([-1.0, 1.0]),
            mediator=np.array([1.0, 1.0]),
            treatment_on_mediator=np.array([1.0, 1.0]),
        )

        assert np.isnan(effects.proportion_mediated[0])
        assert effects.proportion_mediated[1] == pytest.approx(0.5)

    def test_length_mismatch(self):
        with pytest.raises(InsufficientSamplesError):
            combine_effects(np.ones(3), np.ones(3), np.ones(4))

    def test_len_and_dataframe(self, paths):
        effects = combine_effects(**paths)

        df = effects.to_dataframe()

        assert len(effects) == 1000
        assert list(df.columns) == [
            "direct",
            "indirect",
            "mediator",
            "total",
            "proportion_mediated",
        ]


class TestSummarizeEffects:
    """Tests for summarize_effects."""

    def test_effect_summaries_use_hdi(self, paths):
        effects = combine_effects(**paths)

        summaries, _ = summarize_effects(effects, 0.9)

        for label, samples in [
            ("direct", effects.direct),
            ("indirect", effects.indirect),
            ("mediator", effects.mediator),
            ("total", effects.total),
        ]:
            value, low, high = summaries[label]
            assert value == pytest.approx(np.median(samples))
            assert (low, high) == compute_hdi(samples, 0.9)

    def test_proportion_is_ratio_of_typical_values(self, paths):
        effects = combine_effects(**paths)

        summaries, _ = summarize_effects(effects, 0.9, "mean")

        expected = np.mean(effects.indirect) / np.mean(effects.total)
        assert summaries["proportion mediated"][0] == pytest.approx(expected)

    def test_typical_changes_only_point_estimates(self, rng):
        effects = combine_effects(
            direct=rng.gamma(2.0, 0.2, 1000),
            mediator=rng.gamma(3.0, 0.3, 1000),
            treatment_on_mediator=rng.normal(0.5, 0.1, 1000),
        )

        by_median, _ = summarize_effects(effects, 0.9, "median")
        by_mean, _ = summarize_effects(effects, 0.9, "mean")

        for label in ("direct", "indirect", "mediator", "total"):
            assert by_median[label][1:] == by_mean[label][1:]
            assert by_median[label][0] != by_mean[label][0]

    def test_no_diagnostics_for_clean_draws(self, paths):
        _, diagnostics = summarize_effects(combine_effects(**paths))

        assert diagnostics == []


class TestProportionMediatedInterval:
    """Tests for the proportion mediated interval.

    The interval is the point estimate plus/minus half the HDI width of the
    per-draw ratios. This is a symmetric approximation, not an HDI of the
    ratio itself.
    """

    def test_symmetric_half_width_margin(self, paths):
        effects = combine_effects(**paths)

        (low, high), _ = proportion_mediated_interval(effects, 0.4, 0.9)

        ratio_low, ratio_high = compute_hdi(effects.proportion_mediated, 0.9)
        margin = (ratio_high - ratio_low) / 2
        assert low == pytest.approx(0.4 - margin)
        assert high == pytest.approx(0.4 + margin)

    def test_zero_total_draw_is_excluded(self, rng):
        """One zero-total draw out of 1000 is dropped with an advisory."""
        n = 1000
        direct = rng.normal(1.0, 0.1, n)
        mediator = rng.normal(0.5, 0.1, n)
        treatment_on_mediator = np.ones(n)
        mediator[0] = 0.5
        direct[0] = -0.5
        effects = combine_effects(direct, mediator, treatment_on_mediator)
        assert effects.total[0] == 0.0

        (low, high), diagnostics = proportion_mediated_interval(effects, 0.3, 0.9)

        ratio_low, ratio_high = compute_hdi(effects.proportion_mediated[1:], 0.9)
        margin = (ratio_high - ratio_low) / 2
        assert low == pytest.approx(0.3 - margin)
        assert high == pytest.approx(0.3 + margin)
        assert len(diagnostics) == 1
        assert diagnostics[0].category is UndefinedRatioWarning
        assert "1 of 1000" in diagnostics[0].message

    def test_all_totals_zero(self):
        effects = combine_effects(
            direct=np.array([-1.0, -2.0, -3.0]),
            mediator=np.array([1.0, 2.0, 3.0]),
            treatment_on_mediator=np.ones(3),
        )

        with pytest.raises(InsufficientSamplesError):
            summarize_effects(effects)
