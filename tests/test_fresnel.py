"""Tests for the trapezoidal Fresnel integrals and the Cornu spiral."""

import numpy as np
import pytest

from difflab import (
    cornu_spiral,
    fresnel_integral,
    fresnel_integral_reference,
    fresnel_integrals,
)


def trapezoid_reference(u: float, steps: int = 100) -> tuple[float, float]:
    """Plain-loop trapezoidal rule, summed sample by sample."""
    dt = u / steps
    c = 0.0
    s = 0.0
    for i in range(steps + 1):
        t = i * dt
        weight = 0.5 if i in (0, steps) else 1.0
        argument = np.pi * t * t / 2
        c += weight * np.cos(argument)
        s += weight * np.sin(argument)
    return c * dt, s * dt


class TestFresnelIntegral:
    """Tests for fresnel_integral()."""

    def test_zero_is_exactly_zero(self):
        """C(0) and S(0) are exactly zero."""
        result = fresnel_integral(0.0)
        assert result.C == 0.0
        assert result.S == 0.0
        assert tuple(result) == (0.0, 0.0)

    @pytest.mark.parametrize("u", [0.3, 1.0, 2.5, 7.0])
    def test_odd_symmetry(self, u):
        """Negative bounds give negated integrals (no abs(u))."""
        pos = fresnel_integral(u)
        neg = fresnel_integral(-u)
        assert neg.C == pytest.approx(-pos.C, abs=1e-15)
        assert neg.S == pytest.approx(-pos.S, abs=1e-15)
        assert neg.C < 0

    @pytest.mark.parametrize("u", [-1.7, 0.5, 1.0, 4.2, 12.0])
    def test_matches_plain_loop(self, u):
        """Same values as a sample-by-sample trapezoidal sum."""
        c_ref, s_ref = trapezoid_reference(u)
        result = fresnel_integral(u)
        assert np.isclose(result.C, c_ref, rtol=1e-12, atol=1e-12)
        assert np.isclose(result.S, s_ref, rtol=1e-12, atol=1e-12)

    @pytest.mark.parametrize("u", np.linspace(-2.0, 2.0, 9))
    def test_close_to_exact_for_moderate_u(self, u):
        """100 steps are accurate to ~1e-3 for |u| <= 2."""
        c_exact, s_exact = fresnel_integral_reference(u)
        result = fresnel_integral(u)
        assert result.C == pytest.approx(c_exact, abs=1e-3)
        assert result.S == pytest.approx(s_exact, abs=1e-3)

    def test_more_steps_converge(self):
        """Finer quadrature approaches the exact integrals."""
        c_exact, s_exact = fresnel_integral_reference(3.0)
        coarse = fresnel_integral(3.0, steps=100)
        fine = fresnel_integral(3.0, steps=2000)
        assert abs(fine.C - c_exact) < abs(coarse.C - c_exact)
        assert fine.C == pytest.approx(c_exact, abs=1e-5)
        assert fine.S == pytest.approx(s_exact, abs=1e-5)

    def test_known_values_at_one(self):
        """C(1) ~ 0.7799, S(1) ~ 0.4383."""
        result = fresnel_integral(1.0)
        assert result.C == pytest.approx(0.77989, abs=1e-3)
        assert result.S == pytest.approx(0.43826, abs=1e-3)

    def test_idempotent(self):
        """Repeated calls are bit-identical."""
        assert fresnel_integral(2.345) == fresnel_integral(2.345)

    def test_non_finite_input_propagates(self):
        """Infinite bounds give nan instead of raising."""
        result = fresnel_integral(np.inf)
        assert np.isnan(result.C)
        assert np.isnan(result.S)

    @pytest.mark.parametrize("steps", [0, -5, 2.5])
    def test_invalid_steps(self, steps):
        """Step count must be a positive integer."""
        with pytest.raises(ValueError, match="Step count"):
            fresnel_integral(1.0, steps=steps)


class TestFresnelIntegralsVectorized:
    """Tests for the array version of the quadrature."""

    def test_agrees_with_scalar(self):
        """Array evaluation matches element-wise scalar calls."""
        u = np.array([-3.0, -0.5, 0.0, 0.7, 1.9, 6.4])
        c, s = fresnel_integrals(u)
        for ui, ci, si in zip(u, c, s):
            scalar = fresnel_integral(ui)
            assert np.isclose(ci, scalar.C, rtol=1e-12, atol=1e-15)
            assert np.isclose(si, scalar.S, rtol=1e-12, atol=1e-15)

    def test_preserves_shape(self):
        """Output shape follows the input shape."""
        u = np.linspace(0, 2, 12).reshape(3, 4)
        c, s = fresnel_integrals(u)
        assert c.shape == (3, 4)
        assert s.shape == (3, 4)

    def test_zero_entries(self):
        """Zero bounds give exact zeros inside an array."""
        c, s = fresnel_integrals(np.array([0.0, 1.0]))
        assert c[0] == 0.0
        assert s[0] == 0.0


class TestCornuSpiral:
    """Tests for cornu_spiral()."""

    def test_shape(self):
        """Returns n points for each coordinate."""
        c, s = cornu_spiral(u_max=3.0, n=101)
        assert c.shape == (101,)
        assert s.shape == (101,)

    def test_point_symmetric(self):
        """The spiral is point-symmetric about the origin."""
        c, s = cornu_spiral(u_max=2.0, n=201)
        assert np.allclose(c, -c[::-1], atol=1e-12)
        assert np.allclose(s, -s[::-1], atol=1e-12)

    def test_approaches_eyes(self):
        """With fine quadrature the arm heads towards (0.5, 0.5)."""
        c, s = cornu_spiral(u_max=4.0, n=11, steps=4000)
        assert c[-1] == pytest.approx(0.5, abs=0.1)
        assert s[-1] == pytest.approx(0.5, abs=0.1)

    def test_too_few_points(self):
        """At least two points are needed."""
        with pytest.raises(ValueError, match="at least 2"):
            cornu_spiral(n=1)
