"""
Tests for the filter classes in streamfilters
"""

import pytest
import streamfilters as sf
import numpy as np
import scipy.signal as sig


def get_noise(length: int = 500, seed: int = 0):
    return np.random.default_rng(seed).normal(0, 1.0, length)


class TestExponentialFilter:
    def test_constant_domain(self):
        for constant in (0.0, 1.1, -0.5, np.nan, np.inf):
            with pytest.raises(sf.InvalidParameter):
                sf.ExponentialFilter(constant)
        with pytest.raises(sf.InvalidParameter):
            sf.ExponentialFilter("half")
        # Also catchable as a ValueError
        with pytest.raises(ValueError):
            sf.ExponentialFilter(0)

        f = sf.ExponentialFilter(1.0)
        assert f.filter_constant == 1.0
        assert f.apply(4.2) == 4.2

    def test_convergence_to_constant_input(self):
        for constant in (0.05, 0.3, 0.5, 1.0):
            f = sf.ExponentialFilter(constant)
            for _ in range(2000):
                y = f.apply(3.0)
            np.testing.assert_allclose(y, 3.0)

    def test_recurrence(self):
        a = 0.2
        x = get_noise()
        f = sf.ExponentialFilter(a)
        y = np.array([f.apply(i) for i in x])
        np.testing.assert_allclose(y, sig.lfilter([a], [1, -(1 - a)], x))

        # First output only depends on the zero state
        f.reset()
        assert f.apply(1.0) == pytest.approx(a)

    def test_reset_and_resize(self):
        f = sf.ExponentialFilter(0.5)
        f.apply(1.0)
        f.apply(2.0)
        state = f.filtered_data

        # No history buffer, resizing has no effect
        f.resize(10)
        assert f.filtered_data == state
        assert f.filter_constant == 0.5

        f.reset()
        assert f.filtered_data == 0.0
        assert f.filter_constant == 0.5

    def test_from_relaxation_time(self):
        fs_hz = 1000
        f = sf.ExponentialFilter.from_relaxation_time(0.01, fs_hz, 0.95)
        y = f.process_block(np.ones(20))
        # Step response reaches accuracy after 10 samples
        np.testing.assert_allclose(y[9], 0.95)
        assert y[8] < 0.95

        with pytest.raises(sf.InvalidParameter):
            sf.ExponentialFilter.from_relaxation_time(0.0, fs_hz)
        with pytest.raises(sf.InvalidParameter):
            sf.ExponentialFilter.from_relaxation_time(0.01, -fs_hz)
        with pytest.raises(sf.InvalidParameter):
            sf.ExponentialFilter.from_relaxation_time(0.01, fs_hz, 1.0)


class TestMovingAverageFilter:
    def test_constant_input(self):
        c = 2.5
        for w in range(1, 8):
            f = sf.MovingAverageFilter(w)
            f.apply(10.0)
            f.reset()
            for _ in range(w):
                y = f.apply(c)
            assert y == c

    def test_zero_padded_start(self):
        for w in (1, 3, 10):
            f = sf.MovingAverageFilter(w)
            assert f.apply(3.0) == 3.0 / w
            assert not f.is_filled or w == 1
            f.apply(5.0)
            f.reset()
            assert f.apply(3.0) == 3.0 / w

    def test_against_fir(self):
        w = 7
        x = get_noise()
        f = sf.MovingAverageFilter(w)
        y = f.process_block(x)
        np.testing.assert_allclose(
            y, sig.lfilter(np.ones(w) / w, [1], x), atol=1e-12
        )
        assert f.is_filled

    def test_invalid_sizes(self):
        for size in (0, -3, 2.5, "five", None, True):
            with pytest.raises(sf.InvalidParameter):
                sf.MovingAverageFilter(size)
        # Integral floats are accepted
        assert sf.MovingAverageFilter(4.0).filter_size == 4

    def test_from_sampling_period(self):
        f = sf.MovingAverageFilter.from_sampling_period(100, 0.2)
        assert f.filter_size == 20

        with pytest.warns(UserWarning):
            f = sf.MovingAverageFilter.from_sampling_period(100, 0.123)
        assert f.filter_size == 12

        with pytest.raises(sf.InvalidParameter):
            sf.MovingAverageFilter.from_sampling_period(10, 0.01)
        with pytest.raises(sf.InvalidParameter):
            sf.MovingAverageFilter.from_sampling_period(0, 1.0)
        with pytest.raises(sf.InvalidParameter):
            sf.MovingAverageFilter.from_sampling_period(10, -1.0)

    def test_resize(self):
        x = get_noise(50)
        f = sf.MovingAverageFilter(5)
        f.process_block(x)

        f.resize(3)
        assert f.filter_size == 3
        assert f.running_sum == 0.0
        assert f.write_index == 0
        assert len(f.window) == 3
        np.testing.assert_array_equal(
            f.process_block(x), sf.MovingAverageFilter(3).process_block(x)
        )

        with pytest.raises(sf.InvalidParameter):
            f.resize(0)

    def test_running_sum_invariant(self):
        f = sf.MovingAverageFilter(4)
        for i in get_noise(30):
            f.apply(i)
            np.testing.assert_allclose(f.running_sum, np.sum(f.window))


class TestRCFilters:
    def test_lowpass_equals_exponential(self):
        x = get_noise()
        lp = sf.LowPassFilter(1.0, 1.0)
        ex = sf.ExponentialFilter(0.5)
        assert lp.filter_constant == 0.5
        np.testing.assert_array_equal(
            lp.process_block(x), ex.process_block(x)
        )

    def test_lowpass_constructors(self):
        lp = sf.LowPassFilter(0.3, 0.1)
        assert lp.filter_constant == pytest.approx(0.1 / 0.4)
        assert lp.rc == 0.3
        assert lp.dt == 0.1

        lp2 = sf.LowPassFilter.from_resistance_capacitance(3.0, 0.1, 0.1)
        assert lp2.filter_constant == pytest.approx(lp.filter_constant)

        fs_hz = 1000
        lp3 = sf.LowPassFilter.from_cutoff_frequency(50.0, fs_hz)
        rc = 1 / (2 * np.pi * 50.0)
        assert lp3.filter_constant == pytest.approx(
            (1 / fs_hz) / (rc + 1 / fs_hz)
        )
        assert isinstance(lp3, sf.ExponentialFilter)

    def test_highpass_constant_input(self):
        hp = sf.HighPassFilter(0.1, 0.01)
        for _ in range(100):
            assert hp.apply(2.0) == 0.0

        # After a step, the output decays back to zero
        y = hp.process_block(np.full(500, 5.0))
        assert y[0] == pytest.approx(hp.filter_constant * 3.0)
        np.testing.assert_allclose(y[-1], 0.0, atol=1e-12)

    def test_highpass_recurrence(self):
        rc, dt = 0.5, 0.1
        a = rc / (rc + dt)
        x = get_noise()
        hp = sf.HighPassFilter(rc, dt)
        assert hp.filter_constant == pytest.approx(a)
        y = hp.process_block(x)
        # First sample primes the previous input
        np.testing.assert_allclose(
            y, sig.lfilter([a, -a], [1, -a], x - x[0]), atol=1e-12
        )

        hp.reset()
        assert hp.filtered_data == 0.0
        assert hp.last_input is None
        np.testing.assert_array_equal(hp.process_block(x), y)

    def test_highpass_constructors(self):
        hp = sf.HighPassFilter.from_resistance_capacitance(2.0, 0.25, 0.5)
        assert hp.filter_constant == pytest.approx(0.5)
        hp = sf.HighPassFilter.from_cutoff_frequency(10.0, 100.0)
        assert hp.rc == pytest.approx(1 / (2 * np.pi * 10.0))
        assert hp.dt == pytest.approx(0.01)
        assert not isinstance(hp, sf.ExponentialFilter)

    def test_invalid_parameters(self):
        for filter_type in (sf.LowPassFilter, sf.HighPassFilter):
            with pytest.raises(sf.InvalidParameter):
                filter_type(0.0, 0.1)
            with pytest.raises(sf.InvalidParameter):
                filter_type(0.1, -0.1)
            with pytest.raises(sf.InvalidParameter):
                filter_type.from_resistance_capacitance(-1.0, 1.0, 0.1)
            with pytest.raises(sf.InvalidParameter):
                filter_type.from_cutoff_frequency(0.0, 100.0)
            with pytest.raises(sf.InvalidParameter):
                filter_type.from_cutoff_frequency(10.0, 0.0)

    def test_resize_is_noop(self):
        hp = sf.HighPassFilter(0.1, 0.01)
        hp.apply(1.0)
        hp.apply(2.0)
        state = (hp.filtered_data, hp.last_input)
        hp.resize(20)
        assert (hp.filtered_data, hp.last_input) == state


class TestDuplicate:
    def test_duplicate_carries_state(self):
        x = get_noise(40)
        for f in (
            sf.ExponentialFilter(0.3),
            sf.MovingAverageFilter(6),
            sf.LowPassFilter(0.2, 0.05),
            sf.HighPassFilter(0.2, 0.05),
        ):
            f.process_block(x[:20])
            g = f.duplicate()
            assert type(g) is type(f)
            assert g is not f
            np.testing.assert_array_equal(
                g.process_block(x[20:]), f.process_block(x[20:])
            )

    def test_duplicate_is_independent(self):
        f = sf.MovingAverageFilter(3)
        f.apply(3.0)
        g = f.duplicate()
        g.apply(6.0)
        assert f.write_index == 1
        assert g.write_index == 2
        assert f.window is not g.window
        assert f.apply(0.0) == 1.0


class TestMultiStreamFilter:
    def test_equivalence_with_single_filters(self):
        x = get_noise(600).reshape(-1, 2)
        for prototype in (
            sf.ExponentialFilter(0.1),
            sf.MovingAverageFilter(20),
            sf.LowPassFilter(0.1, 0.01),
            sf.HighPassFilter(0.1, 0.01),
        ):
            m = sf.MultiStreamFilter(prototype, 2)
            single_a = prototype.duplicate()
            single_b = prototype.duplicate()
            for a, b in x:
                y = m.apply([a, b])
                assert y.shape == (2,)
                assert y[0] == single_a.apply(a)
                assert y[1] == single_b.apply(b)

    def test_prototype_untouched(self):
        prototype = sf.MovingAverageFilter(4)
        prototype.apply(8.0)
        m = sf.MultiStreamFilter(prototype, 3)
        # Current state of the prototype is carried over
        np.testing.assert_array_equal(
            m.apply([0.0, 0.0, 4.0]), [2.0, 2.0, 3.0]
        )
        assert prototype.write_index == 1
        assert prototype.running_sum == 8.0
        assert m[0] is not m[1]

    def test_mismatch(self):
        m = sf.MultiStreamFilter(sf.ExponentialFilter(0.5), 2)
        with pytest.raises(sf.ConfigurationMismatch):
            m.apply([1.0, 2.0, 3.0])
        with pytest.raises(sf.ConfigurationMismatch):
            m.apply([1.0])
        with pytest.raises(sf.ConfigurationMismatch):
            m.apply([[1.0, 2.0]])
        with pytest.raises(sf.ConfigurationMismatch):
            m.process_sample(1.0, 2)
        with pytest.raises(sf.ConfigurationMismatch):
            m.process_sample(1.0, -1)
        with pytest.raises(sf.ConfigurationMismatch):
            m.process_block(np.zeros((10, 3)))
        # State was not modified by failed calls
        assert all(f.filtered_data == 0.0 for f in m.filters)

    def test_invalid_construction(self):
        with pytest.raises(sf.InvalidParameter):
            sf.MultiStreamFilter(sf.ExponentialFilter(0.5), 0)
        with pytest.raises(sf.InvalidParameter):
            sf.MultiStreamFilter(sf.ExponentialFilter(0.5), 1.5)
        with pytest.raises(sf.InvalidParameter):
            sf.MultiStreamFilter(lambda x: x, 2)

    def test_reset_resize(self):
        m = sf.MultiStreamFilter(sf.MovingAverageFilter(4), 3)
        m.process_block(np.ones((10, 3)))
        m.reset()
        for f in m.filters:
            assert f.running_sum == 0.0
            assert f.write_index == 0

        m.process_block(np.ones((10, 3)))
        m.resize(2)
        assert all(f.filter_size == 2 for f in m.filters)
        np.testing.assert_array_equal(
            m.apply([2.0, 4.0, 6.0]), [1.0, 2.0, 3.0]
        )

    def test_per_channel_processing(self):
        x = get_noise(300).reshape(-1, 3)
        m = sf.MultiStreamFilter(sf.HighPassFilter(0.2, 0.01), 3)
        y = m.process_block(x)
        assert y.shape == x.shape

        m2 = sf.MultiStreamFilter(sf.HighPassFilter(0.2, 0.01), 3)
        # Channel order does not matter
        for ch in (2, 0, 1):
            for ind in range(len(x)):
                assert m2.process_sample(x[ind, ch], ch) == y[ind, ch]

    def test_duplicate(self):
        m = sf.MultiStreamFilter(sf.ExponentialFilter(0.5), 2)
        m.apply([2.0, 4.0])
        m2 = m.duplicate()
        np.testing.assert_array_equal(m2.apply([0, 0]), m.apply([0, 0]))
        m2.apply([10.0, 10.0])
        assert m[0].filtered_data == 0.5
        assert len(m2) == 2
