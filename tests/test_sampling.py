"""
Tests for random sources
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest
from intervalkit import Interval, default_generator, make_generator, seed_default_generator


class TestGenerators:
    """Test explicit and default generators."""

    def test_make_generator_reproducible(self):
        """Test that equal seeds give equal sequences."""
        a = make_generator(1).random(5)
        b = make_generator(1).random(5)
        np.testing.assert_array_equal(a, b)

    def test_default_generator_per_thread(self):
        """Test that each thread gets its own default generator."""
        main = default_generator()
        assert default_generator() is main

        seen = []
        worker = threading.Thread(target=lambda: seen.append(default_generator()))
        worker.start()
        worker.join()
        assert seen[0] is not main

    def test_seed_default_generator(self):
        """Test reproducible sampling through the default generator."""
        iv = Interval(0.0, 1.0)
        seed_default_generator(7)
        first = [iv.random_value() for _ in range(5)]
        seed_default_generator(7)
        second = [iv.random_value() for _ in range(5)]
        assert first == second

    def test_concurrent_sampling(self):
        """Test sampling from many threads at once."""
        iv = Interval(-1.0, 1.0)

        def sample(_):
            return [iv.random_value() for _ in range(500)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(sample, range(16)))
        for values in results:
            assert all(iv.contains(v) for v in values)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
