"""
Random Sources

Generators backing Interval.random_value.

Callers that need reproducible samples pass their own seeded
numpy Generator. The implicit default generator is created lazily
per thread, so intervals sampled concurrently from several threads
never share generator state.
"""

import logging
import threading
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)

_thread_state = threading.local()


def make_generator(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create an independent generator.

    Args:
        seed: Seed for reproducible sequences (None draws fresh entropy)

    Returns:
        A numpy Generator
    """
    return np.random.default_rng(seed)


def default_generator() -> np.random.Generator:
    """Return the calling thread's default generator, creating it on first use."""
    generator = getattr(_thread_state, "generator", None)
    if generator is None:
        generator = make_generator()
        _thread_state.generator = generator
        logger.debug("Created default generator for thread %s", threading.get_ident())
    return generator


def seed_default_generator(seed: Optional[int]) -> np.random.Generator:
    """Replace the calling thread's default generator with a seeded one."""
    generator = make_generator(seed)
    _thread_state.generator = generator
    logger.debug("Seeded default generator for thread %s with %r", threading.get_ident(), seed)
    return generator
