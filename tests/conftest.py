"""
Shared pytest configuration: headless matplotlib and figure cleanup.
"""
import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import pytest


@pytest.fixture(autouse=True)
def close_figures():
    """Close any figure a test leaves open."""
    yield
    plt.close('all')
