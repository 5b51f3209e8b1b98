"""Conftest: render matplotlib figures off-screen during tests."""

import matplotlib

matplotlib.use("Agg")
