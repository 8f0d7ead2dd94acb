"""Astronomical time, and the physical constants that go with it."""
