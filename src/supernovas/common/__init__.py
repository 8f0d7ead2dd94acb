"""Ambient support shared by the Julian date types: configuration, logging & exceptions."""
