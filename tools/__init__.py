"""Maintenance scripts for exported IFN data."""
