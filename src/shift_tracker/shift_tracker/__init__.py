"""Shift Tracker package.

This package is organized by feature modules (profiles, records, schedule, ...)
with a thin Flask controller layer over a pure schedule calculation engine.
"""
