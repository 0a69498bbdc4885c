"""
Top‑level package for the Volunteer Coordination API.

This file makes ``volunteer_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``volunteer_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
