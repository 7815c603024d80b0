"""
Top‑level package for the Work Tracker API.

This file makes ``work_tracker_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``work_tracker_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
