"""Test package for markermap.

This package contains:
- Unit tests (test_projection.py, test_clustering.py, test_filtering.py,
  test_presentation.py, test_config.py)
- Integration tests (test_session.py)
- Test configuration (conftest.py)
"""
