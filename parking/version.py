"""
Application version information.

Version format: MAJOR.MINOR
- MAJOR: Breaking changes (0 while the dashboard API is still moving)
- MINOR: Incremented with each merged PR

Version is logged on server startup and returned by GET /health.
"""

__version__ = "0.3"
