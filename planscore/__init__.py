"""
Business Plan Scoring Engine

Validates a filled-in business plan against its template and scores it:
- Per-field validation and heuristic content scores
- Per-section score, percentage and completeness
- Overall validity and readiness tier with next steps

The engine is a pure library; planscore.main exposes it over HTTP.
"""

__version__ = "1.0.0"
