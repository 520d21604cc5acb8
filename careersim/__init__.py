"""
Career Path Simulator

This package implements the scoring engine behind a guided questionnaire for
new graduates choosing an industry. It maps self-rated preferences and
scenario choices onto a 6-axis career-fit profile, compares it with
industry/company-size reference profiles, and projects third-year salary and
overtime.

Key Design Decisions:
- Stated self-ratings dominate the behavioural scenario signal (0.6 / 0.4)
- Industry sets the baseline, company size shifts and rescales it
- Predictions are fixed linear formulas, not trained models
- Reference data is immutable and loaded once at import
"""

__version__ = "1.0.0"
