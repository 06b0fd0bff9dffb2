"""Configuration package for the decision core.

Value tables and thresholds live in ``values``; service defaults in
``server``; runtime toggles in ``decision_config``.
"""
