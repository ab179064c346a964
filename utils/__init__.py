"""Mini Library - console helpers

- Output rendering for plain / json / rich modes (ui_helpers.py)
- Console input checks (validators.py)
"""
