"""Library Catalog - CLI utilities

- Output rendering in plain/json/rich modes (ui_helpers.py)
- Prompt input validation (validators.py)
"""
