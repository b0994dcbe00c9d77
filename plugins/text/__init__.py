# plugins/text/__init__.py
from __future__ import annotations

"""
Text command group: echo and simple string transforms.
"""
