"""CLI package.

The ``cli`` sub-package contains the Click application. It builds a
fresh store per command and reports results with Rich.
"""
from __future__ import annotations
