"""Dummy file generation services."""

from __future__ import annotations
