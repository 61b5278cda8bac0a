"""Utility helpers for spdxGraph."""

from .log_json import JsonLogger

__all__ = ["JsonLogger"]
