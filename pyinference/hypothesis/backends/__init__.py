"""Compute backends for hypothesis tests."""
