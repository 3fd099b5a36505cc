"""Compute backends for confidence intervals."""
