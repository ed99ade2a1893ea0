"""Utility helpers for the reachability toolkit."""
