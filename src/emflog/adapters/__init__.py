"""Adapters connecting metric logs to external facilities."""
