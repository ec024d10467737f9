"""Encoders for metric logs."""
