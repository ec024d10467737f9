"""Core metric log model, builder, validation and encoding."""
