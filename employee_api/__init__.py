"""Employee directory REST service."""
