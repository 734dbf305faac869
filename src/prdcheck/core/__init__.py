"""Core domain packages for prdcheck."""
