"""Terminal rendering for CLI output."""
