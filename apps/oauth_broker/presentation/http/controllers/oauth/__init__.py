"""OAuth controllers."""
