"""OAuth application components."""
