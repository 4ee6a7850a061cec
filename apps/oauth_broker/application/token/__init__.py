"""Provider token application components."""
