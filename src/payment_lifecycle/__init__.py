"""Payment lifecycle service."""
