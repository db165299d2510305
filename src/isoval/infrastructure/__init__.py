"""Infrastructure layer: the markup codec and the message catalogue."""
