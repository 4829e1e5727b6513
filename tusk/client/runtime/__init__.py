"""Runtime layer: REST pagination and streaming events."""
