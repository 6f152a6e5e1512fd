"""Application layer: ports and use cases of the log relay."""
