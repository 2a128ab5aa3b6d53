"""Core components: HTTP transport, upload protocol, errors and logging."""
