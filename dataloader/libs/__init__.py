"""Library adapters wrapping third-party readers."""
