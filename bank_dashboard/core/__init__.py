"""Core configuration, security and wiring."""
