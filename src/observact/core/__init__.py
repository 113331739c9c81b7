"""Core types, errors, interfaces and configuration."""
