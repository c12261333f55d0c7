"""Azure provider implementation."""
