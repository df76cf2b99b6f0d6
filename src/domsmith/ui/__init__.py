"""User-facing interfaces for domsmith."""
