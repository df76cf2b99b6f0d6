"""Adapters turning compiled templates into target-language source."""
