"""Adapters – concrete transports and the retrying client built on them."""
