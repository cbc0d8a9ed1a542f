"""Checkout: a hexagonal checkout use case built for testing patterns.

The core/ package holds the domain and its ports; adapters/ holds the
concrete payment, storage and notification integrations.
"""
