"""
Brands module - brand management for the product catalog.

This module handles:
- Brand entity, validation and domain events
- Create brand command and get brand query handlers
- Brand repository (port)
- Brand infrastructure (Django ORM adapters)
"""
