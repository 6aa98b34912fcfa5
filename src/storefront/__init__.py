"""Storefront cart pricing and discount engine."""
