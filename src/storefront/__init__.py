"""Storefront — product catalogue, local cart, checkout and order ledger."""
