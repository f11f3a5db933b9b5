"""Catalogue bounded context — the read-only product list the storefront sells from."""
