"""Configuration and logging shared by every storefront context."""
