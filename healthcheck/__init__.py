"""Integration health tracking: error registry, status policy and a sample app."""
