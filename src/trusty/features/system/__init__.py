"""System feature for trusty."""
