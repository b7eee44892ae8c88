"""Core building blocks shared across trusty features."""
