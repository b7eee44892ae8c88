"""Feature packages for trusty."""
