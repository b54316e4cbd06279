"""Player directory lookups."""
