"""Settings and run configuration."""
