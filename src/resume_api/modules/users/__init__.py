"""Users module: users known by external ID and the permissions they hold."""
