"""Object store gateways."""
