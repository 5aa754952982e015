"""keyprov - provision SSH deploy keys for CI."""
