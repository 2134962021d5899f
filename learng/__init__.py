"""learng content backend."""
