"""JSON message catalogues for the admin interface."""
