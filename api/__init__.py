"""HTTP entry point (``api.index:app``)."""
