"""GCE Ops - core: configuration, errors, authentication and the API client."""
