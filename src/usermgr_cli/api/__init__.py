"""HTTP access to the remote user collection."""
