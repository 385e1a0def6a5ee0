"""Service layer: configuration, form state and user reconciliation."""
