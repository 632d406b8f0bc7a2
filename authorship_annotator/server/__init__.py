"""HTTP API for scanning source text for @@author annotations."""
