"""Services coordinating validation, projection, persistence and export."""
