"""Text and JSON formats for CHR dumps."""
