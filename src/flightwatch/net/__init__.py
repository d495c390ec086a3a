"""HTTP access and error summarisation."""
