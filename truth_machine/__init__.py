"""The Truth Machine: an AI lie detector party game backend."""
