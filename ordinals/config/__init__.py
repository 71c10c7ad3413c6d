"""Environment settings and logging setup."""
