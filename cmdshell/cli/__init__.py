"""Command-line front end for the shell."""
