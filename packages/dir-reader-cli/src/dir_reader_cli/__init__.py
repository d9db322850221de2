"""Command-line front end for dir_reader."""
