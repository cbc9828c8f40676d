"""Command-line interface for cgfconverter."""
