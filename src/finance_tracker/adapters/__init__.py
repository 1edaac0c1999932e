"""Command-line adapters for the finance tracker."""
