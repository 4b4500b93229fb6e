"""Shared libraries: errors, logging, validation and tool filtering."""
