"""Command line interface for flatbundle."""
