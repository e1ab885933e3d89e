"""Unit tests for the regparm parameter layer."""
