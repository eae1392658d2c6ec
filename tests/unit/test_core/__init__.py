"""Tests for core configuration, exceptions and logging."""
