"""Tests for the compiler package."""
