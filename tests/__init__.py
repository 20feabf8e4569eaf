"""Test suite for the auto-create-table tool."""
