"""Test suite for the beer stock backend."""
