"""Translator evaluation harness."""
