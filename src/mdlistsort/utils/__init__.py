"""Utility helpers for mdlistsort."""
