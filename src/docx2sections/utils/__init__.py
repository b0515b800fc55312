"""Utility helpers for docx2sections."""
