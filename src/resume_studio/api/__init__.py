"""HTTP surface for preview, export and AI generation."""
