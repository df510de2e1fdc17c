"""Text codecs for PDF outlines and document metadata."""
