"""Infrastructure: export/import transfer codecs."""
