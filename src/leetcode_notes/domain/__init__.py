"""Domain layer: models, locale strings and note rendering."""
