"""Season data loading, parsing and validation."""
