"""Timeline engine: date parsing, normalization, layout and styling. No Django imports."""
