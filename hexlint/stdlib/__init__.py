"""Built-in rules and formatters."""
