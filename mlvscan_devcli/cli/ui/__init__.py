"""Report rendering - text console and JSON export."""
