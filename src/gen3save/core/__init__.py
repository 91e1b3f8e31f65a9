"""Format constants, character table, checksum and errors."""
