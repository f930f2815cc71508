"""Convert tables between markdown pipe-table and CSV text."""
