"""Request handling and custom field reconciliation for the D4H API."""
