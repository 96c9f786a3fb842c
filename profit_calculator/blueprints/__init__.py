"""HTTP blueprints for the profit calculator."""
