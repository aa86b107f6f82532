"""Blog board API: users, boards and replies behind a JSON envelope."""
