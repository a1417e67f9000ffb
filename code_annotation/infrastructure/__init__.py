"""Infrastructure: database sessions, repositories, identity and logging (the shell)."""
