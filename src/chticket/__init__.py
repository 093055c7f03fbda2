"""ch-ticket - create Clubhouse stories from the terminal."""
