"""Todo list manager: reducer-driven task store with a console front end."""
