"""Infrastructure layer: file I/O, command execution, prompting, templates."""
