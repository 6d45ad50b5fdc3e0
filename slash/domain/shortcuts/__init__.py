"""
Shortcuts bounded context: domain layer.

- Shortcut, user and activity entities
- Visibility and ownership rules
- Tag storage codec
- Store port and error taxonomy
"""
