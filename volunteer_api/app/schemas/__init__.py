"""
Pydantic schema definitions for API payloads and stored records.

Each domain (users, events, notifications, matching) defines its own
models.  JSON field names use the camelCase aliases clients already
send (``fullName``, ``requiredSkills``, ``eventId``...), while Python
code uses snake_case attribute names.
"""
