"""
Services Layer

Entity services that:
- Accept raw inputs (ids, partial field dicts) from the HTTP layer
- Validate, coerce and apply defaults before touching the store
- Talk to the store only through an injected repository
- Return rows, plain dicts, or None for "not found"
- Raise ServiceError subclasses with operation-prefixed messages
"""
