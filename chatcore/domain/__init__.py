"""
DOMAIN LAYER

This layer contains:
- Entities: Business objects with identity (User, ConversationHeader, Message)
- Value Objects: Immutable types (Uuid, Permission)
- Ports: Read-only index views that infrastructure implements
- Services: Pure domain logic (permission toggling, activity tracking)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports
2. NO I/O operations
3. Only depends on Python stdlib
"""
