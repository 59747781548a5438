"""
APPLICATION LAYER

- model.py  → Model façade, the composition root over registry and tracker
- commands/ → write operations (register, post, toggle, follow)
- queries/  → read operations (status update, listings, server info)
- dto/      → pydantic shapes handed to the command/transport layer
"""
