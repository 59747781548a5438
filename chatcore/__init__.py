"""
chatcore - authoritative in-memory state for a group chat server.

Users, conversations and messages live in multi-key indices; a permission
engine guards who may act on a conversation and an activity tracker reports
unread activity for what each user follows.
"""
