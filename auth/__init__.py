"""
auth — Email/password session authentication.

Provides:
  • Credential verification against the user store (bcrypt)
  • Token enrichment hooks (``on_issue`` / ``on_read``)
  • Signed session tokens and the catch-all ``/api/auth`` route
  • ``get_session`` / ``get_current_user_id`` FastAPI dependencies
"""
