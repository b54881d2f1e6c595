"""
auth — User authentication module.

Provides:
  • Identity token creation & verification (``TokenService``)
  • Password hashing (bcrypt)
  • Credential store with case-insensitive usernames
  • Register / Login API routes
  • ``get_current_user`` FastAPI dependency
"""
