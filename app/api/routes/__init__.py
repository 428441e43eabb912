"""
API routes.

- board: merged live board feed (/api/board)
"""
