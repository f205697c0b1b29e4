"""
Recipe store collaborators.

Responsibilities:
- Fetch every recipe of one genre in a stable order.
- Report transport and decoding problems as ``StoreFailureError``.
- Optionally cache per-genre fetches for a short time.
"""
