"""Endpoint modules for the remote services.

Internal to pycarburantes; use :class:`pycarburantes.client.CarburantesClient`.
"""
