"""
Couche infrastructure de HikariFlix.

- persistence/ : stockage SQLite des favoris via SQLModel
"""
