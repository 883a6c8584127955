"""
Couche adaptateurs : implémentations concrètes des ports.

- api/ : clients HTTP des catalogues et d'AniList
- player/ : surface de lecture (mpv)
- cli/ : commandes Typer et rendu Rich
"""
