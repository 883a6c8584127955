"""
HikariFlix - Résolution d'épisodes et de flux vidéo pour anime.

Ce package transforme un titre issu d'AniList en liste d'épisodes puis en
flux lisibles, en interrogeant plusieurs catalogues externes avec une chaîne
de recherche de repli, et pilote la sélection sub/dub et sous-titres pendant
la lecture.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, exceptions)
- services/ : Couche application (résolution, sélection de flux, session)
- adapters/ : Couche infrastructure (CLI, clients API, lecteur vidéo)
- infrastructure/ : Persistance des favoris (SQLModel)
"""

__version__ = "0.1.0"
