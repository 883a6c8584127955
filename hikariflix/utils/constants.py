"""
Constantes globales pour HikariFlix.

Ce module contient:
- Le genre AniList qui classe un titre comme contenu adulte
- Les suffixes de slug essayés sur le catalogue miroir, dans l'ordre
"""

# Genre AniList déclenchant la chaîne de recherche "mature"
MATURE_GENRE_TAG = "Hentai"

# Conventions de nommage du miroir : "premier volet", "premier épisode", "saison 1".
# L'ordre est significatif : le premier suffixe qui renvoie des épisodes gagne.
MIRROR_SLUG_SUFFIXES: tuple[str, ...] = ("1", "1-episode-1", "season-1")

# Statut d'une entrée streamingInfo exploitable (les autres statuts signalent un serveur en échec)
FULFILLED_STATUS = "fulfilled"
