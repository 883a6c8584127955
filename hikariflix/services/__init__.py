"""
Couche application : résolution d'épisodes et sélection de flux.

- title_sanitizer : assainissement des titres avant recherche
- episode_normalizer : une fonction de correspondance par forme de catalogue
- episode_resolver : chaîne de stratégies de recherche avec repli
- title_lookup : relance unique avec le titre alternatif
- stream_resolver : variantes de flux d'un épisode
- playback_selection : machine d'état sub/dub + sous-titres
- playback_session : session de lecture, garde contre les réponses obsolètes
- favorites : ajout, retrait et bascule des favoris
"""
