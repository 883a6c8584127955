"""
Couche domaine de HikariFlix.

Contient les entités, objets valeur, ports (interfaces abstraites) et
exceptions du domaine. Aucune dépendance vers les adaptateurs.
"""
